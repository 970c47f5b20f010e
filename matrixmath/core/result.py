"""
Generic result container for matrixmath computations.

The Result class provides a standardized envelope for solver output. It
carries the domain payload together with timing, backend identity and any
non-fatal warnings raised along the way.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (pivot rule, tolerance, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (inverse matrix, failure, etc.)
        info: Structured metadata (method, pivot rule, tolerance)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InversionParams(inverse=inv, failure=None, residual=0.0),
        ...     info={'method': 'gauss_jordan', 'pivot': 'column'},
        ...     timing={'total_seconds': 0.001, 'row_reduce': 0.0008},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
