"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper. A solve
either produces an inverse or records the DegenerateMatrixError that
stopped it, never both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from matrixmath.core.exceptions import DegenerateMatrixError
from matrixmath.core.result import Result
from matrixmath.matrix import SquareMatrix

if TYPE_CHECKING:
    from matrixmath.inversion.design import InversionDesign


@dataclass(frozen=True)
class InversionParams:
    """
    Parameter payload for inversion.

    Exactly one of inverse / failure is set.
    """
    inverse: SquareMatrix | None = None
    failure: DegenerateMatrixError | None = None
    # max |M·M⁻¹ - I| over both product orders; None if not verified
    residual: float | None = None


@dataclass
class InversionSolution:
    """
    User-facing inversion result.

    Wraps Result[InversionParams] and provides convenient accessors.
    """
    _result: Result[InversionParams]
    _design: 'InversionDesign'

    @property
    def matrix(self) -> SquareMatrix:
        """The input matrix."""
        return self._design.matrix

    @property
    def inverse(self) -> SquareMatrix | None:
        """The inverse, or None if the matrix is degenerate."""
        return self._result.params.inverse

    @property
    def error(self) -> DegenerateMatrixError | None:
        """The degeneracy failure, or None on success."""
        return self._result.params.failure

    @property
    def is_degenerate(self) -> bool:
        return self._result.params.failure is not None

    @property
    def residual(self) -> float | None:
        return self._result.params.residual

    def unwrap(self) -> SquareMatrix:
        """
        Return the inverse.

        Raises:
            DegenerateMatrixError: The failure recorded by the solve
        """
        if self._result.params.failure is not None:
            raise self._result.params.failure
        return self._result.params.inverse

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            f"Gauss-Jordan inversion ({self.backend_name})",
            f"  size:      {self._design.size}x{self._design.size}",
            f"  dtype:     {self.info.get('dtype')}",
            f"  pivot:     {self.info.get('pivot')}",
            f"  tolerance: {self.info.get('tolerance'):g}",
        ]
        if self.is_degenerate:
            lines.append(f"  status:    degenerate ({self.error})")
        else:
            lines.append("  status:    inverted")
            if self.residual is not None:
                lines.append(f"  residual:  {self.residual:.3e}")
        if self.timing is not None:
            lines.append(f"  time:      {self.timing['total_seconds']:.6f} s")
        for w in self.warnings:
            lines.append(f"  warning:   {w}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        status = 'degenerate' if self.is_degenerate else 'inverted'
        return f"InversionSolution(size={self._design.size}, status={status!r})"
