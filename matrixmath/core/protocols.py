"""
Core protocols for matrixmath.

These define structural interfaces that backend implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so a backend need not inherit from anything in this package.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a design and produce a parameter
    payload wrapped in a Result. Backends are stateless: all configuration
    is passed to solve() or at construction time, so a single backend
    instance may be shared by concurrent callers.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
