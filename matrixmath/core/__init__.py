"""
Core infrastructure for matrixmath.

This module provides shared abstractions and utilities used by the matrix
types and the inversion solver layer.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, timing, row-reduction kernel
"""

from matrixmath.core.protocols import Backend
from matrixmath.core.result import Result
from matrixmath.core.exceptions import (
    MatrixMathError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "MatrixMathError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateMatrixError",
]
