"""
Exception hierarchy for matrixmath.

All exceptions inherit from MatrixMathError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixMathError(Exception):
    """Base exception for all matrixmath errors."""
    pass


class ValidationError(MatrixMathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    dtype, non-finite values, unknown option strings).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a literal doesn't match its declared shape, when operand
    shapes are incompatible (multiplication, concatenation, row
    accumulation), or when a square-only operation meets a non-square
    matrix.
    """
    pass


class NumericalError(MatrixMathError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateMatrixError(NumericalError):
    """
    Matrix is degenerate (singular or numerically indistinguishable from it).

    Raised by row reduction when no usable pivot exists for some column.
    The reduction is aborted; the partially reduced matrix is not a valid
    result.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column index for which no pivot was found
        tolerance: Zero threshold in effect during the pivot search
    """

    def __init__(
        self,
        message: str = "Cannot invert degenerate matrix.",
        matrix_name: str | None = None,
        column: int | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.tolerance = tolerance
