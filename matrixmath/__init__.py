"""
matrixmath: fixed-shape dense matrices and Gauss–Jordan inversion.

Submodules:
    matrix: Row, Matrix, SquareMatrix, column traversal
    inversion: invert / construct / multiply / equals entry points
    core: exceptions, tolerances, timing, row-reduction kernel
"""

__version__ = "0.1.0"

from matrixmath import matrix
from matrixmath import inversion
from matrixmath.core.exceptions import (
    MatrixMathError,
    ValidationError,
    DimensionError,
    DegenerateMatrixError,
)
from matrixmath.core.compute.tolerances import EQUALITY_TOLERANCE
from matrixmath.matrix import Row, Matrix, SquareMatrix, horizontal_concat
from matrixmath.inversion import construct, invert, multiply, equals

__all__ = [
    "__version__",
    "matrix",
    "inversion",
    "MatrixMathError",
    "ValidationError",
    "DimensionError",
    "DegenerateMatrixError",
    "EQUALITY_TOLERANCE",
    "Row",
    "Matrix",
    "SquareMatrix",
    "horizontal_concat",
    "construct",
    "invert",
    "multiply",
    "equals",
]
