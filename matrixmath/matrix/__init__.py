"""
Fixed-shape dense matrices.

Public API:
    Row               - fixed-width row with scale/accumulate operations
    Matrix            - fixed-shape matrix; multiply, equals, row operations
    SquareMatrix      - adds identity, invert, inverse
    ColumnIterator    - bidirectional cursor down one column
    ColumnView        - restartable iterable over one column
    horizontal_concat - [lhs | rhs]
"""

from matrixmath.matrix.row import Row
from matrixmath.matrix.columns import ColumnIterator, ColumnView
from matrixmath.matrix.matrix import Matrix, horizontal_concat
from matrixmath.matrix.square import SquareMatrix

__all__ = [
    "Row",
    "Matrix",
    "SquareMatrix",
    "ColumnIterator",
    "ColumnView",
    "horizontal_concat",
]
