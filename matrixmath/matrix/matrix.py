"""
Matrix: a fixed-shape stack of Rows backed by one 2D numpy buffer.

The shape is fixed at construction and never changes; every operation
either mutates elements in place or returns a new Matrix. Copies are
deep: no two Matrix objects ever share storage.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from matrixmath.core.compute.linalg.gauss_jordan import PivotRule, row_reduce
from matrixmath.core.compute.tolerances import select_tolerance
from matrixmath.core.exceptions import DimensionError, ValidationError
from matrixmath.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_positive_dimension,
    check_rectangular,
    check_shape,
)
from matrixmath.matrix.columns import ColumnIterator, ColumnView
from matrixmath.matrix.row import Row


def _abs_difference(lhs, rhs):
    """
    Element-wise |lhs - rhs| without integer wrap-around.

    Integer operands are widened to 64 bits and subtracted larger-minus-smaller;
    the modular result read as uint64 is the exact distance.
    """
    common = np.result_type(lhs.dtype, rhs.dtype)
    if common.kind not in 'iu':
        return np.abs(lhs - rhs)
    wide = np.int64 if common.kind == 'i' else np.uint64
    a = lhs.astype(wide)
    b = rhs.astype(wide)
    with np.errstate(over='ignore'):
        return (np.maximum(a, b) - np.minimum(a, b)).astype(np.uint64)


def _inner_product(lhs, rhs, init):
    """Accumulate sum(a * b) over two equal-length iterables, starting at init."""
    total = init
    for a, b in zip(lhs, rhs):
        total = total + a * b
    return total


class Matrix:
    """
    Dense matrix of fixed shape (height x width).

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]])
        Matrix([[1, 2], [3, 4]], shape=(2, 2), dtype=np.int64)
        Matrix.zeros(3, 4)

    The default element dtype is float64. Pass dtype=None to keep the
    dtype numpy infers from the input.

    Indexing:
        m[r]       -> Row, a live view of row r
        m[r, c]    -> element
        m[r, c] = v
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        rows: ArrayLike | Matrix,
        *,
        shape: tuple[int, int] | None = None,
        dtype: DTypeLike | None = np.float64,
    ):
        if isinstance(rows, Matrix):
            rows = rows._data
        check_rectangular(rows, 'rows')
        data = check_array(rows, 'rows', dtype=dtype)
        check_2d(data, 'rows')
        if shape is not None:
            check_shape(data, shape, 'rows')
        height, width = data.shape
        if height < 1 or width < 1:
            raise DimensionError(
                f"rows: need at least one row and one column, got {height}x{width}"
            )
        check_finite(data, 'rows')
        self._data = np.array(data, copy=True)
        self._check_shape_invariant()

    def _check_shape_invariant(self) -> None:
        """Hook for subclasses that constrain the shape."""
        pass

    @classmethod
    def zeros(cls, height: int, width: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Zero-filled matrix."""
        check_positive_dimension(height, 'height')
        check_positive_dimension(width, 'width')
        return cls(np.zeros((height, width), dtype=dtype), dtype=dtype)

    @classmethod
    def _wrap(cls, data: NDArray[np.number[Any]]) -> Matrix:
        """Adopt an owned 2D buffer without validation or copying."""
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # --- Shape ---

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    # --- Access ---

    def __getitem__(self, key):
        if isinstance(key, tuple):
            r, c = key
            return self._data[operator.index(r), operator.index(c)]
        return Row._wrap(self._data[operator.index(key)])

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            r, c = key
            self._data[operator.index(r), operator.index(c)] = value
            return
        if isinstance(value, Row):
            value = value.to_numpy()
        values = np.asarray(value)
        if values.shape != (self.width,):
            raise DimensionError(
                f"Cannot assign {values.shape} values to a row of width {self.width}"
            )
        self._data[operator.index(key)] = values

    def __iter__(self) -> Iterator[Row]:
        for r in range(self._data.shape[0]):
            yield Row._wrap(self._data[r])

    def column_begin(self, column: int) -> ColumnIterator:
        return ColumnIterator(self, 0, column)

    def column_end(self, column: int) -> ColumnIterator:
        return ColumnIterator(self, self.height, column)

    def column(self, column: int) -> ColumnView:
        """Restartable view of one column; the column is never copied."""
        if not 0 <= column < self.width:
            raise IndexError(f"column {column} out of range for width {self.width}")
        return ColumnView(self, column)

    # --- Elementary row operations ---

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange rows a and b in place."""
        if a == b:
            return
        self._data[[a, b]] = self._data[[b, a]]

    def add_multiple_of_row(self, target: int, source: int, factor) -> None:
        """Row[target] += factor * Row[source], in place."""
        self[target].add_in_place(self[source].scaled(factor))

    def row_reduce(self, *, pivot: PivotRule = 'column', tolerance: float | None = None) -> None:
        """
        Reduce to reduced row-echelon form in place (Gauss–Jordan).

        See matrixmath.core.compute.linalg.gauss_jordan.row_reduce.
        """
        row_reduce(self, pivot=pivot, tolerance=tolerance)

    # --- Derived matrices ---

    def right_half(self) -> Matrix:
        """
        Columns [width/2, width) as a new matrix.

        Raises:
            DimensionError: If the width is odd
        """
        if self.width % 2:
            raise DimensionError(
                f"right_half() requires an even width, got {self.width}"
            )
        return Matrix._wrap(self._data[:, self.width // 2:].copy())

    def multiply(self, rhs: Matrix) -> Matrix:
        """
        Matrix product self · rhs.

        Each element is the inner product of a row of self with a column
        view of rhs. The element dtype is the common type of both operands.

        Raises:
            DimensionError: If self.width != rhs.height
        """
        if self.width != rhs.height:
            raise DimensionError(
                f"Cannot multiply {self.height}x{self.width} by "
                f"{rhs.height}x{rhs.width}: inner dimensions differ"
            )
        common = np.result_type(self.dtype, rhs.dtype)
        product = np.zeros((self.height, rhs.width), dtype=common)
        zero = common.type(0)
        for r in range(self.height):
            row = self[r]
            for c in range(rhs.width):
                product[r, c] = _inner_product(row, rhs.column(c), zero)
        # Square operands of one kind give a result of the same kind
        if type(self) is type(rhs) and product.shape[0] == product.shape[1]:
            return type(self)._wrap(product)
        return Matrix._wrap(product)

    def equals(self, rhs: Matrix, tolerance: float | None = None) -> bool:
        """
        Element-wise comparison within tolerance.

        Matrices of different shapes are never equal. With tolerance=None the
        threshold is chosen from the operands' common dtype: exact for
        integers, EQUALITY_TOLERANCE for float64.

        Raises:
            ValidationError: If tolerance is negative
        """
        if not isinstance(rhs, Matrix):
            return False
        if self.shape != rhs.shape:
            return False
        if tolerance is None:
            tolerance = select_tolerance(np.result_type(self.dtype, rhs.dtype)).atol
        elif tolerance < 0:
            raise ValidationError(f"tolerance: must be non-negative, got {tolerance}")
        return bool(np.all(_abs_difference(self._data, rhs._data) <= tolerance))

    # --- Conversion ---

    def copy(self) -> Matrix:
        """Deep copy."""
        return type(self)._wrap(self._data.copy())

    def astype(self, dtype: DTypeLike) -> Matrix:
        """Deep copy with a different element dtype."""
        return type(self)._wrap(self._data.astype(dtype))

    def to_numpy(self) -> NDArray[np.number[Any]]:
        """Copy of the elements as a 2D array."""
        return self._data.copy()

    def to_text(self) -> str:
        """Tab-separated elements, one row per line. Diagnostic only."""
        return '\n'.join(row.to_text() for row in self)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r}, dtype={self._data.dtype.name})"


def horizontal_concat(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    [lhs | rhs]: columns of lhs followed by columns of rhs.

    Raises:
        DimensionError: If the heights differ
    """
    if lhs.height != rhs.height:
        raise DimensionError(
            f"Cannot concatenate matrices of height {lhs.height} and {rhs.height}"
        )
    common = np.result_type(lhs.dtype, rhs.dtype)
    concatenation = np.zeros((lhs.height, lhs.width + rhs.width), dtype=common)
    concatenation[:, :lhs.width] = lhs._data
    concatenation[:, lhs.width:] = rhs._data
    return Matrix._wrap(concatenation)
