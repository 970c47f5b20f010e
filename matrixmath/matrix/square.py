"""
SquareMatrix: Matrix with height == width, plus identity and inversion.

Inversion augments the matrix with the identity, row-reduces [M | I] to
[I | M⁻¹] and keeps the right half.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from matrixmath.core.compute.linalg.gauss_jordan import PivotRule, row_reduce
from matrixmath.core.exceptions import ValidationError
from matrixmath.core.validation import check_positive_dimension, check_square
from matrixmath.matrix.matrix import Matrix, horizontal_concat


class SquareMatrix(Matrix):
    """
    Square matrix of fixed size.

    Construction:
        SquareMatrix([[2, 7], [4, 6]])
        SquareMatrix([[1, 0], [0, 1]], size=2)
        SquareMatrix.identity(3)

    Raises DimensionError at construction if the input isn't square or
    doesn't match size.
    """

    __slots__ = ()

    def __init__(
        self,
        rows: ArrayLike | Matrix,
        *,
        size: int | None = None,
        dtype: DTypeLike | None = np.float64,
    ):
        shape = None if size is None else (size, size)
        super().__init__(rows, shape=shape, dtype=dtype)

    def _check_shape_invariant(self) -> None:
        check_square(self._data, 'rows')

    @classmethod
    def zeros(cls, size: int, dtype: DTypeLike = np.float64) -> SquareMatrix:
        """Zero-filled size x size matrix."""
        check_positive_dimension(size, 'size')
        return cls._wrap(np.zeros((size, size), dtype=dtype))

    @classmethod
    def identity(cls, size: int, dtype: DTypeLike = np.float64) -> SquareMatrix:
        """Ones on the diagonal, zero elsewhere."""
        check_positive_dimension(size, 'size')
        return cls._wrap(np.eye(size, dtype=dtype))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def identity_matrix(self) -> SquareMatrix:
        """Identity of the same size and dtype as this matrix."""
        return SquareMatrix.identity(self.size, dtype=self.dtype)

    def inverse(
        self,
        *,
        pivot: PivotRule = 'column',
        tolerance: float | None = None,
    ) -> SquareMatrix:
        """
        Inverse by value; this matrix is left untouched.

        Integer matrices are promoted to float64 first.

        Raises:
            DegenerateMatrixError: If the matrix has no inverse at the
                given tolerance
        """
        work = self if np.issubdtype(self.dtype, np.inexact) else self.astype(np.float64)
        augmented = horizontal_concat(work, work.identity_matrix())
        row_reduce(augmented, pivot=pivot, tolerance=tolerance, matrix_name='[M | I]')
        return SquareMatrix._wrap(augmented.right_half()._data)

    def invert(
        self,
        *,
        pivot: PivotRule = 'column',
        tolerance: float | None = None,
    ) -> None:
        """
        Replace this matrix with its inverse.

        On failure the matrix is unchanged.

        Raises:
            DegenerateMatrixError: If the matrix has no inverse
            ValidationError: If the dtype is an integer type, which cannot
                hold the inverse
        """
        if not np.issubdtype(self.dtype, np.inexact):
            raise ValidationError(
                f"invert: in-place inversion needs a floating dtype, got {self.dtype}; "
                f"use inverse() to get a float64 result"
            )
        self._data[...] = self.inverse(pivot=pivot, tolerance=tolerance)._data
