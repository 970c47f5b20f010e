"""
InversionDesign: validated input for the inversion pipeline.

Wraps a square matrix and exposes the metadata backends need. Follows the
package Design pattern: build once through a classmethod, immutable after.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from matrixmath.matrix import Matrix, SquareMatrix


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for matrix inversion.

    Holds a private copy of the input matrix, so later mutation of the
    caller's matrix cannot affect a solve in progress.

    Construction:
        InversionDesign.from_array([[2, 7], [4, 6]])
        InversionDesign.from_matrix(m)
    """
    _matrix: SquareMatrix

    @classmethod
    def from_array(cls, data: ArrayLike, *, dtype: DTypeLike | None = np.float64) -> InversionDesign:
        """
        Build InversionDesign from a nested literal or 2D array.

        Raises:
            ValidationError: If data is non-numeric or non-finite
            DimensionError: If data is not a square 2D matrix
        """
        return cls(_matrix=SquareMatrix(data, dtype=dtype))

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> InversionDesign:
        """
        Build InversionDesign from a Matrix, keeping its dtype.

        Raises:
            DimensionError: If matrix is not square
        """
        return cls(_matrix=SquareMatrix(matrix, dtype=matrix.dtype))

    @property
    def matrix(self) -> SquareMatrix:
        """The matrix to invert. Backends must not mutate it."""
        return self._matrix

    @property
    def size(self) -> int:
        return self._matrix.size

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    @property
    def metadata(self) -> dict[str, Any]:
        return {'size': self.size, 'dtype': str(self.dtype)}
