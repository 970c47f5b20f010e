"""
Row: a fixed-width sequence of numeric elements.

A Row either owns its storage (standalone rows, scaled copies) or is a
live view onto one row of a Matrix's buffer. In both cases the width is
fixed for the Row's lifetime; only element values change.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from matrixmath.core.exceptions import DimensionError
from matrixmath.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_positive_dimension,
    check_shape,
)


class Row:
    """
    Fixed-width row of numeric elements.

    Construction:
        Row([1.0, 2.0, 3.0])
        Row([1, 2, 3], dtype=np.int64)
        Row([0.5, 0.5], width=2)
        Row.zeros(3)

    The default element dtype is float64.
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        values: ArrayLike,
        *,
        width: int | None = None,
        dtype: DTypeLike = np.float64,
    ):
        data = check_array(values, 'values', dtype=dtype)
        check_1d(data, 'values')
        if width is not None:
            check_shape(data, (width,), 'values')
        check_finite(data, 'values')
        # Always own the buffer
        self._data = np.array(data, copy=True)

    @classmethod
    def zeros(cls, width: int, dtype: DTypeLike = np.float64) -> Row:
        """Zero-initialised standalone row."""
        check_positive_dimension(width, 'width')
        return cls._wrap(np.zeros(width, dtype=dtype))

    @classmethod
    def _wrap(cls, data: NDArray[np.number[Any]]) -> Row:
        """Wrap an existing 1D buffer without copying (used for Matrix views)."""
        row = cls.__new__(cls)
        row._data = data
        return row

    # --- Shape ---

    @property
    def width(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    # --- Element access ---

    def __getitem__(self, index: int):
        return self._data[index]

    def __setitem__(self, index: int, value) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    # --- Elementary row operations ---

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Replace every element x with func(x), in place."""
        for i in range(self._data.shape[0]):
            self._data[i] = func(self._data[i])

    def scale(self, factor) -> None:
        """Multiply every element by factor, in place."""
        self._data *= factor

    def scaled(self, factor) -> Row:
        """Return a new Row holding every element multiplied by factor."""
        return Row._wrap(self._data * factor)

    def add_in_place(self, other: Row) -> None:
        """
        Accumulate other into this row element-wise.

        Raises:
            DimensionError: If the widths differ
        """
        if other.width != self.width:
            raise DimensionError(
                f"Cannot add a row of width {other.width} to a row of width {self.width}"
            )
        self._data += other._data

    # --- Conversion ---

    def copy(self) -> Row:
        """Standalone copy; never aliases a Matrix buffer."""
        return Row._wrap(self._data.copy())

    def to_numpy(self) -> NDArray[np.number[Any]]:
        """Copy of the elements as a 1D array."""
        return self._data.copy()

    def to_text(self) -> str:
        return '\t'.join(str(element) for element in self._data)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Row({self._data.tolist()!r}, dtype={self._data.dtype.name})"
