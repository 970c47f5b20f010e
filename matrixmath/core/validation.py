"""
Input validation utilities for matrixmath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from matrixmath.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[np.number[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric
    data) and non-numeric dtypes such as bool, str or datetime.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target dtype, or None to keep the inferred one

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_finite(array: NDArray[np.number[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.number[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.number[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.number[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested literal has rows of equal length.

    numpy refuses ragged nested sequences with a generic ValueError; this
    reports which row is off and by how much.

    Raises:
        DimensionError: If any row length differs from the first row's
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, Sequence):
        return
    lengths = [
        len(row) if isinstance(row, Sequence) or np.ndim(row) >= 1 else None
        for row in rows
    ]
    if not lengths or lengths[0] is None:
        return
    for index, length in enumerate(lengths):
        if length != lengths[0]:
            raise DimensionError(
                f"{name}: row {index} has {length} elements, expected {lengths[0]}"
            )


def check_shape(
    array: NDArray[np.number[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the declared shape.

    Raises:
        DimensionError: If array.shape differs from shape
    """
    if tuple(array.shape) != tuple(shape):
        raise DimensionError(
            f"{name}: expected shape {tuple(shape)}, got {tuple(array.shape)}"
        )


def check_square(array: NDArray[np.number[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If height != width
    """
    height, width = array.shape
    if height != width:
        raise DimensionError(
            f"{name}: expected a square matrix, got {height}x{width}"
        )


def check_positive_dimension(value: int, name: str) -> None:
    """
    Verify a dimension is a positive integer.

    Raises:
        DimensionError: If value is not an int or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise DimensionError(f"{name}: expected a positive integer, got {value!r}")


def check_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """
    Verify an option string is one of the allowed values.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        raise ValidationError(
            f"{name}: unknown value {value!r}, expected one of {choices}"
        )
