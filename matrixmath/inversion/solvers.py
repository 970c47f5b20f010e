"""
Solver dispatch for matrix inversion.

These are the entry points external tooling (benchmarks, demos) calls:
construct(), invert(), multiply(), equals().
"""

from __future__ import annotations

import warnings
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from matrixmath.core.compute.linalg.gauss_jordan import PIVOT_RULES, PivotRule
from matrixmath.core.validation import check_choice, check_positive_dimension
from matrixmath.inversion.backends.cpu import CPUGaussJordanBackend
from matrixmath.inversion.design import InversionDesign
from matrixmath.inversion.solution import InversionSolution
from matrixmath.matrix import Matrix, SquareMatrix


def _ensure_design(data: ArrayLike | Matrix | InversionDesign) -> InversionDesign:
    """Convert raw input to InversionDesign if needed."""
    if isinstance(data, InversionDesign):
        return data
    if isinstance(data, Matrix):
        return InversionDesign.from_matrix(data)
    return InversionDesign.from_array(data)


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def construct(
    dimension: int,
    source: Callable[[int, int], float] | ArrayLike,
    *,
    dtype: DTypeLike = np.float64,
) -> SquareMatrix:
    """
    Build a dimension x dimension matrix.

    Parameters
    ----------
    dimension : int
        Number of rows (and columns).
    source : callable or array-like
        Either f(row, column) -> element, called once per element in
        row-major order, or a nested literal / 2D array of the declared
        dimension.
    dtype : dtype
        Element dtype. Default float64.

    Raises
    ------
    DimensionError
        If dimension is not a positive integer or the literal's shape
        differs from (dimension, dimension).
    """
    check_positive_dimension(dimension, 'dimension')
    if callable(source):
        rows = [[source(r, c) for c in range(dimension)] for r in range(dimension)]
        return SquareMatrix(rows, size=dimension, dtype=dtype)
    return SquareMatrix(source, size=dimension, dtype=dtype)


def invert(
    data: ArrayLike | Matrix | InversionDesign,
    *,
    pivot: PivotRule = 'column',
    tolerance: float | None = None,
    verify: bool = True,
) -> InversionSolution:
    """
    Invert a square matrix by Gauss–Jordan elimination.

    A degenerate matrix does not raise here: the returned solution has
    is_degenerate == True and unwrap() re-raises the DegenerateMatrixError.

    Parameters
    ----------
    data : array-like, Matrix or InversionDesign
        Square matrix to invert.
    pivot : str
        'column' (default) or 'diagonal'. See
        matrixmath.core.compute.linalg.gauss_jordan.
    tolerance : float or None
        Pivot zero threshold. None selects the tier for the dtype.
    verify : bool
        Check M·M⁻¹ ≈ I and issue a RuntimeWarning if it isn't.

    Returns
    -------
    InversionSolution
    """
    check_choice(pivot, PIVOT_RULES, 'pivot')
    design = _ensure_design(data)
    result = CPUGaussJordanBackend().solve(
        design, pivot=pivot, tolerance=tolerance, verify=verify,
    )
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return InversionSolution(_result=result, _design=design)


def multiply(a: ArrayLike | Matrix, b: ArrayLike | Matrix) -> Matrix:
    """
    Matrix product a · b.

    Raises
    ------
    DimensionError
        If a.width != b.height
    """
    return _ensure_matrix(a).multiply(_ensure_matrix(b))


def equals(
    a: ArrayLike | Matrix,
    b: ArrayLike | Matrix,
    tolerance: float | None = None,
) -> bool:
    """
    True if a and b have the same shape and every element pair is within
    tolerance. None selects the tolerance for the common dtype.
    """
    return _ensure_matrix(a).equals(_ensure_matrix(b), tolerance=tolerance)
