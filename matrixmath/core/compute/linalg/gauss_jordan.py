"""
Gauss–Jordan row reduction.

Transforms a matrix in place to reduced row-echelon form using the three
elementary row operations (swap, scale, add a multiple of another row).
Applied to an augmented matrix [M | I] it leaves [I | M⁻¹].

For each column r = 0 .. height-1:
    1. Pivot search: if [r][r] is zero within tolerance, swap in a later
       row with a usable pivot. None found -> DegenerateMatrixError.
    2. Normalization: scale row r so that [r][r] == 1.
    3. Elimination: subtract multiples of row r from every other row so
       that column r is zero everywhere except [r][r].

The search takes the first acceptable candidate, not the largest one.
There is no partial pivoting for stability.

Pivot rules:
    'column'   - candidate row s is accepted when [s][r] is nonzero. This
                 is the mathematically valid search and the default.
    'diagonal' - candidate row s is accepted when [s][s] is nonzero, which
                 is the legacy search kept for reproducing older results. It can
                 reject invertible matrices such as [[0, 1], [1, 0]], and if
                 the swapped-in row still has a zero at [r][r] the matrix
                 is reported as degenerate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np

from matrixmath.core.compute.tolerances import select_tolerance
from matrixmath.core.exceptions import (
    DegenerateMatrixError,
    DimensionError,
    ValidationError,
)
from matrixmath.core.validation import check_choice

if TYPE_CHECKING:
    from matrixmath.matrix.matrix import Matrix


PivotRule = Literal['column', 'diagonal']
PIVOT_RULES: tuple[str, ...] = ('column', 'diagonal')


def resolve_tolerance(dtype: np.dtype, tolerance: float | None) -> float:
    """Zero threshold for pivots: explicit value, or the dtype's default tier."""
    if tolerance is None:
        return select_tolerance(dtype).atol
    if tolerance < 0:
        raise ValidationError(f"tolerance: must be non-negative, got {tolerance}")
    return float(tolerance)


def _is_zero(value, tol: float) -> bool:
    return bool(abs(value) <= tol)


def _find_pivot_row(
    matrix: Matrix,
    r: int,
    tol: float,
    pivot: PivotRule,
) -> int | None:
    """First row s > r whose candidate element is nonzero, or None."""
    for s in range(r + 1, matrix.height):
        candidate = matrix[s, r] if pivot == 'column' else matrix[s, s]
        if not _is_zero(candidate, tol):
            return s
    return None


def row_reduce(
    matrix: Matrix,
    *,
    pivot: PivotRule = 'column',
    tolerance: float | None = None,
    matrix_name: str | None = None,
) -> None:
    """
    Reduce matrix to reduced row-echelon form, in place.

    Args:
        matrix: Matrix with width >= height and a floating or complex dtype
        pivot: Pivot-search rule, 'column' or 'diagonal'
        tolerance: Values with absolute value <= tolerance count as zero.
                   None selects the tier for matrix.dtype.
        matrix_name: Name used in the DegenerateMatrixError, if raised

    Raises:
        DegenerateMatrixError: If some column has no usable pivot. The
            matrix is left partially reduced and must be discarded.
        DimensionError: If width < height
        ValidationError: If the dtype is not inexact or an option is invalid
    """
    check_choice(pivot, PIVOT_RULES, 'pivot')
    if not np.issubdtype(matrix.dtype, np.inexact):
        raise ValidationError(
            f"row_reduce: requires a floating or complex dtype, got {matrix.dtype}"
        )
    if matrix.width < matrix.height:
        raise DimensionError(
            f"row_reduce: width ({matrix.width}) must be >= height ({matrix.height})"
        )
    tol = resolve_tolerance(matrix.dtype, tolerance)
    one = matrix.dtype.type(1)
    zero = matrix.dtype.type(0)

    for r in range(matrix.height):
        # Step 1: a nonzero element at [r][r]
        if _is_zero(matrix[r, r], tol):
            s = _find_pivot_row(matrix, r, tol, pivot)
            if s is None:
                raise DegenerateMatrixError(
                    f"Cannot invert degenerate matrix: no nonzero pivot for column {r} "
                    f"(tolerance {tol:g}).",
                    matrix_name=matrix_name,
                    column=r,
                    tolerance=tol,
                )
            matrix.swap_rows(r, s)
            if _is_zero(matrix[r, r], tol):
                # Only reachable with the 'diagonal' rule
                raise DegenerateMatrixError(
                    f"Cannot invert degenerate matrix: row {s} swapped into position {r} "
                    f"has a zero pivot (tolerance {tol:g}).",
                    matrix_name=matrix_name,
                    column=r,
                    tolerance=tol,
                )

        # Step 2: [r][r] == 1
        pivot_value = matrix[r, r]
        if pivot_value != one:
            matrix[r].scale(one / pivot_value)
            matrix[r, r] = one

        # Step 3: zero elsewhere in column r
        for s in range(matrix.height):
            if s != r and not _is_zero(matrix[s, r], tol):
                matrix.add_multiple_of_row(s, r, -matrix[s, r])
                matrix[s, r] = zero
