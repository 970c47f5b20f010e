"""
CPU backend for Gauss–Jordan inversion.

Runs the augment / row-reduce / extract pipeline on the calling thread and
records each stage in the timing breakdown. Degeneracy is returned in the
payload rather than raised, so callers get an explicit success-or-failure
result.
"""

from __future__ import annotations

import numpy as np

from matrixmath.core.compute.linalg.gauss_jordan import (
    PivotRule,
    resolve_tolerance,
    row_reduce,
)
from matrixmath.core.compute.timing import Timer
from matrixmath.core.compute.tolerances import select_tolerance
from matrixmath.core.exceptions import DegenerateMatrixError
from matrixmath.core.result import Result
from matrixmath.inversion.design import InversionDesign
from matrixmath.inversion.solution import InversionParams
from matrixmath.matrix import SquareMatrix, horizontal_concat


def identity_residual(matrix: SquareMatrix, inverse: SquareMatrix) -> float:
    """Largest element of |M·M⁻¹ - I| and |M⁻¹·M - I|."""
    identity = np.eye(matrix.size)
    left = matrix.multiply(inverse).to_numpy()
    right = inverse.multiply(matrix).to_numpy()
    return float(max(np.max(np.abs(left - identity)), np.max(np.abs(right - identity))))


class CPUGaussJordanBackend:
    """CPU backend: Gauss–Jordan elimination on [M | I]."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(
        self,
        design: InversionDesign,
        *,
        pivot: PivotRule = 'column',
        tolerance: float | None = None,
        verify: bool = True,
    ) -> Result[InversionParams]:
        """
        Invert design.matrix.

        Parameters
        ----------
        design : InversionDesign
        pivot : str
            Pivot-search rule, 'column' or 'diagonal'.
        tolerance : float or None
            Pivot zero threshold. None selects the tier for the dtype.
        verify : bool
            If True, measure |M·M⁻¹ - I| and warn when it exceeds the
            equality tolerance for the dtype.
        """
        timer = Timer()
        timer.start()

        matrix = design.matrix
        if not np.issubdtype(matrix.dtype, np.inexact):
            matrix = matrix.astype(np.float64)
        tol = resolve_tolerance(matrix.dtype, tolerance)
        warnings_list: list[str] = []

        inverse = None
        failure = None
        residual = None

        with timer.section('augment'):
            augmented = horizontal_concat(matrix, matrix.identity_matrix())

        try:
            with timer.section('row_reduce'):
                row_reduce(augmented, pivot=pivot, tolerance=tol, matrix_name='[M | I]')
        except DegenerateMatrixError as e:
            failure = e
        else:
            with timer.section('extract'):
                inverse = SquareMatrix._wrap(augmented.right_half().to_numpy())

            if verify:
                with timer.section('verify'):
                    residual = identity_residual(matrix, inverse)
                equality_tol = select_tolerance(matrix.dtype).atol
                if residual > equality_tol:
                    warnings_list.append(
                        f"Inverse is inaccurate: max |M·M⁻¹ - I| = {residual:.3e} "
                        f"exceeds tolerance {equality_tol:g}; the matrix may be "
                        f"ill-conditioned"
                    )

        timer.stop()

        return Result(
            params=InversionParams(inverse=inverse, failure=failure, residual=residual),
            info={
                'method': 'gauss_jordan',
                'pivot': pivot,
                'tolerance': tol,
                'size': matrix.size,
                'dtype': str(matrix.dtype),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
