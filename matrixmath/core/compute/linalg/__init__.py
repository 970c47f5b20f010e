"""
Linear algebra kernels for matrixmath.

All kernels operate in place on matrixmath.matrix.Matrix objects and raise
immediately with clear messages.

Submodules:
    gauss_jordan: Reduced row-echelon form by Gauss–Jordan elimination
"""

from matrixmath.core.compute.linalg.gauss_jordan import (
    PIVOT_RULES,
    PivotRule,
    row_reduce,
)

__all__ = [
    "PIVOT_RULES",
    "PivotRule",
    "row_reduce",
]
