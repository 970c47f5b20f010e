"""
Matrix inversion by Gauss–Jordan elimination.

Public API:
    invert(data)       - InversionSolution (inverse, or the degeneracy failure)
    construct(n, src)  - SquareMatrix from a callable or literal
    multiply(a, b)     - matrix product
    equals(a, b)       - element-wise comparison within tolerance
"""

from matrixmath.inversion.design import InversionDesign
from matrixmath.inversion.solution import InversionParams, InversionSolution
from matrixmath.inversion.solvers import (
    construct,
    invert,
    multiply,
    equals,
)

__all__ = [
    "construct",
    "invert",
    "multiply",
    "equals",
    "InversionDesign",
    "InversionParams",
    "InversionSolution",
]
