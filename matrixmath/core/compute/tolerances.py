"""
Tolerance tiers for numerical comparison.

Defines how close two elements must be to count as equal, and how small a
pivot candidate may be before it counts as zero, per element dtype:
- float64 / complex128 (reference): EQUALITY_TOLERANCE
- float32 / complex64: relaxed for single-precision arithmetic
- integer dtypes: exact comparison

The table is read-only after import; nothing in the package mutates it.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for element comparison."""
    atol: float
    name: str
    description: str


# Maximum per-element absolute difference treated as numerically equal.
EQUALITY_TOLERANCE: float = 1e-11

# Double precision: the reference tier
FP64 = ToleranceTier(
    atol=EQUALITY_TOLERANCE,
    name='fp64',
    description='Double precision — absorbs rounding from row reduction',
)

# Single precision
FP32 = ToleranceTier(
    atol=1e-5,
    name='fp32',
    description='Single precision — relaxed for float32 arithmetic',
)

# Half precision
FP16 = ToleranceTier(
    atol=1e-2,
    name='fp16',
    description='Half precision',
)

# Integers compare exactly
EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Integer dtypes — no rounding, exact comparison',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for a given element dtype."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        return EXACT
    # complex64 has float32 components
    component_size = dtype.itemsize // 2 if np.issubdtype(dtype, np.complexfloating) else dtype.itemsize
    if component_size >= 8:
        return FP64
    if component_size == 4:
        return FP32
    return FP16
