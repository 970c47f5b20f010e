"""
Shared compute infrastructure for matrixmath.

Submodules:
    tolerances: Equality tolerance and per-dtype tolerance tiers
    timing: Execution timing utilities
    linalg: Row-reduction kernel (Gauss–Jordan)
"""

from matrixmath.core.compute.timing import Timer, timed
from matrixmath.core.compute.tolerances import (
    EQUALITY_TOLERANCE,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "EQUALITY_TOLERANCE",
    "ToleranceTier",
    "select_tolerance",
]
