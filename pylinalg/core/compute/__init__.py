"""
Computation utilities: timing and floating point tolerances.
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    FP64,
    FP64_ILL_CONDITIONED,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "FP64",
    "FP64_ILL_CONDITIONED",
    "select_tolerance",
]
