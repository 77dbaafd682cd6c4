"""
Tolerance tiers for floating point comparisons.

Exact element types never need these. They are used where floating
point enters: DoubleWrapper.is_close, the numeric linear system backend's
consistency check and the eigenvalue routine's real/complex split.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def is_close(self, a: float, b: float) -> bool:
        """|a - b| <= atol + rtol * |b|"""
        return abs(a - b) <= self.atol + self.rtol * abs(b)


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Well-conditioned double precision work
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, well-conditioned',
)

# Ill-conditioned problems (cond > 1e4), e.g. Hilbert matrices
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned (cond > 1e4)',
)

# Above this condition number the numeric backend attaches a warning.
CONDITION_THRESHOLD = 1e10


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the tolerance tier for a problem of the given conditioning."""
    if condition_number is not None and condition_number > 1e4:
        return FP64_ILL_CONDITIONED
    return FP64
