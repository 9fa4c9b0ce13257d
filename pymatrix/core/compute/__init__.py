"""
Shared compute infrastructure for pymatrix.

Submodules:
    timing: Solver phase timing
    precision: Elementwise closeness test
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    PIVOT_RTOL,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "PIVOT_RTOL",
]
