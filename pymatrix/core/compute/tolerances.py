"""
Tolerance tiers for numerical validation.

Defines precision expectations used by approximate matrix comparison
(Matrix.allclose), the test suite, and the near-singular pivot check
of the Gauss-Jordan solver.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned float64 work
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned input',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# A pivot smaller than this fraction of max|A| makes the inverse unreliable.
PIVOT_RTOL = CPU_FP64.rtol
