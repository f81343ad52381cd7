"""
Tolerance tiers and iteration defaults.

Defines precision expectations for comparing dense results, plus the
default convergence settings for power iteration. Used by
Matrix.allclose / Vector.allclose, the eigen solvers, and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Double precision after many cancelling operations (large cofactor
# expansions, ill-conditioned inverses)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned input',
)

# Power iteration stops once every component moves less than this
DEFAULT_POWER_TOLERANCE = 1e-10

# Power iteration gives up after this many transitions
DEFAULT_MAX_ITERS = 1000


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
