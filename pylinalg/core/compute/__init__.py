"""
Shared compute infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerance tiers and iteration defaults
    parallel: Index-ordered data-parallel fan-out
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    DEFAULT_POWER_TOLERANCE,
    DEFAULT_MAX_ITERS,
    select_tolerance,
)
from pylinalg.core.compute.parallel import map_indexed, resolve_workers

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "DEFAULT_POWER_TOLERANCE",
    "DEFAULT_MAX_ITERS",
    "select_tolerance",
    # Fan-out
    "map_indexed",
    "resolve_workers",
]
