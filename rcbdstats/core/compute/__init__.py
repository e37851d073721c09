"""
Compute infrastructure shared by all analysis modules.

    timing: Timer for Result.timing
    distributions: validated F and standard-normal distribution functions
    tolerances: zero tests for float64 sums of squares
"""

from rcbdstats.core.compute.timing import Timer
from rcbdstats.core.compute.distributions import (
    check_df,
    f_isf,
    f_ppf,
    f_sf,
    norm_ppf,
)
from rcbdstats.core.compute.tolerances import CPU_FP64, ToleranceTier, is_negligible

__all__ = [
    "Timer",
    "check_df",
    "f_isf",
    "f_ppf",
    "f_sf",
    "norm_ppf",
    "CPU_FP64",
    "ToleranceTier",
    "is_negligible",
]
