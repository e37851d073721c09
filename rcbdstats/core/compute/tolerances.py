"""
Tolerance tiers for numerical decisions.

Sums of squares are accumulated in float64. A quantity that is zero in
exact arithmetic can come out a few ulps away from zero (replicates of
0.1 give SS_error ~ 1e-33), so zero tests compare against a tolerance
scaled by the total variation instead of against 0.0.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU double precision, relative to the total sum of squares
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='cpu_fp64',
    description='CPU double precision sums of squares',
)


def is_negligible(
    value: float,
    scale: float,
    tier: ToleranceTier = CPU_FP64,
) -> bool:
    """True if |value| <= atol + rtol * |scale|."""
    return abs(value) <= tier.atol + tier.rtol * abs(scale)
