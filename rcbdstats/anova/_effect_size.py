"""
Effect sizes and their confidence intervals.

Point estimates:
    eta^2   = SS_source / SS_total
    omega^2 = (SS_source - df_source * MS_error) / (SS_total + MS_error)

omega^2 can be negative and is reported as such; only the intervals are
clamped.

Intervals come from the quantiles of the central F distribution with the
test's degrees of freedom, mapped through

    eta^2   (Smithson 2003):         (df1 F - df1) / (df1 F + df2)
    omega^2 (Fidler & Thompson 2001): df1 (F - 1) / (df1 F + df2 + 1)

This is an approximation; an exact interval would invert the noncentral F
in its noncentrality parameter. The point estimate need not fall inside
its own interval.
"""

import math

import numpy as np

from rcbdstats.anova._common import EffectSizeCI
from rcbdstats.core.compute.distributions import check_df, f_ppf
from rcbdstats.core.exceptions import ValidationError
from rcbdstats.core.validation import check_probability


def eta_squared(ss_source: float, ss_total: float) -> float:
    """Share of the total sum of squares attributable to one source."""
    if ss_total <= 0:
        raise ValidationError(
            f"ss_total: eta^2 needs a positive total sum of squares, got {ss_total}"
        )
    return ss_source / ss_total


def omega_squared(ss_source: float, df_source: int, ms_error: float, ss_total: float) -> float:
    """Bias-corrected effect size; not clamped at zero."""
    denominator = ss_total + ms_error
    if denominator <= 0:
        raise ValidationError(
            f"omega^2 needs ss_total + ms_error > 0, got {denominator}"
        )
    return (ss_source - df_source * ms_error) / denominator


def _clamp(value: float) -> float:
    return float(np.clip(value, 0.0, 1.0))


def effect_size_ci(
    f_value: float,
    df1: float,
    df2: float,
    *,
    confidence_level: float = 0.95,
) -> EffectSizeCI:
    """
    Approximate confidence intervals for eta^2 and omega^2.

    Args:
        f_value: Observed F statistic of the source (must be finite, >= 0)
        df1: Source degrees of freedom
        df2: Error degrees of freedom
        confidence_level: Interval coverage in (0, 1). Default 0.95.

    Returns:
        EffectSizeCI with (low, high) for eta^2 and omega^2, low <= high,
        both inside [0, 1]

    Raises:
        InvalidDegreesOfFreedomError: If df1 <= 0 or df2 <= 0
        ValidationError: If f_value is not a finite non-negative number

    Examples:
        >>> ci = effect_size_ci(12.5, 2, 24)
        >>> low, high = ci.eta
    """
    check_df(df1, df2)
    level = check_probability(confidence_level, "confidence_level")
    if not math.isfinite(f_value) or f_value < 0:
        raise ValidationError(f"f_value: must be finite and >= 0, got {f_value}")

    tail = (1.0 - level) / 2.0
    lower_f = f_ppf(tail, df1, df2)
    upper_f = f_ppf(1.0 - tail, df1, df2)

    eta_low = _clamp((df1 * lower_f - df1) / (df1 * lower_f + df2))
    eta_high = _clamp((df1 * upper_f - df1) / (df1 * upper_f + df2))

    omega_low = _clamp(df1 * (lower_f - 1.0) / (df1 * lower_f + df2 + 1.0))
    omega_high = _clamp(df1 * (upper_f - 1.0) / (df1 * upper_f + df2 + 1.0))

    return EffectSizeCI(
        eta=(eta_low, eta_high),
        omega=(omega_low, omega_high),
        confidence_level=level,
    )
