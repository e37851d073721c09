"""
Distribution functions used by the ANOVA and diagnostics pipelines.

Thin wrappers around scipy.stats that validate their arguments first, so a
bad degrees-of-freedom pair surfaces as InvalidDegreesOfFreedomError instead
of a NaN leaking into a result table.
"""

import math

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats as sp_stats

from rcbdstats.core.exceptions import InvalidDegreesOfFreedomError, ValidationError
from rcbdstats.core.validation import check_probability


def check_df(df1: float, df2: float) -> None:
    """
    Verify an F distribution's degrees of freedom are finite and positive.

    Raises:
        InvalidDegreesOfFreedomError: If either df is non-numeric, non-finite or <= 0
    """
    try:
        d1, d2 = float(df1), float(df2)
    except (TypeError, ValueError) as e:
        raise InvalidDegreesOfFreedomError(
            f"degrees of freedom must be numeric, got df1={df1!r}, df2={df2!r}",
            df1=df1, df2=df2,
        ) from e

    if not (math.isfinite(d1) and math.isfinite(d2)) or d1 <= 0 or d2 <= 0:
        raise InvalidDegreesOfFreedomError(
            f"F distribution requires finite df1 > 0 and df2 > 0, "
            f"got df1={df1}, df2={df2}",
            df1=df1, df2=df2,
        )


def f_sf(f_value: float, df1: float, df2: float) -> float:
    """
    Right-tail probability P(F > f_value) of the central F distribution.

    Raises:
        InvalidDegreesOfFreedomError: If df1 <= 0 or df2 <= 0
        ValidationError: If f_value is NaN
    """
    check_df(df1, df2)
    if math.isnan(f_value):
        raise ValidationError("f_value: NaN has no tail probability")
    return float(sp_stats.f.sf(f_value, df1, df2))


def f_isf(q: float, df1: float, df2: float) -> float:
    """
    Inverse right-tail F: the value with upper-tail probability q.

    f_isf(alpha, df1, df2) is the F-critical value of a test at level alpha.
    """
    check_df(df1, df2)
    q = check_probability(q, "q")
    return float(sp_stats.f.isf(q, df1, df2))


def f_ppf(p: float, df1: float, df2: float) -> float:
    """Inverse left-tail F: the value with lower-tail probability p."""
    check_df(df1, df2)
    p = check_probability(p, "p")
    return float(sp_stats.f.ppf(p, df1, df2))


def norm_ppf(p: ArrayLike):
    """
    Inverse standard-normal CDF (probit).

    Accepts a scalar or an array of probabilities; every value must lie
    strictly inside (0, 1) so the result is always finite.
    """
    arr = np.asarray(p, dtype=np.float64)
    inside = (arr > 0.0) & (arr < 1.0)
    if not np.all(inside):
        bad = np.atleast_1d(arr[~inside]).tolist()
        raise ValidationError(
            f"p: probit is defined on (0, 1) only, got {bad[:5]}"
        )
    z = sp_stats.norm.ppf(arr)
    if arr.ndim == 0:
        return float(z)
    return z
