"""
Residuals of the additive RCBD model and normal scores for a Q-Q plot.

The fit is the additive two-way model without interaction,

    fitted = block_mean + treatment_mean - grand_mean

which differs from the cell means used by the full ANOVA. Residuals are
sorted with a stable sort and paired with plotting positions
(i + 0.5) / n and their standard-normal quantiles.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rcbdstats.core.compute.distributions import norm_ppf
from rcbdstats.core.exceptions import ValidationError
from rcbdstats.core.validation import check_array, check_1d, check_finite
from rcbdstats.descriptive.design import RCBDDesign


def plotting_positions(n: int) -> NDArray[np.floating]:
    """(i + 0.5) / n for i = 0..n-1; strictly increasing inside (0, 1)."""
    if n < 1:
        raise ValidationError(f"n: plotting positions need n >= 1, got {n}")
    return (np.arange(n, dtype=np.float64) + 0.5) / n


def normal_scores(residuals: ArrayLike) -> tuple[NDArray, NDArray, NDArray, NDArray]:
    """
    Sort residuals and pair them with theoretical normal quantiles.

    Args:
        residuals: 1D residuals in any order

    Returns:
        (sorted_residuals, sort_order, percentiles, z_scores). The sort is
        stable, so tied residuals keep their input order.

    Examples:
        >>> sorted_res, _, pct, z = normal_scores([1.0, -2.0, 2.0, -1.0])
        >>> pct
        array([0.125, 0.375, 0.625, 0.875])
    """
    arr = check_array(residuals, "residuals")
    check_1d(arr, "residuals")
    check_finite(arr, "residuals")

    percentiles = plotting_positions(len(arr))
    order = np.argsort(arr, kind='stable')
    return arr[order], order, percentiles, norm_ppf(percentiles)


def additive_fit(design: RCBDDesign) -> dict[str, NDArray | float]:
    """Per-observation block/treatment means, fitted values and residuals."""
    y = design.y
    grand_mean = float(np.mean(y))

    block_means = np.bincount(design.block_idx, weights=y, minlength=design.b)
    block_means /= np.bincount(design.block_idx, minlength=design.b)
    treatment_means = np.bincount(design.treatment_idx, weights=y, minlength=design.t)
    treatment_means /= np.bincount(design.treatment_idx, minlength=design.t)

    obs_block_means = block_means[design.block_idx]
    obs_treatment_means = treatment_means[design.treatment_idx]
    fitted = obs_block_means + obs_treatment_means - grand_mean

    return {
        'grand_mean': grand_mean,
        'block_means': obs_block_means,
        'treatment_means': obs_treatment_means,
        'fitted': fitted,
        'residuals': y - fitted,
    }
