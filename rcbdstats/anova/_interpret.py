"""
Significance banding and effect-size interpretation.

Three significance bands are used for every F test:

    p <  alpha                 'significant'
    alpha <= p < next_alpha    'marginal'
    p >= next_alpha            'not significant'

where next_alpha is 0.05 for alpha = 0.01, 0.10 for alpha = 0.05 and
2 * alpha otherwise. Effect sizes are read against EffectSizeThresholds
(Cohen's 1% / 6% / 14% by default).
"""

import math
from dataclasses import dataclass
from typing import Any

from rcbdstats.anova._common import AnovaRow
from rcbdstats.core.config import DEFAULT_THRESHOLDS, EffectSizeThresholds
from rcbdstats.core.constants import (
    EFFECT_LARGE,
    EFFECT_MEDIUM,
    EFFECT_NEGLIGIBLE,
    EFFECT_SMALL,
    MARGINAL,
    NOT_SIGNIFICANT,
    SIGNIFICANT,
    SOURCE_BLOCKS,
    SOURCE_INTERACTION,
    SOURCE_TREATMENTS,
)
from rcbdstats.core.exceptions import PrerequisiteMissingError, ValidationError
from rcbdstats.core.validation import check_probability


def next_alpha(alpha: float) -> float:
    """Upper edge of the 'marginal' band for a given alpha."""
    alpha = check_probability(alpha, "alpha")
    if math.isclose(alpha, 0.01):
        return 0.05
    if math.isclose(alpha, 0.05):
        return 0.10
    return 2.0 * alpha


def classify_significance(p_value: float, alpha: float = 0.05) -> str:
    """
    Band a p-value as 'significant', 'marginal' or 'not significant'.

    Raises:
        ValidationError: If p_value is NaN or outside [0, 1]
    """
    if p_value is None or math.isnan(p_value) or not 0.0 <= p_value <= 1.0:
        raise ValidationError(f"p_value: must be in [0, 1], got {p_value}")
    upper = next_alpha(alpha)
    if p_value < alpha:
        return SIGNIFICANT
    if p_value < upper:
        return MARGINAL
    return NOT_SIGNIFICANT


def effect_size_tier(
    eta_sq: float,
    thresholds: EffectSizeThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """'large', 'medium', 'small' or 'negligible' for an eta^2 value."""
    if eta_sq >= thresholds.large:
        return EFFECT_LARGE
    if eta_sq >= thresholds.medium:
        return EFFECT_MEDIUM
    if eta_sq >= thresholds.small:
        return EFFECT_SMALL
    return EFFECT_NEGLIGIBLE


def ci_reading(
    ci: tuple[float, float],
    thresholds: EffectSizeThresholds = DEFAULT_THRESHOLDS,
) -> tuple[str, str]:
    """
    Read an effect-size interval.

    Returns:
        (statistical, practical) where statistical is 'excludes 0' or
        'includes 0' and practical is 'entirely above medium' or
        'partially below medium'.
    """
    low, high = ci
    statistical = 'excludes 0' if low > 0.0 else 'includes 0'
    practical = (
        'entirely above medium' if low > thresholds.medium
        else 'partially below medium'
    )
    return statistical, practical


@dataclass(frozen=True)
class EffectInterpretation:
    """Plain-language reading of one tested source."""
    source: str
    significance: str
    effect_tier: str
    eta_squared: float
    text: str
    ci_statistical: str | None
    ci_practical: str | None


_NOT_SIGNIFICANT_TEXT = {
    SOURCE_BLOCKS: "No significant block differences",
    SOURCE_TREATMENTS: "No significant treatment differences",
    SOURCE_INTERACTION: "No significant block x treatment interaction",
}


def _significant_text(row: AnovaRow, tier: str, thresholds: EffectSizeThresholds) -> str:
    important = row.eta_squared >= thresholds.medium
    lead = (
        f"Statistically significant differences "
        f"(η²={row.eta_squared:.2%}, {tier} effect)."
    )
    if row.source == SOURCE_BLOCKS:
        word = "important" if important else "negligible"
        return f"{lead} Suggests {word} blocking factor control."
    if row.source == SOURCE_TREATMENTS:
        word = "meaningful" if important else "marginal"
        return f"{lead} Practical significance: {word} differences."
    return f"{lead} Block and treatment effects are not additive."


def interpret(
    anova_result: Any,
    *,
    thresholds: EffectSizeThresholds = DEFAULT_THRESHOLDS,
) -> tuple[EffectInterpretation, ...]:
    """
    Interpret the tested rows of an ANOVA table.

    Args:
        anova_result: AnovaSolution, or the tuple of AnovaRow it holds
        thresholds: Effect-size cutoffs

    Returns:
        One EffectInterpretation per Blocks / Treatments / Interaction row

    Raises:
        PrerequisiteMissingError: If no ANOVA table is given

    Examples:
        >>> for item in interpret(rcbd_anova(observations)):
        ...     print(item.source, item.text)
    """
    if anova_result is None:
        raise PrerequisiteMissingError(
            "interpretation needs an ANOVA table: run rcbd_anova() first",
            missing='anova_table',
        )
    table = getattr(anova_result, 'table', anova_result)
    tested = [row for row in table if row.is_tested]
    if not tested:
        raise PrerequisiteMissingError(
            "interpretation needs tested rows (Blocks, Treatments, Interaction)",
            missing='anova_table',
        )

    out = []
    for row in tested:
        tier = effect_size_tier(row.eta_squared, thresholds)
        if row.significance == SIGNIFICANT:
            text = _significant_text(row, tier, thresholds)
        else:
            text = _NOT_SIGNIFICANT_TEXT[row.source]

        ci_statistical = ci_practical = None
        if row.eta_squared_ci is not None:
            ci_statistical, ci_practical = ci_reading(row.eta_squared_ci, thresholds)

        out.append(EffectInterpretation(
            source=row.source,
            significance=row.significance,
            effect_tier=tier,
            eta_squared=row.eta_squared,
            text=text,
            ci_statistical=ci_statistical,
            ci_practical=ci_practical,
        ))
    return tuple(out)
