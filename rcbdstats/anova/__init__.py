"""
Two-factor Analysis of Variance with replication for RCBD experiments.

Public API:
    rcbd_anova(data, ...) -> AnovaSolution              # full pipeline
    compute_sums_of_squares(design) -> SumOfSquaresSet
    build_anova_table(ss, b, t, r, ...) -> tuple[AnovaRow, ...]
    effect_size_ci(f, df1, df2, ...) -> EffectSizeCI
    interpret(result, ...) -> tuple[EffectInterpretation, ...]
"""

from rcbdstats.anova._common import (
    AnovaParams,
    AnovaRow,
    EffectSizeCI,
    SumOfSquaresSet,
)
from rcbdstats.anova._ss import compute_sums_of_squares
from rcbdstats.anova._table import build_anova_table, degrees_of_freedom
from rcbdstats.anova._effect_size import effect_size_ci, eta_squared, omega_squared
from rcbdstats.anova._interpret import (
    EffectInterpretation,
    ci_reading,
    classify_significance,
    effect_size_tier,
    interpret,
    next_alpha,
)
from rcbdstats.anova.solvers import rcbd_anova
from rcbdstats.anova.solution import AnovaSolution

__all__ = [
    "rcbd_anova",
    "compute_sums_of_squares",
    "build_anova_table",
    "degrees_of_freedom",
    "effect_size_ci",
    "eta_squared",
    "omega_squared",
    "interpret",
    "ci_reading",
    "classify_significance",
    "effect_size_tier",
    "next_alpha",
    "AnovaParams",
    "AnovaRow",
    "AnovaSolution",
    "EffectInterpretation",
    "EffectSizeCI",
    "SumOfSquaresSet",
]
