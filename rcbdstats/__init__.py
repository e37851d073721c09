"""
rcbdstats: two-factor ANOVA with replication for RCBD experiments.

Randomized Complete Block Design analysis with effect sizes, effect-size
confidence intervals and residual diagnostics.

Submodules:
    descriptive: RCBDDesign, group and partition statistics, summary tables
    anova: sums of squares, ANOVA table, effect sizes, interpretation
    diagnostics: additive-model residuals and normal scores
"""

__version__ = "0.1.0"

from rcbdstats.core import (
    AnalysisConfig,
    EffectSizeThresholds,
    RCBDStatsError,
    ValidationError,
    EmptyPartitionError,
    InsufficientDataError,
    UnbalancedDesignError,
    DegenerateDesignError,
    InvalidDegreesOfFreedomError,
    PrerequisiteMissingError,
)
from rcbdstats.descriptive import (
    RCBDDesign,
    describe_rcbd,
    group_stats,
    partition_statistics,
)
from rcbdstats.anova import (
    build_anova_table,
    classify_significance,
    compute_sums_of_squares,
    effect_size_ci,
    effect_size_tier,
    interpret,
    next_alpha,
    rcbd_anova,
)
from rcbdstats.diagnostics import residual_diagnostics

__all__ = [
    "__version__",
    # Design and configuration
    "RCBDDesign",
    "AnalysisConfig",
    "EffectSizeThresholds",
    # Pipelines
    "describe_rcbd",
    "rcbd_anova",
    "residual_diagnostics",
    "interpret",
    # Stages
    "group_stats",
    "partition_statistics",
    "compute_sums_of_squares",
    "build_anova_table",
    "effect_size_ci",
    "classify_significance",
    "effect_size_tier",
    "next_alpha",
    # Exceptions
    "RCBDStatsError",
    "ValidationError",
    "EmptyPartitionError",
    "InsufficientDataError",
    "UnbalancedDesignError",
    "DegenerateDesignError",
    "InvalidDegreesOfFreedomError",
    "PrerequisiteMissingError",
]
