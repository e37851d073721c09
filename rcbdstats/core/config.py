"""
Configuration structs for the analysis pipelines.

Configuration is passed explicitly into each stage as frozen dataclasses;
there is no module-level mutable state. The defaults below are the only
shared instances and they cannot be modified.
"""

from dataclasses import dataclass

from rcbdstats.core.exceptions import ValidationError
from rcbdstats.core.validation import check_probability


@dataclass(frozen=True)
class AnalysisConfig:
    """
    User-facing analysis options.

    Attributes:
        alpha: Significance threshold for F tests, in (0, 1)
        confidence_level: Coverage of the effect-size intervals, in (0, 1)
    """
    alpha: float = 0.05
    confidence_level: float = 0.95

    def __post_init__(self):
        # frozen: go through object.__setattr__ to store the normalized floats
        object.__setattr__(self, 'alpha', check_probability(self.alpha, "alpha"))
        object.__setattr__(
            self, 'confidence_level',
            check_probability(self.confidence_level, "confidence_level"),
        )


@dataclass(frozen=True)
class EffectSizeThresholds:
    """
    Cutoffs for reading eta^2 as an effect-size tier (Cohen's conventions).

    An effect is large at or above `large`, medium at or above `medium`,
    small at or above `small`, negligible below that.
    """
    large: float = 0.14
    medium: float = 0.06
    small: float = 0.01

    def __post_init__(self):
        if not 0.0 < self.small < self.medium < self.large < 1.0:
            raise ValidationError(
                "thresholds: require 0 < small < medium < large < 1, got "
                f"small={self.small}, medium={self.medium}, large={self.large}"
            )


DEFAULT_CONFIG = AnalysisConfig()
DEFAULT_THRESHOLDS = EffectSizeThresholds()
