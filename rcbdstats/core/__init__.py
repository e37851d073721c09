"""
Core infrastructure for rcbdstats.

This module provides shared abstractions and utilities used by the
domain submodules (descriptive, anova, diagnostics).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: Frozen configuration structs
    constants: Table and interpretation labels
    compute: Timing and distribution functions
"""

from rcbdstats.core.result import Result
from rcbdstats.core.config import (
    AnalysisConfig,
    EffectSizeThresholds,
    DEFAULT_CONFIG,
    DEFAULT_THRESHOLDS,
)
from rcbdstats.core.exceptions import (
    RCBDStatsError,
    ValidationError,
    DimensionError,
    EmptyPartitionError,
    InsufficientDataError,
    UnbalancedDesignError,
    InvalidDegreesOfFreedomError,
    NumericalError,
    DegenerateDesignError,
    PrerequisiteMissingError,
)

__all__ = [
    # Result
    "Result",
    # Config
    "AnalysisConfig",
    "EffectSizeThresholds",
    "DEFAULT_CONFIG",
    "DEFAULT_THRESHOLDS",
    # Exceptions
    "RCBDStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyPartitionError",
    "InsufficientDataError",
    "UnbalancedDesignError",
    "InvalidDegreesOfFreedomError",
    "NumericalError",
    "DegenerateDesignError",
    "PrerequisiteMissingError",
]
