"""
Common data types for RCBD ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container.
"""

from dataclasses import dataclass
from typing import Any, Hashable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SumOfSquaresSet:
    """
    Two-way decomposition of the total sum of squares.

    ss_total == ss_blocks + ss_treatments + ss_interaction + ss_error
    up to floating-point rounding. The means the decomposition was built
    from are kept alongside.
    """
    ss_blocks: float
    ss_treatments: float
    ss_interaction: float
    ss_error: float
    ss_total: float
    grand_mean: float
    block_means: NDArray[np.floating[Any]]        # shape (b,)
    treatment_means: NDArray[np.floating[Any]]    # shape (t,)
    cell_means: NDArray[np.floating[Any]]         # shape (b, t)

    @property
    def components_sum(self) -> float:
        return self.ss_blocks + self.ss_treatments + self.ss_interaction + self.ss_error


@dataclass(frozen=True)
class EffectSizeCI:
    """Confidence intervals for eta^2 and omega^2, both clamped to [0, 1]."""
    eta: tuple[float, float]
    omega: tuple[float, float]
    confidence_level: float


@dataclass(frozen=True)
class AnovaRow:
    """
    One row of the two-factor ANOVA table.

    Blocks, Treatments and Interaction rows carry every field. The Error row
    carries ss, df and ms; the Total row carries ss and df. Fields a row does
    not carry are None. CI fields are also None when the interval could not
    be computed for that row.
    """
    source: str
    ss: float
    df: int
    ms: float | None = None
    f_value: float | None = None
    eta_squared: float | None = None
    eta_squared_ci: tuple[float, float] | None = None
    omega_squared: float | None = None
    omega_squared_ci: tuple[float, float] | None = None
    p_value: float | None = None
    f_critical: float | None = None
    significance: str | None = None

    @property
    def is_tested(self) -> bool:
        return self.f_value is not None


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for the RCBD two-factor ANOVA with replication.

    Produced by rcbd_anova().
    """
    table: tuple[AnovaRow, ...]
    sums_of_squares: SumOfSquaresSet
    alpha: float
    next_alpha: float
    confidence_level: float
    blocks: tuple
    treatments: tuple
    b: int
    t: int
    r: int
    n_obs: int
    block_means: dict[Hashable, float]
    treatment_means: dict[Hashable, float]
