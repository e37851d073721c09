"""
Common data types for residual diagnostics.
"""

from dataclasses import dataclass
from typing import Any, Hashable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ResidualRecord:
    """Observed value, additive-model fit and residual of one observation."""
    block: Hashable
    treatment: Hashable
    observed: float
    fitted: float
    residual: float


@dataclass(frozen=True)
class ResidualParams:
    """
    Parameter payload for residual diagnostics.

    Per-observation arrays follow input order. sorted_residuals, percentiles
    and z_scores are parallel arrays in ascending residual order.
    """
    blocks: tuple                                # block label of each observation
    treatments: tuple                            # treatment label of each observation
    observed: NDArray[np.floating[Any]]
    fitted: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    block_means: NDArray[np.floating[Any]]       # block mean of each observation
    treatment_means: NDArray[np.floating[Any]]   # treatment mean of each observation
    grand_mean: float
    sorted_residuals: NDArray[np.floating[Any]]
    sort_order: NDArray[np.intp]                 # input index of each sorted residual
    percentiles: NDArray[np.floating[Any]]
    z_scores: NDArray[np.floating[Any]]
