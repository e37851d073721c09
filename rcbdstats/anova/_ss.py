"""
Sums of squares for the two-way RCBD model with replication.

Decomposes the total variation around the grand mean into

    Blocks       t r  sum_i (block_i - grand)^2
    Treatments   b r  sum_j (treatment_j - grand)^2
    Interaction    r  sum_ij (cell_ij - block_i - treatment_j + grand)^2
    Error             sum_ijk (y_ijk - cell_ij)^2

For a balanced design the four components add up to
Total = sum_ijk (y_ijk - grand)^2. Plain float64 accumulation is used;
datasets are small enough that no compensated summation is needed.
"""

import numpy as np
from numpy.typing import NDArray

from rcbdstats.anova._common import SumOfSquaresSet
from rcbdstats.core.exceptions import PrerequisiteMissingError
from rcbdstats.descriptive.design import RCBDDesign


def _level_means(y: NDArray, codes: NDArray, n_levels: int) -> NDArray:
    """Mean of y within each code 0..n_levels-1."""
    sums = np.zeros(n_levels, dtype=np.float64)
    counts = np.zeros(n_levels, dtype=np.float64)
    np.add.at(sums, codes, y)
    np.add.at(counts, codes, 1.0)
    return sums / counts


def compute_sums_of_squares(design: RCBDDesign) -> SumOfSquaresSet:
    """
    Decompose the total sum of squares of a balanced RCBD design.

    Args:
        design: Validated RCBDDesign (balanced by construction)

    Returns:
        SumOfSquaresSet with the five sums and the means they came from

    Raises:
        PrerequisiteMissingError: If design is None
    """
    if design is None:
        raise PrerequisiteMissingError(
            "sums of squares need observations: build an RCBDDesign first",
            missing='design',
        )

    y = design.y
    b, t, r = design.b, design.t, design.r

    grand_mean = float(np.mean(y))
    block_means = _level_means(y, design.block_idx, b)
    treatment_means = _level_means(y, design.treatment_idx, t)
    cell_codes = design.block_idx * t + design.treatment_idx
    cell_means = _level_means(y, cell_codes, b * t).reshape(b, t)

    ss_error = float(np.sum((y - cell_means[design.block_idx, design.treatment_idx]) ** 2))
    ss_blocks = float(t * r * np.sum((block_means - grand_mean) ** 2))
    ss_treatments = float(b * r * np.sum((treatment_means - grand_mean) ** 2))

    interaction = (
        cell_means
        - block_means[:, np.newaxis]
        - treatment_means[np.newaxis, :]
        + grand_mean
    )
    ss_interaction = float(r * np.sum(interaction ** 2))
    ss_total = float(np.sum((y - grand_mean) ** 2))

    for arr in (block_means, treatment_means, cell_means):
        arr.setflags(write=False)

    return SumOfSquaresSet(
        ss_blocks=ss_blocks,
        ss_treatments=ss_treatments,
        ss_interaction=ss_interaction,
        ss_error=ss_error,
        ss_total=ss_total,
        grand_mean=grand_mean,
        block_means=block_means,
        treatment_means=treatment_means,
        cell_means=cell_means,
    )
