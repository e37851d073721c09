"""
Group statistics over partitions of an RCBD design.

A partition splits the observations by block, by treatment, or by
block x treatment cell. Every partition gets a GroupStatistics; the
grand total is computed from the pooled observations rather than by
averaging sub-variances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rcbdstats.core.constants import ALL_PARTITIONS, BY_BLOCK, BY_CELL, BY_TREATMENT
from rcbdstats.core.exceptions import (
    EmptyPartitionError,
    InsufficientDataError,
    ValidationError,
)
from rcbdstats.core.validation import check_array, check_finite
from rcbdstats.descriptive.design import RCBDDesign


@dataclass(frozen=True)
class GroupStatistics:
    """
    Count, sum, mean and sample variance of one group of observations.

    variance is a property: it raises InsufficientDataError for groups
    with fewer than 2 observations instead of returning NaN.
    """
    count: int
    sum: float
    mean: float
    sum_sq_dev: float   # sum of squared deviations from mean

    @property
    def variance(self) -> float:
        """Sample variance (n - 1 denominator)."""
        if self.count < 2:
            raise InsufficientDataError(
                f"variance: requires at least 2 observations, got {self.count}",
                n=self.count,
                required=2,
            )
        return self.sum_sq_dev / (self.count - 1)

    @property
    def sd(self) -> float:
        return float(np.sqrt(self.variance))


def group_stats(values: ArrayLike, *, label: Any = None) -> GroupStatistics:
    """
    Compute GroupStatistics for a group of observed values.

    Args:
        values: 1D numeric values of the group
        label: Group label, used in error messages only

    Raises:
        EmptyPartitionError: If values is empty
    """
    arr = check_array(values, "values").ravel()
    if arr.size == 0:
        where = "" if label is None else f" {label!r}"
        raise EmptyPartitionError(
            f"partition{where}: has 0 observations", partition=label,
        )
    check_finite(arr, "values")

    total = float(np.sum(arr))
    mean = total / arr.size
    return GroupStatistics(
        count=int(arr.size),
        sum=total,
        mean=mean,
        sum_sq_dev=float(np.sum((arr - mean) ** 2)),
    )


@dataclass(frozen=True)
class PartitionSummary:
    """
    GroupStatistics per partition label plus the grand total.

    Attributes:
        by: 'block', 'treatment' or 'cell'
        groups: {label: GroupStatistics}; cell labels are (block, treatment)
        total: Statistics of the pooled observations of all groups
    """
    by: str
    groups: dict[Hashable, GroupStatistics]
    total: GroupStatistics

    def means(self) -> dict[Hashable, float]:
        return {label: g.mean for label, g in self.groups.items()}


def _partition_keys(design: RCBDDesign, by: str) -> tuple[list, NDArray[np.intp]]:
    """All labels of a partition and the label code of every observation."""
    if by == BY_BLOCK:
        return list(design.blocks), design.block_idx
    if by == BY_TREATMENT:
        return list(design.treatments), design.treatment_idx
    labels = [(blk, trt) for blk in design.blocks for trt in design.treatments]
    return labels, design.block_idx * design.t + design.treatment_idx


def partition_statistics(
    design: RCBDDesign,
    by: str,
    *,
    levels: Iterable[Hashable] | None = None,
) -> PartitionSummary:
    """
    GroupStatistics per block, per treatment, or per block x treatment cell.

    Args:
        design: Validated RCBD design
        by: 'block', 'treatment' or 'cell'
        levels: Labels to summarise, in output order. Default: every label
            of the partition, in order of first appearance.

    Returns:
        PartitionSummary whose total pools the observations of the
        requested groups.

    Raises:
        ValidationError: If `by` is not a known partition
        EmptyPartitionError: If a requested label has no observations
    """
    if by not in ALL_PARTITIONS:
        raise ValidationError(
            f"by: must be one of {sorted(ALL_PARTITIONS)}, got {by!r}"
        )

    labels, codes = _partition_keys(design, by)
    position = {label: i for i, label in enumerate(labels)}
    requested = labels if levels is None else list(levels)

    groups: dict[Hashable, GroupStatistics] = {}
    pooled = np.zeros(design.n, dtype=bool)
    for label in requested:
        code = position.get(label)
        mask = codes == code if code is not None else np.zeros(design.n, dtype=bool)
        groups[label] = group_stats(design.y[mask], label=label)
        pooled |= mask

    if not groups:
        raise EmptyPartitionError(f"levels: no {by} labels requested", partition=None)

    return PartitionSummary(
        by=by,
        groups=groups,
        total=group_stats(design.y[pooled]),
    )
