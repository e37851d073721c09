"""
Descriptive statistics for RCBD experiments.

Public API:
    RCBDDesign                          - validated observations and layout
    group_stats(values)                 - count, sum, mean, variance of one group
    partition_statistics(design, by)    - statistics per block / treatment / cell
    describe_rcbd(data)                 - SUMMARY tables per block and overall
"""

from rcbdstats.descriptive.design import RCBDDesign, ensure_design
from rcbdstats.descriptive._groups import (
    GroupStatistics,
    PartitionSummary,
    group_stats,
    partition_statistics,
)
from rcbdstats.descriptive.solution import (
    BlockSummary,
    DescriptiveParams,
    DescriptiveSolution,
)
from rcbdstats.descriptive.solvers import describe_rcbd

__all__ = [
    "RCBDDesign",
    "ensure_design",
    "GroupStatistics",
    "PartitionSummary",
    "group_stats",
    "partition_statistics",
    "describe_rcbd",
    "BlockSummary",
    "DescriptiveParams",
    "DescriptiveSolution",
]
