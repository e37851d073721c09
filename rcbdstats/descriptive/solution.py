"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable

from rcbdstats.core.exceptions import InsufficientDataError
from rcbdstats.core.result import Result
from rcbdstats.descriptive._groups import GroupStatistics, PartitionSummary


@dataclass(frozen=True)
class BlockSummary:
    """Per-treatment cell statistics of one block, plus the block total."""
    block: Hashable
    cells: dict[Hashable, GroupStatistics]    # treatment -> cell stats
    total: GroupStatistics


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for the RCBD summary tables.

    One BlockSummary per block, the per-treatment totals over all blocks,
    and the grand statistics of every observation.
    """
    blocks: tuple[BlockSummary, ...]
    treatments: PartitionSummary
    grand: GroupStatistics
    treatment_labels: tuple
    r: int


@dataclass
class DescriptiveSolution:
    """
    User-facing result for describe_rcbd().

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def blocks(self) -> tuple[BlockSummary, ...]:
        return self._result.params.blocks

    @property
    def treatments(self) -> PartitionSummary:
        return self._result.params.treatments

    @property
    def grand(self) -> GroupStatistics:
        return self._result.params.grand

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand.mean

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def block(self, label: Hashable) -> BlockSummary:
        """Summary of the block with the given label."""
        for summary in self.blocks:
            if summary.block == label:
                return summary
        raise KeyError(
            f"block {label!r} not found. "
            f"Available: {[s.block for s in self.blocks]}"
        )

    def summary(self) -> str:
        """Per-block and total SUMMARY tables (Count, Sum, Average, Variance)."""
        labels = [str(t) for t in self._result.params.treatment_labels]
        width = max(12, *(len(s) + 2 for s in labels))
        header = f"{'SUMMARY':<12}" + "".join(f"{s:>{width}}" for s in labels) + f"{'Total':>{width}}"

        lines = [
            "RCBD Descriptive Statistics",
            "=" * len(header),
            header,
        ]
        for blk in self.blocks:
            lines.append("")
            lines.append(str(blk.block))
            stats = [blk.cells[t] for t in self._result.params.treatment_labels] + [blk.total]
            lines.extend(_stat_lines(stats, width))

        lines.append("")
        lines.append("Total")
        stats = list(self.treatments.groups.values()) + [self.grand]
        lines.extend(_stat_lines(stats, width))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(blocks={len(self.blocks)}, "
            f"treatments={len(self.treatments.groups)}, n={self.grand.count})"
        )


def _variance_or_na(stats: GroupStatistics) -> str:
    try:
        return f"{stats.variance:.2f}"
    except InsufficientDataError:
        return "NA"


def _stat_lines(stats: list[GroupStatistics], width: int) -> list[str]:
    return [
        f"{'Count':<12}" + "".join(f"{s.count:>{width}}" for s in stats),
        f"{'Sum':<12}" + "".join(f"{s.sum:>{width}.2f}" for s in stats),
        f"{'Average':<12}" + "".join(f"{s.mean:>{width}.2f}" for s in stats),
        f"{'Variance':<12}" + "".join(f"{_variance_or_na(s):>{width}}" for s in stats),
    ]
