"""
Solver dispatch for descriptive statistics.

Public API:
    describe_rcbd(data) -> DescriptiveSolution
"""

from __future__ import annotations

from typing import Any

from rcbdstats.core.compute.timing import Timer
from rcbdstats.core.constants import BY_CELL, BY_TREATMENT
from rcbdstats.core.result import Result
from rcbdstats.descriptive._groups import group_stats, partition_statistics
from rcbdstats.descriptive.design import RCBDDesign, ensure_design
from rcbdstats.descriptive.solution import (
    BlockSummary,
    DescriptiveParams,
    DescriptiveSolution,
)


def describe_rcbd(data: RCBDDesign | Any) -> DescriptiveSolution:
    """
    Summary statistics of an RCBD experiment.

    For every block: count, sum, mean and variance of each treatment cell
    plus the whole block. Then the same statistics per treatment over all
    blocks, and over every observation.

    Args:
        data: RCBDDesign or sequence of (block, treatment, value) triples

    Returns:
        DescriptiveSolution

    Examples:
        >>> result = describe_rcbd(observations)
        >>> result.block('B1').cells['T1'].mean
        >>> print(result.summary())
    """
    timer = Timer()
    timer.start()

    design = ensure_design(data)

    with timer.section('descriptive'):
        block_summaries = []
        for blk in design.blocks:
            cells = partition_statistics(
                design, BY_CELL,
                levels=[(blk, trt) for trt in design.treatments],
            )
            block_summaries.append(BlockSummary(
                block=blk,
                cells={trt: stats for (_, trt), stats in cells.groups.items()},
                total=cells.total,
            ))

        treatments = partition_statistics(design, BY_TREATMENT)
        grand = group_stats(design.y)

    timer.stop()

    params = DescriptiveParams(
        blocks=tuple(block_summaries),
        treatments=treatments,
        grand=grand,
        treatment_labels=design.treatments,
        r=design.r,
    )

    result = Result(
        params=params,
        info={
            'design_type': 'rcbd',
            'b': design.b,
            't': design.t,
            'r': design.r,
            'n': design.n,
        },
        timing=timer.result(),
        backend_name='cpu',
    )

    return DescriptiveSolution(_result=result)
