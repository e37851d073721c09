"""
RCBD design object.

Wraps validated long-format observations and the block/treatment layout
derived from them. Factory methods handle the accepted input shapes
(observation triples, parallel arrays, wide tables).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from rcbdstats.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)
from rcbdstats.core.exceptions import (
    DimensionError,
    PrerequisiteMissingError,
    UnbalancedDesignError,
    ValidationError,
)


def _encode_levels(labels: NDArray, name: str) -> tuple[tuple, NDArray[np.intp]]:
    """
    Code labels as integers, levels ordered by first appearance.

    Labels are compared as dict keys, so labels that compare equal and hash
    alike (1, 1.0 and True) are one level, reported under the label seen
    first.
    """
    index: dict[Hashable, int] = {}
    codes = np.empty(len(labels), dtype=np.intp)
    for i, label in enumerate(labels.tolist()):
        try:
            code = index.setdefault(label, len(index))
        except TypeError as e:
            raise ValidationError(
                f"{name}: labels must be hashable, got {type(label).__name__}"
            ) from e
        codes[i] = code
    return tuple(index), codes


@dataclass(frozen=True, repr=False)
class RCBDDesign:
    """
    Validated observations of a balanced RCBD experiment with replication.

    Created via factory methods, not directly.

    Attributes:
        y: Observed values, float64, in input order
        block_idx: Block code of each observation (index into blocks)
        treatment_idx: Treatment code of each observation (index into treatments)
        blocks: Block labels in order of first appearance. Labels equal as
            dict keys (1, 1.0, True) are the same level.
        treatments: Treatment labels in order of first appearance
        r: Replications per block x treatment cell
    """
    y: NDArray[np.floating[Any]]
    block_idx: NDArray[np.intp]
    treatment_idx: NDArray[np.intp]
    blocks: tuple
    treatments: tuple
    r: int

    @property
    def b(self) -> int:
        """Number of blocks."""
        return len(self.blocks)

    @property
    def t(self) -> int:
        """Number of treatments."""
        return len(self.treatments)

    @property
    def n(self) -> int:
        return len(self.y)

    def observations(self) -> tuple[tuple[Any, Any, float], ...]:
        """The design as (block, treatment, value) triples in input order."""
        return tuple(
            (self.blocks[bi], self.treatments[ti], float(v))
            for bi, ti, v in zip(self.block_idx, self.treatment_idx, self.y)
        )

    def __repr__(self) -> str:
        return f"RCBDDesign(b={self.b}, t={self.t}, r={self.r}, n={self.n})"

    @staticmethod
    def from_arrays(y: Any, block: Any, treatment: Any) -> RCBDDesign:
        """
        Create a design from parallel long-format arrays.

        Args:
            y: Observed values (1D numeric)
            block: Block label of each observation (1D, same length as y)
            treatment: Treatment label of each observation (1D, same length as y)

        Returns:
            RCBDDesign

        Raises:
            ValidationError: Empty or non-numeric y, fewer than 2 blocks or treatments
            DimensionError: Arrays of different lengths or not 1D
            UnbalancedDesignError: Cells with differing replication counts
        """
        y_arr = check_array(y, "y")
        check_1d(y_arr, "y")
        check_min_samples(y_arr, 1, "y")
        check_finite(y_arr, "y")
        y_arr = y_arr.astype(np.float64, copy=True)

        block_arr = np.asarray(block, dtype=object)
        treatment_arr = np.asarray(treatment, dtype=object)
        check_1d(block_arr, "block")
        check_1d(treatment_arr, "treatment")
        check_consistent_length(
            y_arr, block_arr, treatment_arr, names=("y", "block", "treatment"),
        )

        blocks, block_idx = _encode_levels(block_arr, "block")
        treatments, treatment_idx = _encode_levels(treatment_arr, "treatment")

        if len(blocks) < 2:
            raise ValidationError(f"block: need at least 2 blocks, got {len(blocks)}")
        if len(treatments) < 2:
            raise ValidationError(
                f"treatment: need at least 2 treatments, got {len(treatments)}"
            )

        counts = np.zeros((len(blocks), len(treatments)), dtype=np.intp)
        np.add.at(counts, (block_idx, treatment_idx), 1)

        # r is the count of the first pair; every other cell must match it
        r = int(counts[0, 0])
        if np.any(counts != r):
            cell_counts = {
                (blocks[i], treatments[j]): int(counts[i, j])
                for i in range(len(blocks))
                for j in range(len(treatments))
            }
            offenders = [
                f"{k!r}={v}" for k, v in cell_counts.items() if v != r
            ]
            raise UnbalancedDesignError(
                f"design is unbalanced: expected r={r} observations in every "
                f"block x treatment cell, got {', '.join(offenders[:5])}"
                + (" ..." if len(offenders) > 5 else ""),
                expected_r=r,
                cell_counts=cell_counts,
            )

        y_arr.setflags(write=False)
        block_idx.setflags(write=False)
        treatment_idx.setflags(write=False)

        return RCBDDesign(
            y=y_arr,
            block_idx=block_idx,
            treatment_idx=treatment_idx,
            blocks=blocks,
            treatments=treatments,
            r=r,
        )

    @staticmethod
    def from_observations(observations: Iterable[Sequence[Any]]) -> RCBDDesign:
        """
        Create a design from (block, treatment, value) triples.

        Examples:
            >>> design = RCBDDesign.from_observations([
            ...     ('B1', 'T1', 10.0), ('B1', 'T1', 12.0),
            ...     ('B1', 'T2', 14.0), ('B1', 'T2', 16.0),
            ...     ('B2', 'T1', 11.0), ('B2', 'T1', 13.0),
            ...     ('B2', 'T2', 15.0), ('B2', 'T2', 17.0),
            ... ])
            >>> design.r
            2
        """
        block: list = []
        treatment: list = []
        y: list = []
        for i, obs in enumerate(observations):
            if len(obs) != 3:
                raise DimensionError(
                    f"observations[{i}]: expected (block, treatment, value), "
                    f"got {len(obs)} fields"
                )
            block.append(obs[0])
            treatment.append(obs[1])
            y.append(obs[2])

        if not y:
            raise ValidationError("observations: requires at least 1 observation, got 0")

        return RCBDDesign.from_arrays(y, block, treatment)

    @staticmethod
    def from_wide(header: Sequence[Any], rows: Iterable[Sequence[Any]]) -> RCBDDesign:
        """
        Create a design from a wide table: one column per treatment.

        The first column holds the block label; each following column holds
        the values of one treatment. A block appears on one row per
        replication. Rows are flattened row by row, then treatment by
        treatment, which fixes the observation order.

        Args:
            header: [block_column_name, treatment_1, treatment_2, ...]
            rows: [block, value_1, value_2, ...] per replication

        Examples:
            >>> design = RCBDDesign.from_wide(
            ...     ['Block', 'T1', 'T2'],
            ...     [['B1', 10, 14], ['B1', 12, 16],
            ...      ['B2', 11, 15], ['B2', 13, 17]],
            ... )
        """
        header = list(header)
        if len(header) < 2:
            raise DimensionError(
                f"header: expected a block column and at least one treatment, "
                f"got {len(header)} columns"
            )
        treatments = header[1:]

        block: list = []
        treatment: list = []
        y: list = []
        for i, row in enumerate(rows):
            row = list(row)
            if len(row) != len(header):
                raise DimensionError(
                    f"rows[{i}]: expected {len(header)} columns, got {len(row)}"
                )
            for label, value in zip(treatments, row[1:]):
                block.append(row[0])
                treatment.append(label)
                y.append(value)

        if not y:
            raise ValidationError("rows: requires at least 1 data row, got 0")

        return RCBDDesign.from_arrays(y, block, treatment)


def ensure_design(data: Any) -> RCBDDesign:
    """
    Convert observation triples to RCBDDesign if needed.

    Raises:
        PrerequisiteMissingError: If data is None
    """
    if data is None:
        raise PrerequisiteMissingError(
            "no observations: pass (block, treatment, value) triples or an RCBDDesign",
            missing='observations',
        )
    if isinstance(data, RCBDDesign):
        return data
    return RCBDDesign.from_observations(data)
