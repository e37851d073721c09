"""
Shared fixtures for ANOVA tests.

Provides designs with known sums of squares and the degenerate
layouts the table has to reject.
"""

import numpy as np
import pytest

from rcbdstats.descriptive.design import RCBDDesign


@pytest.fixture
def small_design(small_rcbd):
    """
    2 x 2 x 2 design.

    SS: Blocks 2, Treatments 32, Interaction 0, Error 8, Total 42.
    """
    return RCBDDesign.from_observations(small_rcbd)


@pytest.fixture
def single_replicate():
    """r = 1: no within-cell variation, error df is 0."""
    return [
        ('B1', 'T1', 1.0), ('B1', 'T2', 2.0),
        ('B2', 'T1', 3.0), ('B2', 'T2', 5.0),
    ]


@pytest.fixture
def identical_replicates():
    """r = 2 with every replicate equal to its cell mean: MS_error is 0."""
    return [
        ('B1', 'T1', 4.0), ('B1', 'T1', 4.0),
        ('B1', 'T2', 6.0), ('B1', 'T2', 6.0),
        ('B2', 'T1', 5.0), ('B2', 'T1', 5.0),
        ('B2', 'T2', 9.0), ('B2', 'T2', 9.0),
    ]


@pytest.fixture
def inexact_identical_replicates():
    """
    r = 3 with every replicate equal to its cell mean, using values with no
    exact binary representation: SS_error is a few ulps, not 0.0.
    """
    cells = {('B1', 'T1'): 0.1, ('B1', 'T2'): 0.3, ('B2', 'T1'): 0.7, ('B2', 'T2'): 0.9}
    return [(blk, trt, value) for (blk, trt), value in cells.items() for _ in range(3)]


@pytest.fixture(params=[0, 1, 2, 3, 4, 5])
def random_design(request):
    """Seeded random balanced designs of varying size, like rcbd_3x4x3."""
    rng = np.random.default_rng(1000 + request.param)
    b = int(rng.integers(2, 6))
    t = int(rng.integers(2, 6))
    r = int(rng.integers(2, 5))
    block_effects = rng.normal(0.0, 2.0, b)
    treatment_effects = rng.normal(0.0, 2.0, t)

    observations = []
    for i in range(b):
        for j in range(t):
            mean = 50.0 + block_effects[i] + treatment_effects[j]
            for value in rng.normal(mean, 1.5, r):
                observations.append((f"B{i}", f"T{j}", float(value)))
    return RCBDDesign.from_observations(observations)
