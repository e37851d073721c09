"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_rcbd():
    """
    2 blocks x 2 treatments x 2 replications.

    Grand mean 13.5; block means 13, 14; treatment means 11.5, 15.5;
    cell means 11, 15, 12, 16 (no interaction).
    """
    return [
        ('B1', 'T1', 10.0), ('B1', 'T1', 12.0),
        ('B1', 'T2', 14.0), ('B1', 'T2', 16.0),
        ('B2', 'T1', 11.0), ('B2', 'T1', 13.0),
        ('B2', 'T2', 15.0), ('B2', 'T2', 17.0),
    ]


@pytest.fixture
def rcbd_3x4x3(rng):
    """3 blocks x 4 treatments x 3 replications with block, treatment and interaction effects."""
    block_effects = {'north': 0.0, 'centre': 2.0, 'south': -1.5}
    treatment_effects = {'ctrl': 0.0, 'N': 4.0, 'P': 1.0, 'NP': 6.0}

    observations = []
    for blk, be in block_effects.items():
        for trt, te in treatment_effects.items():
            interaction = 1.5 if (blk == 'south' and trt == 'NP') else 0.0
            for value in rng.normal(20.0 + be + te + interaction, 1.0, 3):
                observations.append((blk, trt, float(value)))
    return observations
