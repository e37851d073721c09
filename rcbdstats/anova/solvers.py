"""
RCBD ANOVA solver dispatch.

Public API:
    rcbd_anova(data, ...) -> AnovaSolution
"""

import warnings
from typing import Any

from rcbdstats.core.compute.timing import Timer
from rcbdstats.core.config import DEFAULT_CONFIG, AnalysisConfig
from rcbdstats.core.exceptions import ValidationError
from rcbdstats.core.result import Result
from rcbdstats.anova._common import AnovaParams
from rcbdstats.anova._interpret import next_alpha
from rcbdstats.anova._ss import compute_sums_of_squares
from rcbdstats.anova._table import build_table
from rcbdstats.anova.solution import AnovaSolution
from rcbdstats.descriptive.design import RCBDDesign, ensure_design


def rcbd_anova(
    data: RCBDDesign | Any,
    *,
    alpha: float | None = None,
    confidence_level: float | None = None,
    config: AnalysisConfig | None = None,
) -> AnovaSolution:
    """
    Two-factor ANOVA with replication for a randomized complete block design.

    Tests blocks, treatments and their interaction against the within-cell
    error, with eta^2 / omega^2 effect sizes and their intervals.

    Args:
        data: RCBDDesign or sequence of (block, treatment, value) triples
        alpha: Significance threshold. Default 0.05.
        confidence_level: Coverage of the effect-size intervals. Default 0.95.
        config: AnalysisConfig; mutually exclusive with alpha/confidence_level

    Returns:
        AnovaSolution with the ANOVA table and significance bands

    Raises:
        UnbalancedDesignError: If cells hold different numbers of replicates
        DegenerateDesignError: If there is no replication variance (e.g. r = 1)

    Examples:
        >>> result = rcbd_anova(observations, alpha=0.01)
        >>> print(result.summary())
        >>> result.row('Treatments').p_value
    """
    if config is not None and (alpha is not None or confidence_level is not None):
        raise ValidationError(
            "config: pass either config= or alpha=/confidence_level=, not both"
        )
    if config is None:
        config = AnalysisConfig(
            alpha=DEFAULT_CONFIG.alpha if alpha is None else alpha,
            confidence_level=(
                DEFAULT_CONFIG.confidence_level if confidence_level is None
                else confidence_level
            ),
        )

    timer = Timer()
    timer.start()

    design = ensure_design(data)

    with timer.section('sums_of_squares'):
        ss = compute_sums_of_squares(design)

    with timer.section('table'):
        rows, warn_list = build_table(
            ss, design.b, design.t, design.r,
            alpha=config.alpha,
            confidence_level=config.confidence_level,
        )

    for message in warn_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    timer.stop()

    params = AnovaParams(
        table=rows,
        sums_of_squares=ss,
        alpha=config.alpha,
        next_alpha=next_alpha(config.alpha),
        confidence_level=config.confidence_level,
        blocks=design.blocks,
        treatments=design.treatments,
        b=design.b,
        t=design.t,
        r=design.r,
        n_obs=design.n,
        block_means=dict(zip(design.blocks, ss.block_means.tolist())),
        treatment_means=dict(zip(design.treatments, ss.treatment_means.tolist())),
    )

    result = Result(
        params=params,
        info={
            'design_type': 'rcbd',
            'alpha': config.alpha,
            'confidence_level': config.confidence_level,
            'b': design.b,
            't': design.t,
            'r': design.r,
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warn_list),
    )

    return AnovaSolution(_result=result)
