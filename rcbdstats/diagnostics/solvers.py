"""
Residual diagnostics solver.

Public API:
    residual_diagnostics(data) -> DiagnosticsSolution
"""

from typing import Any

from rcbdstats.core.compute.timing import Timer
from rcbdstats.core.result import Result
from rcbdstats.descriptive.design import RCBDDesign, ensure_design
from rcbdstats.diagnostics._common import ResidualParams
from rcbdstats.diagnostics._residuals import additive_fit, normal_scores
from rcbdstats.diagnostics.solution import DiagnosticsSolution


def residual_diagnostics(data: RCBDDesign | Any) -> DiagnosticsSolution:
    """
    Residuals of the additive RCBD model for normality and homogeneity checks.

    Fitted values are block mean + treatment mean - grand mean. Residuals
    are then sorted and paired with (i + 0.5) / n plotting positions and
    their standard-normal quantiles.

    Args:
        data: RCBDDesign or sequence of (block, treatment, value) triples

    Returns:
        DiagnosticsSolution

    Examples:
        >>> diag = residual_diagnostics(observations)
        >>> x, y = diag.qq_points()
        >>> fitted, resid = diag.residuals_vs_fitted()
    """
    timer = Timer()
    timer.start()

    design = ensure_design(data)

    with timer.section('residuals'):
        fit = additive_fit(design)

    with timer.section('normal_scores'):
        sorted_residuals, order, percentiles, z_scores = normal_scores(fit['residuals'])

    timer.stop()

    for arr in (
        fit['fitted'], fit['residuals'], fit['block_means'], fit['treatment_means'],
        sorted_residuals, order, percentiles, z_scores,
    ):
        arr.setflags(write=False)

    params = ResidualParams(
        blocks=tuple(design.blocks[i] for i in design.block_idx),
        treatments=tuple(design.treatments[i] for i in design.treatment_idx),
        observed=design.y,
        fitted=fit['fitted'],
        residuals=fit['residuals'],
        block_means=fit['block_means'],
        treatment_means=fit['treatment_means'],
        grand_mean=fit['grand_mean'],
        sorted_residuals=sorted_residuals,
        sort_order=order,
        percentiles=percentiles,
        z_scores=z_scores,
    )

    result = Result(
        params=params,
        info={
            'design_type': 'rcbd',
            'model': 'additive',
            'b': design.b,
            't': design.t,
            'r': design.r,
            'n': design.n,
        },
        timing=timer.result(),
        backend_name='cpu',
    )

    return DiagnosticsSolution(_result=result)
