"""
Residual diagnostics for RCBD experiments.

Public API:
    residual_diagnostics(data) -> DiagnosticsSolution
    normal_scores(residuals)   -> sorted residuals, order, percentiles, z-scores
    plotting_positions(n)      -> (i + 0.5) / n
"""

from rcbdstats.diagnostics._common import ResidualParams, ResidualRecord
from rcbdstats.diagnostics._residuals import (
    additive_fit,
    normal_scores,
    plotting_positions,
)
from rcbdstats.diagnostics.solution import DiagnosticsSolution
from rcbdstats.diagnostics.solvers import residual_diagnostics

__all__ = [
    "residual_diagnostics",
    "additive_fit",
    "normal_scores",
    "plotting_positions",
    "DiagnosticsSolution",
    "ResidualParams",
    "ResidualRecord",
]
