"""
User-facing residual diagnostics solution type.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from rcbdstats.core.result import Result
from rcbdstats.diagnostics._common import ResidualParams, ResidualRecord


@dataclass
class DiagnosticsSolution:
    """
    User-facing result for residual diagnostics.

    Produced by residual_diagnostics(). The arrays feed a Q-Q plot
    (z_scores vs sorted_residuals) and a residuals-vs-fitted plot; drawing
    them is left to the caller.
    """
    _result: Result[ResidualParams]

    @property
    def observed(self) -> NDArray:
        return self._result.params.observed

    @property
    def fitted(self) -> NDArray:
        return self._result.params.fitted

    @property
    def residuals(self) -> NDArray:
        return self._result.params.residuals

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def sorted_residuals(self) -> NDArray:
        return self._result.params.sorted_residuals

    @property
    def percentiles(self) -> NDArray:
        return self._result.params.percentiles

    @property
    def z_scores(self) -> NDArray:
        return self._result.params.z_scores

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def qq_points(self) -> tuple[NDArray, NDArray]:
        """(theoretical z-scores, sorted residuals) for a normal Q-Q plot."""
        return self.z_scores, self.sorted_residuals

    def residuals_vs_fitted(self) -> tuple[NDArray, NDArray]:
        """(fitted values, residuals) for a homogeneity-of-variance plot."""
        return self.fitted, self.residuals

    def to_records(self) -> tuple[ResidualRecord, ...]:
        """One ResidualRecord per observation, in input order."""
        blocks = self._result.params.blocks
        treatments = self._result.params.treatments
        return tuple(
            ResidualRecord(
                block=blk,
                treatment=trt,
                observed=float(obs),
                fitted=float(fit),
                residual=float(res),
            )
            for blk, trt, obs, fit, res in zip(
                blocks, treatments, self.observed, self.fitted, self.residuals,
            )
        )

    def summary(self) -> str:
        """Residual range and the extremes of the normal-score sequence."""
        res = self.residuals
        lines = [
            "Residual Diagnostics (additive RCBD fit)",
            "=" * 50,
            f"Observations: {len(res)}",
            f"Grand mean:   {self.grand_mean:.4f}",
            "",
            f"{'Residuals':<12} {'Min':>9} {'Median':>9} {'Max':>9} {'SD':>9}",
            f"{'':<12} {np.min(res):>9.4f} {np.median(res):>9.4f} "
            f"{np.max(res):>9.4f} {np.std(res, ddof=1):>9.4f}",
            "",
            f"Normal scores: z from {self.z_scores[0]:.4f} to {self.z_scores[-1]:.4f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DiagnosticsSolution(n={len(self.residuals)})"
