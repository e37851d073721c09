"""
User-facing RCBD ANOVA solution type.

Wraps a Result[AnovaParams] and provides convenient accessors, a formatted
summary and the ANOVA table.
"""

from dataclasses import dataclass
from typing import Any, Hashable

from rcbdstats.core.constants import SIGNIFICANCE_CODES, TESTED_SOURCES
from rcbdstats.core.result import Result
from rcbdstats.anova._common import AnovaParams, AnovaRow, SumOfSquaresSet


@dataclass
class AnovaSolution:
    """
    User-facing result for the two-factor RCBD ANOVA with replication.

    Produced by rcbd_anova().
    """
    _result: Result[AnovaParams]

    @property
    def table(self) -> tuple[AnovaRow, ...]:
        """ANOVA table: Blocks, Treatments, Interaction, Error, Total."""
        return self._result.params.table

    def row(self, source: str) -> AnovaRow:
        """The table row of one source."""
        for r in self.table:
            if r.source == source:
                return r
        raise KeyError(
            f"source {source!r} not found. "
            f"Available: {[r.source for r in self.table]}"
        )

    @property
    def sums_of_squares(self) -> SumOfSquaresSet:
        return self._result.params.sums_of_squares

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def next_alpha(self) -> float:
        return self._result.params.next_alpha

    @property
    def confidence_level(self) -> float:
        return self._result.params.confidence_level

    @property
    def grand_mean(self) -> float:
        return self._result.params.sums_of_squares.grand_mean

    @property
    def block_means(self) -> dict[Hashable, float]:
        return self._result.params.block_means

    @property
    def treatment_means(self) -> dict[Hashable, float]:
        return self._result.params.treatment_means

    @property
    def significance(self) -> dict[str, str]:
        """Significance band of every tested source."""
        return {r.source: r.significance for r in self.table if r.is_tested}

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Formatted ANOVA table with effect sizes and intervals."""
        p = self._result.params
        level = f"{p.confidence_level:.0%}"
        width = 118
        lines = [
            "ANOVA: Two-Factor With Replication (RCBD)",
            "=" * width,
            f"Blocks: {p.b}   Treatments: {p.t}   Replications: {p.r}   "
            f"Observations: {p.n_obs}   alpha: {p.alpha:g}",
            "",
            f"{'Source':<12} {'SS':>12} {'df':>5} {'MS':>12} {'F':>10} "
            f"{'eta^2':>8} {'eta^2 ' + level + ' CI':>18} {'omega^2':>8} "
            f"{'omega^2 ' + level + ' CI':>18} {'P-value':>10} {'F crit':>8}",
            "-" * width,
        ]

        for row in self.table:
            if row.is_tested:
                code = SIGNIFICANCE_CODES[row.significance]
                lines.append(
                    f"{row.source:<12} {row.ss:>12.3f} {row.df:>5} {row.ms:>12.3f} "
                    f"{row.f_value:>10.3f} {row.eta_squared:>8.2%} "
                    f"{_format_ci(row.eta_squared_ci):>18} {row.omega_squared:>8.2%} "
                    f"{_format_ci(row.omega_squared_ci):>18} {row.p_value:>10.4f} "
                    f"{row.f_critical:>8.4f} {code}"
                )
            elif row.source in TESTED_SOURCES:
                lines.append(
                    f"{row.source:<12} {row.ss:>12.3f} {row.df:>5} {'-':>12} "
                    f"{'-':>10} {row.eta_squared:>8.2%} "
                    f"{_format_ci(row.eta_squared_ci):>18} {row.omega_squared:>8.2%} "
                    f"{_format_ci(row.omega_squared_ci):>18} {'-':>10} {'-':>8}"
                )
            elif row.ms is not None:
                lines.append(
                    f"{row.source:<12} {row.ss:>12.3f} {row.df:>5} {row.ms:>12.3f}"
                )
            else:
                lines.append(f"{row.source:<12} {row.ss:>12.3f} {row.df:>5}")

        lines.append("-" * width)
        lines.append(
            f"Signif. codes:  '***' p < {p.alpha:g}   "
            f"'**' p < {p.next_alpha:g}   'ns' otherwise"
        )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(b={self._result.params.b}, "
            f"t={self._result.params.t}, r={self._result.params.r}, "
            f"significance={self.significance})"
        )


def _format_ci(ci: tuple[float, float] | None) -> str:
    """Interval as '[low, high]', or 'CI Error' when it could not be computed."""
    if ci is None:
        return "CI Error"
    return f"[{ci[0]:.3f}, {ci[1]:.3f}]"
