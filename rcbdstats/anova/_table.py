"""
Two-factor ANOVA table with replication.

    Source        df              MS            F
    Blocks        b - 1           SS/df         MS/MS_error
    Treatments    t - 1           SS/df         MS/MS_error
    Interaction   (b-1)(t-1)      SS/df         MS/MS_error
    Error         b t (r - 1)     SS/df
    Total         b t r - 1

p-values are upper-tail F probabilities with (df_source, df_error);
F-critical is the inverse upper tail at alpha.
"""

import dataclasses
import warnings

from rcbdstats.anova._common import AnovaRow, SumOfSquaresSet
from rcbdstats.anova._effect_size import effect_size_ci, eta_squared, omega_squared
from rcbdstats.anova._interpret import classify_significance
from rcbdstats.core.compute.distributions import check_df, f_isf, f_sf
from rcbdstats.core.compute.tolerances import is_negligible
from rcbdstats.core.constants import (
    SOURCE_BLOCKS,
    SOURCE_ERROR,
    SOURCE_INTERACTION,
    SOURCE_TOTAL,
    SOURCE_TREATMENTS,
)
from rcbdstats.core.exceptions import (
    DegenerateDesignError,
    InvalidDegreesOfFreedomError,
    PrerequisiteMissingError,
)
from rcbdstats.core.validation import check_probability


def degrees_of_freedom(b: int, t: int, r: int) -> dict[str, int]:
    """Degrees of freedom of every source; they add up to the total."""
    return {
        SOURCE_BLOCKS: b - 1,
        SOURCE_TREATMENTS: t - 1,
        SOURCE_INTERACTION: (b - 1) * (t - 1),
        SOURCE_ERROR: b * t * (r - 1),
        SOURCE_TOTAL: b * t * r - 1,
    }


def _tested_rows(
    ss: SumOfSquaresSet,
    df: dict[str, int],
    alpha: float,
) -> tuple[list[AnovaRow], float]:
    df_error = df[SOURCE_ERROR]
    if df_error <= 0:
        raise DegenerateDesignError(
            f"error degrees of freedom is {df_error}: a design with r=1 has no "
            f"replication variance, so F ratios are undefined",
            df_error=df_error,
        )

    ms_error = ss.ss_error / df_error
    if ms_error <= 0 or is_negligible(ss.ss_error, ss.ss_total):
        raise DegenerateDesignError(
            f"error mean square is {ms_error:.3g}: every replicate equals its "
            f"cell mean, so F ratios are undefined",
            df_error=df_error,
            ms_error=ms_error,
        )

    rows = []
    for source, ss_source in (
        (SOURCE_BLOCKS, ss.ss_blocks),
        (SOURCE_TREATMENTS, ss.ss_treatments),
        (SOURCE_INTERACTION, ss.ss_interaction),
    ):
        df_source = df[source]
        eta = eta_squared(ss_source, ss.ss_total)
        omega = omega_squared(ss_source, df_source, ms_error, ss.ss_total)
        if df_source <= 0:
            # single block or treatment: no F test, the interval gets a placeholder
            rows.append(AnovaRow(
                source=source,
                ss=ss_source,
                df=df_source,
                eta_squared=eta,
                omega_squared=omega,
            ))
            continue
        ms = ss_source / df_source
        f_value = ms / ms_error
        p_value = f_sf(f_value, df_source, df_error)
        rows.append(AnovaRow(
            source=source,
            ss=ss_source,
            df=df_source,
            ms=ms,
            f_value=f_value,
            eta_squared=eta,
            omega_squared=omega,
            p_value=p_value,
            f_critical=f_isf(alpha, df_source, df_error),
            significance=classify_significance(p_value, alpha),
        ))
    return rows, ms_error


def _attach_cis(
    rows: list[AnovaRow],
    df_error: int,
    confidence_level: float,
) -> tuple[list[AnovaRow], list[str]]:
    """
    Add effect-size intervals to the Blocks, Treatments and Interaction rows.

    A row whose interval cannot be computed keeps None in its CI fields and
    produces a warning message; the other rows are unaffected.
    """
    out = []
    messages = []
    for row in rows:
        try:
            check_df(row.df, df_error)
            ci = effect_size_ci(
                row.f_value, row.df, df_error, confidence_level=confidence_level,
            )
        except InvalidDegreesOfFreedomError as e:
            messages.append(f"CI error for {row.source}: {e}")
            out.append(row)
            continue
        out.append(dataclasses.replace(
            row, eta_squared_ci=ci.eta, omega_squared_ci=ci.omega,
        ))
    return out, messages


def build_table(
    ss: SumOfSquaresSet,
    b: int,
    t: int,
    r: int,
    *,
    alpha: float,
    confidence_level: float,
) -> tuple[tuple[AnovaRow, ...], list[str]]:
    """Build the table and return it with any CI warning messages."""
    if ss is None:
        raise PrerequisiteMissingError(
            "ANOVA table needs sums of squares: run compute_sums_of_squares() first",
            missing='sums_of_squares',
        )
    alpha = check_probability(alpha, "alpha")
    confidence_level = check_probability(confidence_level, "confidence_level")

    df = degrees_of_freedom(b, t, r)
    rows, ms_error = _tested_rows(ss, df, alpha)
    rows, messages = _attach_cis(rows, df[SOURCE_ERROR], confidence_level)

    rows.append(AnovaRow(
        source=SOURCE_ERROR,
        ss=ss.ss_error,
        df=df[SOURCE_ERROR],
        ms=ms_error,
    ))
    rows.append(AnovaRow(
        source=SOURCE_TOTAL,
        ss=ss.ss_total,
        df=df[SOURCE_TOTAL],
    ))
    return tuple(rows), messages


def build_anova_table(
    ss: SumOfSquaresSet,
    b: int,
    t: int,
    r: int,
    *,
    alpha: float = 0.05,
    confidence_level: float = 0.95,
) -> tuple[AnovaRow, ...]:
    """
    Degrees of freedom, mean squares, F tests and effect sizes.

    Args:
        ss: Sums of squares from compute_sums_of_squares()
        b: Number of blocks
        t: Number of treatments
        r: Replications per cell
        alpha: Significance threshold for p-value banding and F-critical
        confidence_level: Coverage of the effect-size intervals

    Returns:
        Five rows: Blocks, Treatments, Interaction, Error, Total. A source
        with 0 degrees of freedom (b = 1 or t = 1) keeps its SS and effect
        sizes but has no F test and None intervals, and a RuntimeWarning
        "CI error for <source>" is issued.

    Raises:
        PrerequisiteMissingError: If ss is None
        DegenerateDesignError: If the error mean square is zero or negligible
            next to the total sum of squares (e.g. r = 1)
        ValidationError: If alpha or confidence_level is outside (0, 1)
    """
    rows, messages = build_table(
        ss, b, t, r, alpha=alpha, confidence_level=confidence_level,
    )
    for message in messages:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return rows
