"""
End-to-end tests for rcbd_anova().

Validates:
    - Solution accessors, info, timing
    - Config handling (keyword overrides vs AnalysisConfig)
    - Per-row CI failures become warnings, not errors
    - Summary formatting
"""

import warnings

import numpy as np
import pytest

import rcbdstats.anova._table as table_module
from rcbdstats import rcbd_anova
from rcbdstats.anova import compute_sums_of_squares
from rcbdstats.anova._common import AnovaParams
from rcbdstats.anova._table import build_table
from rcbdstats.anova.solution import AnovaSolution
from rcbdstats.core.config import AnalysisConfig
from rcbdstats.core.constants import NOT_SIGNIFICANT, SIGNIFICANT
from rcbdstats.core.result import Result
from rcbdstats.core.exceptions import (
    DegenerateDesignError,
    InvalidDegreesOfFreedomError,
    PrerequisiteMissingError,
    UnbalancedDesignError,
    ValidationError,
)
from rcbdstats.descriptive.design import RCBDDesign


class TestSolution:

    def test_table_and_means(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        assert len(result.table) == 5
        assert result.grand_mean == 13.5
        assert result.block_means == {'B1': 13.0, 'B2': 14.0}
        assert result.treatment_means == {'T1': 11.5, 'T2': 15.5}
        assert result.n_obs == 8

    def test_significance_map(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        assert result.significance == {
            'Blocks': NOT_SIGNIFICANT,
            'Treatments': SIGNIFICANT,
            'Interaction': NOT_SIGNIFICANT,
        }

    def test_row_lookup(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        np.testing.assert_allclose(result.row('Treatments').f_value, 16.0)
        with pytest.raises(KeyError):
            result.row('Residuals')

    def test_info_timing_backend(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        assert result.info['design_type'] == 'rcbd'
        assert (result.info['b'], result.info['t'], result.info['r']) == (2, 2, 2)
        assert result.backend_name == 'cpu'
        assert {'total_seconds', 'sums_of_squares', 'table'} <= set(result.timing)
        assert result.warnings == ()

    def test_accepts_design(self, small_rcbd):
        design = RCBDDesign.from_observations(small_rcbd)
        assert rcbd_anova(design).table == rcbd_anova(small_rcbd).table

    def test_idempotent(self, rcbd_3x4x3):
        assert rcbd_anova(rcbd_3x4x3).table == rcbd_anova(rcbd_3x4x3).table

    def test_sums_of_squares_exposed(self, small_rcbd):
        ss = rcbd_anova(small_rcbd).sums_of_squares
        np.testing.assert_allclose(ss.components_sum, ss.ss_total)

    def test_repr(self, small_rcbd):
        text = repr(rcbd_anova(small_rcbd))
        assert text.startswith("AnovaSolution(b=2, t=2, r=2")


class TestConfig:

    def test_defaults(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        assert result.alpha == 0.05
        assert result.next_alpha == pytest.approx(0.10)
        assert result.confidence_level == 0.95

    def test_keyword_overrides(self, small_rcbd):
        result = rcbd_anova(small_rcbd, alpha=0.01, confidence_level=0.90)
        assert result.alpha == 0.01
        assert result.next_alpha == pytest.approx(0.05)
        assert result.info['confidence_level'] == 0.90

    def test_config_object(self, small_rcbd):
        result = rcbd_anova(small_rcbd, config=AnalysisConfig(alpha=0.10))
        assert result.alpha == 0.10
        assert result.next_alpha == pytest.approx(0.20)

    def test_config_and_keywords_conflict(self, small_rcbd):
        with pytest.raises(ValidationError, match="config"):
            rcbd_anova(small_rcbd, alpha=0.01, config=AnalysisConfig())

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.05])
    def test_invalid_alpha(self, small_rcbd, alpha):
        with pytest.raises(ValidationError):
            rcbd_anova(small_rcbd, alpha=alpha)

    def test_confidence_level_changes_intervals(self, rcbd_3x4x3):
        narrow = rcbd_anova(rcbd_3x4x3, confidence_level=0.80).row('Treatments')
        wide = rcbd_anova(rcbd_3x4x3, confidence_level=0.99).row('Treatments')
        assert wide.eta_squared_ci[1] > narrow.eta_squared_ci[1]
        assert wide.p_value == narrow.p_value


class TestFailures:

    def test_unbalanced(self, small_rcbd):
        with pytest.raises(UnbalancedDesignError):
            rcbd_anova(small_rcbd[:-1])

    def test_single_replicate(self, single_replicate):
        with pytest.raises(DegenerateDesignError):
            rcbd_anova(single_replicate)

    def test_identical_replicates(self, identical_replicates):
        with pytest.raises(DegenerateDesignError):
            rcbd_anova(identical_replicates)

    def test_inexact_identical_replicates(self, inexact_identical_replicates):
        with pytest.raises(DegenerateDesignError):
            rcbd_anova(inexact_identical_replicates)


class TestIntervalFailure:
    """A row whose interval fails keeps None and the rest of the table survives."""

    @pytest.fixture
    def failing_blocks_ci(self, monkeypatch):
        original = table_module.effect_size_ci

        def fake(f_value, df1, df2, *, confidence_level=0.95):
            # Blocks is the only source with 2 df in a 3 x 4 design
            if df1 == 2:
                raise InvalidDegreesOfFreedomError("simulated failure", df1=df1, df2=df2)
            return original(f_value, df1, df2, confidence_level=confidence_level)

        monkeypatch.setattr(table_module, 'effect_size_ci', fake)

    def test_placeholder_and_warning(self, rcbd_3x4x3, failing_blocks_ci):
        with pytest.warns(RuntimeWarning, match="CI error for Blocks"):
            result = rcbd_anova(rcbd_3x4x3)

        blocks = result.row('Blocks')
        assert blocks.eta_squared_ci is None
        assert blocks.omega_squared_ci is None
        assert blocks.f_value is not None
        assert result.row('Treatments').eta_squared_ci is not None
        assert any("CI error for Blocks" in w for w in result.warnings)

    def test_summary_shows_ci_error(self, rcbd_3x4x3, failing_blocks_ci):
        with pytest.warns(RuntimeWarning):
            result = rcbd_anova(rcbd_3x4x3)
        assert "CI Error" in result.summary()


class TestSummary:

    def test_contents(self, small_rcbd):
        text = rcbd_anova(small_rcbd).summary()
        for word in ("ANOVA", "Blocks", "Treatments", "Interaction", "Error",
                     "Total", "P-value", "F crit", "***", "ns"):
            assert word in text
        assert "CI Error" not in text

    def test_no_warnings_on_normal_run(self, rcbd_3x4x3):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rcbd_anova(rcbd_3x4x3)


class TestMissingObservations:

    def test_none(self):
        with pytest.raises(PrerequisiteMissingError) as info:
            rcbd_anova(None)
        assert info.value.missing == 'observations'


class TestSummaryPlaceholder:

    def test_source_without_degrees_of_freedom(self, small_design):
        ss = compute_sums_of_squares(small_design)
        rows, messages = build_table(ss, 1, 4, 2, alpha=0.05, confidence_level=0.95)
        params = AnovaParams(
            table=rows,
            sums_of_squares=ss,
            alpha=0.05,
            next_alpha=0.10,
            confidence_level=0.95,
            blocks=('B1',),
            treatments=('T1', 'T2', 'T3', 'T4'),
            b=1, t=4, r=2,
            n_obs=8,
            block_means={},
            treatment_means={},
        )
        solution = AnovaSolution(_result=Result(
            params=params, info={}, timing=None, backend_name='cpu',
            warnings=tuple(messages),
        ))

        lines = solution.summary().splitlines()
        blocks_line = next(line for line in lines if line.startswith('Blocks '))
        assert "CI Error" in blocks_line
        treatments_line = next(line for line in lines if line.startswith('Treatments '))
        assert "CI Error" not in treatments_line
        assert set(solution.significance) == {'Treatments'}
