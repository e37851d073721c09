"""
Tests for core infrastructure: Result envelope, config structs, validators,
distribution wrappers, the timer and tolerance tiers.
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest
from scipy import stats as sp_stats

from rcbdstats.core.compute.distributions import f_isf, f_ppf, f_sf, norm_ppf
from rcbdstats.core.compute.timing import Timer
from rcbdstats.core.compute.tolerances import CPU_FP64, is_negligible
from rcbdstats.core.config import AnalysisConfig, EffectSizeThresholds
from rcbdstats.core.exceptions import (
    DimensionError,
    InvalidDegreesOfFreedomError,
    ValidationError,
)
from rcbdstats.core.result import Result
from rcbdstats.core.validation import (
    check_array,
    check_consistent_length,
    check_probability,
)


@dataclass(frozen=True)
class FakeParams:
    value: float


class TestResult:

    def test_fields(self):
        result = Result(params=FakeParams(1.0), info={'k': 1}, timing=None, backend_name='cpu')
        assert result.params.value == 1.0
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name='cpu')
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'gpu'

    def test_warnings_stored(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name='cpu',
            warnings=("CI error for Blocks: bad df",),
        )
        assert result.warnings == ("CI error for Blocks: bad df",)


class TestAnalysisConfig:

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.alpha == 0.05
        assert config.confidence_level == 0.95

    def test_stores_floats(self):
        config = AnalysisConfig(alpha=np.float32(0.01))
        assert type(config.alpha) is float

    @pytest.mark.parametrize("alpha", [0, 1, -0.1, 1.5, float('nan')])
    def test_rejects_alpha_outside_unit_interval(self, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            AnalysisConfig(alpha=alpha)

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(confidence_level='0.95')

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            AnalysisConfig().alpha = 0.1


class TestEffectSizeThresholds:

    def test_defaults(self):
        th = EffectSizeThresholds()
        assert (th.small, th.medium, th.large) == (0.01, 0.06, 0.14)

    def test_rejects_unordered(self):
        with pytest.raises(ValidationError):
            EffectSizeThresholds(large=0.05, medium=0.10, small=0.01)


class TestValidation:

    def test_check_array_converts_ints(self):
        arr = check_array([1, 2, 3], "y")
        assert arr.dtype == np.float64

    def test_check_array_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(['a', 'b'], "y")

    def test_check_array_rejects_mixed(self):
        with pytest.raises(ValidationError):
            check_array([1.0, 'x'], "y")

    def test_consistent_length(self):
        with pytest.raises(DimensionError, match="y=3, block=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("y", "block"))

    def test_check_probability(self):
        assert check_probability(0.5, "p") == 0.5
        with pytest.raises(ValidationError):
            check_probability(True, "p")


class TestDistributions:

    def test_f_critical_matches_table(self):
        # F(1, 4) critical value at alpha = 0.05 is 7.7086
        np.testing.assert_allclose(f_isf(0.05, 1, 4), 7.708647, rtol=1e-5)

    def test_sf_inverts_isf(self):
        crit = f_isf(0.05, 3, 12)
        np.testing.assert_allclose(f_sf(crit, 3, 12), 0.05, rtol=1e-10)

    def test_ppf_matches_scipy(self):
        np.testing.assert_allclose(
            f_ppf(0.025, 2, 24), sp_stats.f.ppf(0.025, 2, 24), rtol=1e-12,
        )

    @pytest.mark.parametrize("df1, df2", [(0, 4), (2, 0), (-1, 5), (float('inf'), 3)])
    def test_invalid_df(self, df1, df2):
        with pytest.raises(InvalidDegreesOfFreedomError):
            f_sf(1.0, df1, df2)
        with pytest.raises(InvalidDegreesOfFreedomError):
            f_isf(0.05, df1, df2)

    def test_non_numeric_df(self):
        with pytest.raises(InvalidDegreesOfFreedomError):
            f_ppf(0.5, 'two', 4)

    def test_sf_rejects_nan(self):
        with pytest.raises(ValidationError):
            f_sf(float('nan'), 1, 4)

    def test_norm_ppf_scalar(self):
        np.testing.assert_allclose(norm_ppf(0.975), 1.959964, rtol=1e-6)
        assert isinstance(norm_ppf(0.5), float)

    def test_norm_ppf_array(self):
        z = norm_ppf([0.125, 0.875])
        np.testing.assert_allclose(z, [-1.150349, 1.150349], rtol=1e-6)

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.2, [0.5, 1.0]])
    def test_norm_ppf_rejects_closed_bounds(self, p):
        with pytest.raises(ValidationError, match="probit"):
            norm_ppf(p)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a'}
        assert result['a'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


class TestTolerances:

    def test_rounding_residue_is_negligible(self):
        # SS_error left by summing 0.1 three times, against a total of 0.6
        assert is_negligible(1e-33, 0.6)

    def test_genuine_variation_is_not(self):
        assert not is_negligible(0.19, 1.0)
        assert not is_negligible(8e-12, 42e-12)

    def test_zero_against_zero(self):
        assert is_negligible(0.0, 0.0)

    def test_default_tier(self):
        assert CPU_FP64.rtol == 1e-12
        assert CPU_FP64.name == 'cpu_fp64'
