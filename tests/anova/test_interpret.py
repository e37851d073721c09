"""
Tests for significance banding, effect-size tiers and interpretations.
"""

import pytest

from rcbdstats import rcbd_anova
from rcbdstats.anova import (
    ci_reading,
    classify_significance,
    effect_size_tier,
    interpret,
    next_alpha,
)
from rcbdstats.core.config import EffectSizeThresholds
from rcbdstats.core.constants import (
    EFFECT_LARGE,
    EFFECT_MEDIUM,
    EFFECT_NEGLIGIBLE,
    EFFECT_SMALL,
    MARGINAL,
    NOT_SIGNIFICANT,
    SIGNIFICANT,
)
from rcbdstats.core.exceptions import PrerequisiteMissingError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Significance bands
# ═══════════════════════════════════════════════════════════════════════


class TestNextAlpha:

    @pytest.mark.parametrize("alpha, expected", [
        (0.01, 0.05),
        (0.05, 0.10),
        (0.10, 0.20),
        (0.001, 0.002),
    ])
    def test_values(self, alpha, expected):
        assert next_alpha(alpha) == pytest.approx(expected)

    def test_invalid(self):
        with pytest.raises(ValidationError):
            next_alpha(0.0)


class TestClassifySignificance:

    @pytest.mark.parametrize("p, alpha, expected", [
        (0.001, 0.05, SIGNIFICANT),
        (0.049, 0.05, SIGNIFICANT),
        (0.05, 0.05, MARGINAL),
        (0.099, 0.05, MARGINAL),
        (0.10, 0.05, NOT_SIGNIFICANT),
        (0.0161, 0.01, MARGINAL),
        (0.07, 0.01, NOT_SIGNIFICANT),
        (0.3, 0.2, MARGINAL),
        (1.0, 0.05, NOT_SIGNIFICANT),
        (0.0, 0.05, SIGNIFICANT),
    ])
    def test_bands(self, p, alpha, expected):
        assert classify_significance(p, alpha) == expected

    @pytest.mark.parametrize("p", [float('nan'), -0.01, 1.01])
    def test_invalid_p(self, p):
        with pytest.raises(ValidationError):
            classify_significance(p)


# ═══════════════════════════════════════════════════════════════════════
# Effect tiers and interval readings
# ═══════════════════════════════════════════════════════════════════════


class TestEffectSizeTier:

    @pytest.mark.parametrize("eta, expected", [
        (0.50, EFFECT_LARGE),
        (0.14, EFFECT_LARGE),
        (0.139, EFFECT_MEDIUM),
        (0.06, EFFECT_MEDIUM),
        (0.059, EFFECT_SMALL),
        (0.01, EFFECT_SMALL),
        (0.0099, EFFECT_NEGLIGIBLE),
        (0.0, EFFECT_NEGLIGIBLE),
    ])
    def test_default_thresholds(self, eta, expected):
        assert effect_size_tier(eta) == expected

    def test_custom_thresholds(self):
        th = EffectSizeThresholds(large=0.5, medium=0.2, small=0.05)
        assert effect_size_tier(0.3, th) == EFFECT_MEDIUM
        assert effect_size_tier(0.1, th) == EFFECT_SMALL


class TestCIReading:

    def test_excludes_zero_above_medium(self):
        assert ci_reading((0.10, 0.40)) == ('excludes 0', 'entirely above medium')

    def test_includes_zero(self):
        assert ci_reading((0.0, 0.69)) == ('includes 0', 'partially below medium')

    def test_excludes_zero_below_medium(self):
        assert ci_reading((0.02, 0.30)) == ('excludes 0', 'partially below medium')


# ═══════════════════════════════════════════════════════════════════════
# interpret()
# ═══════════════════════════════════════════════════════════════════════


class TestInterpret:

    def test_small_design(self, small_rcbd):
        items = {item.source: item for item in interpret(rcbd_anova(small_rcbd))}
        assert list(items) == ['Blocks', 'Treatments', 'Interaction']

        trt = items['Treatments']
        assert trt.significance == SIGNIFICANT
        assert trt.effect_tier == EFFECT_LARGE
        assert trt.text == (
            "Statistically significant differences (η²=76.19%, large effect). "
            "Practical significance: meaningful differences."
        )
        assert trt.ci_statistical == 'includes 0'
        assert trt.ci_practical == 'partially below medium'

        assert items['Blocks'].text == "No significant block differences"
        assert items['Blocks'].effect_tier == EFFECT_SMALL
        assert items['Interaction'].text == "No significant block x treatment interaction"

    def test_significant_blocks(self, rcbd_3x4x3):
        items = {item.source: item for item in interpret(rcbd_anova(rcbd_3x4x3))}
        blk = items['Blocks']
        assert blk.significance == SIGNIFICANT
        assert blk.text.startswith("Statistically significant differences")
        assert "blocking factor control" in blk.text

    def test_accepts_table(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        assert interpret(result.table) == interpret(result)

    def test_thresholds_change_tier(self, small_rcbd):
        th = EffectSizeThresholds(large=0.9, medium=0.8, small=0.5)
        items = {item.source: item for item in interpret(rcbd_anova(small_rcbd), thresholds=th)}
        assert items['Treatments'].effect_tier == EFFECT_SMALL
        assert items['Treatments'].text.endswith("Practical significance: marginal differences.")

    def test_missing_table(self):
        with pytest.raises(PrerequisiteMissingError) as info:
            interpret(None)
        assert info.value.missing == 'anova_table'

    def test_no_tested_rows(self, small_rcbd):
        result = rcbd_anova(small_rcbd)
        untested = tuple(row for row in result.table if not row.is_tested)
        with pytest.raises(PrerequisiteMissingError):
            interpret(untested)
