# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for scheme analysis."""

import numpy as np
import pytest

from chromavoid import analyze, synthesize
from chromavoid.schema import RiskLevel, RiskTier, SchemeStyle, WcagLevel
from chromavoid.engine.analyze import (
    burn_in_level,
    color_metrics,
    contrast_ratio,
    distinctiveness_score,
    harmony_score,
    hue_distance,
    hue_spread,
    oled_risk,
    relative_luminance,
    suggest_improvements,
    wcag_level,
)


class TestContrast:
    def test_black_white(self):
        assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)

    def test_identical_is_one(self):
        assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)

    def test_symmetric(self):
        rng = np.random.default_rng(5)
        for _ in range(50):
            a, b = ("#%02X%02X%02X" % tuple(rng.integers(0, 256, 3)) for _ in range(2))
            assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_relative_luminance(self):
        assert relative_luminance("#000000") == 0.0
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_wcag_levels(self):
        assert wcag_level(7.0) is WcagLevel.AAA
        assert wcag_level(4.5) is WcagLevel.AA
        assert wcag_level(4.49) is WcagLevel.FAIL


class TestHarmony:
    def test_single_hue(self):
        assert harmony_score([120.0], "triadic") == (100, "Single hue scheme")
        assert harmony_score([], "analogous")[0] == 100

    def test_monochrome(self):
        assert harmony_score([200.0, 200.0, 200.0], "monochrome")[0] == 100
        assert harmony_score([200.0, 230.0], SchemeStyle.MONOCHROME)[0] == 40

    def test_complementary(self):
        score, description = harmony_score([0.0, 180.0], "complementary")
        assert score == 100
        assert description.startswith("Complementary")

    def test_spectral_uses_spread(self):
        assert harmony_score([0.0, 120.0, 240.0], "spectral")[0] == 100
        assert harmony_score([0.0, 60.0], "spectral")[0] == 30

    def test_unknown_style_uses_best_match(self):
        score, description = harmony_score([0.0, 180.0], "zigzag")
        assert score == 100
        assert description.startswith("Complementary")

    def test_hue_distance(self):
        assert hue_distance(350.0, 10.0) == pytest.approx(20.0)
        assert hue_distance(0.0, 180.0) == pytest.approx(180.0)

    def test_hue_spread(self):
        assert hue_spread([0.0, 120.0, 240.0]) == pytest.approx(240.0)
        assert hue_spread([350.0, 10.0]) == pytest.approx(20.0)


class TestComponentScores:
    def test_distinctiveness_identical(self):
        assert distinctiveness_score(np.zeros((5, 3))) == 0

    def test_distinctiveness_single(self):
        assert distinctiveness_score(np.zeros((1, 3))) == 100

    def test_distinctiveness_spread(self):
        labs = np.array([[0.0, 0, 0], [0.5, 0, 0], [1.0, 0, 0]])
        assert distinctiveness_score(labs) == 100

    def test_oled_risk(self):
        assert oled_risk(np.array([])) == 0.0
        assert oled_risk(np.zeros(10)) == 0.0
        assert oled_risk(np.ones(4)) == 100.0

    def test_burn_in_buckets(self):
        assert burn_in_level(30) is RiskLevel.LOW
        assert burn_in_level(31) is RiskLevel.MEDIUM
        assert burn_in_level(61) is RiskLevel.HIGH


class TestWhiteOnBlack:
    """All slots black except a white foreground."""

    def test_foreground_aaa(self, white_on_black):
        result = analyze(white_on_black)
        assert result.wcag_compliance.foreground_on_bg is WcagLevel.AAA
        assert result.wcag_compliance.accent_on_bg is WcagLevel.FAIL

    def test_contrast_score(self, white_on_black):
        # Foreground at full credit, both accents at 1:1
        assert analyze(white_on_black).contrast_score == 43

    def test_distinctiveness_low(self, white_on_black):
        assert analyze(white_on_black).distinctiveness <= 20

    def test_oled_penalized(self, white_on_black):
        result = analyze(white_on_black)
        assert result.oled_score < 60
        assert result.burn_in_risk is RiskLevel.MEDIUM

    def test_achromatic_harmony(self, white_on_black):
        assert analyze(white_on_black).harmony_score == 100

    def test_profile_and_counts(self, white_on_black):
        result = analyze(white_on_black)
        assert result.luminance_profile == (0.0,) * 16
        assert result.color_count.bright == 1
        assert result.color_count.dark == 21
        assert result.color_count.neutral == 0

    def test_insights_and_warnings(self, white_on_black):
        result = analyze(white_on_black)
        assert any("WCAG AAA" in text for text in result.insights)
        assert any(text.startswith("Low distinctiveness") for text in result.warnings)

    def test_suggestions(self, white_on_black):
        suggestions = suggest_improvements(white_on_black)
        assert "Increase accent brightness for better visibility" in suggestions
        assert "Reduce overall luminance to protect OLED displays" in suggestions
        assert not any(s.startswith("Foreground contrast") for s in suggestions)


class TestAnalyzeSynthesized:
    @pytest.mark.parametrize("tier", list(RiskTier))
    @pytest.mark.parametrize("style", list(SchemeStyle))
    def test_scores_bounded(self, tier, style):
        result = analyze(synthesize(123, style, "bounds", "Bounds", tier))
        for score in (
            result.overall_score, result.oled_score, result.contrast_score,
            result.harmony_score, result.distinctiveness,
        ):
            assert 0 <= score <= 100
        assert len(result.luminance_profile) == 16

    def test_deterministic(self):
        scheme = synthesize(45, "complementary", "det", "Det")
        assert analyze(scheme) == analyze(scheme)

    def test_serializes(self):
        result = analyze(synthesize(45, "complementary", "det", "Det"))
        data = result.to_dict()
        assert data["burnInRisk"] in {"low", "medium", "high"}
        assert len(data["luminanceProfile"]) == 16


class TestColorMetrics:
    def test_white(self):
        metrics = color_metrics("#FFFFFF")
        assert metrics.luminance == pytest.approx(1.0, abs=1e-6)
        assert metrics.wcag_luminance == pytest.approx(1.0)
