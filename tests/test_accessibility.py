# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for color-vision simulation and accessibility scoring."""

import pytest

from chromavoid import assess_accessibility, simulate_color_blindness
from chromavoid.schema import (
    ColorPair,
    SchemeAccessibilityReport,
    UsageContext,
    VisionType,
    WcagLevel,
)
from chromavoid.engine.accessibility import (
    accessibility_result,
    assess_scheme_accessibility,
    generate_accessible_variant,
    is_accessible,
    scheme_critical_pairs,
)
from chromavoid.engine.analyze import contrast_ratio


class TestSimulation:
    def test_red_achromatopsia(self):
        assert simulate_color_blindness("#FF0000", VisionType.ACHROMATOPSIA) == "#4C4C4C"

    def test_red_protanopia_by_tag(self):
        assert simulate_color_blindness("#FF0000", "protanopia") == "#918E3E"

    def test_normal_is_identity(self):
        assert simulate_color_blindness("#12ab34", VisionType.NORMAL) == "#12AB34"

    @pytest.mark.parametrize("vision", list(VisionType))
    def test_white_and_black_fixed(self, vision):
        assert simulate_color_blindness("#FFFFFF", vision) == "#FFFFFF"
        assert simulate_color_blindness("#000000", vision) == "#000000"

    def test_malformed_is_black(self):
        assert simulate_color_blindness("nope", VisionType.TRITANOPIA) == "#000000"

    def test_unknown_vision_type(self):
        with pytest.raises(ValueError):
            simulate_color_blindness("#FF0000", "tetrachromacy")


class TestAccessibilityResult:
    def test_text_levels(self):
        assert accessibility_result(7.0).compliance is WcagLevel.AAA
        assert accessibility_result(5.0).compliance is WcagLevel.AA
        assert accessibility_result(5.0).score == 100

    def test_failure(self):
        result = accessibility_result(2.0, UsageContext.TEXT)
        assert result.compliance is WcagLevel.FAIL
        assert result.score == 44
        assert len(result.issues) == 1

    def test_interface_context(self):
        result = accessibility_result(3.5, "interface")
        assert result.compliance is WcagLevel.AA
        assert accessibility_result(4.5, "data").compliance is WcagLevel.AAA


class TestAssessAccessibility:
    def test_white_on_black(self):
        score = assess_accessibility("#FFFFFF", "#000000")
        assert score.overall == 100
        assert score.color_blind_safe
        assert score.normal.compliance is WcagLevel.AAA
        assert set(score.color_blindness) == {
            VisionType.PROTANOPIA, VisionType.DEUTERANOPIA,
            VisionType.TRITANOPIA, VisionType.ACHROMATOPSIA,
        }
        assert set(score.contextual) == set(UsageContext)
        assert score.recommendations == ()

    def test_black_on_black(self):
        score = assess_accessibility("#000000", "#000000")
        assert score.normal.compliance is WcagLevel.FAIL
        assert not score.color_blind_safe
        assert score.overall == 25
        assert score.recommendations

    def test_to_dict(self):
        data = assess_accessibility("#FFFFFF", "#000000").to_dict()
        assert data["normalVision"]["wcagCompliance"] == "AAA"
        assert "protanopia" in data["colorBlindness"]

    def test_is_accessible(self):
        assert is_accessible("#FFFFFF", "#000000")
        assert is_accessible("#FFFFFF", "#000000", minimum=WcagLevel.AAA)
        assert not is_accessible("#222222", "#000000")


class TestAccessibleVariant:
    def test_lightens_on_black(self):
        variant = generate_accessible_variant("#333333", "#000000")
        assert contrast_ratio(variant, "#000000") >= 4.5

    def test_darkens_on_white(self):
        variant = generate_accessible_variant("#CCCCCC", "#FFFFFF")
        assert contrast_ratio(variant, "#FFFFFF") >= 4.5

    def test_aaa_text(self):
        variant = generate_accessible_variant("#444444", "#000000", target="AAA")
        assert contrast_ratio(variant, "#000000") >= 7.0

    def test_already_accessible(self):
        assert generate_accessible_variant("#ffffff", "#000000") == "#FFFFFF"


class TestSchemeAccessibility:
    def test_critical_pairs(self, white_on_black):
        pairs = scheme_critical_pairs(white_on_black)
        assert [p.name for p in pairs] == [
            "foreground", "accent", "accent_bright", "cursor", "selection",
        ]
        assert pairs[0].context is UsageContext.TEXT
        assert pairs[1].context is UsageContext.INTERFACE

    def test_report(self, white_on_black):
        report = assess_scheme_accessibility(scheme_critical_pairs(white_on_black))
        assert set(report.pairs) == {
            "foreground", "accent", "accent_bright", "cursor", "selection",
        }
        assert "accent: WCAG compliance failed" in report.critical_issues
        assert not any(i.startswith("foreground") for i in report.critical_issues)
        assert 0 <= report.overall_score <= 100
        assert len(report.recommendations) == len(set(report.recommendations))

    def test_single_pair(self):
        report = assess_scheme_accessibility(
            [ColorPair("text", "#FFFFFF", "#000000")]
        )
        assert report.overall_score == 100
        assert report.critical_issues == ()

    def test_empty(self):
        assert assess_scheme_accessibility([]).overall_score == 0


class TestImmutableResults:
    def test_score_mappings_are_read_only(self):
        score = assess_accessibility("#FFFFFF", "#000000")
        with pytest.raises(TypeError):
            score.color_blindness[VisionType.PROTANOPIA] = score.normal
        with pytest.raises(TypeError):
            score.contextual[UsageContext.TEXT] = score.normal

    def test_score_is_hashable(self):
        a = assess_accessibility("#FFFFFF", "#000000")
        b = assess_accessibility("#FFFFFF", "#000000")
        assert a == b
        assert hash(a) == hash(b)

    def test_report_is_read_only_and_hashable(self, white_on_black):
        report = assess_scheme_accessibility(scheme_critical_pairs(white_on_black))
        with pytest.raises(TypeError):
            report.pairs["extra"] = report.pairs["foreground"]
        hash(report)

    def test_report_copies_caller_mapping(self):
        pairs = {"text": assess_accessibility("#FFFFFF", "#000000")}
        report = SchemeAccessibilityReport(overall_score=100, pairs=pairs)
        pairs.clear()
        assert set(report.pairs) == {"text"}
