# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Result types for scheme analysis, OLED risk assessment and accessibility.

All results are created fresh on each call and never mutated afterward.
Mapping fields are read-only views and do not take part in hashing.
Scores documented as 0-100 are integers clamped into that range.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from chromavoid.schema.color_scheme import OKLCHColor


class WcagLevel(Enum):
    """WCAG contrast verdict."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "fail"


class RiskLevel(Enum):
    """Bucketed OLED burn-in risk."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class VisionType(Enum):
    """Simulated color vision."""
    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"


class UsageContext(Enum):
    """Where a color pair is used; decides the required contrast."""
    TEXT = "text"
    INTERFACE = "interface"
    DATA = "data"


def _freeze(obj, *names: str) -> None:
    """Replace mapping fields of a frozen instance with read-only copies."""
    for name in names:
        object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


# =============================================================================
# Scheme Analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class WcagCompliance:
    """Verdicts for the three key pairs against the background."""
    foreground_on_bg: WcagLevel
    accent_on_bg: WcagLevel
    accent_bright_on_bg: WcagLevel

    def to_dict(self) -> dict:
        return {
            "foregroundOnBg": self.foreground_on_bg.value,
            "accentOnBg": self.accent_on_bg.value,
            "accentBrightOnBg": self.accent_bright_on_bg.value,
        }


@dataclass(frozen=True, slots=True)
class ColorCount:
    """Lightness tallies over the analyzed slots."""
    dark: int
    bright: int
    neutral: int

    def to_dict(self) -> dict:
        return {
            "darkColors": self.dark,
            "brightColors": self.bright,
            "neutralColors": self.neutral,
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Scores for one ColorScheme.

    Attributes:
        overall_score: Weighted blend of the four component scores
        oled_score: 100 minus the burn-in risk value
        contrast_score: WCAG contrast of the key pairs
        harmony_score: Agreement of hue spacing with the declared style
        distinctiveness: How distinguishable the colors are from each other
        burn_in_risk: Bucketed OLED risk
        wcag_compliance: Per-pair WCAG verdicts
        luminance_profile: Relative luminance (percent) of ANSI 0-15
        color_count: Dark / bright / neutral tallies
        insights: Positive findings
        warnings: Problems worth fixing
        harmony_description: Human-readable name of the harmony model used
    """
    overall_score: int
    oled_score: int
    contrast_score: int
    harmony_score: int
    distinctiveness: int
    burn_in_risk: RiskLevel
    wcag_compliance: WcagCompliance
    luminance_profile: tuple[float, ...]
    color_count: ColorCount
    insights: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    harmony_description: str = ""

    def __post_init__(self) -> None:
        for name in (
            "overall_score", "oled_score", "contrast_score",
            "harmony_score", "distinctiveness",
        ):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be 0-100, got {value}")
        if len(self.luminance_profile) != 16:
            raise ValueError(
                f"Luminance profile needs 16 entries, got {len(self.luminance_profile)}"
            )

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "oledScore": self.oled_score,
            "contrastScore": self.contrast_score,
            "harmonyScore": self.harmony_score,
            "distinctiveness": self.distinctiveness,
            "burnInRisk": self.burn_in_risk.value,
            "wcagCompliance": self.wcag_compliance.to_dict(),
            "luminanceProfile": list(self.luminance_profile),
            "colorCount": self.color_count.to_dict(),
            "insights": list(self.insights),
            "warnings": list(self.warnings),
            "harmony": self.harmony_description,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# =============================================================================
# Accessibility
# =============================================================================


@dataclass(frozen=True, slots=True)
class AccessibilityResult:
    """Contrast verdict for one vision type or usage context."""
    contrast: float
    compliance: WcagLevel
    score: int
    issues: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "contrast": self.contrast,
            "compliance": self.compliance.value,
            "score": self.score,
            "issues": list(self.issues),
        }


@dataclass(frozen=True, slots=True)
class AccessibilityScore:
    """
    Full accessibility assessment of one foreground/background pair.

    Attributes:
        overall: Mean of the eight component scores
        normal: Result under normal vision for the requested context
        color_blind_safe: True if no simulated deficiency fails
        color_blindness: Results keyed by deficiency (normal excluded)
        contextual: Results keyed by usage context
        recommendations: Suggested fixes
    """
    overall: int
    normal: AccessibilityResult
    color_blind_safe: bool
    color_blindness: Mapping[VisionType, AccessibilityResult] = field(hash=False)
    contextual: Mapping[UsageContext, AccessibilityResult] = field(hash=False)
    recommendations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "color_blindness", "contextual")

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "normalVision": {
                "contrast": self.normal.contrast,
                "wcagCompliance": self.normal.compliance.value,
                "colorBlindSafe": self.color_blind_safe,
            },
            "colorBlindness": {
                k.value: v.to_dict() for k, v in self.color_blindness.items()
            },
            "contextual": {
                k.value: v.to_dict() for k, v in self.contextual.items()
            },
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class ColorPair:
    """A named foreground/background pair to check."""
    name: str
    foreground: str
    background: str
    context: UsageContext = UsageContext.TEXT


@dataclass(frozen=True, slots=True)
class SchemeAccessibilityReport:
    """Roll-up of AccessibilityScore over several pairs."""
    overall_score: int
    pairs: Mapping[str, AccessibilityScore] = field(hash=False)
    critical_issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "pairs")


# =============================================================================
# OLED Risk Assessment
# =============================================================================


@dataclass(frozen=True, slots=True)
class RiskComponent:
    """
    Risk of a single role color under a tier.

    risk_score is 0-100 (higher = riskier): 70% lightness overshoot and 30%
    chroma overshoot past the role caps, in percent of the cap.
    """
    risk_level: RiskLevel
    risk_score: int
    lightness: float
    chroma: float
    potential_issue: str
    compensation: str


@dataclass(frozen=True, slots=True)
class RiskFactor:
    factor: str
    impact: RiskLevel
    description: str
    mitigation: str


@dataclass(frozen=True, slots=True)
class DetailedRiskAssessment:
    """Per-role OLED risk with factors and recommendations."""
    overall_risk: RiskLevel
    overall_score: int
    components: Mapping[str, RiskComponent] = field(hash=False)
    risk_factors: tuple[RiskFactor, ...]
    recommendations: tuple[str, ...]
    saturation_applied: float
    hue_shift_applied: float
    contrast_enhanced: bool

    def __post_init__(self) -> None:
        _freeze(self, "components")


@dataclass(frozen=True, slots=True)
class CompensationResult:
    """
    Outcome of compensating one color for OLED safety.

    Attributes:
        color: The compensated color
        lightness_reduction: Percent of the original lightness removed
        chroma_boost: Multiplier applied to chroma
        hue_shift: Degrees the hue was rotated
        contrast_enhancement: Tier contrast multiplier
        before_risk: Risk score before compensation
        after_risk: Risk score after compensation
    """
    color: OKLCHColor
    lightness_reduction: int
    chroma_boost: float
    hue_shift: float
    contrast_enhancement: float
    before_risk: int
    after_risk: int
