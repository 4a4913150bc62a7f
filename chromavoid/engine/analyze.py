# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Scheme analysis.

Scores any ColorScheme on four independent axes, each 0-100:

- Contrast: WCAG contrast of foreground, accent and accent_bright against
  the background
- Harmony: how well the hue spacing matches the declared style
- Distinctiveness: pairwise perceptual distance between colors
- OLED: penalizes high mean and peak lightness

Every slot except the background is analyzed. Analysis never modifies
the scheme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from chromavoid.schema import (
    AnalysisResult,
    ColorCount,
    ColorScheme,
    OKLCHColor,
    RiskLevel,
    SchemeStyle,
    WcagCompliance,
    WcagLevel,
)
from chromavoid.engine.colorspace import (
    delta_e_pairwise,
    hex_to_oklch,
    hex_to_rgb,
    oklab_to_oklch,
    round_half_up,
    srgb_to_linear,
    srgb_uint8_to_oklab,
)
from chromavoid.engine.harmony import coerce_style

logger = logging.getLogger(__name__)


# WCAG thresholds
AAA_RATIO = 7.0
AA_RATIO = 4.5

# Chroma below which a color carries no meaningful hue
ACHROMATIC_CHROMA = 0.02

# Distinctiveness: mean ΔE (×100 units) earning full credit, and the
# distance under which a pair counts as too close
DISTINCT_FULL_CREDIT = 20.0
DISTINCT_TOO_CLOSE = 5.0
DISTINCT_PENALTY = 30.0

# Overall blend
WEIGHT_OLED = 0.30
WEIGHT_CONTRAST = 0.30
WEIGHT_HARMONY = 0.20
WEIGHT_DISTINCT = 0.20

_BT709 = np.array([0.2126, 0.7152, 0.0722])


@dataclass(frozen=True, slots=True)
class HarmonyTarget:
    """Expected mean hue distance and tolerance band for a style."""
    distance: float
    tolerance: float
    description: str


HARMONY_TARGETS: dict[SchemeStyle, HarmonyTarget] = {
    SchemeStyle.MONOCHROME: HarmonyTarget(
        0, 15, "Monochromatic - single hue with lightness variations"),
    SchemeStyle.COMPLEMENTARY: HarmonyTarget(
        180, 30, "Complementary - opposite hues on color wheel"),
    SchemeStyle.ANALOGOUS: HarmonyTarget(
        30, 20, "Analogous - adjacent hues for subtle harmony"),
    SchemeStyle.SPLIT_COMPLEMENTARY: HarmonyTarget(
        150, 30, "Split complementary - balanced contrast"),
    SchemeStyle.TRIADIC: HarmonyTarget(
        120, 25, "Triadic - three evenly spaced hues"),
    SchemeStyle.TETRADIC: HarmonyTarget(
        90, 25, "Tetradic - four hues in square pattern"),
    SchemeStyle.SPECTRAL: HarmonyTarget(
        180, 90, "Spectral - full rainbow coverage"),
}


@dataclass(frozen=True, slots=True)
class ColorMetrics:
    """Lightness measures of a single hex color."""
    luminance: float
    oklch: OKLCHColor
    wcag_luminance: float


def _clamp_score(value: float) -> int:
    return round_half_up(min(100.0, max(0.0, value)))


# =============================================================================
# Contrast
# =============================================================================


def _relative_luminance(rgb: NDArray) -> NDArray[np.float64]:
    """WCAG relative luminance of 8-bit sRGB triples, shape (..., 3)."""
    linear = srgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255.0)
    return linear @ _BT709


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance (0 = black, 1 = white)."""
    return float(_relative_luminance(np.array(hex_to_rgb(hex_color))))


def contrast_ratio(hex1: str, hex2: str) -> float:
    """
    WCAG contrast ratio, 1.0 to 21.0.

    Symmetric in its arguments.
    """
    l1 = relative_luminance(hex1)
    l2 = relative_luminance(hex2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def wcag_level(ratio: float) -> WcagLevel:
    if ratio >= AAA_RATIO:
        return WcagLevel.AAA
    if ratio >= AA_RATIO:
        return WcagLevel.AA
    return WcagLevel.FAIL


# =============================================================================
# Harmony
# =============================================================================


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues, 0-180."""
    diff = abs(h1 - h2) % 360.0
    return min(diff, 360.0 - diff)


def hue_spread(hues: list[float]) -> float:
    """Arc of the hue circle covered by the hues (360 minus the widest gap)."""
    if len(hues) < 2:
        return 0.0
    ordered = sorted(hues)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    gaps.append(360.0 - ordered[-1] + ordered[0])
    return 360.0 - max(gaps)


def _style_score(hues: list[float], style: SchemeStyle) -> float:
    target = HARMONY_TARGETS[style]
    distances = [hue_distance(a, b) for a, b in combinations(hues, 2)]

    if style is SchemeStyle.MONOCHROME:
        return max(0.0, 100 - max(distances) * 2)
    if style is SchemeStyle.SPECTRAL:
        return min(100.0, hue_spread(hues) / 2)

    mean_distance = sum(distances) / len(distances)
    deviation = abs(mean_distance - target.distance)
    return max(0.0, 100 - deviation * (100 / target.tolerance))


def harmony_score(
    hues: list[float],
    style: Union[SchemeStyle, str, None],
) -> tuple[int, str]:
    """
    Score hue spacing against a style.

    Args:
        hues: Hues of the chromatic colors (achromatic colors excluded)
        style: Declared style; unknown tags are scored against the best
            matching style

    Returns:
        (score 0-100, description of the harmony model used)
    """
    if len(hues) < 2:
        return 100, "Single hue scheme"

    resolved = coerce_style(style)
    if resolved is not None:
        return (
            _clamp_score(_style_score(hues, resolved)),
            HARMONY_TARGETS[resolved].description,
        )

    best_score, best_description = 0.0, "Unusual color relationships"
    for candidate, target in HARMONY_TARGETS.items():
        score = _style_score(hues, candidate)
        if score > best_score:
            best_score, best_description = score, target.description
    return _clamp_score(best_score), best_description


# =============================================================================
# Distinctiveness
# =============================================================================


def distinctiveness_score(labs: NDArray[np.float64]) -> int:
    """
    Score how distinguishable a set of OKLab colors is.

    Mean pairwise ΔE (×100 units) earns full credit at 20, and the fraction
    of pairs closer than 5 units costs up to 30 points.
    """
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    n = len(labs)
    if n < 2:
        return 100

    upper = np.triu_indices(n, k=1)
    distances = delta_e_pairwise(labs)[upper] * 100
    too_close = np.count_nonzero(distances < DISTINCT_TOO_CLOSE)

    score = min(100.0, distances.mean() / DISTINCT_FULL_CREDIT * 100)
    score -= too_close / len(distances) * DISTINCT_PENALTY
    return _clamp_score(score)


# =============================================================================
# OLED
# =============================================================================


def oled_risk(lightness: NDArray[np.float64]) -> float:
    """
    Burn-in risk value, 0-100.

        risk = 100·meanL + 50·(maxL - 0.5) + 3·#(L > 0.4) + 10·#(L > 0.6)
    """
    lightness = np.asarray(lightness, dtype=np.float64)
    if lightness.size == 0:
        return 0.0
    risk = (
        lightness.mean() * 100
        + (lightness.max() - 0.5) * 50
        + np.count_nonzero(lightness > 0.4) * 3
        + np.count_nonzero(lightness > 0.6) * 10
    )
    return float(min(100.0, max(0.0, risk)))


def burn_in_level(risk: float) -> RiskLevel:
    if risk <= 30:
        return RiskLevel.LOW
    if risk <= 60:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


# =============================================================================
# Analysis
# =============================================================================


def _analyzed_colors(scheme: ColorScheme) -> tuple[str, ...]:
    """Every slot except the background slot."""
    return scheme.all_colors()[1:]


def _insights_and_warnings(
    oled_score: int,
    risk: RiskLevel,
    bright_count: int,
    contrast: int,
    harmony: int,
    harmony_description: str,
    distinct: int,
    compliance: WcagCompliance,
    fg_ratio: float,
    bright_ratio: float,
) -> tuple[list[str], list[str]]:
    insights: list[str] = []
    warnings: list[str] = []

    if oled_score >= 80:
        insights.append(
            f"Excellent OLED efficiency ({oled_score}/100) - minimal power "
            "draw on AMOLED displays."
        )
    elif oled_score >= 60:
        insights.append(
            f"Good OLED optimization ({oled_score}/100) with acceptable "
            "luminance levels."
        )
    elif oled_score >= 40:
        warnings.append(
            f"Moderate OLED risk ({oled_score}/100) - consider darkening "
            "bright colors."
        )
    else:
        warnings.append(
            f"High OLED risk ({oled_score}/100) - {bright_count} colors "
            "exceed safe brightness."
        )

    if contrast >= 80:
        insights.append(
            f"Excellent contrast ({contrast}/100) - strong readability "
            "across UI elements."
        )
    elif contrast >= 60:
        insights.append(
            f"Good contrast ({contrast}/100) - readable with room for "
            "accessibility improvement."
        )
    else:
        warnings.append(
            f"Low contrast ({contrast}/100) - some colors may be hard to "
            "read on black."
        )

    insights.append(f"Harmony: {harmony_description} ({harmony}/100).")

    if distinct >= 70:
        insights.append(
            f"Colors are well-differentiated ({distinct}/100) - easy to "
            "distinguish."
        )
    elif distinct >= 50:
        insights.append(f"Moderate color distinctiveness ({distinct}/100).")
    else:
        warnings.append(
            f"Low distinctiveness ({distinct}/100) - some colors may appear "
            "too similar."
        )

    if risk is RiskLevel.LOW:
        insights.append("Low burn-in risk - safe for extended OLED use.")
    elif risk is RiskLevel.MEDIUM:
        warnings.append(
            "Medium burn-in risk - avoid static display of bright colors "
            "for long periods."
        )
    else:
        warnings.append(
            "High burn-in risk - bright colors should not be displayed "
            "statically."
        )

    if compliance.foreground_on_bg is WcagLevel.AAA:
        insights.append(f"Foreground achieves WCAG AAA (ratio: {fg_ratio:.1f}:1).")
    elif compliance.foreground_on_bg is WcagLevel.AA:
        insights.append(f"Foreground passes WCAG AA (ratio: {fg_ratio:.1f}:1).")
    else:
        warnings.append(
            f"Foreground fails WCAG (ratio: {fg_ratio:.1f}:1) - needs more "
            "contrast."
        )

    if compliance.accent_bright_on_bg is WcagLevel.AAA:
        insights.append(
            f"Bright accent achieves WCAG AAA (ratio: {bright_ratio:.1f}:1)."
        )

    return insights, warnings


def analyze(scheme: ColorScheme) -> AnalysisResult:
    """
    Score a scheme.

    Args:
        scheme: Any ColorScheme (synthesized, optimized or hand-made)

    Returns:
        AnalysisResult with every score clamped to 0-100
    """
    core = scheme.core
    bg = core.background

    # Contrast
    fg_ratio = contrast_ratio(core.foreground, bg)
    accent_ratio = contrast_ratio(core.accent, bg)
    bright_ratio = contrast_ratio(core.accent_bright, bg)
    compliance = WcagCompliance(
        foreground_on_bg=wcag_level(fg_ratio),
        accent_on_bg=wcag_level(accent_ratio),
        accent_bright_on_bg=wcag_level(bright_ratio),
    )
    ratios = np.array([fg_ratio, accent_ratio, bright_ratio])
    contrast = _clamp_score(np.minimum(ratios / AAA_RATIO, 1.0).mean() * 100)

    # Perceptual coordinates of the analyzed slots
    rgb = np.array([hex_to_rgb(h) for h in _analyzed_colors(scheme)])
    labs = srgb_uint8_to_oklab(rgb)
    lch = oklab_to_oklch(labs)
    lightness = lch[:, 0]

    chromatic = lch[:, 1] >= ACHROMATIC_CHROMA
    harmony, harmony_description = harmony_score(
        [float(h) for h in lch[chromatic, 2]], scheme.style,
    )

    distinct = distinctiveness_score(labs)

    risk = oled_risk(lightness)
    oled_score = _clamp_score(100 - risk)
    burn_in = burn_in_level(risk)

    overall = _clamp_score(
        oled_score * WEIGHT_OLED
        + contrast * WEIGHT_CONTRAST
        + harmony * WEIGHT_HARMONY
        + distinct * WEIGHT_DISTINCT
    )

    terminal_rgb = np.array([hex_to_rgb(h) for h in scheme.terminal.as_tuple()])
    luminance_profile = tuple(
        round_half_up(v * 1000) / 10 for v in _relative_luminance(terminal_rgb)
    )

    dark = int(np.count_nonzero(lightness < 0.2))
    bright = int(np.count_nonzero(lightness > 0.5))
    color_count = ColorCount(
        dark=dark, bright=bright, neutral=len(lightness) - dark - bright,
    )

    insights, warnings = _insights_and_warnings(
        oled_score, burn_in, int(np.count_nonzero(lightness > 0.4)),
        contrast, harmony, harmony_description, distinct,
        compliance, fg_ratio, bright_ratio,
    )

    logger.debug(
        "Analyzed %r: overall=%d oled=%d contrast=%d harmony=%d distinct=%d",
        scheme.name, overall, oled_score, contrast, harmony, distinct,
    )

    return AnalysisResult(
        overall_score=overall,
        oled_score=oled_score,
        contrast_score=contrast,
        harmony_score=harmony,
        distinctiveness=distinct,
        burn_in_risk=burn_in,
        wcag_compliance=compliance,
        luminance_profile=luminance_profile,
        color_count=color_count,
        insights=tuple(insights),
        warnings=tuple(warnings),
        harmony_description=harmony_description,
    )


def color_metrics(hex_color: str) -> ColorMetrics:
    """OKLCH lightness and WCAG luminance of one color."""
    oklch = hex_to_oklch(hex_color)
    return ColorMetrics(
        luminance=oklch.L,
        oklch=oklch,
        wcag_luminance=relative_luminance(hex_color),
    )


def suggest_improvements(
    scheme: ColorScheme,
    analysis: Optional[AnalysisResult] = None,
) -> list[str]:
    """Concrete changes that would raise the scheme's weakest scores."""
    analysis = analysis or analyze(scheme)
    suggestions = []

    if analysis.contrast_score < 70:
        if relative_luminance(scheme.core.foreground) < 0.4:
            suggestions.append(
                "Lighten foreground color to improve text readability"
            )
        if relative_luminance(scheme.core.accent) < 0.3:
            suggestions.append("Increase accent brightness for better visibility")

    if analysis.oled_score < 60:
        suggestions.append("Reduce overall luminance to protect OLED displays")
        suggestions.append(
            'Consider switching to "Conservative" or "Ultra-Conservative" '
            "OLED mode"
        )

    if analysis.distinctiveness < 60:
        suggestions.append(
            "Increase color variation - some terminal colors are too similar"
        )

    if analysis.wcag_compliance.foreground_on_bg is not WcagLevel.AAA:
        ratio = contrast_ratio(scheme.core.foreground, scheme.core.background)
        suggestions.append(
            f"Foreground contrast: {ratio:.1f}:1 - aim for 7:1 (AAA)"
        )

    return suggestions
