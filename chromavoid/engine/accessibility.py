# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Color-vision simulation and accessibility scoring.

Deficiencies are simulated with fixed 3×3 matrices applied directly to
8-bit sRGB channels (no gamma round-trip). Contrast is then recomputed on
the simulated colors and scored against the requirement of the usage
context:

    text:             AA ≥ 4.5, AAA ≥ 6.75
    interface, data:  AA ≥ 3.0, AAA ≥ 4.5
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

import numpy as np

from chromavoid.schema import (
    AccessibilityResult,
    AccessibilityScore,
    ColorPair,
    ColorScheme,
    SchemeAccessibilityReport,
    UsageContext,
    VisionType,
    WcagLevel,
)
from chromavoid.engine.analyze import contrast_ratio, relative_luminance
from chromavoid.engine.colorspace import hex_to_rgb, rgb_to_hex, round_half_up

logger = logging.getLogger(__name__)


VISION_MATRICES: dict[VisionType, np.ndarray] = {
    VisionType.NORMAL: np.eye(3),
    VisionType.PROTANOPIA: np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.242, 0.758, 0.0],
    ]),
    VisionType.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.3, 0.7, 0.0],
    ]),
    VisionType.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.433, 0.567, 0.0],
        [0.475, 0.525, 0.0],
    ]),
    VisionType.ACHROMATOPSIA: np.array([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
}

DEFICIENCIES = (
    VisionType.PROTANOPIA,
    VisionType.DEUTERANOPIA,
    VisionType.TRITANOPIA,
    VisionType.ACHROMATOPSIA,
)

REQUIRED_RATIO: dict[UsageContext, float] = {
    UsageContext.TEXT: 4.5,
    UsageContext.INTERFACE: 3.0,
    UsageContext.DATA: 3.0,
}

# AAA threshold as a multiple of the AA requirement
AAA_FACTOR = 1.5

# Accessible-variant search
_VARIANT_STEP = 10
_VARIANT_ATTEMPTS = 20


def _coerce_vision(vision_type: Union[VisionType, str]) -> VisionType:
    return vision_type if isinstance(vision_type, VisionType) else VisionType(vision_type)


def _coerce_context(context: Union[UsageContext, str]) -> UsageContext:
    return context if isinstance(context, UsageContext) else UsageContext(context)


def simulate_color_blindness(
    hex_color: str,
    vision_type: Union[VisionType, str],
) -> str:
    """
    How a color appears under a color-vision deficiency.

    Malformed hex input is treated as black.

    Example::

        simulate_color_blindness("#FF0000", VisionType.ACHROMATOPSIA)
        # "#4C4C4C"
    """
    matrix = VISION_MATRICES[_coerce_vision(vision_type)]
    rgb = np.array(hex_to_rgb(hex_color), dtype=np.float64)
    simulated = np.clip(matrix @ rgb, 0.0, 255.0)
    return rgb_to_hex(*(round_half_up(v) for v in simulated))


def accessibility_result(
    contrast: float,
    context: Union[UsageContext, str] = UsageContext.TEXT,
) -> AccessibilityResult:
    """Score a contrast ratio against a context's requirement."""
    required = REQUIRED_RATIO[_coerce_context(context)]

    if contrast >= required * AAA_FACTOR:
        compliance = WcagLevel.AAA
    elif contrast >= required:
        compliance = WcagLevel.AA
    else:
        compliance = WcagLevel.FAIL

    issues = ()
    if compliance is WcagLevel.FAIL:
        issues = (
            f"Contrast ratio {contrast:.1f}:1 is below minimum requirement "
            f"of {required}:1",
        )

    return AccessibilityResult(
        contrast=contrast,
        compliance=compliance,
        score=min(100, round_half_up(contrast / required * 100)),
        issues=issues,
    )


def _recommendations(
    normal: AccessibilityResult,
    color_blindness: dict[VisionType, AccessibilityResult],
    contextual: dict[UsageContext, AccessibilityResult],
) -> list[str]:
    recs = []

    blind_failures = [
        v.value for v, r in color_blindness.items()
        if r.compliance is WcagLevel.FAIL
    ]
    if blind_failures:
        recs.append(
            f"Poor contrast for users with {', '.join(blind_failures)} color vision"
        )
        recs.append("Consider using higher contrast colors or additional visual cues")

    context_failures = [
        c.value for c, r in contextual.items() if r.compliance is WcagLevel.FAIL
    ]
    if context_failures:
        recs.append(f"Poor contrast for {', '.join(context_failures)} elements")
        recs.append("Increase contrast or use alternative visual indicators")

    if normal.score < 80:
        recs.append("Consider increasing overall contrast for better readability")

    if any(r.score < normal.score * 0.8 for r in color_blindness.values()):
        recs.append("Colors may appear differently to color blind users")
        recs.append("Test with color blindness simulators and ensure usability")

    return recs


def assess_accessibility(
    foreground: str,
    background: str,
    context: Union[UsageContext, str] = UsageContext.TEXT,
) -> AccessibilityScore:
    """
    Full accessibility assessment of a foreground/background pair.

    The overall score is the mean of eight results: normal vision, the
    four simulated deficiencies, and the three usage contexts.
    """
    context = _coerce_context(context)

    normal_contrast = contrast_ratio(foreground, background)
    normal = accessibility_result(normal_contrast, context)

    color_blindness = {
        vision: accessibility_result(
            contrast_ratio(
                simulate_color_blindness(foreground, vision),
                simulate_color_blindness(background, vision),
            ),
            context,
        )
        for vision in DEFICIENCIES
    }

    contextual = {
        ctx: accessibility_result(normal_contrast, ctx) for ctx in UsageContext
    }

    scores = (
        [normal.score]
        + [r.score for r in color_blindness.values()]
        + [r.score for r in contextual.values()]
    )

    return AccessibilityScore(
        overall=round_half_up(sum(scores) / len(scores)),
        normal=normal,
        color_blind_safe=all(
            r.compliance is not WcagLevel.FAIL for r in color_blindness.values()
        ),
        color_blindness=color_blindness,
        contextual=contextual,
        recommendations=tuple(_recommendations(normal, color_blindness, contextual)),
    )


def is_accessible(
    foreground: str,
    background: str,
    context: Union[UsageContext, str] = UsageContext.TEXT,
    minimum: Union[WcagLevel, str] = WcagLevel.AA,
) -> bool:
    """
    True if the pair meets ``minimum`` under normal vision and no
    simulated deficiency fails.
    """
    minimum = minimum if isinstance(minimum, WcagLevel) else WcagLevel(minimum)
    assessment = assess_accessibility(foreground, background, context)

    level = assessment.normal.compliance
    if minimum is WcagLevel.AAA:
        meets = level is WcagLevel.AAA
    else:
        meets = level is not WcagLevel.FAIL
    return meets and assessment.color_blind_safe


def generate_accessible_variant(
    base_color: str,
    background: str,
    context: Union[UsageContext, str] = UsageContext.TEXT,
    target: Union[WcagLevel, str] = WcagLevel.AA,
) -> str:
    """
    Step a color's RGB channels until it reaches the target contrast.

    Channels move by 10 per step, away from the background's luminance,
    for at most 20 steps. The direction flips when the color saturates at
    black or white. Returns the last attempt if the target is never met.
    """
    context = _coerce_context(context)
    target = target if isinstance(target, WcagLevel) else WcagLevel(target)
    text = context is UsageContext.TEXT
    if target is WcagLevel.AAA:
        required = 7.0 if text else 4.5
    else:
        required = 4.5 if text else 3.0

    r, g, b = hex_to_rgb(base_color)
    current = rgb_to_hex(r, g, b)
    if contrast_ratio(current, background) >= required:
        return current

    direction = 1 if relative_luminance(current) > relative_luminance(background) else -1
    for _ in range(_VARIANT_ATTEMPTS):
        r, g, b = (
            min(255, max(0, v + direction * _VARIANT_STEP)) for v in (r, g, b)
        )
        current = rgb_to_hex(r, g, b)
        if contrast_ratio(current, background) >= required:
            return current
        if current in ("#FFFFFF", "#000000"):
            direction = -direction

    logger.debug(
        "No accessible variant of %s on %s reaches %.1f:1",
        base_color, background, required,
    )
    return current


def scheme_critical_pairs(scheme: ColorScheme) -> tuple[ColorPair, ...]:
    """The pairs of a scheme that must stay readable."""
    core = scheme.core
    return (
        ColorPair("foreground", core.foreground, core.background, UsageContext.TEXT),
        ColorPair("accent", core.accent, core.background, UsageContext.INTERFACE),
        ColorPair(
            "accent_bright", core.accent_bright, core.background,
            UsageContext.INTERFACE,
        ),
        ColorPair("cursor", core.cursor, core.background, UsageContext.INTERFACE),
        ColorPair("selection", core.selection_fg, core.selection_bg, UsageContext.TEXT),
    )


def assess_scheme_accessibility(
    pairs: Iterable[ColorPair],
) -> SchemeAccessibilityReport:
    """Assess several pairs and roll them into one report."""
    assessments: dict[str, AccessibilityScore] = {}
    critical: list[str] = []
    recommendations: list[str] = []

    for pair in pairs:
        assessment = assess_accessibility(pair.foreground, pair.background, pair.context)
        assessments[pair.name] = assessment

        if assessment.normal.compliance is WcagLevel.FAIL:
            critical.append(f"{pair.name}: WCAG compliance failed")
        if not assessment.color_blind_safe:
            critical.append(f"{pair.name}: Poor color blindness support")

        for rec in assessment.recommendations:
            if rec not in recommendations:
                recommendations.append(rec)

    overall = 0
    if assessments:
        overall = round_half_up(
            sum(a.overall for a in assessments.values()) / len(assessments)
        )

    return SchemeAccessibilityReport(
        overall_score=overall,
        pairs=assessments,
        critical_issues=tuple(critical),
        recommendations=tuple(recommendations),
    )
