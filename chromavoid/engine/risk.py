# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
OLED risk profiles.

Each RiskTier carries per-role lightness and chroma caps plus the
compensation factors used when a color is pulled under its cap. The
table is static; the functions here only read it.

Every cap is non-decreasing from ULTRA_CONSERVATIVE to AGGRESSIVE. The
contrast floor and the compensation factors run the other way (stricter
tiers demand more contrast and compensate harder).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping, Union

from chromavoid.schema import (
    ColorScheme,
    CompensationResult,
    DetailedRiskAssessment,
    OKLCHColor,
    RiskComponent,
    RiskFactor,
    RiskLevel,
    RiskTier,
)
from chromavoid.engine.colorspace import hex_to_oklch, round_half_up, wrap_hue

logger = logging.getLogger(__name__)


class Role(Enum):
    """UI role a color is capped for."""
    FOREGROUND = "foreground"
    ACCENT = "accent"
    BRIGHT_ACCENT = "bright_accent"
    SELECTION = "selection"
    DARK_COLORS = "dark_colors"
    BRIGHT_COLORS = "bright_colors"


@dataclass(frozen=True, slots=True)
class RoleCaps:
    """One cap per role."""
    foreground: float
    accent: float
    bright_accent: float
    selection: float
    dark_colors: float
    bright_colors: float

    def for_role(self, role: Role) -> float:
        return getattr(self, role.value)

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True, slots=True)
class RiskProfile:
    """
    Constraints for one tier.

    Attributes:
        tier: The tier this profile belongs to
        name: Display name
        description: One-line summary
        max_lightness: OKLCH L cap per role
        max_chroma: OKLCH C cap per role
        min_contrast: Target contrast ratio against the background
        chroma_compensation: Chroma multiplier applied when L is reduced
        risk_threshold_low: Risk scores at or below this are low
        risk_threshold_medium: Risk scores at or below this are medium
        saturation_boost: Reported aesthetic saturation boost
        hue_shift: Degrees added to hue during compensation
        contrast_enhancement: Reported contrast multiplier
    """
    tier: RiskTier
    name: str
    description: str
    max_lightness: RoleCaps
    max_chroma: RoleCaps
    min_contrast: float
    chroma_compensation: float
    risk_threshold_low: float
    risk_threshold_medium: float
    saturation_boost: float
    hue_shift: float
    contrast_enhancement: float

    def caps(self, role: Role) -> tuple[float, float]:
        """(max lightness, max chroma) for a role."""
        return self.max_lightness.for_role(role), self.max_chroma.for_role(role)

    def bucket(self, score: float) -> RiskLevel:
        if score <= self.risk_threshold_low:
            return RiskLevel.LOW
        if score <= self.risk_threshold_medium:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH


RISK_PROFILES: dict[RiskTier, RiskProfile] = {
    RiskTier.ULTRA_CONSERVATIVE: RiskProfile(
        tier=RiskTier.ULTRA_CONSERVATIVE,
        name="Ultra Conservative",
        description="Maximum OLED protection with intelligent color compensation",
        max_lightness=RoleCaps(0.25, 0.20, 0.30, 0.08, 0.10, 0.18),
        max_chroma=RoleCaps(0.15, 0.12, 0.18, 0.06, 0.10, 0.14),
        min_contrast=5.0,
        chroma_compensation=1.4,
        risk_threshold_low=15,
        risk_threshold_medium=30,
        saturation_boost=1.6,
        hue_shift=5,
        contrast_enhancement=1.2,
    ),
    RiskTier.CONSERVATIVE: RiskProfile(
        tier=RiskTier.CONSERVATIVE,
        name="Conservative",
        description="Strong OLED protection with balanced aesthetics",
        max_lightness=RoleCaps(0.30, 0.25, 0.35, 0.10, 0.12, 0.22),
        max_chroma=RoleCaps(0.18, 0.15, 0.22, 0.08, 0.12, 0.17),
        min_contrast=4.5,
        chroma_compensation=1.3,
        risk_threshold_low=20,
        risk_threshold_medium=40,
        saturation_boost=1.4,
        hue_shift=4,
        contrast_enhancement=1.15,
    ),
    RiskTier.BALANCED: RiskProfile(
        tier=RiskTier.BALANCED,
        name="Balanced",
        description="Good OLED protection with excellent aesthetics",
        max_lightness=RoleCaps(0.40, 0.35, 0.50, 0.12, 0.16, 0.30),
        max_chroma=RoleCaps(0.22, 0.20, 0.28, 0.10, 0.15, 0.20),
        min_contrast=4.0,
        chroma_compensation=1.2,
        risk_threshold_low=35,
        risk_threshold_medium=60,
        saturation_boost=1.2,
        hue_shift=3,
        contrast_enhancement=1.1,
    ),
    RiskTier.AGGRESSIVE: RiskProfile(
        tier=RiskTier.AGGRESSIVE,
        name="Aggressive",
        description="Moderate OLED protection with maximum brightness",
        max_lightness=RoleCaps(0.55, 0.50, 0.70, 0.15, 0.20, 0.40),
        max_chroma=RoleCaps(0.30, 0.28, 0.35, 0.12, 0.18, 0.24),
        min_contrast=3.5,
        chroma_compensation=1.1,
        risk_threshold_low=50,
        risk_threshold_medium=75,
        saturation_boost=1.1,
        hue_shift=2,
        contrast_enhancement=1.05,
    ),
}

# Stand-ins for roles missing from an assessment request
_DEFAULT_ROLE_COLORS: dict[Role, OKLCHColor] = {
    Role.FOREGROUND: OKLCHColor(0.30, 0.10, 180.0),
    Role.ACCENT: OKLCHColor(0.25, 0.15, 180.0),
    Role.BRIGHT_ACCENT: OKLCHColor(0.35, 0.20, 180.0),
    Role.DARK_COLORS: OKLCHColor(0.12, 0.08, 180.0),
    Role.BRIGHT_COLORS: OKLCHColor(0.22, 0.12, 180.0),
}

_ASSESSED_ROLES = tuple(_DEFAULT_ROLE_COLORS)


# =============================================================================
# Lookup
# =============================================================================


def coerce_tier(tier: Union[RiskTier, str, None]) -> RiskTier:
    """
    Map a tier tag to RiskTier.

    None and unknown strings fall back to BALANCED.
    """
    if isinstance(tier, RiskTier):
        return tier
    if tier is None:
        return RiskTier.BALANCED
    try:
        return RiskTier(tier)
    except ValueError:
        logger.warning("Unknown risk tier %r, falling back to balanced", tier)
        return RiskTier.BALANCED


def coerce_role(role: Union[Role, str]) -> Role:
    """Map a role tag to Role. Raises ValueError for unknown roles."""
    if isinstance(role, Role):
        return role
    return Role(role)


def get_risk_profile(tier: Union[RiskTier, str, None]) -> RiskProfile:
    """Profile for a tier (unknown tags resolve to balanced)."""
    return RISK_PROFILES[coerce_tier(tier)]


# =============================================================================
# Capping
# =============================================================================


def apply_risk_caps(
    color: OKLCHColor,
    role: Union[Role, str],
    tier: Union[RiskTier, str, None],
) -> OKLCHColor:
    """
    Pull a color under a role's caps.

    Lightness is clamped to the role cap. When that clamp actually lowered
    L, chroma is multiplied by the tier's compensation factor before being
    clamped to the chroma cap, so dimmed colors keep their saturation:

        C' = min(maxC, C · compensation)   if L was reduced
        C' = min(maxC, C)                  otherwise
    """
    profile = get_risk_profile(tier)
    max_l, max_c = profile.caps(coerce_role(role))

    L = min(color.L, max_l)
    if L < color.L:
        C = min(max_c, color.C * profile.chroma_compensation)
    else:
        C = min(max_c, color.C)

    return OKLCHColor(L=L, C=C, h=color.h)


# =============================================================================
# Risk Assessment
# =============================================================================


def _overshoot(value: float, cap: float) -> float:
    """Percent by which value exceeds cap, 0 when under it."""
    return max(0.0, (value - cap) / cap * 100)


def color_risk_score(L: float, C: float, max_l: float, max_c: float) -> float:
    """
    Overshoot risk of one color, 0-100.

    70% lightness overshoot and 30% chroma overshoot, each as a percentage
    of the cap.
    """
    return min(100.0, _overshoot(L, max_l) * 0.7 + _overshoot(C, max_c) * 0.3)


def assess_color_risk(
    color: OKLCHColor,
    role: Union[Role, str],
    profile: RiskProfile,
) -> RiskComponent:
    """Risk of a single role color under a profile."""
    max_l, max_c = profile.caps(coerce_role(role))
    combined = color_risk_score(color.L, color.C, max_l, max_c)
    lightness_risk = _overshoot(color.L, max_l)
    chroma_risk = _overshoot(color.C, max_c)

    if lightness_risk > 50:
        issue = "Excessive brightness - high burn-in risk"
    elif chroma_risk > 50:
        issue = "High chroma - potential OLED stress"
    elif combined > 30:
        issue = "Moderate OLED risk detected"
    else:
        issue = "Low risk - acceptable for OLED"

    if lightness_risk > 20:
        compensation = (
            f"Reduced lightness by {round_half_up(lightness_risk)}%, "
            "enhanced saturation"
        )
    elif chroma_risk > 20:
        compensation = f"Reduced chroma by {round_half_up(chroma_risk)}%"
    else:
        compensation = "No compensation needed"

    return RiskComponent(
        risk_level=profile.bucket(combined),
        risk_score=round_half_up(combined),
        lightness=color.L,
        chroma=color.C,
        potential_issue=issue,
        compensation=compensation,
    )


def _risk_factors(
    components: dict[str, RiskComponent],
    tier: RiskTier,
) -> list[RiskFactor]:
    factors = []
    for role, component in components.items():
        if component.risk_level is RiskLevel.HIGH:
            factors.append(RiskFactor(
                factor=f"{role} brightness",
                impact=RiskLevel.HIGH,
                description=f"{role} color is too bright for OLED protection",
                mitigation=f"Reduce lightness or switch to {tier.value} mode",
            ))
        if component.chroma > 0.25:
            factors.append(RiskFactor(
                factor=f"{role} saturation",
                impact=RiskLevel.MEDIUM,
                description=f"High chroma in {role} may cause OLED stress",
                mitigation="Reduce saturation or use chroma compensation",
            ))

    high_count = sum(
        1 for c in components.values() if c.risk_level is RiskLevel.HIGH
    )
    if high_count > 2:
        factors.append(RiskFactor(
            factor="Overall scheme risk",
            impact=RiskLevel.HIGH,
            description="Multiple high-risk components detected",
            mitigation="Switch to more conservative OLED mode",
        ))
    return factors


def _recommendations(
    components: dict[str, RiskComponent],
    overall: RiskLevel,
    tier: RiskTier,
) -> list[str]:
    if overall is RiskLevel.HIGH:
        recs = [
            "HIGH RISK: Switch to Ultra-Conservative mode for maximum OLED protection",
            "Consider reducing overall brightness significantly",
            "Use dark mode exclusively for OLED displays",
        ]
    elif overall is RiskLevel.MEDIUM:
        recs = [
            "Medium risk detected - monitor for OLED burn-in",
            "Consider more frequent screen rotation with static elements",
            "Reduce screen brightness in display settings",
        ]
    else:
        recs = [
            "Low risk - good OLED protection",
            "Scheme is safe for extended OLED use",
            "Monitor for any image retention over time",
        ]

    for role, component in components.items():
        if component.risk_level is RiskLevel.HIGH:
            recs.append(f"High-risk {role}: Consider darker shade or different hue")

    if tier is RiskTier.AGGRESSIVE and overall is not RiskLevel.LOW:
        recs.append(
            "Aggressive mode detected - consider Balanced or Conservative "
            "for better protection"
        )
    if tier is RiskTier.ULTRA_CONSERVATIVE:
        recs.append("Ultra-Conservative mode: Maximum protection applied")
        recs.append("Colors may appear darker but OLED is maximally protected")
    return recs


def assess_oled_risk(
    role_colors: Mapping[Union[Role, str], OKLCHColor],
    tier: Union[RiskTier, str, None],
) -> DetailedRiskAssessment:
    """
    Per-role OLED risk for a set of role colors.

    Assessed roles are foreground, accent, bright_accent, dark_colors and
    bright_colors. Roles missing from ``role_colors`` are scored with
    moderate stand-in colors.
    """
    profile = get_risk_profile(tier)
    given = {coerce_role(role): color for role, color in role_colors.items()}

    components = {
        role.value: assess_color_risk(
            given.get(role, _DEFAULT_ROLE_COLORS[role]), role, profile,
        )
        for role in _ASSESSED_ROLES
    }

    mean_score = sum(c.risk_score for c in components.values()) / len(components)
    overall = profile.bucket(mean_score)

    return DetailedRiskAssessment(
        overall_risk=overall,
        overall_score=round_half_up(mean_score),
        components=components,
        risk_factors=tuple(_risk_factors(components, profile.tier)),
        recommendations=tuple(_recommendations(components, overall, profile.tier)),
        saturation_applied=profile.saturation_boost,
        hue_shift_applied=profile.hue_shift,
        contrast_enhanced=profile.contrast_enhancement > 1.0,
    )


def assess_scheme_risk(
    scheme: ColorScheme,
    tier: Union[RiskTier, str, None],
) -> DetailedRiskAssessment:
    """
    OLED risk of an existing scheme.

    The dark and bright ANSI groups are represented by their lightest
    member (the worst case for burn-in).
    """
    def lightest(hexes: tuple[str, ...]) -> OKLCHColor:
        return max((hex_to_oklch(h) for h in hexes), key=lambda c: c.L)

    role_colors = {
        Role.FOREGROUND: hex_to_oklch(scheme.core.foreground),
        Role.ACCENT: hex_to_oklch(scheme.core.accent),
        Role.BRIGHT_ACCENT: hex_to_oklch(scheme.core.accent_bright),
        Role.DARK_COLORS: lightest(scheme.terminal.dark),
        Role.BRIGHT_COLORS: lightest(scheme.terminal.bright),
    }
    return assess_oled_risk(role_colors, tier)


# =============================================================================
# Compensation
# =============================================================================


def apply_compensation(
    color: OKLCHColor,
    role: Union[Role, str],
    tier: Union[RiskTier, str, None],
) -> CompensationResult:
    """
    Compensate a color whose risk score exceeds 30.

    Lightness is clamped to the role cap, chroma is boosted by the tier's
    compensation factor (within the chroma cap) and the hue is rotated by
    the tier's hue shift. Colors at or below the threshold pass through.
    """
    profile = get_risk_profile(tier)
    max_l, max_c = profile.caps(coerce_role(role))

    before = color_risk_score(color.L, color.C, max_l, max_c)
    reduction = max(0.0, (color.L - max_l) / color.L) if color.L > 0 else 0.0

    result = color
    if before > 30:
        result = OKLCHColor(
            L=min(color.L, max_l),
            C=min(max_c, color.C * profile.chroma_compensation),
            h=wrap_hue(color.h + profile.hue_shift),
        )
    after = color_risk_score(result.L, result.C, max_l, max_c)

    return CompensationResult(
        color=result,
        lightness_reduction=round_half_up(reduction * 100),
        chroma_boost=profile.chroma_compensation,
        hue_shift=profile.hue_shift,
        contrast_enhancement=profile.contrast_enhancement,
        before_risk=round_half_up(before),
        after_risk=round_half_up(after),
    )
