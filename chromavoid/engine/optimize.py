# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Palette optimizer.

Reclamps a curated source palette into an OLED-safe ColorScheme under a
risk tier. Source colors keep their hue; lightness is capped per role and
chroma is scaled by ``preserve_saturation``, with the tier's compensation
factor applied whenever lightness had to come down.

This is applied to external palettes. Synthesized schemes never pass
through here.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from chromavoid.schema import (
    PURE_BLACK,
    ColorScheme,
    CoreColors,
    OKLabColor,
    OKLCHColor,
    RiskTier,
    TerminalColors,
)
from chromavoid.engine.colorspace import capped_hex, hex_to_oklab
from chromavoid.engine.palettes import (
    PaletteNotFoundError,
    SourcePalette,
    get_palette,
)
from chromavoid.engine.risk import RiskProfile, coerce_tier, get_risk_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptimizeOptions:
    """
    Configuration for palette optimization.

    Out-of-range values are clamped to [0, 1] on construction and unknown
    tier tags resolve to balanced, so every instance is valid.
    """

    risk_tier: Union[RiskTier, str] = RiskTier.BALANCED

    # Fraction of source chroma kept before capping
    preserve_saturation: float = 0.8

    # Scales the lightness lift of ANSI 8-15 over ANSI 0-7 (0.16 at 1.0)
    preserve_brightness: float = 0.5

    # Fraction of the remaining headroom to the cap added to foreground,
    # accent and accent_bright lightness
    contrast_boost: float = 0.2

    def __post_init__(self) -> None:
        object.__setattr__(self, "risk_tier", coerce_tier(self.risk_tier))
        for name in ("preserve_saturation", "preserve_brightness", "contrast_boost"):
            value = float(getattr(self, name))
            object.__setattr__(self, name, min(1.0, max(0.0, value)))


# Lightness lift of the bright ANSI row at preserve_brightness = 1.0
BRIGHT_LIFT = 0.16

# Stand-ins for roles a source palette does not define (OKLab)
_ROLE_DEFAULTS: dict[str, OKLabColor] = {
    "foreground": OKLabColor(0.6, 0.0, 0.0),
    "accent": OKLabColor(0.4, 0.1, 0.1),
    "error": OKLabColor(0.35, 0.15, 0.08),
    "warning": OKLabColor(0.35, 0.1, 0.12),
    "success": OKLabColor(0.35, -0.08, 0.1),
    "info": OKLabColor(0.35, 0.05, 0.12),
    "primary": OKLabColor(0.35, 0.08, 0.1),
    "secondary": OKLabColor(0.3, 0.05, 0.08),
    "dim": OKLabColor(0.25, 0.0, 0.0),
    "layer": OKLabColor(0.15, 0.0, 0.0),
    "surface": OKLabColor(0.1, 0.0, 0.0),
}

# Sources for ANSI 0-7 (color0 is the black background)
_ANSI_ROLES = (
    "background", "error", "success", "warning",
    "primary", "accent", "info", "foreground",
)

# Capped at 1.5x the dark ANSI lightness cap
_STATUS_ROLES = ("error", "warning", "success", "info", "primary")


def _source_color(palette: SourcePalette, *keys: str) -> OKLCHColor:
    """First defined source color among keys, else the first key's default."""
    for key in keys:
        if key in palette.colors:
            return hex_to_oklab(palette.colors[key]).to_oklch()
    return _ROLE_DEFAULTS[keys[0]].to_oklch()


def _clamp_color(
    color: OKLCHColor,
    max_l: float,
    max_c: float,
    options: OptimizeOptions,
    profile: RiskProfile,
) -> OKLCHColor:
    L = min(color.L, max_l)
    C = color.C * options.preserve_saturation
    if L < color.L:
        C *= profile.chroma_compensation
    return OKLCHColor(L=L, C=min(C, max_c), h=color.h)


def _boost(color: OKLCHColor, max_l: float, boost: float) -> OKLCHColor:
    return OKLCHColor(L=color.L + (max_l - color.L) * boost, C=color.C, h=color.h)


def optimize_roles(
    palette: SourcePalette,
    options: Optional[OptimizeOptions] = None,
) -> dict[str, OKLCHColor]:
    """
    OLED-clamped OKLCH color for every semantic role.

    Roles: foreground, accent, accent_bright, selection_bg, error, warning,
    success, info, primary, secondary, dim, layer, surface, background.
    """
    opts = options or OptimizeOptions()
    profile = get_risk_profile(opts.risk_tier)
    max_l = profile.max_lightness
    max_c = profile.max_chroma

    def clamp(color: OKLCHColor, cap_l: float, cap_c: float) -> OKLCHColor:
        return _clamp_color(color, cap_l, cap_c, opts, profile)

    roles: dict[str, OKLCHColor] = {}

    roles["foreground"] = _boost(
        clamp(_source_color(palette, "foreground", "fg"),
              max_l.foreground, max_c.foreground),
        max_l.foreground, opts.contrast_boost,
    )

    accent_source = _source_color(palette, "accent", "primary")
    roles["accent"] = _boost(
        clamp(accent_source, max_l.accent, max_c.accent),
        max_l.accent, opts.contrast_boost,
    )

    lifted = OKLCHColor(
        L=min(1.0, accent_source.L * 1.15), C=accent_source.C, h=accent_source.h,
    )
    roles["accent_bright"] = _boost(
        clamp(lifted, max_l.bright_accent, max_c.bright_accent),
        max_l.bright_accent, opts.contrast_boost,
    )

    accent = roles["accent"]
    roles["selection_bg"] = OKLCHColor(
        L=min(accent.L * 0.15, 0.08, max_l.selection),
        C=min(accent.C * 0.3, max_c.selection),
        h=accent.h,
    )

    for role in _STATUS_ROLES:
        keys = (role, "primary") if role == "info" else (role,)
        roles[role] = clamp(
            _source_color(palette, *keys), max_l.dark_colors * 1.5, max_c.accent,
        )

    roles["secondary"] = clamp(
        _source_color(palette, "secondary"), max_l.dark_colors, max_c.accent,
    )
    roles["dim"] = clamp(
        _source_color(palette, "dim"), max_l.dark_colors * 0.8, max_c.accent * 0.5,
    )
    roles["layer"] = clamp(
        _source_color(palette, "layer"), max_l.dark_colors * 0.6, max_c.accent * 0.3,
    )
    roles["surface"] = clamp(
        _source_color(palette, "surface"), max_l.dark_colors * 0.5, 0.0,
    )
    roles["background"] = OKLCHColor(L=0.0, C=0.0, h=0.0)

    return roles


def _terminal(
    roles: dict[str, OKLCHColor],
    profile: RiskProfile,
    options: OptimizeOptions,
) -> TerminalColors:
    dark_cap = profile.max_lightness.dark_colors
    bright_cap = profile.max_lightness.bright_colors
    lift = BRIGHT_LIFT * options.preserve_brightness

    base = [roles[role] for role in _ANSI_ROLES]
    dark = [
        capped_hex(OKLCHColor(min(c.L, dark_cap), c.C, c.h), dark_cap)
        for c in base
    ]
    bright = [
        capped_hex(OKLCHColor(min(c.L + lift, bright_cap), c.C, c.h), bright_cap)
        for c in base
    ]
    # color0 is the background itself
    dark[0] = PURE_BLACK
    return TerminalColors.from_sequence(dark + bright)


def optimize_source(
    palette: SourcePalette,
    options: Optional[OptimizeOptions] = None,
) -> ColorScheme:
    """
    Optimize any SourcePalette into a ColorScheme.

    cursor repeats the accent and selection_fg repeats the foreground.
    The background is pure black.
    """
    opts = options or OptimizeOptions()
    profile = get_risk_profile(opts.risk_tier)
    roles = optimize_roles(palette, opts)
    caps = profile.max_lightness

    foreground = capped_hex(roles["foreground"], caps.foreground)
    accent = capped_hex(roles["accent"], caps.accent)

    core = CoreColors(
        background=PURE_BLACK,
        foreground=foreground,
        accent=accent,
        accent_bright=capped_hex(roles["accent_bright"], caps.bright_accent),
        cursor=accent,
        selection_bg=capped_hex(roles["selection_bg"], caps.selection),
        selection_fg=foreground,
    )

    logger.debug(
        "Optimized palette %r at tier %s", palette.id, opts.risk_tier.value,
    )

    return ColorScheme(
        name=f"{palette.name} OLED",
        description=(
            f"{palette.description} — {opts.risk_tier.value} OLED optimization"
        ),
        seed=re.sub(r"\s+", "-", palette.name.lower()),
        style=palette.harmony,
        hue=float(palette.base_hue),
        core=core,
        terminal=_terminal(roles, profile, opts),
    )


def optimize_palette(
    palette_id: str,
    options: Optional[OptimizeOptions] = None,
) -> ColorScheme:
    """
    Optimize a registered palette.

    Raises:
        PaletteNotFoundError: If palette_id is not registered (before any
            work is done)
    """
    palette = get_palette(palette_id)
    return optimize_source(palette, options)


def optimize_many(
    palette_ids: Iterable[str],
    options: Optional[OptimizeOptions] = None,
) -> tuple[ColorScheme, ...]:
    """Optimize several palettes, skipping unknown ids with a warning."""
    schemes = []
    for palette_id in palette_ids:
        try:
            schemes.append(optimize_palette(palette_id, options))
        except PaletteNotFoundError:
            logger.warning("Skipping unknown palette %r", palette_id)
    return tuple(schemes)

