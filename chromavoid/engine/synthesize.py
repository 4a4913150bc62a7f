# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Palette synthesizer.

Builds a complete 23-slot ColorScheme from a base hue, a harmony style, a
seed string and a risk tier.

Pipeline:
1. Six harmony descriptors → six target OKLCH colors
2. Role caps from the risk tier (with chroma compensation)
3. Seeded jitter, damped by each descriptor's harmony strength
4. Core slots from the first three colors, ANSI 16 from the eight
   spectrum hues rendered at dark and bright lightness
5. Gamut-safe hex encoding (see colorspace.capped_hex)

The background slot is always pure black. Identical inputs produce
identical schemes; only ``created_at`` differs between calls.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Callable, Optional, Union

from chromavoid.schema import (
    PURE_BLACK,
    ColorScheme,
    CoreColors,
    OKLCHColor,
    RiskTier,
    SchemeStyle,
    TerminalColors,
)
from chromavoid.engine.colorspace import capped_hex, wrap_hue
from chromavoid.engine.harmony import (
    HarmonyDescriptor,
    derive_descriptors,
    expand_to_spectrum,
    harmonic_hue,
    style_tag,
)
from chromavoid.engine.risk import (
    RiskProfile,
    Role,
    apply_risk_caps,
    coerce_tier,
    get_risk_profile,
)
from chromavoid.engine.rng import create_rng

logger = logging.getLogger(__name__)


DESCRIPTIONS = (
    "Whispers of the void",
    "Signal from deep space",
    "Midnight resonance",
    "Spectral silence",
    "Zero-point luminescence",
    "Event horizon shimmer",
    "Quantum twilight",
    "Photon decay",
    "Dark matter pulse",
)

RANDOM_NAMES = (
    "Nebula", "Void", "Eclipse", "Cipher", "Nova",
    "Abyss", "Phantom", "Specter", "Oblivion",
)

_BASE36 = string.digits + string.ascii_lowercase

# Role of each harmony slot (0-5)
_SLOT_ROLES = (
    Role.FOREGROUND,
    Role.ACCENT,
    Role.BRIGHT_ACCENT,
    Role.ACCENT,
    Role.ACCENT,
    Role.ACCENT,
)

# ANSI chroma targets per index
_DARK_CHROMA = (0.02, 0.08, 0.08, 0.08, 0.08, 0.08, 0.08, 0.02)
_BRIGHT_CHROMA = (0.03, 0.12, 0.12, 0.13, 0.11, 0.12, 0.12, 0.03)

# ANSI lightness targets per index: (role whose cap applies, fraction of cap)
# color7 borrows the bright cap and color15 the foreground cap so the two
# "white" slots stay readable.
_DARK_LIGHTNESS = (
    (Role.DARK_COLORS, 0.70),
    *((Role.DARK_COLORS, 0.90),) * 6,
    (Role.BRIGHT_COLORS, 0.90),
)
_BRIGHT_LIGHTNESS = (
    (Role.BRIGHT_COLORS, 0.60),
    *((Role.BRIGHT_COLORS, 1.00),) * 6,
    (Role.FOREGROUND, 1.00),
)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _target_color(base_hue: float, descriptor: HarmonyDescriptor) -> OKLCHColor:
    """Untreated OKLCH target for one descriptor."""
    return OKLCHColor(
        L=_clamp(0.5 + descriptor.lightness_offset / 100, 0.05, 0.95),
        C=_clamp(0.12 * descriptor.chroma_multiplier, 0.01, 0.25),
        h=harmonic_hue(base_hue, descriptor),
    )


def _jitter(
    color: OKLCHColor,
    descriptor: HarmonyDescriptor,
    role: Role,
    profile: RiskProfile,
    rng: Callable[[], float],
) -> OKLCHColor:
    """
    Seeded variation scaled by (1 - harmony_strength).

    Strongly related slots barely move; results stay under the role caps.
    """
    variation = 0.02 * (1 - descriptor.harmony_strength)
    max_l, max_c = profile.caps(role)

    L = color.L + (rng() - 0.5) * variation
    C = color.C + (rng() - 0.5) * variation * 0.5
    h = color.h + (rng() - 0.5) * variation * 30

    return OKLCHColor(
        L=_clamp(L, 0.01, max_l),
        C=_clamp(C, 0.005, max_c),
        h=wrap_hue(h),
    )


def _ansi_color(
    hue: float,
    chroma: float,
    lightness: tuple[Role, float],
    profile: RiskProfile,
    rng: Callable[[], float],
) -> str:
    role, fraction = lightness
    max_l, max_c = profile.caps(role)

    color = OKLCHColor(
        L=_clamp(max_l * fraction - rng() * 0.01, 0.01, max_l),
        C=_clamp(chroma + (rng() - 0.5) * 0.02, 0.0, max_c),
        h=wrap_hue(hue + rng() * 8 - 4),
    )
    return capped_hex(apply_risk_caps(color, role, profile.tier), max_l)


def synthesize(
    base_hue: float,
    style: Union[SchemeStyle, str],
    seed: str,
    name: str,
    risk_tier: Union[RiskTier, str, None] = RiskTier.BALANCED,
    *,
    created_at: Optional[str] = None,
) -> ColorScheme:
    """
    Derive a complete scheme.

    Args:
        base_hue: Base hue in degrees (wrapped to [0, 360))
        style: Harmony style; unknown tags use flat descriptors
        seed: Seed string for jitter (combined with name)
        name: Display name
        risk_tier: OLED tier; unknown tags fall back to balanced
        created_at: Optional fixed ISO-8601 timestamp

    Returns:
        ColorScheme with a pure black background and every slot under the
        tier's caps for its role.

    Example::

        scheme = synthesize(180, "monochrome", "singularity", "Singularity")
        scheme.core.background  # "#000000"
    """
    base_hue = wrap_hue(float(base_hue))
    tier = coerce_tier(risk_tier)
    profile = get_risk_profile(tier)
    rng = create_rng(seed + name)

    descriptors = derive_descriptors(style)

    # Harmony slots: target → caps → jitter
    slots = []
    for descriptor, role in zip(descriptors, _SLOT_ROLES):
        capped = apply_risk_caps(_target_color(base_hue, descriptor), role, tier)
        slots.append(_jitter(capped, descriptor, role, profile, rng))

    fg, accent, accent_bright = slots[0], slots[1], slots[2]
    base = slots[0]

    selection_bg = apply_risk_caps(
        OKLCHColor(
            L=_clamp(profile.max_lightness.selection * 0.8 - rng() * 0.01, 0.01, 1.0),
            C=0.06,
            h=base.h,
        ),
        Role.SELECTION, tier,
    )
    selection_fg = apply_risk_caps(
        OKLCHColor(
            L=profile.max_lightness.foreground * 0.95,
            C=0.05,
            h=base.h,
        ),
        Role.FOREGROUND, tier,
    )

    accent_bright_hex = capped_hex(accent_bright, profile.max_lightness.bright_accent)
    core = CoreColors(
        background=PURE_BLACK,
        foreground=capped_hex(fg, profile.max_lightness.foreground),
        accent=capped_hex(accent, profile.max_lightness.accent),
        accent_bright=accent_bright_hex,
        cursor=accent_bright_hex,
        selection_bg=capped_hex(selection_bg, profile.max_lightness.selection),
        selection_fg=capped_hex(selection_fg, profile.max_lightness.foreground),
    )

    # ANSI 16: eight spectrum hues, rendered dark then bright
    hues = expand_to_spectrum(tuple(slot.h for slot in slots))
    dark = [
        _ansi_color(h, c, lightness, profile, rng)
        for h, c, lightness in zip(hues, _DARK_CHROMA, _DARK_LIGHTNESS)
    ]
    bright = [
        _ansi_color(h, c, lightness, profile, rng)
        for h, c, lightness in zip(hues, _BRIGHT_CHROMA, _BRIGHT_LIGHTNESS)
    ]
    terminal = TerminalColors.from_sequence(dark + bright)

    description = DESCRIPTIONS[int(rng() * len(DESCRIPTIONS))]

    logger.debug(
        "Synthesized %r: style=%s hue=%.1f tier=%s",
        name, style_tag(style), base_hue, tier.value,
    )

    extra = {"created_at": created_at} if created_at is not None else {}
    return ColorScheme(
        name=name,
        description=description,
        seed=seed,
        style=style_tag(style),
        hue=base_hue,
        core=core,
        terminal=terminal,
        **extra,
    )


def synthesize_random(*, rng: Optional[random.Random] = None) -> ColorScheme:
    """
    Synthesize a scheme from random inputs at the balanced tier.

    The seed is eight base-36 characters and the name is a word from
    RANDOM_NAMES plus the first four seed characters, e.g. "Nova-K3F9".
    Pass a seeded ``random.Random`` for repeatable results.
    """
    rng = rng or random.Random()

    hue = rng.randrange(360)
    style = rng.choice(list(SchemeStyle))
    seed = "".join(rng.choice(_BASE36) for _ in range(8))
    name = f"{rng.choice(RANDOM_NAMES)}-{seed[:4].upper()}"

    return synthesize(hue, style, seed, name, RiskTier.BALANCED)
