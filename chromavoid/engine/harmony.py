# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Harmony model.

Each SchemeStyle maps to six descriptors. A descriptor places one hue
relative to the base hue and nudges its chroma and lightness targets:

    hue = (base + harmony_strength · hue_offset) mod 360

The strength scales the offset itself, so a 180° partner with strength 0.9
lands at 162°, not 180°.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from chromavoid.schema import SchemeStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HarmonyDescriptor:
    """
    Placement of one harmonic hue.

    Attributes:
        hue_offset: Degrees from the base hue
        chroma_multiplier: Scales the 0.12 base chroma target
        lightness_offset: Added to the 0.5 base lightness, in percent
        harmony_strength: 0-1; scales the offset and damps jitter
        psychological_weight: 0-1 emphasis (informational)
    """
    hue_offset: float
    chroma_multiplier: float
    lightness_offset: float
    harmony_strength: float
    psychological_weight: float


def _d(*values: float) -> HarmonyDescriptor:
    return HarmonyDescriptor(*values)


HARMONY_TABLE: dict[SchemeStyle, tuple[HarmonyDescriptor, ...]] = {
    SchemeStyle.MONOCHROME: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(0, 0.7, 15, 0.9, 0.8),
        _d(0, 0.5, -10, 0.8, 0.6),
        _d(0, 0.3, 20, 0.7, 0.4),
        _d(0, 0.2, -15, 0.6, 0.3),
        _d(0, 0.1, 25, 0.5, 0.2),
    ),
    SchemeStyle.COMPLEMENTARY: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(180, 0.9, 5, 0.9, 0.9),
        _d(0, 0.6, -10, 0.8, 0.7),
        _d(180, 0.7, 15, 0.7, 0.6),
        _d(30, 0.4, 10, 0.6, 0.5),
        _d(210, 0.5, 20, 0.5, 0.4),
    ),
    SchemeStyle.TRIADIC: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(120, 0.85, 5, 0.85, 0.8),
        _d(240, 0.85, 5, 0.85, 0.8),
        _d(60, 0.6, -10, 0.7, 0.6),
        _d(180, 0.6, 10, 0.6, 0.5),
        _d(300, 0.6, 15, 0.6, 0.5),
    ),
    SchemeStyle.ANALOGOUS: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(30, 0.95, 3, 0.9, 0.8),
        _d(-30, 0.9, 5, 0.85, 0.7),
        _d(60, 0.7, -5, 0.7, 0.5),
        _d(-60, 0.7, 8, 0.6, 0.4),
        _d(15, 0.5, 12, 0.5, 0.3),
    ),
    SchemeStyle.SPLIT_COMPLEMENTARY: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(150, 0.85, 5, 0.85, 0.8),
        _d(210, 0.85, 5, 0.85, 0.8),
        _d(30, 0.6, -8, 0.7, 0.6),
        _d(180, 0.7, 12, 0.6, 0.5),
        _d(240, 0.6, 15, 0.5, 0.4),
    ),
    SchemeStyle.TETRADIC: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(90, 0.9, 3, 0.85, 0.8),
        _d(180, 0.85, 6, 0.75, 0.7),
        _d(270, 0.9, 3, 0.8, 0.7),
        _d(45, 0.6, -5, 0.6, 0.5),
        _d(135, 0.6, 10, 0.5, 0.4),
    ),
    SchemeStyle.SPECTRAL: (
        _d(0, 1.0, 0, 1.0, 1.0),
        _d(60, 0.9, 2, 0.9, 0.9),
        _d(120, 0.95, 4, 0.95, 0.9),
        _d(180, 0.9, 6, 0.85, 0.85),
        _d(240, 0.95, 8, 0.9, 0.8),
        _d(300, 0.85, 10, 0.8, 0.7),
    ),
}

# Used for style tags outside SchemeStyle
FLAT_DESCRIPTORS: tuple[HarmonyDescriptor, ...] = tuple(
    _d(0, 1.0, 0, 1.0, 1.0) for _ in range(6)
)

# Descriptor index feeding each of the 8 spectrum slots
SPECTRUM_ORDER = (0, 1, 2, 3, 4, 5, 0, 0)


def coerce_style(style: Union[SchemeStyle, str, None]) -> Optional[SchemeStyle]:
    """Map a style tag to SchemeStyle, or None if it is not one."""
    if isinstance(style, SchemeStyle):
        return style
    try:
        return SchemeStyle(style)
    except ValueError:
        return None


def style_tag(style: Union[SchemeStyle, str]) -> str:
    """The string form stored on a ColorScheme."""
    return style.value if isinstance(style, SchemeStyle) else str(style)


def derive_descriptors(
    style: Union[SchemeStyle, str],
) -> tuple[HarmonyDescriptor, ...]:
    """
    Six descriptors for a style.

    Unknown styles get FLAT_DESCRIPTORS (every slot on the base hue).
    """
    resolved = coerce_style(style)
    if resolved is None:
        logger.debug("Unknown style %r, using flat descriptors", style)
        return FLAT_DESCRIPTORS
    return HARMONY_TABLE[resolved]


def harmonic_hue(base_hue: float, descriptor: HarmonyDescriptor) -> float:
    """Hue for one descriptor, normalized to [0, 360)."""
    hue = (base_hue + descriptor.harmony_strength * descriptor.hue_offset) % 360.0
    return 0.0 if hue >= 360.0 else hue


def harmonic_hues(
    base_hue: float,
    style: Union[SchemeStyle, str],
) -> tuple[float, ...]:
    """The six harmonic hues of a style around base_hue."""
    return tuple(harmonic_hue(base_hue, d) for d in derive_descriptors(style))


def expand_to_spectrum(items: tuple) -> tuple:
    """Cycle six entries to the eight spectrum slots."""
    if len(items) != 6:
        raise ValueError(f"Expected 6 entries, got {len(items)}")
    return tuple(items[i] for i in SPECTRUM_ORDER)
