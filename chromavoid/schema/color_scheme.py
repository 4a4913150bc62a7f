# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
ColorScheme v1.0 — Canonical schema for synthesized themes.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same inputs → same scheme (creation time excluded)
- OLED-first: The background slot is pure black for every generated scheme
- Serializable: JSON-ready for hand-off to exporters and renderers

Slot layout (23 colors):
- core: background, foreground, accent, accent_bright, cursor,
  selection_bg, selection_fg
- terminal: ANSI color0-color7 (dark spectrum), color8-color15
  (bright spectrum, same hue set)

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- h (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue)
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"

PURE_BLACK = "#000000"

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def _check_hex(name: str, value: str) -> None:
    if not isinstance(value, str) or not _HEX_RE.match(value):
        raise ValueError(f"{name} must be a #RRGGBB hex color, got {value!r}")


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =============================================================================
# Enumerations
# =============================================================================


class SchemeStyle(Enum):
    """Hue-relationship pattern used to derive a scheme."""
    MONOCHROME = "monochrome"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    SPECTRAL = "spectral"


class RiskTier(Enum):
    """OLED burn-in safety tier, strictest first."""
    ULTRA_CONSERVATIVE = "ultra-conservative"
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLabColor:
    """
    A single color in OKLab space.

    Attributes:
        L: Perceptual lightness (0.0 = black, 1.0 = white)
        a: Green-red axis (practically -0.4 to 0.4)
        b: Blue-yellow axis (practically -0.4 to 0.4)
    """
    L: float
    a: float
    b: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")

    def to_oklch(self) -> OKLCHColor:
        """Polar form (lossless)."""
        from chromavoid.engine.colorspace import oklab_color_to_oklch
        return oklab_color_to_oklch(self)

    @property
    def hex(self) -> str:
        """Gamut-clipped hex string like "#3941C8"."""
        from chromavoid.engine.colorspace import oklab_to_hex
        return oklab_to_hex(self.L, self.a, self.b)

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b}


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH space.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        h: Hue in degrees [0, 360). Meaningless when C ≈ 0.
    """
    L: float
    C: float
    h: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no perceptible hue (gray/white/black)."""
        return self.C < 0.02

    def to_oklab(self) -> OKLabColor:
        """Rectangular form (lossless)."""
        from chromavoid.engine.colorspace import oklch_color_to_oklab
        return oklch_color_to_oklab(self)

    @property
    def hex(self) -> str:
        """Gamut-clipped hex string like "#3941C8"."""
        from chromavoid.engine.colorspace import oklch_to_hex
        return oklch_to_hex(self.L, self.C, self.h)

    def to_dict(self) -> dict:
        return {"L": self.L, "C": self.C, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        return cls(L=data["L"], C=data["C"], h=data.get("h", 0.0))


# =============================================================================
# Slot Groups
# =============================================================================


@dataclass(frozen=True, slots=True)
class CoreColors:
    """
    The seven UI slots.

    Attributes:
        background: Page/terminal background (pure black for OLED schemes)
        foreground: Default text color
        accent: Primary highlight
        accent_bright: Emphasized highlight
        cursor: Cursor block color
        selection_bg: Selected-text background
        selection_fg: Selected-text foreground
    """
    background: str
    foreground: str
    accent: str
    accent_bright: str
    cursor: str
    selection_bg: str
    selection_fg: str

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_hex(f.name, getattr(self, f.name))

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> CoreColors:
        return cls(**{f.name: data[f.name] for f in fields(cls)})


@dataclass(frozen=True, slots=True)
class TerminalColors:
    """
    The ANSI 16 palette.

    color0-color7 are the dark spectrum; color8-color15 render the same hue
    set brighter.
    """
    color0: str
    color1: str
    color2: str
    color3: str
    color4: str
    color5: str
    color6: str
    color7: str
    color8: str
    color9: str
    color10: str
    color11: str
    color12: str
    color13: str
    color14: str
    color15: str

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_hex(f.name, getattr(self, f.name))

    @classmethod
    def from_sequence(cls, colors) -> TerminalColors:
        """Build from 16 hex strings in ANSI order."""
        colors = tuple(colors)
        if len(colors) != 16:
            raise ValueError(f"ANSI palette needs 16 colors, got {len(colors)}")
        return cls(*colors)

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    @property
    def dark(self) -> tuple[str, ...]:
        """ANSI 0-7."""
        return self.as_tuple()[:8]

    @property
    def bright(self) -> tuple[str, ...]:
        """ANSI 8-15."""
        return self.as_tuple()[8:]

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> TerminalColors:
        return cls(**{f.name: data[f.name] for f in fields(cls)})


# =============================================================================
# Top-Level Scheme Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """
    A complete 23-slot theme.

    Produced once by the synthesizer or optimizer and treated as a value
    afterward. ``created_at`` does not take part in equality, so two
    syntheses with identical inputs compare equal.

    Attributes:
        name: Display name
        description: Short flavor text
        seed: Seed string the scheme was derived from
        style: Harmony style tag (normally a SchemeStyle value)
        hue: Base hue in degrees
        core: The seven UI slots
        terminal: The ANSI 16 palette
        created_at: ISO-8601 UTC creation time
        version: Schema version
    """
    name: str
    description: str
    seed: str
    style: str
    hue: float
    core: CoreColors
    terminal: TerminalColors
    created_at: str = field(default_factory=utc_timestamp, compare=False)
    version: str = field(default=SCHEMA_VERSION)

    def all_colors(self) -> tuple[str, ...]:
        """All 23 slots, core first then ANSI 0-15."""
        return self.core.as_tuple() + self.terminal.as_tuple()

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "name": self.name,
            "description": self.description,
            "seed": self.seed,
            "style": self.style,
            "hue": self.hue,
            "createdAt": self.created_at,
            "core": self.core.to_dict(),
            "terminal": self.terminal.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ColorScheme:
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            seed=data.get("seed", ""),
            style=data.get("style", SchemeStyle.MONOCHROME.value),
            hue=data.get("hue", 0.0),
            core=CoreColors.from_dict(data["core"]),
            terminal=TerminalColors.from_dict(data["terminal"]),
            created_at=data.get("createdAt") or utc_timestamp(),
            version=data.get("version", SCHEMA_VERSION),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ColorScheme:
        return cls.from_dict(json.loads(json_str))
