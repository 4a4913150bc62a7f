# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Registry of curated source palettes.

Each palette maps semantic roles (primary, accent, foreground, error, ...)
to hex colors as published by its authors. The optimizer reclamps these
into OLED-safe schemes; the registry itself is read-only data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class PaletteNotFoundError(KeyError):
    """Raised when a palette id does not resolve to a known source palette."""

    def __init__(self, palette_id: str):
        super().__init__(palette_id)
        self.palette_id = palette_id

    def __str__(self) -> str:
        return f'Palette "{self.palette_id}" not found'


@dataclass(frozen=True, slots=True)
class SourcePalette:
    """
    A curated palette before OLED optimization.

    Attributes:
        id: Registry key
        name: Display name
        description: One-line summary
        base_hue: Dominant hue in degrees
        colors: Role name → hex color
        harmony: Harmony style tag the palette follows
        contrast: "low", "medium" or "high"
        mood: Free-form mood tag
    """
    id: str
    name: str
    description: str
    base_hue: float
    colors: dict[str, str]
    harmony: str
    contrast: str
    mood: str


@dataclass(frozen=True, slots=True)
class PaletteMetadata:
    """Display metadata for a registry entry."""
    id: str
    name: str
    category: str
    description: str
    author: str
    year: int


def _colors(
    primary: str, secondary: str, accent: str, surface: str,
    background: str, foreground: str, dim: str, error: str,
    warning: str, success: str, info: str, layer: str,
) -> dict[str, str]:
    return {
        "primary": primary,
        "secondary": secondary,
        "accent": accent,
        "surface": surface,
        "background": background,
        "foreground": foreground,
        "dim": dim,
        "error": error,
        "warning": warning,
        "success": success,
        "info": info,
        "layer": layer,
    }


PALETTES: dict[str, SourcePalette] = {
    "nord": SourcePalette(
        id="nord",
        name="Nord",
        description="An arctic, north-bluish color palette",
        base_hue=220,
        colors=_colors(
            "#5E81AC", "#81A1C1", "#88C0D0", "#2E3440", "#3B4252", "#D8DEE9",
            "#4C566A", "#BF616A", "#D08770", "#A3BE8C", "#81A1C1", "#434C5E",
        ),
        harmony="analogous",
        contrast="medium",
        mood="calm",
    ),
    "tokyo_night": SourcePalette(
        id="tokyo_night",
        name="Tokyo Night",
        description="A dark theme inspired by Tokyo at night",
        base_hue=240,
        colors=_colors(
            "#7AA2F7", "#9ABDF5", "#7DCFFF", "#1A1B26", "#16161E", "#C0CAF5",
            "#565F89", "#F7768E", "#FF9E64", "#9ECE6A", "#7AA2F7", "#292E42",
        ),
        harmony="analogous",
        contrast="high",
        mood="modern",
    ),
    "gruvbox": SourcePalette(
        id="gruvbox",
        name="Gruvbox",
        description="Retro groove color scheme",
        base_hue=40,
        colors=_colors(
            "#83A598", "#8EC07C", "#FABD2F", "#282828", "#3C3836", "#EBDBB2",
            "#665C54", "#FB4934", "#FE8019", "#B8BB26", "#83A598", "#504945",
        ),
        harmony="analogous",
        contrast="medium",
        mood="retro",
    ),
    "catppuccin": SourcePalette(
        id="catppuccin",
        name="Catppuccin",
        description="Soothing pastel theme for the high-spirited",
        base_hue=320,
        colors=_colors(
            "#F5C2E7", "#FAB387", "#F9E2AF", "#1E1E2E", "#181825", "#CDD6F4",
            "#6C7086", "#F38BA8", "#FAB387", "#A6E3A1", "#74C7EC", "#313244",
        ),
        harmony="analogous",
        contrast="medium",
        mood="soft",
    ),
    "monokai": SourcePalette(
        id="monokai",
        name="Monokai",
        description="Professional color scheme",
        base_hue=280,
        colors=_colors(
            "#AE81FF", "#66D9EF", "#FD971F", "#272822", "#1E1F1C", "#F8F8F2",
            "#75715E", "#F92672", "#FD971F", "#A6E22A", "#66D9EF", "#49483E",
        ),
        harmony="complementary",
        contrast="high",
        mood="professional",
    ),
    "dracula": SourcePalette(
        id="dracula",
        name="Dracula",
        description="Dark theme for a great cause",
        base_hue=290,
        colors=_colors(
            "#BD93F9", "#8BE9FD", "#FFB86C", "#282A36", "#1E1F29", "#F8F8F2",
            "#6272A4", "#FF5555", "#FFB86C", "#50FA7B", "#8BE9FD", "#44475A",
        ),
        harmony="complementary",
        contrast="high",
        mood="vibrant",
    ),
}

PALETTE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "dark": ("nord", "tokyo_night", "gruvbox", "catppuccin", "monokai", "dracula"),
    "popular": ("tokyo_night", "nord", "catppuccin", "gruvbox"),
    "retro": ("gruvbox",),
    "modern": ("tokyo_night", "catppuccin", "monokai"),
    "vibrant": ("dracula", "monokai"),
    "soft": ("catppuccin", "nord"),
}

PALETTE_METADATA: tuple[PaletteMetadata, ...] = (
    PaletteMetadata(
        "nord", "Nord", "dark",
        "Arctic, north-bluish palette with calm aesthetics",
        "Arctic Ice Studio", 2016,
    ),
    PaletteMetadata(
        "tokyo_night", "Tokyo Night", "dark",
        "Modern theme inspired by Tokyo neon lights",
        "Enkia", 2021,
    ),
    PaletteMetadata(
        "gruvbox", "Gruvbox", "retro",
        "Retro groove color scheme with warm tones",
        "Pavel Pertsev", 2012,
    ),
    PaletteMetadata(
        "catppuccin", "Catppuccin", "modern",
        "Soothing pastel theme with soft colors",
        "Catppuccin Org", 2021,
    ),
    PaletteMetadata(
        "monokai", "Monokai", "modern",
        "Professional color scheme for developers",
        "Wimer Hazenberg", 2011,
    ),
    PaletteMetadata(
        "dracula", "Dracula", "vibrant",
        "Dark theme supporting many editors and terminals",
        "Zeno Rocha", 2013,
    ),
)


def find_palette(palette_id: str) -> Optional[SourcePalette]:
    """Palette for an id, or None."""
    return PALETTES.get(palette_id)


def get_palette(palette_id: str) -> SourcePalette:
    """
    Palette for an id.

    Raises:
        PaletteNotFoundError: If the id is not registered
    """
    palette = PALETTES.get(palette_id)
    if palette is None:
        raise PaletteNotFoundError(palette_id)
    return palette


def all_palettes() -> tuple[SourcePalette, ...]:
    return tuple(PALETTES.values())


def available_palette_ids() -> tuple[str, ...]:
    return tuple(PALETTES)


def palettes_by_category(category: str) -> tuple[SourcePalette, ...]:
    """Palettes in a category; unknown categories are empty."""
    return tuple(
        PALETTES[pid] for pid in PALETTE_CATEGORIES.get(category, ())
        if pid in PALETTES
    )
