# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for the source palette registry."""

import re

import pytest

from chromavoid.engine.palettes import (
    PALETTE_CATEGORIES,
    PALETTE_METADATA,
    PALETTES,
    PaletteNotFoundError,
    all_palettes,
    available_palette_ids,
    find_palette,
    get_palette,
    palettes_by_category,
)

HEX = re.compile(r"^#[0-9A-F]{6}$")


class TestRegistry:
    def test_ids(self):
        assert available_palette_ids() == (
            "nord", "tokyo_night", "gruvbox", "catppuccin", "monokai", "dracula",
        )
        assert len(all_palettes()) == 6

    def test_ids_match_keys(self):
        for key, palette in PALETTES.items():
            assert palette.id == key

    def test_colors_are_hex(self):
        for palette in all_palettes():
            assert len(palette.colors) == 12
            assert all(HEX.match(c) for c in palette.colors.values())

    def test_nord_values(self):
        nord = get_palette("nord")
        assert nord.colors["primary"] == "#5E81AC"
        assert nord.colors["error"] == "#BF616A"
        assert nord.base_hue == 220


class TestLookup:
    def test_find_missing(self):
        assert find_palette("solarized") is None

    def test_get_missing(self):
        with pytest.raises(PaletteNotFoundError):
            get_palette("solarized")

    def test_categories(self):
        assert [p.id for p in palettes_by_category("retro")] == ["gruvbox"]
        assert palettes_by_category("pastel") == ()

    def test_categories_reference_known_palettes(self):
        for ids in PALETTE_CATEGORIES.values():
            assert set(ids) <= set(PALETTES)

    def test_metadata_covers_registry(self):
        assert {m.id for m in PALETTE_METADATA} == set(PALETTES)
