# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ OKLab ↔ OKLCH, hex, HSL)."""

import logging

import numpy as np
import pytest

from chromavoid.schema import PURE_BLACK, OKLabColor, OKLCHColor
from chromavoid.engine.colorspace import (
    NEUTRAL_OKLAB,
    capped_hex,
    delta_e,
    delta_e_pairwise,
    hex_to_oklab,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_oklch,
    hsl_to_rgb,
    linear_to_srgb,
    oklab_to_oklch,
    oklab_to_rgb,
    oklab_to_srgb_uint8,
    oklch_to_hex,
    oklch_to_hsl,
    oklch_to_oklab,
    parse_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklab,
    round_half_up,
    srgb_to_linear,
    srgb_uint8_to_oklab,
    wrap_hue,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_out_of_range_linear_is_clamped(self):
        srgb = linear_to_srgb(np.array([-0.2, 1.5, 0.5]))
        assert srgb[0] == 0.0
        assert srgb[1] == 1.0

    def test_full_intensity_is_exact(self):
        srgb = linear_to_srgb(np.array([1.0, 1.0, 1.0]))
        assert np.all(srgb == 1.0)
        assert float(linear_to_srgb(srgb_to_linear(np.array([1.0])))[0]) == 1.0


class TestRGBRoundtrip:
    """8-bit sRGB → OKLab → 8-bit sRGB must land within one step."""

    def test_random_triples(self):
        rgb = np.random.default_rng(2026).integers(0, 256, size=(1000, 3))
        recovered = oklab_to_srgb_uint8(srgb_uint8_to_oklab(rgb))
        assert np.abs(recovered - rgb).max() <= 1

    def test_scalar_roundtrip(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (255, 0, 0), (18, 171, 52)]:
            lab = rgb_to_oklab(*rgb)
            recovered = oklab_to_rgb(lab.L, lab.a, lab.b)
            assert all(abs(a - b) <= 1 for a, b in zip(recovered, rgb))

    def test_black_and_white_lightness(self):
        assert rgb_to_oklab(0, 0, 0).L == pytest.approx(0.0, abs=1e-9)
        assert rgb_to_oklab(255, 255, 255).L == pytest.approx(1.0, abs=1e-6)

    def test_out_of_gamut_is_clipped(self):
        r, g, b = oklab_to_rgb(0.9, 0.4, 0.4)
        assert all(0 <= v <= 255 for v in (r, g, b))


class TestOKLCH:
    def test_gray_has_zero_chroma(self):
        lch = oklab_to_oklch(np.array([0.5, 0.0, 0.0]))
        assert lch[1] == pytest.approx(0.0)
        assert 0.0 <= lch[2] < 360.0

    def test_negative_b_gives_hue_in_range(self):
        lch = oklab_to_oklch(np.array([0.5, 0.1, -0.1]))
        assert lch[2] == pytest.approx(315.0)

    def test_polar_roundtrip(self):
        lab = np.array([0.6, -0.05, 0.12])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-12)

    def test_color_type_roundtrip(self):
        color = OKLCHColor(L=0.4, C=0.1, h=200.0)
        back = color.to_oklab().to_oklch()
        assert back.L == pytest.approx(0.4)
        assert back.C == pytest.approx(0.1)
        assert back.h == pytest.approx(200.0)


class TestScalarHelpers:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-0.5) == 0
        assert round_half_up(1.49) == 1

    def test_wrap_hue(self):
        assert wrap_hue(370.0) == pytest.approx(10.0)
        assert wrap_hue(-30.0) == pytest.approx(330.0)
        assert wrap_hue(-1e-15) == 0.0

    def test_rgb_to_hex_clamps_and_uppercases(self):
        assert rgb_to_hex(300, -5, 16) == "#FF0010"
        assert rgb_to_hex(171, 205, 239) == "#ABCDEF"


class TestHexParsing:
    def test_parse_hex(self):
        assert parse_hex("#12AB34") == (0x12, 0xAB, 0x34)
        assert parse_hex("12ab34") == (0x12, 0xAB, 0x34)

    @pytest.mark.parametrize("bad", ["", "#123", "#GGGGGG", "#1234567", "red"])
    def test_parse_hex_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            parse_hex(bad)

    def test_hex_to_rgb_is_lenient(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chromavoid.engine.colorspace"):
            assert hex_to_rgb("not-a-color") == (0, 0, 0)
        assert "Unparsable hex color" in caplog.text

    def test_hex_to_oklab_falls_back_to_neutral(self):
        assert hex_to_oklab("#XYZXYZ") == NEUTRAL_OKLAB
        assert hex_to_oklab("#XYZXYZ") == OKLabColor(L=0.5, a=0.0, b=0.0)

    def test_fallbacks_differ_by_path(self):
        # Channel math reads a bad color as black, perceptual math as mid-gray
        assert hex_to_rgb("#12345") == (0, 0, 0)
        assert hex_to_oklch("#12345").L == 0.5
        assert hex_to_oklch("#12345").is_achromatic

    def test_hex_to_oklch_white(self):
        c = hex_to_oklch("#FFFFFF")
        assert c.L == pytest.approx(1.0, abs=1e-6)
        assert c.is_achromatic

    def test_oklch_to_hex_roundtrip(self):
        c = hex_to_oklch("#3941C8")
        assert oklch_to_hex(c.L, c.C, c.h) == "#3941C8"


class TestHSL:
    def test_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)

    def test_gray(self):
        assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)

    def test_rgb_to_hsl(self):
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)

    def test_hue_wraps(self):
        assert hsl_to_rgb(480, 100, 50) == hsl_to_rgb(120, 100, 50)

    def test_oklch_bridge(self):
        c = hsl_to_oklch(240, 100, 50)
        assert oklch_to_hsl(c.L, c.C, c.h) == (240, 100, 50)


class TestDeltaE:
    def test_identical_is_zero(self):
        lab = OKLabColor(0.5, 0.1, -0.05)
        assert delta_e(lab, lab) == pytest.approx(0.0)

    def test_symmetric(self):
        a = OKLabColor(0.3, 0.1, 0.05)
        b = OKLabColor(0.7, -0.05, 0.1)
        assert delta_e(a, b) == pytest.approx(delta_e(b, a))

    def test_black_white_is_about_one(self):
        black = hex_to_oklab("#000000")
        white = hex_to_oklab("#FFFFFF")
        assert delta_e(black, white) == pytest.approx(1.0, abs=1e-3)

    def test_pairwise_matrix(self):
        labs = np.array([[0.2, 0.0, 0.0], [0.5, 0.1, 0.0], [0.8, 0.0, -0.1]])
        d = delta_e_pairwise(labs)
        assert d.shape == (3, 3)
        np.testing.assert_allclose(np.diag(d), 0.0, atol=1e-12)
        np.testing.assert_allclose(d, d.T)
        expected = delta_e(OKLabColor(*labs[0]), OKLabColor(*labs[1]))
        assert d[0, 1] == pytest.approx(expected)


class TestCappedHex:
    def test_emitted_lightness_stays_under_cap(self):
        for h in range(0, 360, 30):
            hex_color = capped_hex(OKLCHColor(0.9, 0.2, float(h)), 0.4)
            assert hex_to_oklch(hex_color).L <= 0.4

    def test_in_range_color_unchanged(self):
        color = OKLCHColor(0.3, 0.05, 120.0)
        assert capped_hex(color, 0.5) == oklch_to_hex(0.3, 0.05, 120.0)

    def test_zero_cap_gives_black(self):
        assert capped_hex(OKLCHColor(0.5, 0.1, 30.0), 0.0) == PURE_BLACK
