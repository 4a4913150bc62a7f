# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → OKLab → OKLCH (and HSL via sRGB)

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

Array functions take shape (..., 3) and are pure NumPy. The scalar helpers
below them wrap the array path for single colors and hex strings.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from numpy.typing import NDArray

from chromavoid.schema import PURE_BLACK, OKLabColor, OKLCHColor

logger = logging.getLogger(__name__)

# Neutral fallbacks for unparsable input: black for channel math,
# mid-gray for perceptual math (see hex_to_rgb)
NEUTRAL_RGB = (0, 0, 0)
NEUTRAL_OKLAB = OKLabColor(L=0.5, a=0.0, b=0.0)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Linear values are clamped to [0, 1] first, which absorbs out-of-gamut
    input. Full intensity maps to exactly 1.0.
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055
    )
    # The gamma branch lands one ulp short of 1.0 at full intensity
    return np.where(linear >= 1.0, 1.0, np.clip(srgb, 0.0, 1.0))


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS' to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # Signed cube root keeps out-of-gamut values finite
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB (unclamped).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, h), h in [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    h = np.degrees(np.arctan2(b, a)) % 360.0
    # -0.0 % 360 and tiny negatives can land exactly on 360.0
    h = np.where(h >= 360.0, 0.0, h)

    return np.stack([L, C, h], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLCH (h in degrees) to OKLab."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    h_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(h_rad), C * np.sin(h_rad)], axis=-1)


# =============================================================================
# Full chain: 8-bit sRGB ↔ OKLab
# =============================================================================


def srgb_uint8_to_oklab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB channels [0,255] to OKLab.

    Args:
        pixels: Array of shape (..., 3) with values in [0, 255]

    Returns:
        Array of shape (..., 3) with OKLab values
    """
    srgb = np.clip(np.asarray(pixels, dtype=np.float64), 0.0, 255.0) / 255.0
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb_uint8(lab: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Convert OKLab to 8-bit sRGB channels.

    Out-of-gamut colors are clipped in linear space. Channels are rounded
    half-up to integers in [0, 255].
    """
    srgb = linear_to_srgb(oklab_to_linear_rgb(lab))
    return np.floor(srgb * 255.0 + 0.5).astype(np.int64)


def srgb_uint8_to_oklch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert 8-bit sRGB channels [0,255] to OKLCH."""
    return oklab_to_oklch(srgb_uint8_to_oklab(pixels))


# =============================================================================
# Scalar helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from -inf (not banker's)."""
    return int(np.floor(value + 0.5))


def wrap_hue(h: float) -> float:
    """Normalize a hue in degrees to [0, 360)."""
    h = h % 360.0
    # Tiny negatives wrap to exactly 360.0
    return 0.0 if h >= 360.0 else h


def rgb_to_oklab(r: float, g: float, b: float) -> OKLabColor:
    """Convert 8-bit sRGB channels to an OKLab color."""
    L, a, b_ = srgb_uint8_to_oklab(np.array([r, g, b], dtype=np.float64))
    return OKLabColor(L=float(np.clip(L, 0.0, 1.0)), a=float(a), b=float(b_))


def oklab_to_rgb(L: float, a: float, b: float) -> tuple[int, int, int]:
    """Convert OKLab to 8-bit sRGB channels (gamut-clipped)."""
    r, g, b_ = oklab_to_srgb_uint8(np.array([L, a, b], dtype=np.float64))
    return int(r), int(g), int(b_)


def oklab_color_to_oklch(color: OKLabColor) -> OKLCHColor:
    """Polar form of an OKLab color."""
    L, C, h = oklab_to_oklch(np.array([color.L, color.a, color.b]))
    return OKLCHColor(L=float(L), C=float(C), h=float(h))


def oklch_color_to_oklab(color: OKLCHColor) -> OKLabColor:
    """Rectangular form of an OKLCH color."""
    L, a, b = oklch_to_oklab(np.array([color.L, color.C, color.h]))
    return OKLabColor(L=float(L), a=float(a), b=float(b))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as ``#RRGGBB``, clamping each to [0, 255]."""
    r, g, b = (min(255, max(0, int(v))) for v in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Parse ``#RRGGBB`` (or ``RRGGBB``) into channels.

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    m = _HEX_RE.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if not m:
        raise ValueError(f"Malformed hex color: {hex_color!r}")
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Lenient hex parsing.

    Malformed input maps to black rather than raising. Channel callers
    (contrast, color-vision simulation, the analysis luminance path)
    measure against the black background, so an unreadable slot scores as
    an invisible color instead of passing as readable. Perceptual callers
    go through hex_to_oklab instead, whose mid-gray NEUTRAL_OKLAB is an
    achromatic source that the role caps then pull down.
    """
    try:
        return parse_hex(hex_color)
    except ValueError:
        logger.warning("Unparsable hex color %r, using %s", hex_color, NEUTRAL_RGB)
        return NEUTRAL_RGB


def hex_to_oklab(hex_color: str) -> OKLabColor:
    """
    Convert a hex color to OKLab.

    Malformed input maps to NEUTRAL_OKLAB (mid gray) rather than raising.
    """
    try:
        r, g, b = parse_hex(hex_color)
    except ValueError:
        logger.warning("Unparsable hex color %r, using neutral OKLab", hex_color)
        return NEUTRAL_OKLAB
    return rgb_to_oklab(r, g, b)


def hex_to_oklch(hex_color: str) -> OKLCHColor:
    """Convert a hex color to OKLCH (lenient, see hex_to_oklab)."""
    return oklab_color_to_oklch(hex_to_oklab(hex_color))


def oklab_to_hex(L: float, a: float, b: float) -> str:
    """Convert OKLab to a hex color string like ``#3941C8``."""
    return rgb_to_hex(*oklab_to_rgb(L, a, b))


def oklch_to_hex(L: float, C: float, h: float) -> str:
    """Convert OKLCH to a hex color string like ``#3941C8``."""
    lab = oklch_to_oklab(np.array([L, C, h], dtype=np.float64))
    return rgb_to_hex(*(int(v) for v in oklab_to_srgb_uint8(lab)))


# =============================================================================
# HSL bridge (legacy, non-perceptual callers)
# =============================================================================


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit sRGB.

    Args:
        h: Hue in degrees (any value, wrapped to [0, 360))
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]
    """
    h = h % 360.0
    s = min(100.0, max(0.0, s)) / 100.0
    l = min(100.0, max(0.0, l)) / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    sector = int(h // 60)
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector % 6]

    return tuple(int(np.floor((v + m) * 255 + 0.5)) for v in (r, g, b))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert 8-bit sRGB to HSL.

    Returns:
        (h, s, l) rounded to integers: degrees, percent, percent
    """
    r, g, b = r / 255, g / 255, b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    h = s = 0.0
    l = (hi + lo) / 2

    if hi != lo:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif hi == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h *= 60

    def _round(v: float) -> int:
        return int(np.floor(v + 0.5))

    return _round(h) % 360, _round(s * 100), _round(l * 100)


def hsl_to_oklch(h: float, s: float, l: float) -> OKLCHColor:
    """Bridge HSL (degrees, percent, percent) to OKLCH via sRGB."""
    return oklab_color_to_oklch(rgb_to_oklab(*hsl_to_rgb(h, s, l)))


def oklch_to_hsl(L: float, C: float, h: float) -> tuple[int, int, int]:
    """Bridge OKLCH to integer HSL via sRGB."""
    lab = oklch_to_oklab(np.array([L, C, h], dtype=np.float64))
    return rgb_to_hsl(*(int(v) for v in oklab_to_srgb_uint8(lab)))


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e(lab1: OKLabColor, lab2: OKLabColor) -> float:
    """
    Perceptual color difference between two OKLab colors.

    CIE94-style weighting evaluated on OKLCH components:

        ΔH = sqrt(Δa² + Δb² - ΔC²)
        SC = 1 + 0.045 · meanC,  SH = 1 + 0.015 · meanC
        ΔE = sqrt(ΔL² + (ΔC/SC)² + (ΔH/SH)²)

    This is not CIEDE2000. The result is on the OKLab scale (black to
    white ≈ 1.0); multiply by 100 for CIE-like units.
    """
    arr = np.array([[lab1.L, lab1.a, lab1.b], [lab2.L, lab2.a, lab2.b]])
    return float(delta_e_pairwise(arr)[0, 1])


def delta_e_pairwise(labs: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Vectorized ΔE for every pair in a set of OKLab colors.

    Args:
        labs: Array of shape (N, 3) with OKLab values

    Returns:
        Symmetric array of shape (N, N) with a zero diagonal
    """
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    chroma = np.sqrt(labs[:, 1] ** 2 + labs[:, 2] ** 2)

    dL = labs[:, np.newaxis, 0] - labs[np.newaxis, :, 0]
    da = labs[:, np.newaxis, 1] - labs[np.newaxis, :, 1]
    db = labs[:, np.newaxis, 2] - labs[np.newaxis, :, 2]
    dC = chroma[:, np.newaxis] - chroma[np.newaxis, :]
    # Rounding can leave a tiny negative under the root
    dH = np.sqrt(np.maximum(0.0, da ** 2 + db ** 2 - dC ** 2))

    mean_c = (chroma[:, np.newaxis] + chroma[np.newaxis, :]) / 2
    sc = 1.0 + 0.045 * mean_c
    sh = 1.0 + 0.015 * mean_c

    return np.sqrt(dL ** 2 + (dC / sc) ** 2 + (dH / sh) ** 2)


# =============================================================================
# Gamut-safe encoding
# =============================================================================

_CAP_STEP = 0.002


def capped_hex(color: OKLCHColor, max_l: float) -> str:
    """
    Hex for a color whose emitted lightness must stay at or under max_l.

    Rounding to 8 bits and gamut clipping can push the measured lightness
    of the hex above the requested L, so the hex is re-measured and L is
    stepped down until it fits. Returns pure black if nothing fits.
    """
    L = color.L
    hex_color = oklch_to_hex(L, color.C, color.h)
    measured = hex_to_oklch(hex_color).L

    while measured > max_l:
        L -= max(measured - max_l, _CAP_STEP)
        if L <= 0.0:
            return PURE_BLACK
        hex_color = oklch_to_hex(L, color.C, color.h)
        measured = hex_to_oklch(hex_color).L

    return hex_color
