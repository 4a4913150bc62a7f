# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
ChromaVoid -- Perceptual color-scheme synthesis for OLED displays.

Generates terminal and editor color schemes on a pure black background,
keeps every color under per-role lightness caps to limit burn-in, and
scores the results for contrast, harmony and accessibility.

Quick start::

    from chromavoid import synthesize, analyze

    scheme = synthesize(180, "monochrome", "singularity", "Singularity")
    scheme.to_json()        # Serialized scheme
    analyze(scheme)         # Scores, insights and warnings
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromavoid.engine import (
    OptimizeOptions,
    PaletteNotFoundError,
    analyze,
    assess_accessibility,
    optimize_palette,
    simulate_color_blindness,
    synthesize,
    synthesize_random,
)
from chromavoid.schema import (
    AnalysisResult,
    ColorScheme,
    CoreColors,
    OKLabColor,
    OKLCHColor,
    RiskTier,
    SchemeStyle,
    TerminalColors,
)

__all__ = [
    # Core API
    "synthesize",
    "synthesize_random",
    "optimize_palette",
    "OptimizeOptions",
    "analyze",
    "assess_accessibility",
    "simulate_color_blindness",
    "PaletteNotFoundError",
    # Types (commonly needed)
    "ColorScheme",
    "CoreColors",
    "TerminalColors",
    "AnalysisResult",
    "OKLabColor",
    "OKLCHColor",
    "SchemeStyle",
    "RiskTier",
    # Version
    "__version__",
]
