# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Synthesis and validation engine for ChromaVoid.

All operations are pure and synchronous. Schemes go in and come out as
immutable values; nothing here keeps state between calls.
"""

from chromavoid.engine.accessibility import (
    assess_accessibility,
    assess_scheme_accessibility,
    generate_accessible_variant,
    is_accessible,
    scheme_critical_pairs,
    simulate_color_blindness,
)
from chromavoid.engine.analyze import (
    analyze,
    color_metrics,
    contrast_ratio,
    relative_luminance,
    suggest_improvements,
    wcag_level,
)
from chromavoid.engine.optimize import (
    OptimizeOptions,
    optimize_many,
    optimize_palette,
    optimize_source,
)
from chromavoid.engine.palettes import (
    PaletteNotFoundError,
    available_palette_ids,
    get_palette,
)
from chromavoid.engine.risk import (
    RISK_PROFILES,
    apply_risk_caps,
    assess_oled_risk,
    assess_scheme_risk,
    get_risk_profile,
)
from chromavoid.engine.synthesize import synthesize, synthesize_random

__all__ = [
    # Synthesis
    "synthesize",
    "synthesize_random",
    # Optimization
    "OptimizeOptions",
    "PaletteNotFoundError",
    "optimize_palette",
    "optimize_source",
    "optimize_many",
    "available_palette_ids",
    "get_palette",
    # Risk
    "RISK_PROFILES",
    "get_risk_profile",
    "apply_risk_caps",
    "assess_oled_risk",
    "assess_scheme_risk",
    # Analysis
    "analyze",
    "suggest_improvements",
    "color_metrics",
    "contrast_ratio",
    "relative_luminance",
    "wcag_level",
    # Accessibility
    "simulate_color_blindness",
    "assess_accessibility",
    "assess_scheme_accessibility",
    "scheme_critical_pairs",
    "is_accessible",
    "generate_accessible_variant",
]
