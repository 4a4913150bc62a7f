# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Schema definitions for color schemes and their analysis.

All types in this module are immutable (frozen dataclasses).
Once a scheme or analysis is produced, it is a value and cannot be altered.
"""

from chromavoid.schema.color_scheme import (
    PURE_BLACK,
    SCHEMA_VERSION,
    ColorScheme,
    CoreColors,
    OKLabColor,
    OKLCHColor,
    RiskTier,
    SchemeStyle,
    TerminalColors,
)
from chromavoid.schema.analysis import (
    AccessibilityResult,
    AccessibilityScore,
    AnalysisResult,
    ColorCount,
    ColorPair,
    CompensationResult,
    DetailedRiskAssessment,
    RiskComponent,
    RiskFactor,
    RiskLevel,
    SchemeAccessibilityReport,
    UsageContext,
    VisionType,
    WcagCompliance,
    WcagLevel,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    "PURE_BLACK",
    # Color values
    "OKLabColor",
    "OKLCHColor",
    # Scheme
    "SchemeStyle",
    "RiskTier",
    "CoreColors",
    "TerminalColors",
    "ColorScheme",
    # Analysis
    "WcagLevel",
    "RiskLevel",
    "WcagCompliance",
    "ColorCount",
    "AnalysisResult",
    # Accessibility
    "VisionType",
    "UsageContext",
    "AccessibilityResult",
    "AccessibilityScore",
    "ColorPair",
    "SchemeAccessibilityReport",
    # OLED risk
    "RiskComponent",
    "RiskFactor",
    "DetailedRiskAssessment",
    "CompensationResult",
]
