# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a ColorScheme (and optionally its AnalysisResult) as a structured
block (XML, JSON, or Markdown) that can be handed to exporters or inserted
directly into a prompt.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional
from xml.sax.saxutils import escape, quoteattr

from chromavoid.schema import AnalysisResult, ColorScheme
from chromavoid.engine.colorspace import hex_to_oklch


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    scheme: ColorScheme,
    analysis: Optional[AnalysisResult] = None,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "color_scheme",
) -> str:
    """Serialize a ColorScheme as a context block.

    Args:
        scheme: The ColorScheme to serialize.
        analysis: Optional analysis of the scheme to include.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <color_scheme version="1.0" source="chromavoid" name="Singularity"
                      style="monochrome" hue="180.0" seed="singularity">
          <core>
            <color slot="background" hex="#000000" L="0.000" C="0.000"/>
            <color slot="foreground" hex="#3F5F5E" L="0.398" C="0.037" H="187.2"/>
            ...
          </core>
          <terminal>
            <color slot="color0" hex="#0C0F0F" L="0.110" C="0.005"/>
            ...
          </terminal>
          <analysis overall="71" oled="88" contrast="38" harmony="100"
                    distinctiveness="47" burn_in="low"/>
        </color_scheme>
    """
    if format == BlockFormat.XML:
        return _to_xml(scheme, analysis, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(scheme, analysis, tag_name)
    else:
        return _to_markdown(scheme, analysis, tag_name)


def _color_line(slot: str, hex_color: str, indent: str) -> str:
    c = hex_to_oklch(hex_color)
    h_attr = "" if c.is_achromatic else f' H="{c.h:.1f}"'
    return (
        f'{indent}<color slot="{slot}" hex="{hex_color}" '
        f'L="{c.L:.3f}" C="{c.C:.3f}"{h_attr}/>'
    )


def _to_xml(
    scheme: ColorScheme,
    analysis: Optional[AnalysisResult],
    tag_name: str,
) -> str:
    """Generate XML block."""
    lines = [
        f'<{tag_name} version="{scheme.version}" source="chromavoid" '
        f"name={quoteattr(scheme.name)} style={quoteattr(scheme.style)} "
        f'hue="{scheme.hue:.1f}" seed={quoteattr(scheme.seed)}>'
    ]

    # Core
    lines.append("  <core>")
    for slot, hex_color in scheme.core.to_dict().items():
        lines.append(_color_line(slot, hex_color, "    "))
    lines.append("  </core>")

    # Terminal
    lines.append("  <terminal>")
    for slot, hex_color in scheme.terminal.to_dict().items():
        lines.append(_color_line(slot, hex_color, "    "))
    lines.append("  </terminal>")

    # Analysis
    if analysis is not None:
        attrs = (
            f'overall="{analysis.overall_score}" oled="{analysis.oled_score}" '
            f'contrast="{analysis.contrast_score}" '
            f'harmony="{analysis.harmony_score}" '
            f'distinctiveness="{analysis.distinctiveness}" '
            f'burn_in="{analysis.burn_in_risk.value}"'
        )
        notes = analysis.insights + analysis.warnings
        if not notes:
            lines.append(f"  <analysis {attrs}/>")
        else:
            lines.append(f"  <analysis {attrs}>")
            wcag = analysis.wcag_compliance
            lines.append(
                f'    <wcag foreground="{wcag.foreground_on_bg.value}" '
                f'accent="{wcag.accent_on_bg.value}" '
                f'accent_bright="{wcag.accent_bright_on_bg.value}"/>'
            )
            for text in analysis.insights:
                lines.append(f"    <insight>{escape(text)}</insight>")
            for text in analysis.warnings:
                lines.append(f"    <warning>{escape(text)}</warning>")
            lines.append("  </analysis>")

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _payload(scheme: ColorScheme, analysis: Optional[AnalysisResult]) -> dict:
    data = scheme.to_dict()
    if analysis is not None:
        data["analysis"] = analysis.to_dict()
    return data


def _to_json(
    scheme: ColorScheme,
    analysis: Optional[AnalysisResult],
    tag_name: str,
) -> str:
    """Generate JSON block with wrapper."""
    wrapped = {tag_name: _payload(scheme, analysis)}
    return json.dumps(wrapped, indent=2)


def _to_markdown(
    scheme: ColorScheme,
    analysis: Optional[AnalysisResult],
    tag_name: str,
) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(_payload(scheme, analysis), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
