# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for the context block serializer."""

import json

from chromavoid import analyze, synthesize
from chromavoid.runtime import BlockFormat, to_context_block


def _scheme():
    return synthesize(180, "monochrome", "singularity", "Singularity",
                      created_at="2026-01-01T00:00:00Z")


class TestXmlBlock:
    def test_structure(self):
        block = to_context_block(_scheme())
        lines = block.splitlines()
        assert lines[0].startswith('<color_scheme version="1.0" source="chromavoid"')
        assert lines[-1] == "</color_scheme>"
        assert block.count("<color slot=") == 23
        assert "<core>" in block and "<terminal>" in block
        assert "<analysis" not in block

    def test_background_line(self):
        block = to_context_block(_scheme())
        assert '<color slot="background" hex="#000000" L="0.000" C="0.000"/>' in block

    def test_attributes_escaped(self, scheme_factory):
        block = to_context_block(scheme_factory(name='Say "hi" & <go>'))
        assert "name='Say \"hi\" &amp; &lt;go&gt;'" in block

    def test_with_analysis(self):
        scheme = _scheme()
        analysis = analyze(scheme)
        block = to_context_block(scheme, analysis)
        assert f'<analysis overall="{analysis.overall_score}"' in block
        assert "<wcag foreground=" in block
        assert block.count("<insight>") == len(analysis.insights)
        assert block.count("<warning>") == len(analysis.warnings)

    def test_custom_tag(self):
        block = to_context_block(_scheme(), tag_name="theme")
        assert block.startswith("<theme ")
        assert block.endswith("</theme>")


class TestJsonBlock:
    def test_wrapped(self):
        data = json.loads(to_context_block(_scheme(), format=BlockFormat.JSON))
        assert list(data) == ["color_scheme"]
        assert data["color_scheme"]["core"]["background"] == "#000000"
        assert "analysis" not in data["color_scheme"]

    def test_with_analysis(self):
        scheme = _scheme()
        block = to_context_block(scheme, analyze(scheme), format=BlockFormat.JSON)
        data = json.loads(block)["color_scheme"]
        assert data["analysis"]["overallScore"] == analyze(scheme).overall_score


class TestMarkdownBlock:
    def test_fenced(self):
        block = to_context_block(_scheme(), format=BlockFormat.MARKDOWN)
        lines = block.splitlines()
        assert lines[0] == "<!-- color_scheme -->"
        assert lines[1] == "```json"
        assert lines[-2] == "```"
        assert lines[-1] == "<!-- /color_scheme -->"
        payload = json.loads("\n".join(lines[2:-2]))
        assert payload["name"] == "Singularity"
