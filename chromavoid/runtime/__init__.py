# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Report delivery for ChromaVoid.

Renders a ColorScheme, optionally with its AnalysisResult, as a context
block (XML, JSON or Markdown) for hand-off to exporters, renderers and
prompts. The delivery layer never modifies scheme or analysis content.
"""

from chromavoid.runtime.serializers import BlockFormat, to_context_block

__all__ = [
    "to_context_block",
    "BlockFormat",
]
