# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Serializers for ColorScheme reports.

All serializers preserve the scheme exactly -- no modification or inference.
"""

from chromavoid.runtime.serializers.block import BlockFormat, to_context_block

__all__ = [
    "BlockFormat",
    "to_context_block",
]
