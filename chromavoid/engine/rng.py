# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""
Seeded deterministic number stream.

A string seed is folded into a 32-bit state, and each draw advances the
state with a Park-Miller style multiplier. All arithmetic wraps at 32 bits
so the stream is identical on every platform for the same seed.
"""

from __future__ import annotations

from typing import Callable

_MULTIPLIER = 48271
_UINT32 = 0x100000000


def _int32(value: int) -> int:
    """Wrap an integer to signed 32-bit two's complement."""
    value &= 0xFFFFFFFF
    return value - _UINT32 if value & 0x80000000 else value


def _utf16_units(text: str):
    """Yield UTF-16 code units (surrogate pairs split like a JS string)."""
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def seed_hash(seed: str) -> int:
    """Fold a seed string to a signed 32-bit state."""
    h = 0
    for code in _utf16_units(seed):
        h = _int32((h << 5) - h + code)
    return h


def create_rng(seed: str) -> Callable[[], float]:
    """
    Create a deterministic stream of floats in [0, 1).

    The empty seed folds to state 0, which stays 0 forever, so every draw
    returns 0.0.

    Example::

        rng = create_rng("singularity")
        rng()  # same value on every run
    """
    state = seed_hash(seed)

    def draw() -> float:
        nonlocal state
        state = _int32(_MULTIPLIER * state)
        return (state & 0xFFFFFFFF) / _UINT32

    return draw
