# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

import pytest

from chromavoid.schema import ColorScheme, CoreColors, TerminalColors

BLACK = "#000000"
WHITE = "#FFFFFF"


def make_scheme(foreground=WHITE, name="Probe", style="monochrome", **core):
    """A scheme that is pure black everywhere except the given slots."""
    slots = dict(
        background=BLACK,
        foreground=foreground,
        accent=BLACK,
        accent_bright=BLACK,
        cursor=BLACK,
        selection_bg=BLACK,
        selection_fg=BLACK,
    )
    slots.update(core)
    return ColorScheme(
        name=name,
        description="Test scheme",
        seed="probe",
        style=style,
        hue=0.0,
        core=CoreColors(**slots),
        terminal=TerminalColors.from_sequence([BLACK] * 16),
        created_at="2026-01-01T00:00:00Z",
    )


@pytest.fixture
def white_on_black():
    return make_scheme()


@pytest.fixture
def scheme_factory():
    return make_scheme
