"""
Shared test fixtures for the songlines test suite.

Factories are plain functions (importable as `from conftest import make_motif`)
so tests can build objects inline with overrides.
"""

import random

import pytest

from songlines.config import SonglinesConfig
from songlines.display.design import COLORS
from songlines.display.surface import RecordingSurface
from songlines.motif import Motif, MotifPalette
from songlines.scene import Scene


# ---------------------------------------------------------------------------
# Random sources
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random source - same sequence every test."""
    return random.Random(1234)


# ---------------------------------------------------------------------------
# Surfaces
# ---------------------------------------------------------------------------

@pytest.fixture
def surface():
    """Headless surface that records draw operations."""
    return RecordingSurface(400, 400)


# ---------------------------------------------------------------------------
# Motif factories
# ---------------------------------------------------------------------------

def make_palette(**overrides) -> MotifPalette:
    defaults = dict(
        base=COLORS.BASE_PALETTE[0],
        inner=COLORS.PATTERN_PALETTE[0],
        middle=COLORS.PATTERN_PALETTE[1],
        outer=COLORS.PATTERN_PALETTE[2],
    )
    defaults.update(overrides)
    return MotifPalette(**defaults)


def make_motif(
    x: float = 0.0,
    y: float = 0.0,
    radius: float = 100.0,
    inner: int = 0,
    middle: int = 0,
    outer: int = 0,
    **kwargs,
) -> Motif:
    """Motif with fixed variants and palette."""
    return Motif(
        x=x,
        y=y,
        radius=radius,
        inner_variant=inner,
        middle_variant=middle,
        outer_variant=outer,
        palette=kwargs.pop("palette", make_palette()),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Scene factories
# ---------------------------------------------------------------------------

def make_config(size: int = 400, dots: bool = False, seed: int = 7) -> SonglinesConfig:
    config = SonglinesConfig()
    config.canvas.width = config.canvas.height = size
    config.canvas.background_dots = dots
    config.output.seed = seed
    return config


def make_scene(size: int = 400, dots: bool = False, seed: int = 7) -> Scene:
    """Scene already built for a square canvas."""
    scene = Scene(make_config(size, dots, seed))
    scene.rebuild(size, size)
    return scene


@pytest.fixture
def scene():
    return make_scene()
