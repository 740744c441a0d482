"""
Background texture - scattered translucent white dots.

Dot count scales with canvas area (density per pixel), dot size with canvas
width, so the texture reads the same at any resolution. Positions, sizes and
opacities are re-drawn every frame, which makes the field twinkle.
"""

import math
import random

from .display.design import COLORS
from .display.surface import Surface

DOT_DENSITY = 0.004  # Dots per square pixel


def dot_count(width: float, height: float, density: float = DOT_DENSITY) -> int:
    if width <= 0 or height <= 0:
        return 0
    return math.floor(width * height * density)


def draw_background_dots(
    surface: Surface,
    rng: random.Random,
    density: float = DOT_DENSITY,
    color=COLORS.DOT,
) -> int:
    """Scatter dots over the whole surface. Returns the number drawn."""
    width, height = surface.width, surface.height
    count = dot_count(width, height, density)
    with surface.push():
        surface.no_stroke()
        for _ in range(count):
            x = rng.uniform(0, width)
            y = rng.uniform(0, height)
            size = rng.uniform(width * 0.002, width * 0.005)
            alpha = int(rng.uniform(100, 200))  # Varied opacity, like stars
            surface.fill((color[0], color[1], color[2], alpha))
            surface.ellipse(x, y, size)
    return count
