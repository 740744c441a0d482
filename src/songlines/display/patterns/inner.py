"""
Inner layer - the motif's core.

A filled base disc grows first, then one of two centerpieces:
a single irregular blob (the "eye") or an open spiral.
"""

import math
import random

from ..design import remap
from ..shapes import draw_hand_drawn_circle, draw_irregular_blob
from ..surface import Surface

SPIRAL_POINTS = 50
SPIRAL_STEP = 0.4  # radians per point


def draw_base_disc(surface: Surface, radius: float, p: float, base_color, rng: random.Random) -> None:
    """Earth-tone disc under the inner pattern, radius grows with p."""
    if p <= 0:
        return
    draw_hand_drawn_circle(surface, radius * 0.25 * p, rng, fill=base_color)


def draw_core_blob(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    draw_irregular_blob(surface, 0, 0, radius * 0.15 * p, color, rng)


def draw_spiral(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """Open spiral; p controls how many of the 50 points exist."""
    total = math.floor(SPIRAL_POINTS * p)
    points = []
    for i in range(total):
        r = remap(i, 0, SPIRAL_POINTS, 0, radius * 0.2)
        angle = i * SPIRAL_STEP
        points.append((math.cos(angle) * r, math.sin(angle) * r))
    with surface.push():
        surface.no_fill()
        surface.stroke(color)
        surface.stroke_weight(radius * 0.015)
        surface.curve_shape(points, close=False)
