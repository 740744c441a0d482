"""
Middle layer - four ring treatments between core and rim.

p scales either the reach of the rings (dots, solid rings, concentric rings)
or how many symbols appear (U-shapes).
"""

import math
import random

from ..design import TWO_PI, remap
from ..shapes import draw_hand_drawn_circle, draw_irregular_blob
from ..surface import Surface

U_SHAPE_COUNT = 8
RING_COUNT = 5
RING_POINTS = 25


def draw_concentric_dots(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """Rings of small blobs from 0.2r out to 0.5r*p, evenly dense per ring."""
    dot_size = radius * 0.04
    spacing = dot_size * 1.5
    ring = radius * 0.2
    while ring < radius * 0.5 * p:
        count = math.floor((TWO_PI * ring) / spacing)
        for i in range(count):
            angle = (TWO_PI / count) * i
            draw_irregular_blob(surface, ring, angle, dot_size, color, rng)
        ring += spacing


def draw_u_shapes(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """
    Eight U arcs on an orbit, each facing the center.
    The U stands for a person sitting, as in Central Desert iconography.
    """
    orbit = radius * 0.35
    size = radius * 0.15
    max_count = U_SHAPE_COUNT * p
    with surface.push():
        surface.no_fill()
        surface.stroke(color)
        surface.stroke_weight(radius * 0.02)
        i = 0
        while i < max_count:
            with surface.push():
                surface.rotate((TWO_PI / U_SHAPE_COUNT) * i)
                surface.translate(orbit, 0)
                surface.rotate(math.pi / 2)
                surface.arc(0, 0, size, size, 0, math.pi)
            i += 1


def draw_solid_rings(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    with surface.push():
        surface.stroke_weight(radius * 0.01)
        draw_hand_drawn_circle(surface, radius * 0.45 * p, rng, stroke=color)
        draw_hand_drawn_circle(surface, radius * 0.3 * p, rng, stroke=color)


def draw_concentric_rings(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """Five wobbly outlines between 0.3r and 0.5r, all scaled by p."""
    base_weight = radius * 0.01
    with surface.push():
        surface.no_fill()
        surface.stroke(color)
        for j in range(RING_COUNT):
            ring = remap(j, 0, RING_COUNT - 1, radius * 0.3, radius * 0.5) * p
            surface.stroke_weight(base_weight * rng.uniform(0.8, 1.2))
            # Closed spline wraps, so no duplicate of the first point at the end
            points = []
            for i in range(RING_POINTS):
                angle = (TWO_PI / RING_POINTS) * i
                r = ring + rng.uniform(-radius * 0.025, radius * 0.025)
                points.append((math.cos(angle) * r, math.sin(angle) * r))
            surface.curve_shape(points, close=True)
