"""
Outer layer - the rim, drawn last and on top.

Variants: ring of dots, radiating spokes, striped rings, and a wavy
"spring" contour that stays open until the layer is fully revealed.
"""

import math
import random

from ..design import TWO_PI, remap
from ..shapes import draw_hand_drawn_circle, draw_irregular_blob
from ..surface import Surface

SPOKE_COUNT = 40
STRIPE_COUNT = 2
WAVE_RESOLUTION = 240
WAVE_FREQUENCY = 60


def draw_dot_ring(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """Blob rings starting at 0.65r, reaching out to 0.95r*p."""
    dot_size = radius * 0.07
    spacing = radius * 0.09
    ring = radius * 0.65
    while ring < radius * 0.95 * p:
        count = math.floor((TWO_PI * ring) / spacing)
        for i in range(count):
            angle = (TWO_PI / count) * i
            draw_irregular_blob(surface, ring, angle, dot_size, color, rng)
        ring += spacing


def draw_radiating_lines(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """Sunburst of up to 40 spokes, each tipped with a dot."""
    max_lines = SPOKE_COUNT * p
    with surface.push():
        surface.stroke(color)
        surface.stroke_weight(radius * 0.015)
        surface.stroke_cap("round")
        i = 0
        while i < max_lines:
            angle = (TWO_PI / SPOKE_COUNT) * i + rng.uniform(-0.05, 0.05)
            with surface.push():
                surface.rotate(angle)
                surface.line(radius * 0.6, 0, radius * 0.95, 0)
                draw_irregular_blob(surface, radius * 0.95, 0, radius * 0.03, color, rng)
            i += 1


def draw_striped_rings(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    base_weight = radius * 0.025
    with surface.push():
        for i in range(STRIPE_COUNT):
            ring = remap(i, 0, STRIPE_COUNT - 1, radius * 0.65, radius * 0.9)
            if p < 1:
                ring *= p
            surface.stroke_weight(base_weight * rng.uniform(0.8, 1.2))
            draw_hand_drawn_circle(surface, ring, rng, stroke=color)


def draw_wavy_ring(surface: Surface, radius: float, p: float, color, rng: random.Random) -> None:
    """
    Sine-perturbed ring ("spring"). p controls how far around it is drawn.

    Open while p < 1 so the growing end stays free; closed only at p == 1.
    """
    base = radius * 0.73
    amplitude = base * 0.30
    total = math.floor(WAVE_RESOLUTION * p)
    points = []
    for j in range(total + 1):
        angle = (TWO_PI / WAVE_RESOLUTION) * j
        r = base + math.sin(angle * WAVE_FREQUENCY) * amplitude
        r += rng.uniform(-radius * 0.005, radius * 0.005)
        points.append((math.cos(angle) * r, math.sin(angle) * r))
    with surface.push():
        surface.no_fill()
        surface.stroke(color)
        surface.stroke_weight(radius * 0.025)
        surface.curve_shape(points, close=p >= 1)
