"""
Procedural shapes - the hand-drawn vocabulary every motif is built from.

Two primitives:
- hand-drawn circle: 50 jittered perimeter points, smoothed and closed
- irregular blob: 8 jittered points, smoothed, closed, randomly rotated

Jitter and rotation are re-sampled on every call from the caller's random
source, so shapes shimmer slightly from frame to frame. Only the motif's
construction-time choices (colors, variants) stay fixed.
"""

import math
import random
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .design import TWO_PI

if TYPE_CHECKING:
    from .surface import Surface

Point = Tuple[float, float]

CIRCLE_POINTS = 50
CIRCLE_JITTER = 0.01  # Fraction of radius
BLOB_POINTS = 8


def catmull_rom(points: Sequence[Point], closed: bool = False, samples: int = 8) -> List[Point]:
    """
    Sample a uniform Catmull-Rom spline through points.

    Closed curves wrap around and pass through every point. Open curves use the
    first and last points as control points only, so fewer than 4 points
    produce nothing.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    n = len(pts)
    if closed:
        if n < 3:
            return [(float(x), float(y)) for x, y in pts]
        p0 = np.roll(pts, 1, axis=0)
        p1 = pts
        p2 = np.roll(pts, -1, axis=0)
        p3 = np.roll(pts, -2, axis=0)
    else:
        if n < 4:
            return []
        p0, p1, p2, p3 = pts[:-3], pts[1:-2], pts[2:-1], pts[3:]

    t = np.linspace(0.0, 1.0, samples, endpoint=False)[:, None, None]
    t2 = t * t
    t3 = t2 * t
    curve = 0.5 * (
        2 * p1
        + (p2 - p0) * t
        + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
        + (3 * p1 - p0 - 3 * p2 + p3) * t3
    )
    # (samples, segments, 2) -> segment-major order
    curve = curve.transpose(1, 0, 2).reshape(-1, 2)
    if not closed:
        curve = np.vstack([curve, p2[-1]])
    return [(float(x), float(y)) for x, y in curve]


def jittered_circle_points(
    radius: float,
    rng: random.Random,
    points: int = CIRCLE_POINTS,
    jitter: float = CIRCLE_JITTER,
) -> List[Point]:
    """Perimeter points of a circle, each radius nudged by +/- jitter*radius."""
    result = []
    for i in range(points):
        angle = (TWO_PI / points) * i
        r = radius + rng.uniform(-radius * jitter, radius * jitter)
        result.append((math.cos(angle) * r, math.sin(angle) * r))
    return result


def blob_points(size: float, rng: random.Random, points: int = BLOB_POINTS) -> List[Point]:
    """Outline of a small dot whose radius wobbles within 0.85-1.15 of size/2."""
    result = []
    for i in range(points):
        angle = (TWO_PI / points) * i
        r = size * 0.5 * rng.uniform(0.85, 1.15)
        result.append((math.cos(angle) * r, math.sin(angle) * r))
    return result


def draw_hand_drawn_circle(
    surface: "Surface",
    radius: float,
    rng: random.Random,
    fill=None,
    stroke=None,
    stroke_weight: Optional[float] = None,
) -> None:
    """
    Draw an organic circle centered on the current origin.

    fill and stroke are each optional; stroke_weight=None keeps whatever weight
    the caller already set.
    """
    with surface.push():
        if fill is not None:
            surface.fill(fill)
        else:
            surface.no_fill()
        if stroke is not None:
            surface.stroke(stroke)
        else:
            surface.no_stroke()
        if stroke_weight:
            surface.stroke_weight(stroke_weight)
        surface.curve_shape(jittered_circle_points(radius, rng), close=True)


def draw_irregular_blob(
    surface: "Surface",
    offset: float,
    angle: float,
    size: float,
    color,
    rng: random.Random,
) -> None:
    """Draw a filled blob at polar position (offset, angle) from the origin."""
    x = math.cos(angle) * offset
    y = math.sin(angle) * offset
    with surface.push():
        surface.fill(color)
        surface.no_stroke()
        surface.translate(x, y)
        surface.rotate(rng.uniform(0, TWO_PI))  # Fresh every call (flicker)
        surface.curve_shape(blob_points(size, rng), close=True)
