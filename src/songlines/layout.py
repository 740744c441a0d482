"""
Layout - where the motifs sit.

Twenty-five motifs on five parallel diagonals, five per line. Positions depend
only on the canvas size; randomness only decides each motif's look and
whether it joins the connectable "node" subset (70% by default).
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .motif import LayerDurations, Motif

MOTIFS_PER_LINE = 5
RADIUS_DIVISOR = 8      # radius = width / 8
STEP_DIVISOR = 4.8      # step = (width / 4.8, height / 4.8)
CONNECT_PROBABILITY = 0.7


def _line_starts(width: float, height: float) -> List[Tuple[float, float]]:
    """Start point of each of the five diagonals."""
    return [
        (width / 7.1, height / 7.1),
        (width / 2, (height * 2) / 20),
        ((width * 4) / 5, 0),
        (width / 20, height / 2.2),
        (0, (height * 8) / 10),
    ]


def line_centers(
    count: int,
    start: Tuple[float, float],
    step: Tuple[float, float],
) -> List[Tuple[float, float]]:
    """Arithmetic progression of centers along one line."""
    return [(start[0] + step[0] * i, start[1] + step[1] * i) for i in range(count)]


def layout_centers(width: float, height: float) -> List[Tuple[float, float]]:
    """All motif centers, line by line."""
    step = (width / STEP_DIVISOR, height / STEP_DIVISOR)
    centers = []
    for start in _line_starts(width, height):
        centers.extend(line_centers(MOTIFS_PER_LINE, start, step))
    return centers


@dataclass
class Layout:
    """Motifs in draw order plus the subset eligible for songlines."""
    motifs: List[Motif] = field(default_factory=list)
    nodes: List[Motif] = field(default_factory=list)


def create_fixed_layout(
    width: float,
    height: float,
    rng: random.Random,
    connect_probability: float = CONNECT_PROBABILITY,
    durations: Optional[LayerDurations] = None,
) -> Layout:
    """Build every motif for a canvas. A zero-sized canvas gives an empty layout."""
    layout = Layout()
    if width <= 0 or height <= 0:
        return layout

    radius = width / RADIUS_DIVISOR
    for x, y in layout_centers(width, height):
        motif = Motif.create(x, y, radius, rng, durations)
        layout.motifs.append(motif)
        if rng.random() < connect_probability:
            layout.nodes.append(motif)
    return layout
