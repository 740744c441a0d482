"""
Songline Network - animated lines between neighbouring nodes.

Segments are precomputed once per layout: every pair of connectable motifs
closer than width / 2.8 becomes a segment, in nested-scan order (i < j).
Segment k starts growing at k * 150 ms of network virtual time and takes
800 ms to reach its far end.

The network's virtual time is master_progress * total_time, so as master
progress falls the same formula retracts every line back to its start point.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .display.design import COLORS, TIMING, RGBA, clamp, lerp
from .display.surface import Surface
from .motif import Motif

DISTANCE_DIVISOR = 2.8
LINE_WIDTH = 10


@dataclass(frozen=True)
class Segment:
    """A songline between two motifs. Holds references, not copies."""
    start: Motif
    end: Motif
    start_delay_ms: float

    @property
    def length(self) -> float:
        return math.dist(self.start.center, self.end.center)

    def point_at(self, progress: float) -> Tuple[float, float]:
        """Point along the segment, progress 0 = start, 1 = end."""
        return (
            lerp(self.start.x, self.end.x, progress),
            lerp(self.start.y, self.end.y, progress),
        )


def prepare_network_lines(
    nodes: Sequence[Motif],
    width: float,
    line_delay_ms: float = TIMING.LINE_DELAY_MS,
    distance_divisor: float = DISTANCE_DIVISOR,
) -> List[Segment]:
    """Every node pair strictly closer than width / distance_divisor, in scan order."""
    threshold = width / distance_divisor
    segments: List[Segment] = []
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            a, b = nodes[i], nodes[j]
            if math.dist(a.center, b.center) < threshold:
                segments.append(Segment(a, b, len(segments) * line_delay_ms))
    return segments


def network_duration(
    segment_count: int,
    line_delay_ms: float = TIMING.LINE_DELAY_MS,
    line_grow_ms: float = TIMING.LINE_GROW_MS,
) -> float:
    """Virtual time until the last segment finishes growing."""
    if segment_count <= 0:
        return 0.0
    return (segment_count - 1) * line_delay_ms + line_grow_ms


def segment_progress(
    virtual_time: float,
    start_delay_ms: float,
    line_grow_ms: float = TIMING.LINE_GROW_MS,
) -> float:
    return clamp((virtual_time - start_delay_ms) / line_grow_ms)


class SonglineNetwork:
    """The precomputed segments of one layout and how to draw them."""

    def __init__(
        self,
        segments: Sequence[Segment],
        line_delay_ms: float = TIMING.LINE_DELAY_MS,
        line_grow_ms: float = TIMING.LINE_GROW_MS,
        color: RGBA = COLORS.LINK,
        line_width: float = LINE_WIDTH,
    ):
        self.segments = list(segments)
        self.line_delay_ms = line_delay_ms
        self.line_grow_ms = line_grow_ms
        self.color = color
        self.line_width = line_width

    @classmethod
    def build(
        cls,
        nodes: Sequence[Motif],
        width: float,
        line_delay_ms: float = TIMING.LINE_DELAY_MS,
        line_grow_ms: float = TIMING.LINE_GROW_MS,
        distance_divisor: float = DISTANCE_DIVISOR,
        **kwargs,
    ) -> "SonglineNetwork":
        segments = prepare_network_lines(nodes, width, line_delay_ms, distance_divisor)
        return cls(segments, line_delay_ms, line_grow_ms, **kwargs)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def total_time(self) -> float:
        return network_duration(len(self.segments), self.line_delay_ms, self.line_grow_ms)

    def endpoints(self, master_progress: float) -> List[Optional[Tuple[float, float]]]:
        """
        Current tip of every segment, or None where it has not started.
        Pure function of master_progress and the segment data.
        """
        if not self.segments:
            return []
        now = master_progress * self.total_time
        tips: List[Optional[Tuple[float, float]]] = []
        for seg in self.segments:
            p = segment_progress(now, seg.start_delay_ms, self.line_grow_ms)
            tips.append(seg.point_at(p) if p > 0 else None)
        return tips

    def render(self, surface: Surface, master_progress: float) -> int:
        """Draw visible segments. Returns how many were drawn."""
        drawn = 0
        with surface.push():
            surface.stroke(self.color)
            surface.stroke_weight(self.line_width)
            surface.stroke_cap("round")
            for seg, tip in zip(self.segments, self.endpoints(master_progress)):
                if tip is None:
                    continue
                surface.line(seg.start.x, seg.start.y, tip[0], tip[1])
                drawn += 1
        return drawn

    def describe(self) -> str:
        return f"{len(self.segments)} segments over {self.total_time:.0f}ms"
