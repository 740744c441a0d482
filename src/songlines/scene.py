"""
Scene - the aggregate that owns one visual instance.

Holds the motifs, the songline network, the canvas size and the current
master progress. The driver calls rebuild()/resize() when the canvas changes
and frame() once per tick:

    scene = Scene(config)
    scene.rebuild(800, 800)
    surface = scene.new_surface()
    scene.frame(surface, time_ms)

Draw order each frame: background color -> dot texture -> songlines -> motifs.
"""

import random
import sys
from typing import List, Optional, Tuple

from .background import draw_background_dots
from .clock import master_progress
from .config import SonglinesConfig
from .display.design import COLORS
from .display.surface import PilSurface, Surface
from .layout import create_fixed_layout
from .motif import LayerDurations, Motif
from .network import SonglineNetwork


class Scene:
    """One independently seeded instance of the artwork."""

    def __init__(self, config: Optional[SonglinesConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SonglinesConfig()
        self.rng = rng or random.Random(self.config.output.seed)
        self.motifs: List[Motif] = []
        self.nodes: List[Motif] = []
        self.network = self._build_network([], 0)
        self.canvas_size: Tuple[int, int] = (0, 0)
        self.master_progress: float = 0.0

    @property
    def durations(self) -> LayerDurations:
        anim = self.config.animation
        return LayerDurations(anim.inner_duration_ms, anim.middle_duration_ms, anim.outer_duration_ms)

    def _build_network(self, nodes: List[Motif], width: float) -> SonglineNetwork:
        net = self.config.network
        return SonglineNetwork.build(
            nodes,
            width,
            line_delay_ms=net.line_delay_ms,
            line_grow_ms=net.line_grow_ms,
            distance_divisor=net.distance_divisor,
            line_width=net.line_width,
        )

    def rebuild(self, width: int, height: int) -> None:
        """Discard everything and lay out a fresh square canvas of min(width, height)."""
        size = max(0, min(int(width), int(height)))
        self.canvas_size = (size, size)
        layout = create_fixed_layout(
            size,
            size,
            self.rng,
            connect_probability=self.config.network.connect_probability,
            durations=self.durations,
        )
        self.motifs = layout.motifs
        self.nodes = layout.nodes
        self.network = self._build_network(self.nodes, size)
        print(
            f"[Scene] Built {size}x{size}: {len(self.motifs)} motifs, "
            f"{len(self.nodes)} nodes, songlines: {self.network.describe()}",
            file=sys.stderr,
            flush=True,
        )

    setup = rebuild

    def resize(self, width: int, height: int) -> None:
        """Window changed size: full rebuild, no incremental update."""
        print(f"[Scene] Resize to {width}x{height}", file=sys.stderr, flush=True)
        self.rebuild(width, height)

    def new_surface(self) -> PilSurface:
        """A Pillow surface matching the current canvas."""
        width, height = self.canvas_size
        return PilSurface(width, height, background=COLORS.BACKGROUND)

    def frame(self, surface: Surface, time_ms: float) -> float:
        """Draw one frame at time_ms. Returns the master progress used."""
        self.master_progress = master_progress(time_ms, self.config.animation.loop_duration_ms)
        m = self.master_progress

        surface.background(COLORS.BACKGROUND)
        if self.config.canvas.background_dots:
            draw_background_dots(surface, self.rng, self.config.canvas.dot_density)
        self.network.render(surface, m)
        for motif in self.motifs:
            motif.render(surface, m, self.rng, background=COLORS.BACKGROUND)
        return m
