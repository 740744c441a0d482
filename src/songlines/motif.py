"""
Circle Motif - one circular, three-layer generative drawing unit.

Each motif picks its pattern variants and colors once, at construction, and
keeps them for its lifetime. Per frame it turns the master progress into a
virtual time and splits that into three staged layer progresses:

    inner  : [0, 800) ms
    middle : [800, 2000) ms
    outer  : [2000, 3500) ms

The arithmetic alone enforces the ordering - middle stays at 0 until inner's
window has elapsed, outer until middle's has. On rewind the same formulas
retract outer first, then middle, then inner.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .display.design import COLORS, TIMING, RGB, clamp
from .display.shapes import draw_hand_drawn_circle
from .display.surface import Surface
from .display.patterns import draw_pattern, variant_count
from .display.patterns.inner import draw_base_disc

MASK_SCALE = 1.05  # Occlusion disc radius relative to the motif radius


@dataclass(frozen=True)
class LayerDurations:
    """Reveal window of each layer, in milliseconds."""
    inner: float = TIMING.INNER_DURATION_MS
    middle: float = TIMING.MIDDLE_DURATION_MS
    outer: float = TIMING.OUTER_DURATION_MS

    @property
    def total(self) -> float:
        return self.inner + self.middle + self.outer


@dataclass(frozen=True)
class LayerProgress:
    """Progress of each layer, each in [0, 1]."""
    inner: float
    middle: float
    outer: float


def layer_progress(virtual_time: float, durations: LayerDurations = LayerDurations()) -> LayerProgress:
    """Split a motif's virtual time into the three staged layer progresses."""
    return LayerProgress(
        inner=clamp(virtual_time / durations.inner),
        middle=clamp((virtual_time - durations.inner) / durations.middle),
        outer=clamp((virtual_time - durations.inner - durations.middle) / durations.outer),
    )


@dataclass(frozen=True)
class MotifPalette:
    base: RGB
    inner: RGB
    middle: RGB
    outer: RGB


@dataclass(frozen=True, eq=False)
class Motif:
    """A circular motif. Immutable once built, compared and hashed by identity."""

    x: float
    y: float
    radius: float
    inner_variant: int
    middle_variant: int
    outer_variant: int
    palette: MotifPalette
    durations: LayerDurations = field(default_factory=LayerDurations)

    @classmethod
    def create(
        cls,
        x: float,
        y: float,
        radius: float,
        rng: random.Random,
        durations: Optional[LayerDurations] = None,
    ) -> "Motif":
        """Sample variants and colors for a new motif."""
        outer_variant = rng.randrange(variant_count("outer"))
        middle_variant = rng.randrange(variant_count("middle"))
        inner_variant = rng.randrange(variant_count("inner"))
        palette = MotifPalette(
            base=rng.choice(COLORS.BASE_PALETTE),
            inner=rng.choice(COLORS.PATTERN_PALETTE),
            middle=rng.choice(COLORS.PATTERN_PALETTE),
            outer=rng.choice(COLORS.PATTERN_PALETTE),
        )
        return cls(
            x=x,
            y=y,
            radius=radius,
            inner_variant=inner_variant,
            middle_variant=middle_variant,
            outer_variant=outer_variant,
            palette=palette,
            durations=durations or LayerDurations(),
        )

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def layer_progress(self, master_progress: float) -> LayerProgress:
        return layer_progress(master_progress * self.durations.total, self.durations)

    def render(
        self,
        surface: Surface,
        master_progress: float,
        rng: random.Random,
        background: RGB = COLORS.BACKGROUND,
    ) -> LayerProgress:
        """Draw mask disc, then inner, middle, outer. Returns the layer progresses used."""
        progress = self.layer_progress(master_progress)
        with surface.push():
            surface.translate(self.x, self.y)
            # Mask: hides songlines passing under the motif, regardless of progress
            draw_hand_drawn_circle(surface, self.radius * MASK_SCALE, rng, fill=background)

            draw_base_disc(surface, self.radius, progress.inner, self.palette.base, rng)
            draw_pattern(surface, "inner", self.inner_variant, self.radius, progress.inner, self.palette.inner, rng)
            draw_pattern(surface, "middle", self.middle_variant, self.radius, progress.middle, self.palette.middle, rng)
            draw_pattern(surface, "outer", self.outer_variant, self.radius, progress.outer, self.palette.outer, rng)
        return progress
