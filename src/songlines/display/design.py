"""
Design System - the artwork's visual language.

Palette, timing constants, and the small numeric helpers (easing, lerp, clamp)
shared by every renderer. Deep earth background, ochre bases, bright
ceremony-white and sun-yellow pattern work.
"""

import math
from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

TWO_PI = 2 * math.pi


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation. t=0 gives a, t=1 gives b."""
    return a + (b - a) * t


def remap(value: float, in_low: float, in_high: float, out_low: float, out_high: float) -> float:
    """Map value from one range to another (no clamping)."""
    return out_low + (value - in_low) * (out_high - out_low) / (in_high - in_low)


def ease_in_out_cubic(x: float) -> float:
    """
    Cubic ease-in-out for the 0 -> 1 -> 0 loop.
    Starts and ends slowly, fastest through the middle. ease(0.5) == 0.5.
    """
    if x < 0.5:
        return 4 * x * x * x
    return 1 - math.pow(-2 * x + 2, 3) / 2


@dataclass(frozen=True)
class Timing:
    """Animation timing - one loop expands then contracts."""

    LOOP_DURATION_MS: float = 15000  # Full expand + contract cycle

    # Per-layer reveal windows inside one motif
    INNER_DURATION_MS: float = 800
    MIDDLE_DURATION_MS: float = 1200
    OUTER_DURATION_MS: float = 1500

    # Songline network
    LINE_DELAY_MS: float = 150  # Stagger between consecutive lines
    LINE_GROW_MS: float = 800   # How long one line takes to grow


TIMING = Timing()


# === Color Palette ===
# Aboriginal-inspired: deep earth grounds, high-contrast pattern work

@dataclass(frozen=True)
class Colors:
    """Palette for background, motif bases, patterns, and links."""

    BACKGROUND: RGB = (30, 20, 15)  # Deep, dark earth

    # Motif base discs (deep earth tones)
    BASE_PALETTE: Tuple[RGB, ...] = (
        (90, 40, 20),    # Red ochre
        (60, 30, 15),    # Deep earth
        (40, 45, 35),    # Bush green
        (110, 60, 30),   # Burnt orange
        (20, 20, 20),    # Charcoal
    )

    # Pattern colors (bright, high contrast)
    PATTERN_PALETTE: Tuple[RGB, ...] = (
        (255, 255, 255),  # Ceremony white
        (255, 240, 200),  # Cream
        (255, 215, 0),    # Sun yellow
        (255, 140, 80),   # Bright ochre
        (160, 180, 140),  # Sage
        (200, 200, 210),  # Ash
    )

    LINK: RGBA = (240, 230, 200, 180)  # Creamy, semi-transparent songlines
    DOT: RGB = (255, 255, 255)         # Background star dots


COLORS = Colors()


def with_alpha(color, alpha: int = 255) -> RGBA:
    """Return an RGBA tuple. RGBA input keeps its own alpha."""
    if len(color) == 4:
        return tuple(int(c) for c in color)
    return (int(color[0]), int(color[1]), int(color[2]), int(alpha))
