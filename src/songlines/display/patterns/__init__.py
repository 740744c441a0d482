"""
Pattern Registry - the closed set of drawing strategies for each motif layer.

Every motif has three concentric layers (inner, middle, outer). Each layer
picks one variant at construction; the variant id indexes a dispatch table
of generator functions here. Generators are plain functions:

    generator(surface, radius, p, color, rng) -> None

drawn around the current origin (the motif center). p is the layer's
progress in [0, 1]: nothing at p <= 0, the full static form at p == 1.
"""

import random
from typing import Callable, Dict, List

from ..surface import Surface

PatternFn = Callable[[Surface, float, float, tuple, random.Random], None]

LAYERS = ("inner", "middle", "outer")

# layer -> variant id -> generator
_PATTERNS: Dict[str, Dict[int, PatternFn]] = {layer: {} for layer in LAYERS}


def register_pattern(layer: str, variant: int, fn: PatternFn) -> None:
    """Register a generator for a layer variant."""
    _PATTERNS[layer][variant] = fn


def get_pattern(layer: str, variant: int) -> PatternFn:
    """Look up a generator. Unknown ids raise KeyError."""
    return _PATTERNS[layer][variant]


def variant_count(layer: str) -> int:
    """Number of variants registered for a layer."""
    return len(_PATTERNS[layer])


def list_patterns(layer: str) -> List[str]:
    """Generator names for a layer, in variant order."""
    table = _PATTERNS[layer]
    return [table[v].__name__ for v in sorted(table)]


def draw_pattern(
    surface: Surface,
    layer: str,
    variant: int,
    radius: float,
    p: float,
    color,
    rng: random.Random,
) -> None:
    """Run a layer generator. Callers clamp p; out-of-range p is a bug."""
    assert 0.0 <= p <= 1.0, f"{layer} progress out of range: {p}"
    if p <= 0:
        return
    get_pattern(layer, variant)(surface, radius, p, color, rng)


# --- Register generators at import time ---
from . import inner, middle, outer  # noqa: E402

register_pattern("inner", 0, inner.draw_core_blob)
register_pattern("inner", 1, inner.draw_spiral)

register_pattern("middle", 0, middle.draw_concentric_dots)
register_pattern("middle", 1, middle.draw_u_shapes)
register_pattern("middle", 2, middle.draw_solid_rings)
register_pattern("middle", 3, middle.draw_concentric_rings)

register_pattern("outer", 0, outer.draw_dot_ring)
register_pattern("outer", 1, outer.draw_radiating_lines)
register_pattern("outer", 2, outer.draw_striped_rings)
register_pattern("outer", 3, outer.draw_wavy_ring)
