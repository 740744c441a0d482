"""
Display - drawing surfaces, procedural shapes, and motif patterns.
"""

from .design import COLORS, TIMING, clamp, lerp, remap, ease_in_out_cubic, with_alpha
from .surface import Surface, PilSurface, RecordingSurface, Style, DrawOp
from .shapes import catmull_rom, draw_hand_drawn_circle, draw_irregular_blob

__all__ = [
    "COLORS", "TIMING", "clamp", "lerp", "remap", "ease_in_out_cubic", "with_alpha",
    "Surface", "PilSurface", "RecordingSurface", "Style", "DrawOp",
    "catmull_rom", "draw_hand_drawn_circle", "draw_irregular_blob",
]
