"""
Drawing Surface - explicit render target for every draw call.

Style (fill, stroke, stroke weight, cap) and the 2D transform live on the
surface and are scoped with push():

    with surface.push():
        surface.translate(x, y)
        surface.fill(color)
        ...

State is restored when the block exits, even on error.

Two backends:
- PilSurface: draws into a Pillow RGB image with alpha blending
- RecordingSurface: records device-space operations (headless, tests)
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple
import math

from PIL import Image, ImageDraw

from .design import COLORS, RGBA, with_alpha
from .shapes import Point, catmull_rom

# Affine matrix (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
Matrix = Tuple[float, float, float, float, float, float]
IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

ARC_SEGMENTS = 24


@dataclass
class Style:
    """Current drawing style. None disables fill or stroke."""
    fill: Optional[RGBA] = (255, 255, 255, 255)
    stroke: Optional[RGBA] = (0, 0, 0, 255)
    stroke_weight: float = 1.0
    stroke_cap: str = "round"  # "round" or "butt"


class Surface(ABC):
    """Abstract 2D drawing surface with a scoped style/transform stack."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.style = Style()
        self._matrix: Matrix = IDENTITY

    # --- Scoped state ---

    @contextmanager
    def push(self) -> Iterator["Surface"]:
        """Save style and transform; restore them when the block exits."""
        saved_matrix = self._matrix
        saved_style = replace(self.style)
        try:
            yield self
        finally:
            self._matrix = saved_matrix
            self.style = saved_style

    # --- Style ---

    def fill(self, color) -> None:
        self.style.fill = with_alpha(color)

    def no_fill(self) -> None:
        self.style.fill = None

    def stroke(self, color) -> None:
        self.style.stroke = with_alpha(color)

    def no_stroke(self) -> None:
        self.style.stroke = None

    def stroke_weight(self, weight: float) -> None:
        self.style.stroke_weight = float(weight)

    def stroke_cap(self, cap: str) -> None:
        self.style.stroke_cap = cap

    # --- Transform ---

    def translate(self, dx: float, dy: float) -> None:
        a, b, c, d, e, f = self._matrix
        self._matrix = (a, b, c, d, e + a * dx + c * dy, f + b * dx + d * dy)

    def rotate(self, angle: float) -> None:
        a, b, c, d, e, f = self._matrix
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self._matrix = (
            a * cos_a + c * sin_a,
            b * cos_a + d * sin_a,
            c * cos_a - a * sin_a,
            d * cos_a - b * sin_a,
            e,
            f,
        )

    def transform_point(self, x: float, y: float) -> Point:
        """Map a local point to device coordinates."""
        a, b, c, d, e, f = self._matrix
        return (a * x + c * y + e, b * x + d * y + f)

    # --- Drawing ---

    def background(self, color) -> None:
        """Fill the whole surface, ignoring transform and style."""
        self._clear(with_alpha(color))

    def curve_shape(self, points: Sequence[Point], close: bool = False) -> None:
        """Smoothed (Catmull-Rom) shape through points, in local coordinates."""
        smoothed = catmull_rom(points, closed=close)
        if not smoothed:
            return
        self.polyline(smoothed, close=close)

    def polyline(self, points: Sequence[Point], close: bool = False) -> None:
        """Straight-edged shape through points, in local coordinates."""
        if not points:
            return
        if self.style.fill is None and self.style.stroke is None:
            return
        device = [self.transform_point(x, y) for x, y in points]
        self._polyline(device, close, replace(self.style))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self.style.stroke is None:
            return
        device = [self.transform_point(x1, y1), self.transform_point(x2, y2)]
        self._polyline(device, False, replace(self.style, fill=None))

    def arc(self, cx: float, cy: float, w: float, h: float, start: float, stop: float) -> None:
        """Elliptical arc from start to stop (radians, clockwise on screen)."""
        points = []
        for i in range(ARC_SEGMENTS + 1):
            angle = start + (stop - start) * i / ARC_SEGMENTS
            points.append((cx + math.cos(angle) * w / 2, cy + math.sin(angle) * h / 2))
        device = [self.transform_point(x, y) for x, y in points]
        if self.style.fill is not None:
            pie = [self.transform_point(cx, cy)] + device
            self._polyline(pie, True, replace(self.style, stroke=None))
        if self.style.stroke is not None:
            self._polyline(device, False, replace(self.style, fill=None))

    def ellipse(self, x: float, y: float, diameter: float) -> None:
        """Circle of the given diameter centered at (x, y)."""
        if self.style.fill is None and self.style.stroke is None:
            return
        self._ellipse(self.transform_point(x, y), diameter / 2, replace(self.style))

    # --- Backend hooks ---

    @abstractmethod
    def _clear(self, color: RGBA) -> None:
        pass

    @abstractmethod
    def _polyline(self, points: List[Point], closed: bool, style: Style) -> None:
        """Draw device-space points: fill the polygon if style.fill, outline if style.stroke."""
        pass

    @abstractmethod
    def _ellipse(self, center: Point, radius: float, style: Style) -> None:
        pass


class PilSurface(Surface):
    """
    Pillow-backed surface.

    Draws on an RGB image through an RGBA ImageDraw, so translucent fills and
    strokes blend onto what is already there.
    """

    def __init__(self, width: int, height: int, background=COLORS.BACKGROUND):
        super().__init__(width, height)
        self._image = Image.new("RGB", (max(0, self.width), max(0, self.height)), tuple(background[:3]))
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    @property
    def image(self) -> Image.Image:
        return self._image

    def save(self, path) -> None:
        self._image.save(path)

    def _clear(self, color: RGBA) -> None:
        if self.width <= 0 or self.height <= 0:
            return
        self._image.paste(color[:3], (0, 0, self.width, self.height))

    def _polyline(self, points: List[Point], closed: bool, style: Style) -> None:
        if style.fill is not None and len(points) >= 3:
            self._draw.polygon(points, fill=style.fill)
        if style.stroke is None:
            return
        width = max(1, int(round(style.stroke_weight)))
        path = list(points) + [points[0]] if closed else list(points)
        if len(path) < 2:
            return
        self._draw.line(path, fill=style.stroke, width=width, joint="curve" if width > 2 else None)
        if not closed and style.stroke_cap == "round" and width > 2:
            half = width / 2
            for x, y in (path[0], path[-1]):
                self._draw.ellipse([x - half, y - half, x + half, y + half], fill=style.stroke)

    def _ellipse(self, center: Point, radius: float, style: Style) -> None:
        x, y = center
        width = max(1, int(round(style.stroke_weight)))
        self._draw.ellipse(
            [x - radius, y - radius, x + radius, y + radius],
            fill=style.fill,
            outline=style.stroke,
            width=width if style.stroke is not None else 0,
        )


@dataclass
class DrawOp:
    """One recorded draw operation in device coordinates."""
    kind: str  # "clear", "polyline", "ellipse"
    points: Tuple[Point, ...]
    closed: bool = False
    style: Optional[Style] = None
    radius: float = 0.0
    color: Optional[RGBA] = None


class RecordingSurface(Surface):
    """Surface that records operations instead of rasterizing them."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.ops: List[DrawOp] = []

    def ops_of(self, kind: str) -> List[DrawOp]:
        return [op for op in self.ops if op.kind == kind]

    def reset(self) -> None:
        self.ops.clear()

    def _clear(self, color: RGBA) -> None:
        self.ops.append(DrawOp("clear", (), color=color))

    def _polyline(self, points: List[Point], closed: bool, style: Style) -> None:
        self.ops.append(DrawOp("polyline", tuple(points), closed=closed, style=style))

    def _ellipse(self, center: Point, radius: float, style: Style) -> None:
        self.ops.append(DrawOp("ellipse", (center,), style=style, radius=radius))
