"""
Render surface abstraction
--------------------------
World and entities draw through a small immediate-mode 2D API: fill style,
clear/fill rect, filled circle and a save/translate/rotate/restore transform
stack. Coordinates are canvas coordinates (origin top-left, y grows down).

Concrete backends only implement the three `_emit_*` hooks and receive
shapes already transformed into canvas space.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .utils import rotate_point

Point = Tuple[float, float]
Color = Tuple[int, int, int]


class CanvasUnavailableError(RuntimeError):
    """Raised when the simulation is started without a usable render surface"""


class Canvas:
    """Base 2D drawing context with a transform stack"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.fill_style: Color = (0, 0, 0)
        # Current transform: translation then rotation
        self._origin: Point = (0.0, 0.0)
        self._angle = 0.0
        self._stack: List[Tuple[Point, float, Color]] = []

    # ----------------------------
    # Transform stack
    # ----------------------------

    def save(self):
        self._stack.append((self._origin, self._angle, self.fill_style))

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() called without matching save()")
        self._origin, self._angle, self.fill_style = self._stack.pop()

    def translate(self, x: float, y: float):
        dx, dy = rotate_point(x, y, self._angle)
        self._origin = (self._origin[0] + dx, self._origin[1] + dy)

    def rotate(self, angle: float):
        self._angle += angle

    def to_canvas(self, x: float, y: float) -> Point:
        """Map a local point through the current transform"""
        rx, ry = rotate_point(x, y, self._angle)
        return self._origin[0] + rx, self._origin[1] + ry

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ----------------------------
    # Primitives
    # ----------------------------

    def clear_rect(self, x: float, y: float, w: float, h: float):
        self._emit_clear(self._corners(x, y, w, h))

    def fill_rect(self, x: float, y: float, w: float, h: float):
        self._emit_polygon(self._corners(x, y, w, h), self.fill_style)

    def fill_circle(self, x: float, y: float, radius: float):
        cx, cy = self.to_canvas(x, y)
        self._emit_circle(cx, cy, radius, self.fill_style)

    def _corners(self, x: float, y: float, w: float, h: float) -> List[Point]:
        return [
            self.to_canvas(x, y),
            self.to_canvas(x + w, y),
            self.to_canvas(x + w, y + h),
            self.to_canvas(x, y + h),
        ]

    # ----------------------------
    # Backend hooks
    # ----------------------------

    def _emit_clear(self, corners: List[Point]):
        raise NotImplementedError

    def _emit_polygon(self, corners: List[Point], color: Color):
        raise NotImplementedError

    def _emit_circle(self, x: float, y: float, radius: float, color: Color):
        raise NotImplementedError


class RecordingCanvas(Canvas):
    """Canvas that records draw operations instead of rasterizing them.

    Used by headless runs and tests. Each op is a tuple whose first element
    is one of 'clear', 'polygon' or 'circle'.
    """

    def __init__(self, width: int, height: int, keep: Optional[int] = None):
        super().__init__(width, height)
        self.ops: list = []
        self.keep = keep
        self.frames = 0

    def _record(self, op):
        self.ops.append(op)
        if self.keep is not None and len(self.ops) > self.keep:
            del self.ops[: len(self.ops) - self.keep]

    def _emit_clear(self, corners):
        self.frames += 1
        self._record(("clear", corners))

    def _emit_polygon(self, corners, color):
        self._record(("polygon", corners, color))

    def _emit_circle(self, x, y, radius, color):
        self._record(("circle", (x, y), radius, color))


def check_canvas(canvas) -> Canvas:
    """Validate a render surface before the simulation starts"""
    if canvas is None:
        raise CanvasUnavailableError("No canvas available to draw on")
    if not isinstance(canvas, Canvas):
        raise CanvasUnavailableError(f"Not a canvas: {type(canvas).__name__}")
    if canvas.width <= 0 or canvas.height <= 0 or math.isnan(canvas.width + canvas.height):
        raise CanvasUnavailableError(
            f"Canvas has no drawable area ({canvas.width}x{canvas.height})"
        )
    return canvas
