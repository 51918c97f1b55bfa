# lenslink/interact/drag.py
from __future__ import annotations
import math
from typing import Tuple

from lenslink.schema.types import Point, Rectangle, ViewBox

def calc_scale(client_width: float, client_height: float, viewbox: ViewBox) -> float:
    """Screen pixels per viewbox unit for an SVG letterboxed into its client box."""
    return min(client_width / viewbox.width, client_height / viewbox.height)

def clamp_to_viewbox(x: float, y: float, rect: Rectangle, viewbox: ViewBox) -> Tuple[float, float]:
    # lower bound first: a rect larger than the viewbox ends up at a negative offset
    x = max(0.0, x); y = max(0.0, y)
    x = min(x, viewbox.width - rect.width)
    y = min(y, viewbox.height - rect.height)
    return x, y

class DragSession:
    """
    Pointer-drag state for one rectangle.

    The host calls start() on pointer-down, move() on every pointer-move and
    end() on pointer-up. Each move returns a new Rectangle; the session keeps
    the last pointer position so deltas never accumulate twice.
    """

    def __init__(self, rect: Rectangle, viewbox: ViewBox, decimals: int = 2):
        self.rect = rect
        self.viewbox = viewbox
        self.decimals = decimals
        self._last = Point(x=0.0, y=0.0)

    def start(self, pointer: Point) -> None:
        self._last = pointer

    def move(self, pointer: Point, scale: float) -> Rectangle:
        if not math.isfinite(scale) or scale <= 0:
            raise ValueError(f"scale must be a positive finite number, got {scale!r}")
        x = self.rect.x + (pointer.x - self._last.x) / scale
        y = self.rect.y + (pointer.y - self._last.y) / scale
        x, y = clamp_to_viewbox(x, y, self.rect, self.viewbox)
        self.rect = self.rect.model_copy(update={
            "x": round(x, self.decimals),
            "y": round(y, self.decimals),
        })
        self._last = pointer
        return self.rect

    def end(self, pointer: Point) -> Rectangle:
        self._last = pointer
        return self.rect
