"""Axis-aligned collision boxes centred on a world point."""

from __future__ import annotations

from dataclasses import dataclass

from .render import RED, Renderer
from .utils import Viewport


def _half(n: int) -> int:
    """Halve an integer, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


@dataclass
class Hitbox:
    """A box ``hor`` wide and ``vert`` tall centred on (x, y)."""

    vert: int
    hor: int
    x: float = 0.0
    y: float = 0.0

    def _edges(self) -> tuple[int, int, int, int]:
        half_vert = _half(self.vert)
        half_hor = _half(self.hor)
        top = int(self.y + half_vert)
        bottom = int(self.y - half_vert)
        left = int(self.x - half_hor)
        right = int(self.x + half_hor)
        return top, bottom, left, right

    def overlaps(self, other: Hitbox) -> bool:
        """Return True if the two boxes touch or intersect."""
        top1, bottom1, left1, right1 = self._edges()
        top2, bottom2, left2, right2 = other._edges()

        vertical = (top1 >= bottom2 >= bottom1) or (top2 >= bottom1 >= bottom2)
        horizontal = (right1 >= left2 >= left1) or (right2 >= left1 >= left2)
        return vertical and horizontal

    def draw(self, renderer: Renderer, viewport: Viewport) -> None:
        """Draw the box in red, relative to the camera."""
        half_vert = _half(self.vert)
        half_hor = _half(self.hor)
        renderer.filled_rectangle(
            (self.x - half_hor) - viewport.offset_x,
            (self.y - half_vert) - viewport.offset_y,
            (self.x + half_hor) - viewport.offset_x,
            (self.y + half_vert) - viewport.offset_y,
            RED,
        )