"""Drawing interface used by the game objects.

The base :class:`Renderer` records every drawing call, which is enough to run
the game logic headless; a concrete backend overrides the drawing methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing call."""

    kind: str
    args: tuple[Any, ...]


class Renderer:
    """Records drawing calls in :attr:`commands`."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def _record(self, kind: str, *args: Any) -> None:
        self.commands.append(DrawCommand(kind, args))

    def filled_rectangle(self, x1, y1, x2, y2, color) -> None:
        """Fill the rectangle with corners (x1, y1) and (x2, y2)."""
        self._record("rectangle", x1, y1, x2, y2, color)

    def filled_circle(self, x, y, radius, color) -> None:
        """Fill a circle centred on (x, y)."""
        self._record("circle", x, y, radius, color)

    def line(self, x1, y1, x2, y2, color, thickness) -> None:
        """Draw a line of the given thickness."""
        self._record("line", x1, y1, x2, y2, color, thickness)

    def bitmap_region(self, sprite, sx, sy, sw, sh, dx, dy) -> None:
        """Blit the region (sx, sy, sw, sh) of ``sprite`` at (dx, dy)."""
        self._record("bitmap", sprite, sx, sy, sw, sh, dx, dy)

    def text(self, x, y, message, color) -> None:
        """Write ``message`` with its top-left corner at (x, y)."""
        self._record("text", x, y, message, color)