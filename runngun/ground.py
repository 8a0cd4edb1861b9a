"""Static square blocks placed in the world."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from .hitbox import Hitbox
from .render import GREEN, Renderer
from .utils import Position

if TYPE_CHECKING:
    from .player import Player


class Ground:
    """A square block of the given side centred on a world position."""

    def __init__(self, side: int, position: Position) -> None:
        self.side = side
        self.position = dataclasses.replace(position)
        self.hitbox = Hitbox(side, side, float(position.x), float(position.y))

    def __repr__(self) -> str:
        return f"Ground(side={self.side}, position={self.position!r})"

    def update(self, player: Player, renderer: Renderer | None = None) -> None:
        """Place the block relative to the camera and draw it."""
        size = self.side // 2
        viewport = player.viewport
        pos = self.position
        pos.x = int(pos.world_x - viewport.offset_x)
        pos.y = int(pos.world_y - viewport.offset_y)
        self.hitbox.x = float(pos.world_x)
        self.hitbox.y = float(pos.world_y)
        if renderer is not None:
            renderer.filled_rectangle(
                pos.x - size, pos.y - size, pos.x + size, pos.y + size, GREEN
            )