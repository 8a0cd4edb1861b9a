"""Pick-ups that grant health or a double jump."""

from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import TYPE_CHECKING

from .hitbox import Hitbox
from .render import GREEN, Renderer
from .utils import Position

if TYPE_CHECKING:
    from .player import Player


class ItemType(IntEnum):
    """What an item gives the player."""

    HEALTH = 0
    DOUBLE_JUMP = 1


class Item:
    """A square pick-up collected by touching it."""

    def __init__(self, side: int, position: Position, item_type=ItemType.HEALTH) -> None:
        self.item_type = item_type
        self.has_collided = False
        self.side = side
        self.position = dataclasses.replace(position)
        self.hitbox = Hitbox(side, side, float(position.x), float(position.y))

    def __repr__(self) -> str:
        return (
            f"Item(item_type={self.item_type!r}, position={self.position!r}, "
            f"has_collided={self.has_collided})"
        )

    def check_collision(self, player: Player) -> None:
        """Give the player the item's effect if they touch it."""
        if not player.hitbox.overlaps(self.hitbox):
            return
        if self.item_type == ItemType.HEALTH:
            player.health += 1
        if self.item_type == ItemType.DOUBLE_JUMP:
            player.can_double_jump += 1
        self.has_collided = True

    def update(self, player: Player, renderer: Renderer | None = None) -> None:
        """Place the item relative to the camera, draw it and check pick-up."""
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
        self.check_collision(player)