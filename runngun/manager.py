"""Holds the world's actors and runs their per-frame logic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .boss import Boss
from .enemy import NormalEnemy
from .item import Item, ItemType
from .render import Renderer
from .utils import Position

if TYPE_CHECKING:
    from .player import Player


class GameManager:
    """The enemies, items, player and boss of one level."""

    def __init__(self, player: Player, boss: Boss | None = None) -> None:
        if player is None:
            raise ValueError("the game manager needs a player")
        self.player = player
        self.boss = boss
        self.enemies: list[NormalEnemy] = []
        self.items: list[Item] = []

    def __repr__(self) -> str:
        return (
            f"GameManager(enemies={len(self.enemies)}, items={len(self.items)}, "
            f"boss={self.boss!r})"
        )

    def spawn_enemy(self, side: int, position: Position) -> NormalEnemy:
        """Add a new enemy at the front of the list and return it."""
        enemy = NormalEnemy(side, position)
        self.enemies.insert(0, enemy)
        return enemy

    def spawn_item(self, side: int, position: Position, item_type=ItemType.HEALTH) -> Item:
        """Add a new item at the front of the list and return it."""
        item = Item(side, position, item_type)
        self.items.insert(0, item)
        return item

    def update(self, renderer: Renderer | None = None) -> None:
        """Drop spent actors, update the rest, and the boss once enemies are gone."""
        self.items = [item for item in self.items if not item.has_collided]
        self.enemies = [enemy for enemy in self.enemies if not enemy.is_dead]

        for enemy in self.enemies:
            enemy.update(self.player, renderer)
        for item in self.items:
            item.update(self.player, renderer)

        if not self.enemies and self.boss is not None:
            self.boss.update(self.player, renderer)