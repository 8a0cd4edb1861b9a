"""Regular enemies that stand still and shoot at the player when close."""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING

from .bullet import Bullet
from .hitbox import Hitbox
from .pistol import Pistol
from .render import GREEN, Renderer
from .utils import Position, Vector2

if TYPE_CHECKING:
    from .player import Player

PISTOL_COOLDOWN_ENEMY = 20
ENEMY_HEALTH = 5
SHOT_RANGE = 200
BULLET_SPEED = 6.0


class NormalEnemy:
    """A square enemy that fires at the player within range."""

    def __init__(self, side: int, position: Position) -> None:
        self.health = ENEMY_HEALTH
        self.side = side
        self.position = dataclasses.replace(position)
        self.hitbox = Hitbox(side, side, float(position.x), float(position.y))
        self.pistol = Pistol()

    def __repr__(self) -> str:
        return f"NormalEnemy(health={self.health}, position={self.position!r})"

    @property
    def is_dead(self) -> bool:
        """True once the enemy has no health left."""
        return self.health <= 0

    def _distance_to(self, player: Player) -> float:
        return math.hypot(
            self.position.world_x - player.position.world_x,
            self.position.world_y - player.position.world_y,
        )

    def shoot_at(self, player: Player) -> Bullet:
        """Fire a bullet straight towards the player and return it."""
        dx = player.position.world_x - self.position.world_x
        dy = player.position.world_y - self.position.world_y
        angle = math.atan2(dy, dx)
        trajectory = Vector2(math.cos(angle), math.sin(angle))
        return self.pistol.shoot(self.position, trajectory, BULLET_SPEED)

    def check_distance(self, player: Player) -> None:
        """Shoot if the player is in range and the pistol has cooled down."""
        if self._distance_to(player) < SHOT_RANGE and self.pistol.timer == 0:
            self.pistol.timer = PISTOL_COOLDOWN_ENEMY
            self.shoot_at(player)

    def check_collision(self, player: Player) -> None:
        """Apply at most one hit each way between player and enemy bullets."""
        if player.pistol.remove_first_hit(self.hitbox):
            self.health -= 1
        if self.pistol.remove_first_hit(player.hitbox):
            player.health -= 1

    def update(self, player: Player, renderer: Renderer | None = None) -> None:
        """Run one frame: cooldown, placement, drawing, hits and shooting."""
        self.pistol.tick()
        if self.health == 0:
            return

        viewport = player.viewport
        pos = self.position
        pos.x = int(pos.world_x - viewport.offset_x)
        pos.y = int(pos.world_y - viewport.offset_y)
        self.hitbox.x = float(pos.world_x)
        self.hitbox.y = float(pos.world_y)

        if renderer is not None:
            size = self.side // 2
            renderer.filled_rectangle(
                pos.x - size, pos.y - size, pos.x + size, pos.y + size, GREEN
            )

        self.check_collision(player)
        self.check_distance(player)
        self.pistol.update_shots(viewport, renderer)