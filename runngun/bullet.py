"""Projectiles fired by pistols."""

from __future__ import annotations

import dataclasses

from .hitbox import Hitbox
from .utils import Position, Vector2

BULLET_LIFETIME = 180
BULLET_SIZE = 5


class Bullet:
    """A projectile travelling in a straight line for a limited time."""

    def __init__(self, position: Position, trajectory: Vector2, velocity: float) -> None:
        self.velocity = float(velocity)
        self.position = dataclasses.replace(position)
        self.timer_to_live = BULLET_LIFETIME
        self.trajectory = dataclasses.replace(trajectory)
        self.hitbox = Hitbox(BULLET_SIZE, BULLET_SIZE, float(position.x), float(position.y))

    def __repr__(self) -> str:
        return (
            f"Bullet(position={self.position!r}, trajectory={self.trajectory!r}, "
            f"velocity={self.velocity!r}, timer_to_live={self.timer_to_live})"
        )

    def advance(self) -> None:
        """Move one frame along the trajectory and age by one frame."""
        self.timer_to_live -= 1
        dx = self.trajectory.x * self.velocity
        dy = self.trajectory.y * self.velocity
        pos = self.position
        pos.x = int(pos.x + dx)
        pos.y = int(pos.y + dy)
        pos.world_x = int(pos.world_x + dx)
        pos.world_y = int(pos.world_y + dy)
        self.hitbox.x = float(pos.world_x)
        self.hitbox.y = float(pos.world_y)