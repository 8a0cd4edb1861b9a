"""A gun with a cooldown and the bullets it has fired."""

from __future__ import annotations

from .bullet import Bullet
from .hitbox import Hitbox
from .render import RED, Renderer
from .utils import Position, Vector2, Viewport

PISTOL_COOLDOWN = 10
BULLET_RADIUS = 2


class Pistol:
    """Fires bullets and keeps them, newest first."""

    def __init__(self) -> None:
        self.timer = 0
        self.shots: list[Bullet] = []

    def __repr__(self) -> str:
        return f"Pistol(timer={self.timer}, shots={len(self.shots)})"

    def shoot(self, position: Position, trajectory: Vector2, velocity: float) -> Bullet:
        """Fire a bullet from ``position`` and return it."""
        bullet = Bullet(position, trajectory, velocity)
        self.shots.insert(0, bullet)
        return bullet

    def tick(self) -> None:
        """Count the cooldown down by one frame, stopping at zero."""
        if self.timer:
            self.timer -= 1

    def update_shots(self, viewport: Viewport, renderer: Renderer | None = None) -> None:
        """Move and draw every bullet, dropping the expired or off-screen ones."""
        survivors = []
        for bullet in self.shots:
            bullet.advance()
            if renderer is not None:
                renderer.filled_circle(
                    bullet.position.world_x - viewport.offset_x,
                    bullet.position.world_y - viewport.offset_y,
                    BULLET_RADIUS,
                    RED,
                )
            if bullet.position.x > viewport.width or bullet.timer_to_live == 0:
                continue
            survivors.append(bullet)
        self.shots = survivors

    def remove_first_hit(self, target: Hitbox) -> bool:
        """Remove the first bullet touching ``target``; return whether one did."""
        for index, bullet in enumerate(self.shots):
            if bullet.hitbox.overlaps(target):
                del self.shots[index]
                return True
        return False