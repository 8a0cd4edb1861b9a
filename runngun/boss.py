"""The final enemy: it shoots and calls down a vertical beam of power."""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING

from .bullet import Bullet
from .hitbox import Hitbox
from .pistol import Pistol
from .render import GREEN, Renderer
from .utils import INV_FRAME, Position, Vector2

if TYPE_CHECKING:
    from .player import Player

PISTOL_COOLDOWN_BOSS = 40
POWER_COOLDOWN_BOSS = 400
POWER_WIDTH = 50
POWER_HEIGHT = 10000
POWER_LINE_TIME = POWER_COOLDOWN_BOSS - 200
POWER_LINE_THICKNESS = 10
BOSS_HEALTH = 50
SHOT_RANGE = 200
POWER_RANGE = 400
BULLET_SPEED = 6.0


class BossDefeated(Exception):
    """Raised when the boss is updated with no health left: the game is won."""


class Power:
    """A tall beam that is aimed, telegraphed with a line, then strikes."""

    def __init__(self, side: int, position: Position) -> None:
        self.is_fixed = False
        self.is_active = False
        self.timer_to_live = POWER_COOLDOWN_BOSS
        self.timer = POWER_COOLDOWN_BOSS
        self.line_timer = POWER_LINE_TIME
        self.position = dataclasses.replace(position)
        self.hitbox = Hitbox(POWER_HEIGHT, side, float(position.x), float(position.y))

    def __repr__(self) -> str:
        return (
            f"Power(is_fixed={self.is_fixed}, is_active={self.is_active}, "
            f"timer={self.timer}, line_timer={self.line_timer})"
        )

    def reset(self) -> None:
        """Release the aim and fire the beam, restarting every timer."""
        self.is_fixed = False
        self.is_active = True
        self.timer = POWER_COOLDOWN_BOSS
        self.timer_to_live = POWER_COOLDOWN_BOSS
        self.line_timer = POWER_LINE_TIME


class Boss:
    """A large square enemy with a pistol and a beam power."""

    def __init__(self, side: int, position: Position) -> None:
        self.health = BOSS_HEALTH
        self.side = side
        self.position = dataclasses.replace(position)
        self.hitbox = Hitbox(side, side, float(position.x), float(position.y))
        self.pistol = Pistol()
        self.power = Power(POWER_WIDTH, Position(-10000, -10000, -10000, -10000))

    def __repr__(self) -> str:
        return f"Boss(health={self.health}, position={self.position!r})"

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
        """Shoot at a close player and aim the power at a nearby one."""
        distance = self._distance_to(player)
        if distance < SHOT_RANGE and self.pistol.timer == 0:
            self.pistol.timer = PISTOL_COOLDOWN_BOSS
            self.shoot_at(player)
        power = self.power
        if distance < POWER_RANGE and power.timer == 0 and not power.is_fixed:
            power.is_fixed = True
            power.position = Position(player.position.x, 0, player.position.world_x, 0)
            power.hitbox.x = float(power.position.world_x)
            power.hitbox.y = float(power.position.world_y)

    def check_collision(self, player: Player) -> None:
        """Apply at most one hit each way between player and boss bullets."""
        if player.pistol.remove_first_hit(self.hitbox):
            self.health -= 1
        if self.pistol.remove_first_hit(player.hitbox):
            player.health -= 1

    def update_power(self, player: Player, renderer: Renderer | None = None) -> None:
        """Advance the power's timers, telegraph it, and let it strike."""
        power = self.power
        viewport = player.viewport

        if power.timer_to_live <= 0:
            power.is_active = False

        if power.timer:
            power.timer -= 1

        if power.timer == 0:
            if renderer is not None:
                half = power.hitbox.vert // 2
                x = power.hitbox.x - viewport.offset_x
                renderer.line(
                    x,
                    power.hitbox.y + half - viewport.offset_y,
                    x,
                    power.hitbox.y - half - viewport.offset_y,
                    GREEN,
                    POWER_LINE_THICKNESS,
                )
            power.line_timer -= 1

        if power.line_timer == 0:
            power.reset()

        if power.is_active:
            if power.hitbox.overlaps(player.hitbox) and player.invencibility == 0:
                player.invencibility = INV_FRAME
                player.health -= 1
            power.timer_to_live -= 1
            if renderer is not None:
                power.hitbox.draw(renderer, viewport)

    def update(self, player: Player, renderer: Renderer | None = None) -> None:
        """Run one frame; raise :class:`BossDefeated` once health reaches zero."""
        self.pistol.tick()

        if self.health == 0:
            raise BossDefeated("the boss has been defeated")

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
        self.update_power(player, renderer)