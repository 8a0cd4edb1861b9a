"""The player character: movement, jumping, shooting and its state machine."""

from __future__ import annotations

import dataclasses
from typing import Any

from .hitbox import Hitbox
from .joystick import Button, Joystick
from .pistol import PISTOL_COOLDOWN, Pistol
from .render import Renderer
from .utils import INV_FRAME, Position, State, Vector2, Viewport

GRAVITY = 0.8
LEFT_CORNER = 300
RIGHT_CORNER = 500
HITBOX = 20
HITBOX_CROUCHED = 10

FRAME_SIZE = 256
FRAME_NUMBER = 8
FRAME_DELAY = 5

PLAYER_STEP = 3
PLAYER_HEALTH = 5
JUMP_STRENGTH = -10
BULLET_SPEED = 6.0


class Player:
    """The character the user controls, followed by the camera."""

    def __init__(
        self,
        side: int,
        position: Position,
        viewport: Viewport,
        sprite: Any = None,
    ) -> None:
        half = side // 2
        outside_x = position.x - half < 0 or position.x + half > viewport.width
        outside_y = position.y - side < 0 or position.y + half > viewport.height
        if outside_x or outside_y:
            raise ValueError("the player does not fit inside the viewport")

        self.health = PLAYER_HEALTH
        self.side = side
        self.face = Button.RIGHT
        self.is_on_ground = False
        self.is_right = False
        self.is_left = False
        self.can_double_jump = 0
        self.invencibility = INV_FRAME
        self.sprite = sprite
        self.position = dataclasses.replace(position)
        self.current_frame = 0
        self.animation_time = 0
        self.velocity_y = 0.0
        self.jump_strength = JUMP_STRENGTH
        self.hitbox = Hitbox(side, side, float(position.x), float(position.y))
        self.control = Joystick()
        self.pistol = Pistol()
        self.viewport = viewport
        self.state = State.IDLE

    def __repr__(self) -> str:
        return (
            f"Player(state={self.state.name}, health={self.health}, "
            f"position={self.position!r})"
        )

    # Movement

    def move(self, steps: int, direction) -> None:
        """Walk ``steps`` steps left or right, scrolling the camera at the corners."""
        distance = steps * PLAYER_STEP
        pos = self.position
        if direction == Button.LEFT:
            pos.world_x -= distance
            self.face = Button.LEFT
            if pos.x > RIGHT_CORNER:
                self.is_right = False
                pos.x -= distance
                return
            if pos.x < LEFT_CORNER:
                self.viewport.offset_x -= distance
                self.is_left = True
            else:
                self.is_right = False
                pos.x -= distance
        elif direction == Button.RIGHT:
            pos.world_x += distance
            self.face = Button.RIGHT
            if pos.x < LEFT_CORNER:
                self.is_left = False
                pos.x += distance
                return
            if pos.x > RIGHT_CORNER:
                self.viewport.offset_x += distance
                self.is_right = True
            else:
                self.is_left = False
                pos.x += distance

    def _walk_from_controls(self) -> None:
        if self.control.left:
            self.move(1, Button.LEFT)
        if self.control.right:
            self.move(1, Button.RIGHT)

    # Entering states

    def enter_grounded(self) -> None:
        """Crouch: the hitbox shrinks."""
        self.is_left = False
        self.is_right = False
        self.state = State.CROUCHED
        self.hitbox.vert = HITBOX_CROUCHED

    def enter_run(self) -> None:
        """Start running and take the first steps."""
        self.state = State.RUN
        self.on_run(State.RUN)

    def enter_idle(self) -> None:
        """Stand still with the full hitbox."""
        self.is_left = False
        self.is_right = False
        self.state = State.IDLE
        self.hitbox.vert = HITBOX

    def enter_double_jump(self) -> None:
        """Jump again while in the air."""
        self.control.jump = False
        self.state = State.DOUBLE_JUMP
        self.is_on_ground = False
        self.velocity_y = float(self.jump_strength)

    def enter_jump(self) -> None:
        """Leave the ground."""
        self.control.jump = False
        self.state = State.JUMPING
        self.is_on_ground = False
        self.velocity_y = float(self.jump_strength)

    # Handling events within a state

    def on_grounded(self) -> None:
        """Stand up once the down button is released."""
        if not self.control.down:
            self.enter_idle()

    def on_jump(self, state: State) -> None:
        """Land, double jump, or steer while in the air."""
        if self.is_on_ground:
            self.enter_idle()
            return
        if self.control.jump and self.can_double_jump:
            self.enter_double_jump()
            return
        self._walk_from_controls()

    def on_double_jump(self) -> None:
        """Land or steer while in the air."""
        if self.is_on_ground:
            self.enter_idle()
            return
        self._walk_from_controls()

    def on_run(self, state: State) -> None:
        """Switch to the requested state, or keep running."""
        if state == State.IDLE:
            self.enter_idle()
        elif state == State.JUMPING:
            self.enter_jump()
        elif state == State.CROUCHED:
            self.enter_grounded()
        else:
            self._walk_from_controls()

    def on_idle(self, state: State) -> None:
        """Leave the idle state for the requested one."""
        if state == State.RUN:
            self.enter_run()
        elif state == State.JUMPING:
            self.enter_jump()
        elif state == State.CROUCHED:
            self.enter_grounded()

    def update_state(self, new_state: State) -> None:
        """Feed ``new_state`` to the state machine.

        The handlers run in order, so a state entered by one handler is
        handled again by the next within the same frame.
        """
        if self.state == State.IDLE:
            self.on_idle(new_state)
        if self.state == State.RUN:
            self.on_run(new_state)
        if self.state == State.JUMPING:
            self.on_jump(new_state)
        if self.state == State.DOUBLE_JUMP:
            self.on_double_jump()
        if self.state == State.CROUCHED:
            self.on_grounded()

    # Per-frame logic

    def shoot(self) -> None:
        """Fire a bullet in the direction the player is facing."""
        direction = -1.0 if self.face == Button.LEFT else 1.0
        self.pistol.shoot(self.position, Vector2(direction, 0.0), BULLET_SPEED)

    def _requested_state(self) -> State:
        new_state = State.IDLE
        if self.control.left or self.control.right:
            new_state = State.RUN
        if self.control.down:
            new_state = State.CROUCHED
        if self.control.jump:
            new_state = State.JUMPING
        return new_state

    def update(self, renderer: Renderer | None = None) -> None:
        """Run one frame: physics, input, shooting, animation and drawing."""
        pos = self.position
        pos.y = int(pos.y + self.velocity_y)
        pos.world_y = int(pos.world_y + self.velocity_y)
        self.hitbox.y = float(pos.world_y)
        self.hitbox.x = float(pos.world_x)

        if self.invencibility > 0:
            self.invencibility -= 1

        if not self.is_on_ground:
            self.velocity_y += GRAVITY

        floor = self.viewport.width / 2
        if pos.y >= floor:
            pos.world_y = int(floor)
            pos.y = int(floor)
            self.velocity_y = 0.0
            self.is_on_ground = True

        self.update_state(self._requested_state())

        if self.control.fire and self.pistol.timer == 0:
            self.shoot()
            self.pistol.timer = PISTOL_COOLDOWN

        self.pistol.update_shots(self.viewport, renderer)
        self.pistol.tick()

        self.animation_time += 1
        if self.animation_time >= FRAME_DELAY:
            self.animation_time = 0
            self.current_frame += 1
            if self.current_frame > FRAME_NUMBER:
                self.current_frame = 0

        if renderer is not None:
            renderer.bitmap_region(
                self.sprite,
                self.current_frame * FRAME_SIZE,
                0,
                FRAME_SIZE,
                FRAME_SIZE,
                pos.x + self.viewport.x,
                pos.y + self.viewport.y,
            )