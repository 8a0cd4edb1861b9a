"""The player's input state: one latch per button."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Button(IntEnum):
    """Logical buttons of the controller."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    FIRE = 4
    JUMP = 5


@dataclass
class Joystick:
    """Which buttons are currently held."""

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False
    jump: bool = False

    def toggle(self, button) -> None:
        """Flip the latch of ``button``; unknown buttons are ignored."""
        try:
            name = Button(button).name.lower()
        except ValueError:
            return
        setattr(self, name, not getattr(self, name))