"""Shared value types: positions, the camera viewport, vectors and states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

INV_FRAME = 30
"""Frames of invincibility granted after the player takes a hit."""


@dataclass
class Position:
    """A location both on screen (``x``, ``y``) and in the world."""

    x: int = 0
    y: int = 0
    world_x: int = 0
    world_y: int = 0


@dataclass
class Viewport:
    """The camera: its screen origin, scroll offset and size."""

    x: float = 0.0
    y: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class Vector2:
    """A two-dimensional direction or displacement."""

    x: float = 0.0
    y: float = 0.0


class State(IntEnum):
    """States of the player's finite state machine."""

    IDLE = 0
    RUN = 1
    JUMPING = 2
    DOUBLE_JUMP = 3
    CROUCHED = 4


class Entity(Enum):
    """Kinds of actors in the world."""

    PLAYER = 0
    NORMAL_ENEMY = 1