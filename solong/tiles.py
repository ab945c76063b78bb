"""Tile kinds, key codes and movement directions used by the game."""

from __future__ import annotations

from enum import Enum, IntEnum

IMG_SIZE = 64
"""Side length, in pixels, of one tile image."""

FRAME_RATE = 200
"""Loop iterations between two animation frames."""

ENEMY_FRAMES = 1000
"""Loop iterations between two enemy patrol moves."""


class TileKind(str, Enum):
    """The characters a map may contain."""

    EMPTY = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"
    ENEMY = "X"


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    LEFT = 65361
    DOWN = 65364
    RIGHT = 65363
    SPACE = 32


class Direction(Enum):
    """A step on the grid, as a (dx, dy) offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.S: Direction.DOWN,
    Key.DOWN: Direction.DOWN,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
    Key.W: Direction.UP,
    Key.UP: Direction.UP,
}


def direction_for_key(keycode: int) -> Direction | None:
    """Return the direction a key code moves the player, or None."""
    return _KEY_DIRECTIONS.get(keycode)