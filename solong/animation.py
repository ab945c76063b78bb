"""Per-frame updates: opening the exit, sprite animation and enemy patrols."""

from __future__ import annotations

import random
from typing import Protocol

from solong.game import Game, GameEnded, ImageName
from solong.tilemap import Tile
from solong.tiles import ENEMY_FRAMES, FRAME_RATE, Direction, TileKind

_PLANT_FRAMES = (ImageName.PLANT_01, ImageName.PLANT_02)
_PLAYER_FRAMES = (ImageName.PLAYER_01, ImageName.PLAYER_02)
_ENEMY_FRAMES = (
    ImageName.ENEMY_01,
    ImageName.ENEMY_02,
    ImageName.ENEMY_03,
    ImageName.ENEMY_04,
)

# Index drawn at random picks the patrol direction, in this order.
_PATROL_DIRECTIONS = (Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP)


class RandomSource(Protocol):
    """Anything that can draw a random integer below a bound."""

    def randrange(self, stop: int) -> int: ...


def step_text(steps: int) -> str:
    """The step counter line shown under the map."""
    return f"steps: {steps}"


def render_exit(game: Game) -> None:
    """Open every exit door and mark the collectibles as done."""
    for tile in game.tilemap:
        if tile.kind is TileKind.EXIT:
            tile.image = ImageName.DOOR_02
    game.collectibles = -1


def _toggle(tile: Tile, frames: tuple[ImageName, ImageName]) -> None:
    if tile.image_number == 0:
        tile.image_number = 1
        tile.image = frames[1]
    else:
        tile.image_number = 0
        tile.image = frames[0]


def _cycle_enemy(tile: Tile) -> None:
    if 0 <= tile.image_number < len(_ENEMY_FRAMES):
        tile.image_number = (tile.image_number + 1) % len(_ENEMY_FRAMES)
        tile.image = _ENEMY_FRAMES[tile.image_number]


def animate(game: Game) -> None:
    """Advance the animation of plants, the player and enemies by one frame."""
    for tile in game.tilemap:
        if tile.kind is TileKind.COLLECTIBLE:
            _toggle(tile, _PLANT_FRAMES)
        elif tile.kind is TileKind.PLAYER:
            _toggle(tile, _PLAYER_FRAMES)
        elif tile.kind is TileKind.ENEMY:
            _cycle_enemy(tile)


def _move_enemy(game: Game, tile: Tile, direction: Direction) -> None:
    target = game.tilemap.neighbour(tile, direction)
    if target is None:
        return
    if target.kind is TileKind.EMPTY:
        target.kind = TileKind.ENEMY
        target.image = tile.image
        target.image_number = tile.image_number
        tile.kind = TileKind.EMPTY
        tile.image = None
    elif target.kind is TileKind.PLAYER:
        raise GameEnded("caught")


def patrol_enemies(game: Game, rng: RandomSource) -> None:
    """Move each enemy one tile in a random direction, in row-major order.

    An enemy that steps onto the player ends the game. The scan sees the
    grid as it changes, so an enemy that moved right or down may move again.
    """
    for tile in game.tilemap:
        if tile.kind is TileKind.ENEMY:
            direction = _PATROL_DIRECTIONS[rng.randrange(len(_PATROL_DIRECTIONS))]
            _move_enemy(game, tile, direction)


class FrameCounter:
    """Drives the per-iteration updates of the game loop."""

    def __init__(self, bonus: bool = False, rng: RandomSource | None = None) -> None:
        self.bonus = bonus
        self.rng = rng if rng is not None else random.Random()
        self.frames = 0
        self.enemy_frames = 0

    def tick(self, game: Game) -> None:
        """Run one loop iteration's worth of state changes."""
        if game.collectibles == 0:
            render_exit(game)
        if self.bonus and self.enemy_frames > ENEMY_FRAMES:
            patrol_enemies(game, self.rng)
            self.enemy_frames = 0
        if self.frames > FRAME_RATE:
            animate(game)
            game.key_pressed = False
            self.frames = 0
        self.frames += 1
        if self.bonus:
            self.enemy_frames += 1