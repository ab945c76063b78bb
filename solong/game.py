"""Game state: the tile map, the player's moves and the step counter."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from solong.mapfile import MapInfo
from solong.tilemap import Tile, TileMap
from solong.tiles import Direction, Key, TileKind, direction_for_key


class ImageName(str, Enum):
    """The sprites the game draws, named after their asset files."""

    DOOR_01 = "door_01"
    DOOR_02 = "door_02"
    ENEMY_01 = "enemy_01"
    ENEMY_02 = "enemy_02"
    ENEMY_03 = "enemy_03"
    ENEMY_04 = "enemy_04"
    PLANT_01 = "plant_01"
    PLANT_02 = "plant_02"
    PLAYER_01 = "player_01"
    PLAYER_02 = "player_02"
    WALL_01 = "wall_01"

    @property
    def filename(self) -> str:
        """The name of the image file within the asset directory."""
        return f"{self.value}.xpm"

    @classmethod
    def required(cls, bonus: bool) -> tuple[ImageName, ...]:
        """The images a game needs, in loading order."""
        doors = (cls.DOOR_01, cls.DOOR_02)
        enemies = (cls.ENEMY_01, cls.ENEMY_02, cls.ENEMY_03, cls.ENEMY_04)
        rest = (
            cls.PLANT_01,
            cls.PLANT_02,
            cls.PLAYER_01,
            cls.PLAYER_02,
            cls.WALL_01,
        )
        return doors + (enemies if bonus else ()) + rest


class GameEnded(Exception):
    """Raised when the game is over.

    `reason` is "quit" when the player pressed escape, "escaped" when the
    player walked through the open exit and "caught" when an enemy was met.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


_WALKABLE = (TileKind.COLLECTIBLE, TileKind.EMPTY)


class Game:
    """The state of one game on a validated map."""

    def __init__(self, info: MapInfo, bonus: bool = False, out: TextIO | None = None) -> None:
        self.info = info
        self.bonus = bonus
        self.out = out
        self.tilemap = TileMap(info.rows)
        self.collectibles = info.collectibles
        self.steps = 0
        self.key_pressed = False
        self.assign_images()

    @property
    def player(self) -> Tile | None:
        """The tile the player stands on."""
        return self.tilemap.find_player()

    def assign_images(self) -> None:
        """Give every tile the first image of its kind."""
        images = {
            TileKind.WALL: ImageName.WALL_01,
            TileKind.EXIT: ImageName.DOOR_01,
            TileKind.COLLECTIBLE: ImageName.PLANT_01,
            TileKind.PLAYER: ImageName.PLAYER_01,
        }
        if self.bonus:
            images[TileKind.ENEMY] = ImageName.ENEMY_01
        for tile in self.tilemap:
            tile.image = images.get(tile.kind)
            tile.image_number = 0

    def key_press(self, keycode: int) -> None:
        """Handle one key press; only one is accepted per animation frame."""
        if self.key_pressed:
            return
        if keycode == Key.ESC:
            raise GameEnded("quit")
        direction = direction_for_key(keycode)
        if direction is not None:
            self.move_player(direction)
        self.key_pressed = True

    def move_player(self, direction: Direction) -> None:
        """Move the player one tile in `direction` if the way is free."""
        tile = self.player
        if tile is None:
            return
        target = self.tilemap.neighbour(tile, direction)
        if target is None:
            return
        if target.kind in _WALKABLE:
            if target.kind is TileKind.COLLECTIBLE:
                self.collectibles -= 1
            target.kind = TileKind.PLAYER
            target.image = tile.image
            target.image_number = tile.image_number
            tile.kind = TileKind.EMPTY
            tile.image = None
            self.player_moved()
        if target.image == ImageName.DOOR_02:
            self.player_moved()
            raise GameEnded("escaped")
        if self.bonus and target.kind is TileKind.ENEMY:
            raise GameEnded("caught")

    def player_moved(self) -> None:
        """Count a step and report the new total."""
        self.steps += 1
        out = self.out if self.out is not None else sys.stdout
        out.write(f"steps: {self.steps}\n")