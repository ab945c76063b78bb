"""Reading and validating map files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from solong.tiles import TileKind

MAP_EXTENSION = ".ber"

_BASE_COMPONENTS = frozenset(
    kind.value
    for kind in (
        TileKind.EMPTY,
        TileKind.WALL,
        TileKind.COLLECTIBLE,
        TileKind.EXIT,
        TileKind.PLAYER,
    )
)
_BONUS_COMPONENTS = _BASE_COMPONENTS | {TileKind.ENEMY.value}


class MapError(Exception):
    """Raised when a map argument or map file is not acceptable."""


@dataclass(frozen=True)
class MapInfo:
    """A validated map: its rows and the counts found in it."""

    rows: tuple[str, ...]
    height: int
    width: int
    collectibles: int
    exits: int
    players: int


def check_map_path(path: str) -> str:
    """Check that `path` names a map file with the right extension."""
    path = os.fspath(path)
    if not path:
        raise MapError("NULL map argument")
    if len(path) <= len(MAP_EXTENSION):
        raise MapError("Map argument invalid")
    if not path.endswith(MAP_EXTENSION):
        raise MapError("Wrong map extension")
    if path[-len(MAP_EXTENSION) - 1] == "/":
        raise MapError("No map name")
    return path


def _keep_first_player(text: str) -> str:
    """Turn every starting position after the first into empty space."""
    head, sep, tail = text.partition(TileKind.PLAYER.value)
    if not sep:
        return text
    return head + sep + tail.replace(TileKind.PLAYER.value, TileKind.EMPTY.value)


def _split_rows(text: str) -> list[str]:
    body = text.strip("\n")
    if "\n\n" in body:
        raise MapError("Line Break inside of map")
    rows = [line for line in body.split("\n") if line]
    if not rows:
        raise MapError("Map is empty")
    return rows


def _check_rectangular(rows: list[str]) -> None:
    width = len(rows[0])
    if any(len(row) != width for row in rows) or len(rows) <= 1:
        raise MapError("Map is not rectangular")


def _check_closed(rows: list[str]) -> None:
    wall = TileKind.WALL.value
    if any(char != wall for char in rows[0] + rows[-1]):
        raise MapError("Map is not closed")
    if any(row[0] != wall or row[-1] != wall for row in rows[1:-1]):
        raise MapError("Map is not closed")


def _count_components(text: str, allow_enemies: bool) -> tuple[int, int, int]:
    valid = _BONUS_COMPONENTS if allow_enemies else _BASE_COMPONENTS
    for char in text:
        if char != "\n" and char not in valid:
            raise MapError("Invalid character")
    collectibles = text.count(TileKind.COLLECTIBLE.value)
    exits = text.count(TileKind.EXIT.value)
    players = text.count(TileKind.PLAYER.value)
    if collectibles < 1:
        raise MapError("Wrong number of collectibles")
    if exits < 1:
        raise MapError("Wrong number of map exits")
    if players < 1:
        raise MapError("Wrong number of starting positions")
    return collectibles, exits, players


def parse_map(text: str, allow_enemies: bool = False) -> MapInfo:
    """Validate the contents of a map file and describe it.

    Only the first starting position is kept; later ones become empty space.
    Enemy tiles are accepted only when `allow_enemies` is true.
    """
    if not text:
        raise MapError("Map is empty")
    text = _keep_first_player(text)
    rows = _split_rows(text)
    _check_rectangular(rows)
    _check_closed(rows)
    collectibles, exits, players = _count_components(text, allow_enemies)
    return MapInfo(
        rows=tuple(rows),
        height=len(rows),
        width=len(rows[0]),
        collectibles=collectibles,
        exits=exits,
        players=players,
    )


def load_map(path: str | os.PathLike[str], allow_enemies: bool = False) -> MapInfo:
    """Read and validate the map file at `path`."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Map file not found or has an error") from exc
    return parse_map(data.decode("latin-1"), allow_enemies)


def debug_report(info: MapInfo) -> str:
    """Return a human-readable dump of the map and its counts."""
    lines = "".join(f"{row}\n" for row in info.rows)
    return (
        f"\n{lines}"
        f"\nHeight: {info.height}"
        f"\nWidth: {info.width}"
        f"\nCollectibles: {info.collectibles}"
        f"\nStarting positions: {info.players}"
        f"\nExits: {info.exits}\n"
    )