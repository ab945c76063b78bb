"""The grid of tiles a game is played on."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from solong.tiles import Direction, TileKind


@dataclass(eq=False)
class Tile:
    """One cell of the map and what is drawn on it."""

    kind: TileKind
    x: int
    y: int
    image: str | None = None
    image_number: int = 0


class TileMap:
    """A rectangular grid of tiles built from map rows."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        if not rows:
            raise ValueError("a tile map needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of a tile map must have the same width")
        self.height = len(rows)
        self.width = width
        self._grid = [
            [Tile(TileKind(char), x, y) for x, char in enumerate(row)]
            for y, row in enumerate(rows)
        ]

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"no tile at ({x}, {y})")
        return self._grid[y][x]

    def neighbour(self, tile: Tile, direction: Direction) -> Tile | None:
        """Return the tile next to `tile` in `direction`, or None at the edge."""
        x, y = tile.x + direction.dx, tile.y + direction.dy
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._grid[y][x]
        return None

    def __iter__(self) -> Iterator[Tile]:
        for row in self._grid:
            yield from row

    def find_player(self) -> Tile | None:
        """Return the last player tile in row-major order, or None."""
        found = None
        for tile in self:
            if tile.kind is TileKind.PLAYER:
                found = tile
        return found

    def __str__(self) -> str:
        return "\n".join("".join(t.kind.value for t in row) for row in self._grid)