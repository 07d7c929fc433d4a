from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .errors import InvalidCoords, TileNotEmpty
from .tiles import Color, Tile, EMPTY, WALL

Coord = Tuple[int, int]


class Grid:
    """Rectangular array of tiles, stored row-major.

    The shape is fixed at construction. Reads are public; writes go through
    the placement helpers or the underscore primitive used by Board.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidCoords(f"Invalid grid size: {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[Tile] = [EMPTY] * (width * height)

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.width + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def check(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise InvalidCoords(f"Invalid coordinates: ({r}, {c})")

    def read(self, r: int, c: int) -> Tile:
        self.check(r, c)
        return self._cells[self.index(r, c)]

    def _write(self, r: int, c: int, tile: Tile) -> None:
        self.check(r, c)
        self._cells[self.index(r, c)] = tile

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the grid."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def rows(self) -> Iterator[Tuple[Tile, ...]]:
        for r in range(self.height):
            start = self.index(r, 0)
            yield tuple(self._cells[start:start + self.width])

    def neighbors(self, r: int, c: int) -> List[Coord]:
        """Orthogonal neighbors that lie inside the grid (no wrap-around)."""
        out: List[Coord] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                out.append((nr, nc))
        return out

    def place_source(self, r1: int, c1: int, r2: int, c2: int, color: Color) -> None:
        """Writes a pair of sources; nothing is written unless both cells are free."""
        self.check(r1, c1)
        self.check(r2, c2)
        if (r1, c1) == (r2, c2):
            raise TileNotEmpty(f"Source endpoints overlap at ({r1}, {c1})")
        for r, c in ((r1, c1), (r2, c2)):
            if not self.read(r, c).is_empty():
                raise TileNotEmpty(f"Tile is already taken: ({r}, {c})")
        self._write(r1, c1, Tile.source(color))
        self._write(r2, c2, Tile.source(color))

    def place_wall(self, r: int, c: int) -> None:
        self.check(r, c)
        if not self.read(r, c).is_empty():
            raise TileNotEmpty(f"Tile is already taken: ({r}, {c})")
        self._write(r, c, WALL)

    def clear_color(self, color: Color) -> int:
        """Resets every flow tile of `color` to empty; sources stay. Returns the count cleared."""
        cleared = 0
        for i, tile in enumerate(self._cells):
            if tile.is_flow() and tile.color == color:
                self._cells[i] = EMPTY
                cleared += 1
        return cleared
