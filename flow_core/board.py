from __future__ import annotations

from typing import Optional, Sequence

from .errors import EmptyTile, InvalidCoords, NoMoreColors, TileNotEmpty
from .grid import Coord, Grid
from .moves import Direction
from .tiles import Color, Tile


class Board:
    """The puzzle state machine: one grid, one cursor, and the color allocator.

    The cursor starts at (0, 0) and is not grabbed. While grabbed, every move
    paints the entered cell with the color of the cell just left, following
    the rules in `paint`.
    """

    def __init__(self, width: int, height: int) -> None:
        self.grid = Grid(width, height)
        self.cursor: Coord = (0, 0)
        self.grabbed = False
        # None once the palette is exhausted
        self.next_color: Optional[Color] = Color.first()

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Tile]],
        cursor: Coord = (0, 0),
        grabbed: bool = False,
        next_color: Optional[Color] = Color.RED,
    ) -> 'Board':
        """Rebuilds a board from a snapshot, e.g. one decoded from JSON."""
        if not rows or not rows[0]:
            raise InvalidCoords("Board snapshot has no cells")
        width = len(rows[0])
        board = cls(width, len(rows))
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidCoords(f"Row {r} has {len(row)} cells, expected {width}")
            for c, tile in enumerate(row):
                board.grid._write(r, c, tile)
        board.grid.check(*cursor)
        board.cursor = (int(cursor[0]), int(cursor[1]))
        board.grabbed = bool(grabbed)
        board.next_color = next_color
        return board

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def tile_at(self, r: int, c: int) -> Tile:
        return self.grid.read(r, c)

    def current(self) -> Tile:
        return self.grid.read(*self.cursor)

    # ---------- Level construction ----------

    def place_source(self, r1: int, c1: int, r2: int, c2: int) -> Color:
        """Places a source pair in the next palette color and returns that color."""
        color = self.next_color
        if color is None:
            raise NoMoreColors()
        self.grid.place_source(r1, c1, r2, c2, color)
        try:
            self.next_color = color.next()
        except NoMoreColors:
            self.next_color = None
        return color

    def place_wall(self, r: int, c: int) -> None:
        self.grid.place_wall(r, c)

    def clear_color(self, color: Color) -> int:
        return self.grid.clear_color(color)

    # ---------- Cursor & drag ----------

    def grab(self) -> None:
        """Toggles drag mode; a no-op on empty and wall tiles."""
        tile = self.current()
        if tile.is_empty() or tile.is_wall():
            return
        self.grabbed = not self.grabbed

    def release(self) -> None:
        """Drops drag mode unconditionally (host recovery after a failed move)."""
        self.grabbed = False

    def move(self, direction: Direction) -> None:
        r, c = self.cursor
        dr, dc = direction.delta
        nr, nc = r + dr, c + dc
        if not self.grid.in_bounds(nr, nc):
            return
        if self.grabbed and self.grid.read(nr, nc).is_wall():
            return

        self.cursor = (nr, nc)
        if self.grabbed:
            color = self.grid.read(r, c).color
            if color is None:
                raise EmptyTile()
            self.paint(color)

    def paint(self, color: Color) -> None:
        """Applies `color` to the tile under the cursor.

        Entering a source of the same color or the same color's own flow ends
        the drag; the latter also retracts that flow. Entering another color's
        flow retracts it and paints over.
        """
        r, c = self.cursor
        tile = self.grid.read(r, c)
        if tile.is_source() and tile.color == color:
            self.grabbed = False
            return
        if tile.is_flow() and tile.color == color:
            self.grid.clear_color(color)
            self.grabbed = False
            return
        other = tile.color if tile.is_flow() else None
        if other is not None:
            self.grid.clear_color(other)
        elif not tile.is_empty():
            raise TileNotEmpty()
        self.grid._write(r, c, Tile.flow(color))

    # ---------- Win check ----------

    def connected(self, r: int, c: int) -> bool:
        """True if any in-bounds orthogonal neighbor shares this tile's color."""
        color = self.grid.read(r, c).color
        if color is None:
            raise EmptyTile()
        return any(self.grid.read(nr, nc).color == color for nr, nc in self.grid.neighbors(r, c))

    def is_solved(self) -> bool:
        for r, c in self.grid.coords():
            if self.grid.read(r, c).is_source() and not self.connected(r, c):
                return False
        return True
