from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import NoMoreColors


class Color(Enum):
    """The fixed palette, declared in allocation order."""
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"
    PINK = "pink"
    YELLOW = "yellow"
    GREEN = "green"
    PURPLE = "purple"
    GRAY = "gray"

    def next(self) -> 'Color':
        """Returns the color allocated after this one."""
        order = list(Color)
        i = order.index(self)
        if i + 1 >= len(order):
            raise NoMoreColors()
        return order[i + 1]

    @classmethod
    def first(cls) -> 'Color':
        return cls.RED


class TileKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    SOURCE = "source"
    FLOW = "flow"


@dataclass(frozen=True)
class Tile:
    """A single grid cell: a kind tag plus the color payload for sources and flows."""
    kind: TileKind = TileKind.EMPTY
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        colored = self.kind in (TileKind.SOURCE, TileKind.FLOW)
        if colored and self.color is None:
            raise ValueError(f"{self.kind.value} tile needs a color")
        if not colored and self.color is not None:
            raise ValueError(f"{self.kind.value} tile cannot carry a color")

    @staticmethod
    def empty() -> 'Tile':
        return EMPTY

    @staticmethod
    def wall() -> 'Tile':
        return WALL

    @staticmethod
    def source(color: Color) -> 'Tile':
        return Tile(TileKind.SOURCE, color)

    @staticmethod
    def flow(color: Color) -> 'Tile':
        return Tile(TileKind.FLOW, color)

    def is_empty(self) -> bool:
        return self.kind is TileKind.EMPTY

    def is_wall(self) -> bool:
        return self.kind is TileKind.WALL

    def is_source(self) -> bool:
        return self.kind is TileKind.SOURCE

    def is_flow(self) -> bool:
        return self.kind is TileKind.FLOW

    def is_colored(self) -> bool:
        return self.color is not None


EMPTY = Tile(TileKind.EMPTY)
WALL = Tile(TileKind.WALL)
