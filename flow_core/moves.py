from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, text: str) -> 'Direction':
        """Accepts names case-insensitively plus the n/s/e/w shorthands."""
        key = text.strip().lower()
        for d in cls:
            if key == d.value or key == d.value[0]:
                return d
        raise ValueError(f"Invalid direction: {text!r}")


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


class Command(Enum):
    GRAB = "grab"
    QUIT = "quit"


def random_direction(rng: Optional[random.Random] = None) -> Direction:
    """Uniformly random direction; used to drive fuzz runs of Board.move."""
    rng = rng or random.Random()
    return rng.choice(list(Direction))
