from __future__ import annotations

from typing import Optional, Union

from .moves import Command, Direction

Action = Union[Direction, Command]

KEYMAP = {
    'KEY_UP': Direction.NORTH,
    'w': Direction.NORTH,
    'KEY_DOWN': Direction.SOUTH,
    's': Direction.SOUTH,
    'KEY_RIGHT': Direction.EAST,
    'd': Direction.EAST,
    'KEY_LEFT': Direction.WEST,
    'a': Direction.WEST,
    ' ': Command.GRAB,
    'q': Command.QUIT,
    '^[': Command.QUIT,
    '\x1b': Command.QUIT,
}


def resolve_key(name: str) -> Optional[Action]:
    """Maps a key name (as reported by curses.keyname, or a literal char) to an action."""
    return KEYMAP.get(name)
