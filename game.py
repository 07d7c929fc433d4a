from __future__ import annotations

# Facade module that re-exports Flowpaint core functionality.
# Used by the Flask app and tests; single-responsibility modules live under flow_core/*.

from flow_core.board import Board  # noqa: F401
from flow_core.errors import (  # noqa: F401
    FlowError,
    InvalidCoords,
    EmptyTile,
    NoMoreColors,
    TileNotEmpty,
)
from flow_core.grid import Coord, Grid  # noqa: F401
from flow_core.keys import resolve_key  # noqa: F401
from flow_core.level import (  # noqa: F401
    Level,
    LevelFormatError,
    SourceDirective,
    WallDirective,
    build_board,
    load_level,
    parse_level,
)
from flow_core.moves import Command, Direction, random_direction  # noqa: F401
from flow_core.render import render, status_line  # noqa: F401
from flow_core.tiles import Color, Tile, TileKind  # noqa: F401
from flow_core.cli import apply_action, play, WON, QUIT  # noqa: F401


def main() -> None:
    # CLI driver delegated to flow_core.cli
    import sys
    from flow_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
