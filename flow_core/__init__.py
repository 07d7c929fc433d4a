"""
Flowpaint core Python package.

This package contains the board state machine for the path-painting puzzle
plus the thin host helpers built around it.
Modules:
- tiles.py: Color, TileKind, Tile
- errors.py: FlowError and its four kinds
- grid.py: Grid
- board.py: Board (cursor, drag controller, win check)
- moves.py: Direction, Command
- level.py, render.py, keys.py, cli.py: host-side helpers
"""
