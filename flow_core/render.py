from __future__ import annotations

from typing import List

from .board import Board
from .tiles import Color, Tile

# 256-color foreground codes
ANSI_CODES = {
    Color.RED: 1,
    Color.YELLOW: 3,
    Color.ORANGE: 173,
    Color.GREEN: 2,
    Color.BLUE: 4,
    Color.PURPLE: 5,
    Color.PINK: 13,
    Color.GRAY: 243,
}

# (foreground, bold) for terminals limited to the 8 basic colors; each pair is unique
BASIC_STYLES = {
    Color.RED: (1, False),
    Color.ORANGE: (1, True),
    Color.BLUE: (4, False),
    Color.PINK: (5, True),
    Color.YELLOW: (3, False),
    Color.GREEN: (2, False),
    Color.PURPLE: (5, False),
    Color.GRAY: (7, False),
}

RESET = "\033[0m"


def color_style(color: Color, n_colors: int):
    """Foreground code and bold flag for `color` on a terminal with `n_colors` colors."""
    if n_colors >= 256:
        return ANSI_CODES[color], False
    return BASIC_STYLES[color]


def colorize(color: Color, ch: str) -> str:
    return f"\033[38;5;{ANSI_CODES[color]}m{ch}{RESET}"


def glyph(tile: Tile) -> str:
    if tile.is_source():
        return "%"
    if tile.is_flow():
        return "*"
    if tile.is_wall():
        return "X"
    return "#"


def render(board: Board, color: bool = True) -> str:
    """Draws the board inside a frame; the cursor cell is drawn as 'O'."""
    lines: List[str] = ["+" + "-" * board.width + "+"]
    for r, row in enumerate(board.grid.rows()):
        cells: List[str] = []
        for c, tile in enumerate(row):
            ch = "O" if board.cursor == (r, c) else glyph(tile)
            if color and tile.color is not None:
                ch = colorize(tile.color, ch)
            cells.append(ch)
        lines.append("|" + "".join(cells) + "|")
    lines.append("+" + "-" * board.width + "+")
    return "\n".join(lines)


def status_line(board: Board) -> str:
    r, c = board.cursor
    mode = "dragging" if board.grabbed else "free"
    return f"({r}, {c}) {mode}"
