from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Dict, Iterable, List, Optional

from .board import Board
from .errors import FlowError
from .keys import Action, resolve_key
from .level import LevelFormatError, build_board, load_level
from .moves import Command, Direction
from .render import ANSI_CODES, color_style, glyph, render, status_line
from .tiles import Color

WON = "won"
QUIT = "quit"


def apply_action(board: Board, action: Action) -> Optional[str]:
    """Applies one action; a failed move only drops drag mode."""
    if action is Command.QUIT:
        return QUIT
    if action is Command.GRAB:
        board.grab()
    elif isinstance(action, Direction):
        try:
            board.move(action)
        except FlowError:
            board.release()
    return WON if board.is_solved() else None


def play(board: Board, actions: Iterable[Optional[Action]], draw: Callable[[Board], None] = lambda b: None) -> str:
    """Runs the game loop over a stream of actions until a win or quit.

    Unmapped keys arrive as None and are ignored. Running out of input counts
    as quitting.
    """
    draw(board)
    for action in actions:
        if action is None:
            continue
        outcome = apply_action(board, action)
        draw(board)
        if outcome is not None:
            return outcome
    return QUIT


def _init_colors(curses) -> Dict[Color, int]:
    """Registers one color pair per palette entry; returns the extra attributes per color."""
    attrs: Dict[Color, int] = {}
    if not curses.has_colors():
        return attrs
    curses.start_color()
    curses.use_default_colors()
    for i, color in enumerate(ANSI_CODES, start=1):
        fg, bold = color_style(color, curses.COLORS)
        curses.init_pair(i, fg, -1)
        attrs[color] = curses.color_pair(i) | (curses.A_BOLD if bold else 0)
    return attrs


def draw_board(stdscr, b: Board, attrs: Dict[Color, int]) -> None:
    """Draws the framed board and status line, or a notice if the window is too small."""
    stdscr.erase()
    rows, cols = stdscr.getmaxyx()
    status = status_line(b)
    # The bottom-right cell cannot be written, hence the strict comparisons
    if b.height + 3 >= rows or max(b.width + 2, len(status)) >= cols:
        notice = f"Enlarge the terminal to {b.width + 3}x{b.height + 4}"
        if rows > 0 and cols > 1:
            stdscr.addnstr(0, 0, notice, cols - 1)
        stdscr.refresh()
        return
    stdscr.addstr(0, 0, "+" + "-" * b.width + "+")
    for r, row in enumerate(b.grid.rows()):
        stdscr.addstr(r + 1, 0, "|")
        for c, tile in enumerate(row):
            ch = "O" if b.cursor == (r, c) else glyph(tile)
            attr = attrs.get(tile.color, 0) if tile.color is not None else 0
            stdscr.addstr(r + 1, c + 1, ch, attr)
        stdscr.addstr(r + 1, b.width + 1, "|")
    stdscr.addstr(b.height + 1, 0, "+" + "-" * b.width + "+")
    stdscr.addstr(b.height + 2, 0, status)
    stdscr.refresh()


def _run_curses(board: Board, use_color: bool) -> str:
    import curses

    def main(stdscr) -> str:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        stdscr.keypad(True)
        attrs = _init_colors(curses) if use_color else {}

        def keys():
            while True:
                ch = stdscr.getch()
                if ch == curses.KEY_RESIZE:
                    draw_board(stdscr, board, attrs)
                    continue
                yield resolve_key(curses.keyname(ch).decode('ascii', 'replace'))

        return play(board, keys(), lambda b: draw_board(stdscr, b, attrs))

    return curses.wrapper(main)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Flowpaint: connect same-colored sources by painting paths')
    parser.add_argument('level', help='Path to a level file')
    parser.add_argument('--plain', action='store_true', help='Render without colors')
    args = parser.parse_args(argv)

    use_color = not args.plain and not os.getenv('FLOW_NO_COLOR')

    try:
        level = load_level(args.level)
    except OSError as e:
        print(f"[level] failed to open level file {args.level}: {e}", file=sys.stderr)
        return 1
    except LevelFormatError as e:
        print(f"[level] invalid level: {e}", file=sys.stderr)
        return 1

    try:
        board = build_board(level)
    except FlowError as e:
        print(f"[level] cannot build board: {e}", file=sys.stderr)
        return 1

    outcome = _run_curses(board, use_color)
    if outcome == WON:
        print(render(board, color=use_color))
        print("=== VICTORY ===")
    return 0


if __name__ == '__main__':
    sys.exit(main())
