from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .board import Board


class LevelFormatError(ValueError):
    """Raised for level text that cannot be parsed."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)


@dataclass(frozen=True)
class SourceDirective:
    # Level files list x (column) before y (row)
    c1: int
    r1: int
    c2: int
    r2: int


@dataclass(frozen=True)
class WallDirective:
    c: int
    r: int


Directive = Union[SourceDirective, WallDirective]


@dataclass(frozen=True)
class Level:
    width: int
    height: int
    directives: Tuple[Directive, ...] = field(default_factory=tuple)


def _parse_ints(text: str, line_no: int) -> List[int]:
    out: List[int] = []
    for tok in text.split():
        try:
            value = int(tok)
        except ValueError:
            raise LevelFormatError(f"invalid coordinate: {tok!r}", line_no) from None
        if value < 0:
            raise LevelFormatError(f"negative coordinate: {tok!r}", line_no)
        out.append(value)
    return out


def parse_level(text: str) -> Level:
    """Parses a level description.

    The first meaningful line is `WIDTH HEIGHT`; each following line is a
    source pair (`c1 r1 c2 r2`) or a wall (`c r`). Blank lines and lines
    starting with '#' are skipped.
    """
    size: Optional[Tuple[int, int]] = None
    directives: List[Directive] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        nums = _parse_ints(line, line_no)
        if size is None:
            if len(nums) != 2:
                raise LevelFormatError(f"invalid size line: {line!r}", line_no)
            if nums[0] == 0 or nums[1] == 0:
                raise LevelFormatError(f"grid size must be positive: {line!r}", line_no)
            size = (nums[0], nums[1])
        elif len(nums) == 4:
            directives.append(SourceDirective(*nums))
        elif len(nums) == 2:
            directives.append(WallDirective(*nums))
        else:
            raise LevelFormatError(f"invalid coordinate line: {line!r}", line_no)
    if size is None:
        raise LevelFormatError("empty level")
    return Level(width=size[0], height=size[1], directives=tuple(directives))


def load_level(path: str) -> Level:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_level(f.read())


def build_board(level: Level) -> Board:
    """Applies the directives in file order; any placement error propagates."""
    board = Board(level.width, level.height)
    for d in level.directives:
        if isinstance(d, SourceDirective):
            board.place_source(d.r1, d.c1, d.r2, d.c2)
        else:
            board.place_wall(d.r, d.c)
    return board
