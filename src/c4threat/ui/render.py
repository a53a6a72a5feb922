from __future__ import annotations
from typing import Iterable, List, Optional, Set

from c4threat.config import EMPTY, USE_COLOR
from c4threat.core.board import Board
from c4threat.types import Coord
from c4threat.ui.colors import c, BOLD, DIM, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE


def _piece(mark: Optional[str], color: bool) -> str:
    if mark == EMPTY:
        return c("·", FG_GRAY, color)
    if mark == "R":
        return c("R", FG_RED, color)
    if mark == "Y":
        return c("Y", FG_YELLOW, color)
    return "?"


def render_lines(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = USE_COLOR) -> List[str]:
    """
    Text picture of the board, 1-indexed headers on both axes.
    Highlighted empty cells are drawn as "*".
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i) for i in range(1, board.cols + 1)), DIM, color)]
    for r in range(1, board.rows + 1):
        parts = []
        for col in range(1, board.cols + 1):
            if (r, col) in hl:
                parts.append(c(c("*", FG_GREEN, color), REVERSE, color))
            else:
                parts.append(_piece(board.cell_at(r, col), color))
        lines.append(c(f"{r} ", DIM, color) + " ".join(parts))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None, color: bool = USE_COLOR) -> None:
    print(c("CONNECT 4", BOLD, color))
    if status:
        print(status)
    for line in render_lines(board, highlight, color):
        print(line)
