from __future__ import annotations
from typing import List, Optional

from c4threat.core.board import Board
from c4threat.types import Coord, Orientation, Run


def _beyond(end: Coord, inner: Coord) -> Coord:
    """The cell one step past `end`, moving away from `inner`."""
    dr = end[0] - inner[0]
    dc = end[1] - inner[1]
    return (end[0] + dr, end[1] + dc)


def extension_candidates(run: Run, orientation: Orientation) -> List[Coord]:
    """
    Cells that would turn `run` into four, front end first.
    May include off-board coordinates; callers filter with Board.is_free.
    """
    front, mid, back = run

    if orientation == "horizontal":
        row = front[0]
        return [(row, front[1] - 1), (row, back[1] + 1)]

    if orientation == "vertical":
        col = front[1]
        return [(front[0] - 1, col), (back[0] + 1, col)]

    if orientation == "diagonal":
        return [_beyond(front, mid), _beyond(back, mid)]

    raise ValueError(f"Unknown orientation: {orientation!r}")


def find_open_extension(board: Board, run: Run, orientation: Orientation) -> Optional[Coord]:
    for r, c in extension_candidates(run, orientation):
        if board.is_free(r, c):
            return (r, c)
    return None
