from __future__ import annotations
from typing import Callable, List, Optional, Sequence

from c4threat.config import DIAG_THIRD_MIN_COL, DIAG_THIRD_MAX_COL
from c4threat.core.board import Board
from c4threat.types import Coord, Orientation, Run

# Diagonal neighbour offsets, in the order they are tried
DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _consecutive_triples(
    coords: Sequence[Coord],
    line: Callable[[Coord], int],
    pos: Callable[[Coord], int],
) -> List[Run]:
    """
    Walk `coords` in order and pick out triples that share a line and have
    strictly consecutive positions along it. A matched triple is consumed whole.
    """
    runs: List[Run] = []
    i = 0
    while i + 2 < len(coords):
        a, b, c = coords[i], coords[i + 1], coords[i + 2]
        if (
            line(a) == line(b) == line(c)
            and pos(b) == pos(a) + 1
            and pos(c) == pos(a) + 2
        ):
            runs.append((a, b, c))
            i += 3
        else:
            i += 1
    return runs


def horizontal_runs(coords: Sequence[Coord]) -> List[Run]:
    ordered = sorted(coords)
    return _consecutive_triples(ordered, line=lambda p: p[0], pos=lambda p: p[1])


def vertical_runs(coords: Sequence[Coord]) -> List[Run]:
    # Grouped by column only; sorted() is stable so rows keep their incoming order.
    ordered = sorted(coords, key=lambda p: p[1])
    return _consecutive_triples(ordered, line=lambda p: p[1], pos=lambda p: p[0])


def diagonal_mids(board: Board, start: Coord) -> List[Coord]:
    """Diagonal neighbours of `start` that carry the same mark (0 to 4 of them)."""
    mark = board.cell_at(*start)
    if mark is None:
        return []
    out: List[Coord] = []
    for dr, dc in DIAGONAL_STEPS:
        nb = (start[0] + dr, start[1] + dc)
        if board.cell_at(*nb) == mark:
            out.append(nb)
    return out


def diagonal_third(board: Board, start: Coord, mid: Coord) -> Optional[Coord]:
    """
    Continue the start->mid direction by one more step. The third point only
    counts if it carries the same mark and sits on an interior column.
    """
    dr = _sign(mid[0] - start[0])
    dc = _sign(mid[1] - start[1])
    if dr == 0 or dc == 0:
        return None
    third = (mid[0] + dr, mid[1] + dc)
    if not (DIAG_THIRD_MIN_COL <= third[1] <= DIAG_THIRD_MAX_COL):
        return None
    mark = board.cell_at(*start)
    if mark is None or board.cell_at(*third) != mark:
        return None
    return third


def diagonal_runs(board: Board, coords: Sequence[Coord]) -> List[Run]:
    # Every start is tried, so a line shows up once from each end that qualifies.
    runs: List[Run] = []
    for start in coords:
        for mid in diagonal_mids(board, start):
            third = diagonal_third(board, start, mid)
            if third is not None:
                runs.append((start, mid, third))
    return runs


def scan(orientation: Orientation, board: Board, coords: Sequence[Coord]) -> List[Run]:
    if orientation == "horizontal":
        return horizontal_runs(coords)
    if orientation == "vertical":
        return vertical_runs(coords)
    if orientation == "diagonal":
        return diagonal_runs(board, coords)
    raise ValueError(f"Unknown orientation: {orientation!r}")
