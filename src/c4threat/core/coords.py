from __future__ import annotations
from typing import List

from c4threat.core.board import Board
from c4threat.types import Coord, Player


def collect(board: Board, player: Player) -> List[Coord]:
    """Every cell holding `player`, in row-major order (row 1..6, col 1..7)."""
    return [
        (r, c)
        for r in range(1, board.rows + 1)
        for c in range(1, board.cols + 1)
        if board.cell_at(r, c) == player
    ]
