# src/c4threat/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from c4threat.config import ROWS, COLS, EMPTY, MARKS
from c4threat.types import Mark


@dataclass(frozen=True, slots=True)
class Board:
    """
    Read-only 6x7 grid of marks, addressed with 1-indexed (row, col).
    Row 1 is the top of the board.
    """
    grid: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)
    rows: int = field(default=ROWS, init=False)
    cols: int = field(default=COLS, init=False)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Board":
        return cls(grid=tuple(tuple(row) for row in rows))

    @classmethod
    def empty(cls) -> "Board":
        return cls.from_rows([[EMPTY] * COLS for _ in range(ROWS)])

    def in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def cell_at(self, row: int, col: int) -> Optional[Mark]:
        # Edge probes one step off the grid are routine; they are a miss, not an error.
        if not self.in_bounds(row, col):
            return None
        try:
            return self.grid[row - 1][col - 1]  # type: ignore[return-value]
        except IndexError:
            return None

    def is_free(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) == EMPTY

    def is_valid(self) -> bool:
        if len(self.grid) != ROWS:
            return False
        for row in self.grid:
            if len(row) != COLS:
                return False
            if any(m not in MARKS for m in row):
                return False
        return True

    def rows_text(self) -> List[str]:
        return ["(" + ",".join(row) + ")" for row in self.grid]
