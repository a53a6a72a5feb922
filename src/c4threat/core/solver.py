from __future__ import annotations
import logging
from typing import Dict, List, Optional

from c4threat.config import PLAYERS
from c4threat.core.board import Board
from c4threat.core.coords import collect
from c4threat.core.lines import scan
from c4threat.core.slots import find_open_extension
from c4threat.types import Coord, Orientation, Player

log = logging.getLogger("c4threat.solver")

ORIENTATIONS: tuple[Orientation, ...] = ("horizontal", "vertical", "diagonal")


def format_coord(coord: Coord) -> str:
    r, c = coord
    return f"({r}x{c})"


def format_completions(found: Dict[Orientation, Coord]) -> str:
    return "".join(format_coord(found[o]) for o in ORIENTATIONS if o in found)


class Solver:
    """
    Finds, per orientation, the first run of three whose end can be extended
    to four by a single disc.
    """

    def __init__(self, board: Board, player: Player, logger: Optional[logging.Logger] = None) -> None:
        self.board = board
        self.player = player
        self.log = logger or log
        self._coords: Optional[List[Coord]] = None

    @property
    def coords(self) -> List[Coord]:
        if self._coords is None:
            self._coords = collect(self.board, self.player)
            self.log.debug("player %s occupies %d cells: %s", self.player, len(self._coords), self._coords)
        return self._coords

    def find(self, orientation: Orientation) -> Optional[Coord]:
        runs = scan(orientation, self.board, self.coords)
        self.log.debug("%s runs: %s", orientation, runs)
        for run in runs:
            slot = find_open_extension(self.board, run, orientation)
            if slot is not None:
                self.log.debug("%s run %s completes at %s", orientation, run, slot)
                return slot
        return None

    def completions(self) -> Dict[Orientation, Coord]:
        out: Dict[Orientation, Coord] = {}
        for orientation in ORIENTATIONS:
            slot = self.find(orientation)
            if slot is not None:
                out[orientation] = slot
        return out

    def result(self) -> str:
        return format_completions(self.completions())


def evaluate(board: Board, player: str, logger: Optional[logging.Logger] = None) -> str:
    """
    "(RxC)" tokens for the horizontal, vertical and diagonal completing moves
    of `player`, concatenated in that order. Empty string when there are none
    or when the board/player is not valid.
    """
    lg = logger or log
    if player not in PLAYERS:
        lg.warning("refusing to evaluate: unknown player %r", player)
        return ""
    if not board.is_valid():
        lg.warning("refusing to evaluate: invalid board")
        return ""

    res = Solver(board, player, logger=lg).result()  # type: ignore[arg-type]
    lg.debug("result for %s: %r", player, res)
    return res
