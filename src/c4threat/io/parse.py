from __future__ import annotations
import logging
from typing import Optional, Sequence, Tuple

from c4threat.config import ROWS, MARKS, PLAYERS, ROW_TEXT_LEN
from c4threat.core.board import Board
from c4threat.core.solver import evaluate
from c4threat.errors import BoardError, BoardFormatError, PlayerError
from c4threat.types import Mark, Player

log = logging.getLogger("c4threat.parse")


def parse_row(text: str) -> Tuple[Mark, ...]:
    """
    Parse one "(m,m,m,m,m,m,m)" row. Marks sit at the odd indices,
    commas at the even ones in between.
    """
    s = text.strip()
    if len(s) != ROW_TEXT_LEN:
        raise BoardFormatError(f"Row must be {ROW_TEXT_LEN} characters, got {len(s)}: {text!r}")
    if s[0] != "(" or s[-1] != ")":
        raise BoardFormatError(f"Row must be wrapped in parentheses: {text!r}")
    if any(s[i] != "," for i in range(2, ROW_TEXT_LEN - 1, 2)):
        raise BoardFormatError(f"Row marks must be comma separated: {text!r}")

    marks = tuple(s[i] for i in range(1, ROW_TEXT_LEN - 1, 2))
    bad = [m for m in marks if m not in MARKS]
    if bad:
        raise BoardFormatError(f"Illegal mark(s) {bad} in row {text!r}")
    return marks  # type: ignore[return-value]


def parse_player(text: str) -> Player:
    p = text.strip()
    if p not in PLAYERS:
        raise PlayerError(f"Player must be one of {', '.join(PLAYERS)}, got {text!r}")
    return p  # type: ignore[return-value]


def parse_board(rows: Sequence[str]) -> Board:
    if len(rows) != ROWS:
        raise BoardFormatError(f"Expected {ROWS} rows, got {len(rows)}.")
    return Board.from_rows(parse_row(r) for r in rows)


def parse_args(args: Sequence[str]) -> Tuple[Player, Board]:
    """`args` is [player, row1, ..., row6]."""
    if len(args) != ROWS + 1:
        raise BoardFormatError(f"Expected a player and {ROWS} rows, got {len(args)} values.")
    return parse_player(args[0]), parse_board(args[1:])


def game_challenge(args: Sequence[str], logger: Optional[logging.Logger] = None) -> str:
    lg = logger or log
    try:
        player, board = parse_args(args)
    except BoardError as e:
        lg.warning("Rejected input: %s", e)
        return ""
    return evaluate(board, player, logger=logger)
