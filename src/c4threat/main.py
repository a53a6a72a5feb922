from __future__ import annotations

import argparse
import logging

from c4threat.config import DEMO_PLAYER, DEMO_ROWS, LOG_LEVEL
from c4threat.core.solver import Solver, format_completions, format_coord
from c4threat.errors import BoardError
from c4threat.io.parse import parse_board, parse_player
from c4threat.ui.render import render

log = logging.getLogger("c4threat.main")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="c4threat",
        description="Find the cells that complete a Connect-4 line of three for a player.",
    )
    ap.add_argument("--player", type=str, default=None, help="R or Y. Defaults to the demo board's player.")
    ap.add_argument(
        "--rows",
        type=str,
        nargs="*",
        default=None,
        help='Six rows, top to bottom, each like "(x,x,x,R,R,R,x)". If omitted, a built-in demo board is used.',
    )
    ap.add_argument("--show-board", action="store_true", help="Print the board with completing cells marked")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors in --show-board output")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    rows = args.rows if args.rows else list(DEMO_ROWS)
    player_text = args.player if args.player is not None else DEMO_PLAYER

    try:
        player = parse_player(player_text)
        board = parse_board(rows)
    except BoardError as e:
        log.error("Rejected input: %s", e)
        return 2

    found = Solver(board, player).completions()
    result = format_completions(found)

    if args.show_board:
        status = ", ".join(f"{o}: {format_coord(coord)}" for o, coord in found.items()) or "No completing move."
        render(board, f"Player {player} | {status}", highlight=found.values(), color=not args.no_color)

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
