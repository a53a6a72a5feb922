from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from c4threat.config import ROWS, COLS
from c4threat.core.solver import ORIENTATIONS, Solver, format_coord
from c4threat.errors import BoardError
from c4threat.io.parse import parse_board, parse_player

from ..io.load_cases import ROW_COLS

log = logging.getLogger("c4threat_analysis.summarize")


@dataclass(frozen=True)
class SummaryConfig:
    top_n: int = 20
    # Drop puzzles that were rejected by the parser
    only_valid: bool = False


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def evaluate_cases(df: pd.DataFrame) -> pd.DataFrame:
    """
    Solve every puzzle row. Output has one row per input row with the
    per-orientation completing cell ("" when none) and the combined result.
    Rejected boards are kept with valid=False and an empty result.
    """
    _require_cols(df, ["name", "player", *ROW_COLS])

    records = []
    for rec in df.to_dict("records"):
        out = {"name": rec["name"], "player": rec["player"], "valid": True}
        found = {}
        try:
            player = parse_player(rec["player"])
            board = parse_board([rec[c] for c in ROW_COLS])
        except BoardError as e:
            log.warning("%s rejected: %s", rec["name"], e)
            out["valid"] = False
        else:
            found = Solver(board, player).completions()

        for o in ORIENTATIONS:
            out[o] = format_coord(found[o]) if o in found else ""
        out["result"] = "".join(out[o] for o in ORIENTATIONS)
        out["n_completions"] = len(found)
        records.append(out)

    columns = ["name", "player", "valid", *ORIENTATIONS, "result", "n_completions"]
    out_df = pd.DataFrame.from_records(records, columns=columns)
    out_df["valid"] = out_df["valid"].astype(bool)
    out_df["n_completions"] = out_df["n_completions"].astype(int)
    return out_df


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.only_valid:
        _require_cols(out, ["valid"])
        out = out[out["valid"]].copy()
    return out


def orientation_counts(results: pd.DataFrame) -> pd.Series:
    """How many puzzles have a completing move in each orientation."""
    _require_cols(results, list(ORIENTATIONS))
    counts = {o: int((results[o] != "").sum()) for o in ORIENTATIONS}
    return pd.Series(counts, name="puzzles")


def cell_counts(results: pd.DataFrame) -> pd.DataFrame:
    """ROWS x COLS grid (1-indexed labels) counting how often each cell was reported."""
    _require_cols(results, list(ORIENTATIONS))
    grid = pd.DataFrame(0, index=range(1, ROWS + 1), columns=range(1, COLS + 1))
    for o in ORIENTATIONS:
        for token in results[o]:
            if not token:
                continue
            r, c = (int(v) for v in token.strip("()").split("x"))
            grid.loc[r, c] += 1
    return grid


def top_table(results: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = filter_rows(results, cfg)
    out = out.sort_values("n_completions", ascending=False, kind="stable")
    out = out.head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out
