from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from c4threat.config import ROWS


ROW_COLS = [f"row{i}" for i in range(1, ROWS + 1)]
DEFAULT_EXPECTED_COLS = ["player", *ROW_COLS]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def load_cases(spec: LoadSpec) -> pd.DataFrame:
    """
    One puzzle per CSV line: player,row1..row6 (rows quoted, since they hold commas).
    An optional "name" column labels each puzzle; otherwise the line number is used.
    """
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    # Everything is text; "x" and friends must never be turned into NaN
    df = pd.read_csv(spec.csv_path, dtype=str, keep_default_na=False)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.expected_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    if "name" not in df.columns:
        df.insert(0, "name", [f"case{i + 1}" for i in range(len(df))])

    for c in spec.expected_cols:
        df[c] = df[c].astype(str).str.strip()

    return df.reset_index(drop=True)


def load_latest_from_dir(cases_dir: Path, pattern: str = "cases_*.csv") -> Path:
    if not cases_dir.exists():
        raise FileNotFoundError(f"Cases directory not found: {cases_dir}")

    files = sorted(cases_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {cases_dir}")

    return files[-1]
