# src/c4threat/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
EMPTY = "x"
PLAYERS = ("R", "Y")
MARKS = (EMPTY,) + PLAYERS

# "(m,m,m,m,m,m,m)"
ROW_TEXT_LEN = 2 * COLS + 1

# A diagonal's third point must land on one of these columns
DIAG_THIRD_MIN_COL = 2
DIAG_THIRD_MAX_COL = COLS - 1

LOG_LEVEL = "WARNING"

# Board evaluated when the CLI is run without rows
DEMO_PLAYER = "R"
DEMO_ROWS = (
    "(x,x,x,x,x,x,x)",
    "(x,x,x,x,x,x,x)",
    "(x,x,x,x,x,x,x)",
    "(x,x,Y,x,R,R,x)",
    "(x,R,Y,x,R,R,Y)",
    "(R,R,R,x,R,Y,Y)",
)

# UI toggles
USE_COLOR = True
