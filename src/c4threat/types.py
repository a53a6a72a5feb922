# src/c4threat/types.py

from __future__ import annotations
from typing import Literal, Tuple

Player = Literal["R", "Y"]
Mark = Literal["x", "R", "Y"]
Orientation = Literal["horizontal", "vertical", "diagonal"]

Coord = Tuple[int, int]          # (row, col), 1-indexed
Run = Tuple[Coord, Coord, Coord]
