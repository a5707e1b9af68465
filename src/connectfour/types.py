# src/connectfour/types.py

from __future__ import annotations
from enum import IntEnum
from typing import NewType, Tuple


class Chip(IntEnum):
    NONE = 0
    RED = 1
    BLACK = 2


Column = NewType("Column", int)   # column index 0..width-1
Coord = Tuple[int, int]           # (column, row), row 0 is the bottom
