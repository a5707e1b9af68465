from __future__ import annotations
from dataclasses import dataclass


@dataclass(slots=True)
class Move:
    column: int
    score: int = 0  # filled in by the strategist while ranking root moves
