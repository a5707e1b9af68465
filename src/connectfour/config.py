# src/connectfour/config.py

from __future__ import annotations
from dataclasses import dataclass

WIDTH = 7
HEIGHT = 6
CONNECT_N = 4

# Search defaults
LOOKAHEAD_DEPTH = 7
WIN_SCORE = 1000

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_CEILING_SEC = 2.0  # upper bound for the visible pause after a search


@dataclass(frozen=True, slots=True)
class RuleSet:
    """
    Board geometry and search depth for one game.

    The defaults are the standard 7x6 connect-four. Smaller boards are handy
    in tests because the search tree shrinks with the width.
    """
    width: int = WIDTH
    height: int = HEIGHT
    connect_n: int = CONNECT_N
    depth: int = LOOKAHEAD_DEPTH

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Board needs at least one row and one column.")
        if self.connect_n < 2:
            raise ValueError("connect_n must be at least 2.")
        if self.connect_n > max(self.width, self.height):
            raise ValueError("connect_n does not fit on the board.")
        if self.depth < 1:
            raise ValueError("Look-ahead depth must be at least 1.")

    @property
    def cells(self) -> int:
        return self.width * self.height


DEFAULT_RULES = RuleSet()
