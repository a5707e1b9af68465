from __future__ import annotations

from typing import Dict, Optional

import pytest

from connectfour.config import DEFAULT_RULES, RuleSet
from connectfour.core.board import Board
from connectfour.core.player import BLACK, RED, Player
from connectfour.game.state import GameState
from connectfour.types import Chip

_CHIPS = {"R": Chip.RED, "B": Chip.BLACK}


def build_board(columns: Dict[int, str], rules: RuleSet = DEFAULT_RULES) -> Board:
    """Columns given bottom-up as strings of 'R' / 'B'."""
    board = Board(rules)
    for column, stack in columns.items():
        for row, ch in enumerate(stack):
            board.set_chip(_CHIPS[ch], column, row)
    return board


@pytest.fixture
def make_state():
    def _make(
        columns: Dict[int, str],
        current: Optional[Player] = None,
        rules: RuleSet = DEFAULT_RULES,
    ) -> GameState:
        board = build_board(columns, rules)
        if current is None:
            reds = board.chip_count(Chip.RED)
            blacks = board.chip_count(Chip.BLACK)
            current = RED if reds == blacks else BLACK
        return GameState(board, current)

    return _make


@pytest.fixture
def make_board():
    return build_board


@pytest.fixture
def full_columns() -> Dict[int, str]:
    # every column full, pattern does not matter for legality
    return {c: ("RRRBBB" if c % 2 == 0 else "BBBRRR") for c in range(DEFAULT_RULES.width)}
