# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Tuple

from connectfour.config import DEFAULT_RULES, RuleSet, WIN_SCORE
from connectfour.core.player import Player
from connectfour.types import Chip, Coord

# (dx, dy): vertical, horizontal, diagonal up, diagonal down
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

Line = Tuple[Coord, ...]


@lru_cache(maxsize=None)
def lines_for(rules: RuleSet) -> Tuple[Line, ...]:
    """
    Every run of connect_n cells that fits on the board, found by trying each
    direction from each (column, row) origin. A direction is skipped when the
    last cell of the run would fall off the board.
    """
    n = rules.connect_n
    lines: List[Line] = []
    for column in range(rules.width):
        for row in range(rules.height):
            for dx, dy in DIRECTIONS:
                end_col = column + dx * (n - 1)
                end_row = row + dy * (n - 1)
                if end_col < 0 or end_col >= rules.width:
                    continue
                if end_row < 0 or end_row >= rules.height:
                    continue
                lines.append(tuple((column + i * dx, row + i * dy) for i in range(n)))
    return tuple(lines)


@lru_cache(maxsize=None)
def _line_indices(rules: RuleSet) -> Tuple[Tuple[int, ...], ...]:
    h = rules.height
    return tuple(tuple(r + c * h for (c, r) in line) for line in lines_for(rules))


@dataclass(slots=True)
class Board:
    """
    Flat column-major grid: cell (column, row) lives at row + column * height,
    with row 0 at the bottom. Chips only ever land on top of a column, so each
    column is a contiguous run of chips starting at row 0.
    """
    rules: RuleSet = DEFAULT_RULES
    cells: List[Chip] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [Chip.NONE] * self.rules.cells
        elif len(self.cells) != self.rules.cells:
            raise ValueError(
                f"Expected {self.rules.cells} cells, got {len(self.cells)}."
            )

    @property
    def width(self) -> int:
        return self.rules.width

    @property
    def height(self) -> int:
        return self.rules.height

    def copy(self) -> "Board":
        return Board(self.rules, self.cells[:])

    def chip_at(self, column: int, row: int) -> Chip:
        return self.cells[row + column * self.rules.height]

    def set_chip(self, chip: Chip, column: int, row: int) -> None:
        # row must come from next_empty_slot_in_column
        self.cells[row + column * self.rules.height] = chip

    def next_empty_slot_in_column(self, column: int) -> Optional[int]:
        base = column * self.rules.height
        for row in range(self.rules.height):
            if self.cells[base + row] == Chip.NONE:
                return row
        return None

    def can_move_in_column(self, column: int) -> bool:
        return self.next_empty_slot_in_column(column) is not None

    def is_full(self) -> bool:
        for column in range(self.rules.width):
            if self.can_move_in_column(column):
                return False
        return True

    def column_heights(self) -> List[int]:
        heights = []
        for column in range(self.rules.width):
            row = self.next_empty_slot_in_column(column)
            heights.append(self.rules.height if row is None else row)
        return heights

    def chip_count(self, chip: Chip) -> int:
        return self.cells.count(chip)

    def winning_line(self, player: Player) -> Optional[List[Coord]]:
        chip = player.chip
        cells = self.cells
        for line, idx in zip(lines_for(self.rules), _line_indices(self.rules)):
            if all(cells[i] == chip for i in idx):
                return list(line)
        return None

    def is_win(self, player: Player) -> bool:
        return self.winning_line(player) is not None

    def score(self, player: Player) -> int:
        """
        Terminal-only evaluation: +WIN_SCORE if `player` has a line,
        -WIN_SCORE if the opponent has one, otherwise 0.
        """
        if self.is_win(player):
            return WIN_SCORE
        if self.is_win(player.opponent()):
            return -WIN_SCORE
        return 0
