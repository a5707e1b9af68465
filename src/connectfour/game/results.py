from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from connectfour.core.player import Player
from connectfour.game.state import GameState
from connectfour.types import Coord


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None
    line: Optional[Tuple[Coord, ...]] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WIN:
            return f"{self.winner} wins!"
        if self.status is Status.DRAW:
            return "Draw game."
        return "In progress."


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def win(player: Player, line: Optional[Sequence[Coord]] = None) -> Outcome:
    return Outcome(Status.WIN, player, tuple(line) if line is not None else None)


def evaluate_outcome(state: GameState, mover: Player) -> Outcome:
    """
    Classify the position right after `mover` dropped a chip. The mover's win
    is checked first, then a full board, otherwise the game goes on.
    """
    line = state.board.winning_line(mover)
    if line is not None:
        return win(mover, line)
    if state.board.is_full():
        return DRAW
    return IN_PROGRESS
