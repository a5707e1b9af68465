from __future__ import annotations
from dataclasses import dataclass, field
import random

from connectfour.game.errors import NoLegalMoves
from connectfour.game.state import GameState
from connectfour.types import Column


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Column:
        moves = state.legal_moves()
        if not moves:
            raise NoLegalMoves()
        return Column(self.rng.choice(moves).column)
