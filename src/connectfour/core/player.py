from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from connectfour.types import Chip

_NAMES: Dict[Chip, str] = {
    Chip.RED: "Red",
    Chip.BLACK: "Black",
    Chip.NONE: "None",
}


def name(chip: Chip) -> str:
    return _NAMES[Chip(chip)]


@dataclass(frozen=True, slots=True)
class Player:
    """
    One side of the game. Compared by chip, so a player survives state
    cloning and pickling (the arena ships states across processes).
    """
    chip: Chip

    def __post_init__(self) -> None:
        chip = Chip(self.chip)
        if chip is Chip.NONE:
            raise ValueError("A player must own a red or black chip.")
        object.__setattr__(self, "chip", chip)

    @property
    def name(self) -> str:
        return name(self.chip)

    def opponent(self) -> "Player":
        return BLACK if self.chip is Chip.RED else RED

    def __str__(self) -> str:
        return self.name


RED = Player(Chip.RED)
BLACK = Player(Chip.BLACK)

# Both players, indexed by chip value - 1.
PLAYERS: Tuple[Player, Player] = (RED, BLACK)


def player_for(chip: Chip) -> Player:
    chip = Chip(chip)
    if chip is Chip.NONE:
        raise ValueError("No player owns an empty cell.")
    return PLAYERS[chip - 1]
