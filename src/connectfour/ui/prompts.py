from __future__ import annotations
from typing import Optional

from connectfour.game.state import GameState
from connectfour.types import Column


class HumanAgent:
    """Marks a seat whose moves come from the keyboard via parse_move."""
    name = "Human"

    def choose_move(self, state: GameState) -> Column:
        raise RuntimeError("HumanAgent.choose_move should never be called.")


def parse_move(raw: str, cols: int) -> Optional[Column]:
    """
    Turn a 1-based column typed by the player into a 0-based column.
    Returns None when the player wants to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Column(col)


def ask_play_again() -> bool:
    return input("Play again? [y/N] ").strip().lower() in {"y", "yes"}
