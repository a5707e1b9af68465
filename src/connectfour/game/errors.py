from __future__ import annotations


class IllegalMove(ValueError):
    """Raised when a chip is dropped into a full or non-existent column."""

    def __init__(self, column: int, reason: str = "Column is full.") -> None:
        super().__init__(reason)
        self.column = column


class NoLegalMoves(ValueError):
    """Raised by agents that must return a move but were handed a full board."""

    def __init__(self) -> None:
        super().__init__("No valid moves.")
