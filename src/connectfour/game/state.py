from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connectfour.core.board import Board
from connectfour.core.move import Move
from connectfour.core.player import Player, RED
from connectfour.game.errors import IllegalMove


@dataclass(slots=True)
class GameState:
    """
    Board plus the player to move. This is everything the search needs:
    legal_moves / apply / clone / score / is_terminal_for.
    """
    board: Board = field(default_factory=Board)
    current: Player = RED

    def legal_moves(self) -> List[Move]:
        board = self.board
        return [Move(c) for c in range(board.width) if board.can_move_in_column(c)]

    def apply(self, move: Move) -> int:
        """
        Drop the current player's chip into move.column and hand the turn to
        the opponent. Returns the row the chip landed on.
        """
        column = move.column
        if column < 0 or column >= self.board.width:
            raise IllegalMove(column, f"Column must be between 1 and {self.board.width}.")

        row = self.board.next_empty_slot_in_column(column)
        if row is None:
            raise IllegalMove(column)

        self.board.set_chip(self.current.chip, column, row)
        self.current = self.current.opponent()
        return row

    def clone(self) -> "GameState":
        return GameState(self.board.copy(), self.current)

    def score(self, player: Player) -> int:
        return self.board.score(player)

    def is_terminal_for(self, player: Player) -> bool:
        board = self.board
        return board.is_win(player) or board.is_win(player.opponent()) or board.is_full()
