"""
The small synchronous API a front end needs: start a game, list droppable
columns, apply a human move, classify the position and ask the engine for a
reply.
"""
from __future__ import annotations
import random
from typing import List, Optional

from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.config import DEFAULT_RULES, RuleSet
from connectfour.core.board import Board
from connectfour.core.move import Move
from connectfour.core.player import Player, RED
from connectfour.game.results import Outcome, evaluate_outcome as _evaluate
from connectfour.game.state import GameState


def new_game(rules: RuleSet = DEFAULT_RULES) -> GameState:
    return GameState(board=Board(rules), current=RED)


def legal_moves(state: GameState) -> List[int]:
    return [m.column for m in state.legal_moves()]


def apply_human_move(state: GameState, column: int) -> None:
    # raises IllegalMove and leaves the state untouched
    state.apply(Move(column))


def evaluate_outcome(state: GameState, mover: Player) -> Outcome:
    return _evaluate(state, mover)


def request_ai_move(
    state: GameState,
    player: Optional[Player] = None,
    depth: Optional[int] = None,
    rng_seed: Optional[int] = None,
) -> Optional[int]:
    """
    Run the search for `player` (default: side to move) and return its column,
    or None when the board is full. `depth` defaults to the board's rule set.
    `state` is not modified.
    """
    if depth is None:
        depth = state.board.rules.depth
    strategist = MinimaxStrategist(depth=depth, rng=random.Random(rng_seed))
    move = strategist.best_move(state, player)
    return None if move is None else move.column
