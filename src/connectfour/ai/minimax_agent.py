from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import random
import time
from typing import List, Optional

from connectfour.config import LOOKAHEAD_DEPTH
from connectfour.core.move import Move
from connectfour.core.player import Player
from connectfour.game.errors import NoLegalMoves
from connectfour.game.state import GameState
from connectfour.types import Column

logger = logging.getLogger(__name__)


class _SearchTimeout(Exception):
    pass


def _ordered_moves(state: GameState) -> List[Move]:
    # Center-first ordering only changes how soon cutoffs happen, never the value.
    moves = state.legal_moves()
    center = state.board.width // 2
    moves.sort(key=lambda m: abs(m.column - center))
    return moves


@dataclass(slots=True)
class MinimaxStrategist:
    """
    Depth-limited negamax. Scores come from GameState.score, so a position is
    worth +WIN_SCORE / -WIN_SCORE once decided and 0 otherwise.

    Every root move is scored exactly enough to know whether it ties the best
    score; below the root alpha-beta prunes freely. When several root moves
    share the best score one of them is picked with `rng`, so seed it for
    reproducible games.

    With `time_limit_sec` set the search deepens one ply at a time and keeps
    the deepest finished iteration. Depth 1 always finishes.
    """
    name: str = "Minimax AI"
    depth: int = LOOKAHEAD_DEPTH
    rng: random.Random = field(default_factory=random.Random)
    time_limit_sec: Optional[float] = None

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0
    _deadline: Optional[float] = None

    def choose_move(self, state: GameState) -> Column:
        move = self.best_move(state)
        if move is None:
            raise NoLegalMoves()
        return Column(move.column)

    def best_move(self, state: GameState, player: Optional[Player] = None) -> Optional[Move]:
        """
        Best move for `player` (default: the side to move in `state`).
        Returns None only when the board has no legal moves. `state` is never
        modified.
        """
        me = state.current if player is None else player

        root = state.clone()
        root.current = me
        if not root.legal_moves():
            self.last_info = {"depth": 0, "nodes": 0, "cutoffs": 0, "eval": None, "move_col": None, "time_ms": 0}
            return None

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        if self.time_limit_sec is None:
            self._deadline = None
            candidates, best_score = self._search_root(root, me, self.depth)
            depth_reached = self.depth
        else:
            candidates, best_score, depth_reached = self._deepen(root, me, start)

        chosen = self.rng.choice(candidates)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": depth_reached,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": best_score,
            "move_col": chosen.column + 1,
            "ties": len(candidates),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s picked column %d for %s (eval=%s, depth=%d, nodes=%d, ties=%d)",
            self.name, chosen.column, me, best_score, depth_reached, self._nodes, len(candidates),
        )
        return chosen

    def _deepen(self, root: GameState, me: Player, start: float) -> tuple[List[Move], int, int]:
        deadline = start + max(0.0, float(self.time_limit_sec))

        # first ply runs without a deadline so there is always an answer
        self._deadline = None
        candidates, best_score = self._search_root(root, me, 1)
        depth_reached = 1

        self._deadline = deadline
        for d in range(2, self.depth + 1):
            if time.perf_counter() >= deadline:
                break
            try:
                candidates, best_score = self._search_root(root, me, d)
            except _SearchTimeout:
                logger.debug("Depth %d abandoned at the deadline; keeping depth %d", d, depth_reached)
                break
            depth_reached = d

        self._deadline = None
        return candidates, best_score, depth_reached

    def _search_root(self, root: GameState, me: Player, depth: int) -> tuple[List[Move], int]:
        best_score = -inf
        best_moves: List[Move] = []

        # ascending column order
        for move in root.legal_moves():
            child = root.clone()
            child.apply(move)

            # alpha sits one below the best so far, so ties come back exact
            alpha = best_score - 1
            move.score = -self._negamax(child, me.opponent(), depth - 1, -inf, -alpha)

            if move.score > best_score:
                best_score = move.score
                best_moves = [move]
            elif move.score == best_score:
                best_moves.append(move)

        return best_moves, int(best_score)

    def _negamax(self, state: GameState, to_play: Player, depth: int, alpha: float, beta: float) -> float:
        if self._deadline is not None and time.perf_counter() >= self._deadline:
            raise _SearchTimeout()

        self._nodes += 1

        if depth == 0 or state.is_terminal_for(to_play):
            return state.score(to_play)

        v = -inf
        for m in _ordered_moves(state):
            child = state.clone()
            child.apply(m)
            v = max(v, -self._negamax(child, to_play.opponent(), depth - 1, -beta, -alpha))

            alpha = max(alpha, v)
            if alpha >= beta:
                self._cutoffs += 1
                break

        return v
