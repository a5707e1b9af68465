from __future__ import annotations

import random
from typing import Dict, List, Tuple

from connectfour.config import DEFAULT_RULES, RuleSet
from connectfour.core.move import Move
from connectfour.core.player import RED
from connectfour.game.actions import evaluate_outcome, new_game
from connectfour.game.results import Outcome, Status

from .arena_stats import BLACK_WINS, DRAW, RED_WINS, SideStats


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def _result(outcome: Outcome) -> str:
    if outcome.status is Status.DRAW:
        return DRAW
    return RED_WINS if outcome.winner == RED else BLACK_WINS


def play_headless(
    agent_red,
    agent_black,
    seed_base: int = 0,
    opening_plies: int = 2,
    rules: RuleSet = DEFAULT_RULES,
) -> Tuple[str, Dict[str, SideStats]]:
    """
    Play one game without any rendering. The first `opening_plies` moves are
    random (seeded) so repeated pairings do not replay the same game.
    Returns "RED", "BLACK" or "D" plus per-side search stats.
    """
    state = new_game(rules)
    stats = {
        "Red": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        "Black": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }

    seed_agent(agent_red, seed_base + 101)
    seed_agent(agent_black, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        moves = state.legal_moves()
        if not moves:
            break
        mover = state.current
        state.apply(rng.choice(moves))
        outcome = evaluate_outcome(state, mover)
        if outcome.is_over:
            return _result(outcome), stats

    while True:
        mover = state.current
        agent = agent_red if mover == RED else agent_black
        column = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[mover.name]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["depth"] += int(info.get("depth", 0))

        state.apply(Move(column))
        outcome = evaluate_outcome(state, mover)
        if outcome.is_over:
            return _result(outcome), stats


def run_pairings_batch(args):
    (batch_items, games_per_pair, rules) = args
    out: List[tuple] = []
    for (a_name, b_name, a_make, b_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            # colours alternate so neither entrant always moves first
            if g % 2 == 0:
                outcome, stats = play_headless(a_make(), b_make(), seed_base=(base_seed + g), rules=rules)
                out.append((a_name, b_name, True, outcome, stats))
            else:
                outcome, stats = play_headless(b_make(), a_make(), seed_base=(base_seed + g), rules=rules)
                out.append((a_name, b_name, False, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
