"""
Per-entrant tallies for the arena and the numbers derived from them.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict

RED_WINS = "RED"
BLACK_WINS = "BLACK"
DRAW = "D"

SideStats = Dict[str, int]


@dataclass(frozen=True)
class Entrant:
    name: str
    make: Callable[[], object]  # must be picklable (use functools.partial, not lambda)


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    def add_side(self, side: SideStats) -> None:
        self.moves += side["moves"]
        self.time_ms += side["time_ms"]
        self.nodes += side["nodes"]
        self.depth_sum += side["depth"]


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_red: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == DRAW:
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    winner, loser = (agg_a, agg_b) if (outcome == RED_WINS) == a_is_red else (agg_b, agg_a)
    winner.wins += 1
    winner.points += 1.0
    loser.losses += 1


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def avg_depth(a: Agg) -> float:
    return (a.depth_sum / a.moves) if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float) -> float:
    """Lower bound of the Wilson score interval for a success rate p over n games."""
    if n <= 0:
        return 0.0
    p = max(0.0, min(1.0, p))
    z2 = z * z
    denom = 1.0 + (z2 / n)
    center = p + (z2 / (2.0 * n))
    rad = z * math.sqrt(max(0.0, (p * (1.0 - p) + (z2 / (4.0 * n))) / n))
    return max(0.0, (center - rad) / denom)


def strength_score(a: Agg, z: float) -> float:
    return wilson_lcb(ppg(a), a.games, z)
