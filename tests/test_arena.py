from __future__ import annotations

import random
from functools import partial

import pytest

from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.ai.random_agent import RandomAgent
from connectfour.config import RuleSet
from connectfour.core.player import RED
from connectfour.game.errors import NoLegalMoves
from connectfour.game.state import GameState
from connectfour.scripts.arena import CSV_COLUMNS, ranking, run_arena, write_csv
from connectfour.scripts.arena_play import play_headless
from connectfour.scripts.arena_stats import BLACK_WINS, DRAW, RED_WINS, Agg, Entrant, add_result, ppg, wilson_lcb

SMALL = RuleSet(width=4, height=4, connect_n=3)


class TestPlayHeadless:
    def test_finishes_with_a_known_result(self):
        outcome, stats = play_headless(RandomAgent(), RandomAgent(), seed_base=3, rules=SMALL)
        assert outcome in {RED_WINS, BLACK_WINS, DRAW}
        assert set(stats) == {"Red", "Black"}

    def test_seeded_games_repeat(self):
        first = play_headless(RandomAgent(), RandomAgent(), seed_base=42, rules=SMALL)
        second = play_headless(RandomAgent(), RandomAgent(), seed_base=42, rules=SMALL)
        assert first[0] == second[0]
        assert first[1]["Red"]["moves"] == second[1]["Red"]["moves"]

    def test_search_stats_are_collected(self):
        _, stats = play_headless(MinimaxStrategist(depth=2), RandomAgent(), seed_base=1, rules=SMALL)
        assert stats["Red"]["moves"] > 0
        assert stats["Red"]["nodes"] > 0
        assert stats["Black"]["nodes"] == 0


class TestScoring:
    def test_add_result_win_and_draw(self):
        a, b = Agg(), Agg()
        add_result(a, b, RED_WINS, a_is_red=True)
        add_result(a, b, RED_WINS, a_is_red=False)
        add_result(a, b, DRAW, a_is_red=True)
        assert (a.wins, a.losses, a.draws, a.points) == (1, 1, 1, 1.5)
        assert (b.wins, b.losses, b.draws, b.points) == (1, 1, 1, 1.5)
        assert ppg(a) == pytest.approx(0.5)

    def test_wilson_lower_bound(self):
        assert wilson_lcb(0.5, 0, 1.28) == 0.0
        lcb = wilson_lcb(0.8, 50, 1.28)
        assert 0.0 < lcb < 0.8
        assert wilson_lcb(0.8, 500, 1.28) > lcb


class TestRandomAgent:
    def test_full_board_raises(self, make_state, full_columns):
        with pytest.raises(NoLegalMoves):
            RandomAgent().choose_move(make_state(full_columns, current=RED))

    def test_seeded(self):
        picks = [RandomAgent(rng=random.Random(5)).choose_move(GameState()) for _ in range(3)]
        assert len(set(picks)) == 1


class TestRunArena:
    def test_round_robin_in_process(self, tmp_path):
        entrants = [
            Entrant("Random", partial(RandomAgent, name="Random")),
            Entrant("Minimax d1", partial(MinimaxStrategist, name="Minimax d1", depth=1)),
            Entrant("Minimax d3", partial(MinimaxStrategist, name="Minimax d3", depth=3)),
        ]
        agg = run_arena(entrants, games_per_pair=2, seed=7, max_workers=1, rules=SMALL)

        assert set(agg) == {"Random", "Minimax d1", "Minimax d3"}
        assert all(a.games == 4 for a in agg.values())
        assert all(a.wins + a.draws + a.losses == a.games for a in agg.values())
        assert sum(a.points for a in agg.values()) == pytest.approx(6.0)
        assert agg["Random"].nodes == 0

        ranked = [name for name, _ in ranking(agg)]
        assert sorted(ranked) == sorted(agg)

        out = write_csv(agg, tmp_path / "results")
        assert out.name.startswith("arena_results_")
        header = out.read_text().splitlines()[0].split(",")
        assert header == CSV_COLUMNS
