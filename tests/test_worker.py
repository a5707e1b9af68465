from __future__ import annotations

import random
import threading

import pytest

from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.game.worker import SearchWorker


class _BlockingStrategist:
    def __init__(self) -> None:
        self.release = threading.Event()

    def best_move(self, state):
        self.release.wait(timeout=5)
        return None


class TestSearchWorker:
    def test_same_answer_as_a_direct_search(self, make_state):
        state = make_state({3: "RB", 2: "R"})
        direct = MinimaxStrategist(depth=3, rng=random.Random(8)).best_move(state)

        with SearchWorker(MinimaxStrategist(depth=3, rng=random.Random(8))) as worker:
            column = worker.submit(state).result(timeout=30)

        assert column == direct.column

    def test_live_state_is_untouched(self, make_state):
        state = make_state({0: "RRR", 1: "B", 2: "B", 5: "B"})
        before = state.board.cells[:]
        with SearchWorker(MinimaxStrategist(depth=2)) as worker:
            assert worker.submit(state).result(timeout=30) == 0
            assert not worker.busy
        assert state.board.cells == before

    def test_one_search_at_a_time(self, make_state):
        strategist = _BlockingStrategist()
        with SearchWorker(strategist) as worker:
            future = worker.submit(make_state({}))
            assert worker.busy
            with pytest.raises(RuntimeError, match="already running"):
                worker.submit(make_state({}))
            strategist.release.set()
            assert future.result(timeout=5) is None
