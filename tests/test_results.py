from __future__ import annotations

from connectfour.core.player import BLACK, RED
from connectfour.game.results import DRAW, IN_PROGRESS, Status, evaluate_outcome, win


class TestEvaluateOutcome:
    def test_mover_win_is_checked_first(self, make_state, full_columns):
        # a full board that also holds a Red line is a win, not a draw
        full_columns[0] = "RRRRBB"
        state = make_state(full_columns, current=BLACK)
        outcome = evaluate_outcome(state, RED)
        assert outcome.status is Status.WIN
        assert outcome.winner == RED

    def test_only_the_mover_is_checked(self, make_state):
        state = make_state({0: "BBBB", 1: "RRR"}, current=RED)
        assert evaluate_outcome(state, RED) == IN_PROGRESS

    def test_in_progress(self, make_state):
        state = make_state({3: "R"})
        outcome = evaluate_outcome(state, RED)
        assert outcome is IN_PROGRESS
        assert not outcome.is_over


class TestOutcome:
    def test_str(self):
        assert str(win(RED)) == "Red wins!"
        assert str(DRAW) == "Draw game."
        assert str(IN_PROGRESS) == "In progress."

    def test_win_line_is_stored_as_tuple(self):
        outcome = win(BLACK, [(0, 0), (1, 0), (2, 0), (3, 0)])
        assert outcome.line == ((0, 0), (1, 0), (2, 0), (3, 0))
        assert outcome.is_over
        hash(outcome)
