from __future__ import annotations

import pickle

import pytest

from connectfour.core.player import BLACK, PLAYERS, RED, Player, name, player_for
from connectfour.types import Chip


class TestPlayer:
    def test_opponent_is_a_bijection(self):
        assert RED.opponent() == BLACK
        assert BLACK.opponent() == RED
        assert RED.opponent().opponent() == RED

    def test_names(self):
        assert name(Chip.RED) == "Red"
        assert name(Chip.BLACK) == "Black"
        assert name(Chip.NONE) == "None"
        assert RED.name == "Red"
        assert str(BLACK) == "Black"

    def test_exactly_two_players(self):
        assert PLAYERS == (RED, BLACK)
        assert player_for(Chip.RED) is RED
        assert player_for(Chip.BLACK) is BLACK

    def test_no_player_for_empty_chip(self):
        with pytest.raises(ValueError):
            Player(Chip.NONE)
        with pytest.raises(ValueError):
            player_for(Chip.NONE)

    def test_compared_by_chip(self):
        assert Player(Chip.RED) == RED
        assert Player(2) == BLACK
        assert Player(2).chip is Chip.BLACK
        assert pickle.loads(pickle.dumps(RED)) == RED
