from __future__ import annotations

import random
import time
from typing import Callable, Optional, Tuple

from connectfour.ai.base import Agent
from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.config import LOOKAHEAD_DEPTH
from connectfour.game.controller import run_game
from connectfour.ui.prompts import HumanAgent, ask_play_again

START_DELAY_SEC = 3

# game index -> (red, black); called once per game so no search state carries over
SeatFactory = Callable[[int], Tuple[Agent, Agent]]


def _strategist(name: str, depth: int, seed: Optional[int]) -> MinimaxStrategist:
    return MinimaxStrategist(name=name, depth=depth, rng=random.Random(seed))


def _game_seed(seed: Optional[int], game: int, offset: int = 0) -> Optional[int]:
    # replays with a fixed --seed still differ from game to game
    return None if seed is None else seed + 2 * game + offset


def _seats(choice: str, depth: int, seed: Optional[int]) -> Optional[SeatFactory]:
    if choice == "1":
        return lambda game: (HumanAgent(), _strategist(f"Minimax d{depth}", depth, _game_seed(seed, game)))
    if choice == "2":
        return lambda game: (HumanAgent(), HumanAgent())
    if choice == "3":
        return lambda game: (
            _strategist(f"Minimax Red d{depth}", depth, _game_seed(seed, game)),
            _strategist(f"Minimax Black d{depth}", depth, _game_seed(seed, game, offset=1)),
        )
    return None


def play_games(seats: SeatFactory) -> int:
    """
    Play until a game is quit or the player declines a rematch.
    Returns the number of games started.
    """
    game = 0
    while True:
        red, black = seats(game)
        game += 1
        print(f"\nStarting game {game}: {red.name} vs {black.name}")
        print(f"Game will start in {START_DELAY_SEC} seconds...\n")
        time.sleep(START_DELAY_SEC)

        outcome = run_game(red, black)
        if not outcome.is_over or not ask_play_again():
            return game


def run_menu(depth: int = LOOKAHEAD_DEPTH, seed: Optional[int] = None) -> None:
    print("Select mode:")
    print("1) Human (Red) vs AI (Black)")
    print("2) Human vs Human")
    print("3) AI vs AI")
    print("4) Run AI arena (self-play, CSV export)")

    choice = input("Choice: ").strip()

    if choice == "4":
        print(f"\nStarting AI arena in {START_DELAY_SEC} seconds...\n")
        time.sleep(START_DELAY_SEC)
        from connectfour.scripts.arena import main as arena_main
        arena_main([])
        return

    seats = _seats(choice, depth, seed)
    if seats is None:
        print("\nInvalid choice. Defaulting to Human vs AI.")
        seats = _seats("1", depth, seed)

    play_games(seats)
