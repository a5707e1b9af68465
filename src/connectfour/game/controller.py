from __future__ import annotations

import logging
import time
from typing import Optional

from connectfour.ai.base import Agent
from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.config import DEFAULT_RULES, RuleSet
from connectfour.core.move import Move
from connectfour.core.player import Player, RED
from connectfour.game.actions import apply_human_move, evaluate_outcome, new_game
from connectfour.game.results import IN_PROGRESS, Outcome
from connectfour.game.worker import SearchWorker
from connectfour.ui.effects import ai_thinking, thinking_delay
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_red: Agent, agent_black: Agent, current: Player) -> str:
    """
    Prepend a persistent header showing who plays Red and Black.
    """
    red_name = _agent_name(agent_red, "Player Red")
    black_name = _agent_name(agent_black, "Player Black")

    header = f"Red: {red_name} | Black: {black_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _search_status(agent: Agent, column: int) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {column + 1}"
    return (
        f"{agent.name} chose {column + 1} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def _ai_column(agent: Agent, worker: Optional[SearchWorker], state, show_thinking: bool) -> Optional[int]:
    start = time.perf_counter()
    if worker is not None:
        # input is not read while the future is pending
        column = worker.submit(state).result()
    else:
        column = agent.choose_move(state)
    elapsed = time.perf_counter() - start

    if show_thinking:
        ai_thinking(thinking_delay(elapsed), f"{agent.name}")
    return column


def run_game(
    agent_red: Agent,
    agent_black: Agent,
    show_thinking: bool = True,
    rules: RuleSet = DEFAULT_RULES,
) -> Outcome:
    state = new_game(rules)
    status = f"Player {state.current} starts."
    outcome: Optional[Outcome] = None

    workers = {
        id(agent): SearchWorker(agent)
        for agent in (agent_red, agent_black)
        if isinstance(agent, MinimaxStrategist)
    }

    try:
        while outcome is None or not outcome.is_over:
            render(state.board, _status_with_agents(status, agent_red, agent_black, state.current))

            mover = state.current
            current_agent = agent_red if mover == RED else agent_black

            if current_agent.name == "Human":
                raw = input(f"Player {mover} move: ")
                try:
                    column = parse_move(raw, state.board.width)
                    if column is not None:
                        apply_human_move(state, column)
                except ValueError as e:
                    # bad input or a full column: same player is asked again
                    status = str(e)
                    continue

                if column is None:
                    render(
                        state.board,
                        _status_with_agents("Game quit.", agent_red, agent_black, mover),
                    )
                    return IN_PROGRESS
                status = f"Player {mover} chose {int(column) + 1}"
            else:
                column = _ai_column(current_agent, workers.get(id(current_agent)), state, show_thinking)
                if column is None:
                    # full board
                    outcome = evaluate_outcome(state, mover)
                    continue
                # an illegal engine move propagates
                state.apply(Move(column))
                status = _search_status(current_agent, column)

            outcome = evaluate_outcome(state, mover)
            logger.debug("After %s played: %s", mover, outcome.status.value)
            if not outcome.is_over:
                status += f" | Next: Player {state.current}"

    finally:
        for worker in workers.values():
            worker.shutdown()

    render(
        state.board,
        _status_with_agents(str(outcome), agent_red, agent_black, state.current),
        highlight=outcome.line,
    )
    return outcome
