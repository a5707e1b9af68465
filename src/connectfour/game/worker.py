from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
import logging
from typing import Optional

from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.game.state import GameState

logger = logging.getLogger(__name__)


class SearchWorker:
    """
    Runs the strategist away from the input loop. The live state is cloned
    before the search starts; only the chosen column comes back.
    One search at a time: submitting while another is pending is an error.
    """

    def __init__(self, strategist: MinimaxStrategist) -> None:
        self.strategist = strategist
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="search")
        self._pending: Optional[Future] = None

    @property
    def busy(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def submit(self, state: GameState) -> "Future[Optional[int]]":
        if self.busy:
            raise RuntimeError("A search is already running.")

        snapshot = state.clone()
        logger.debug("Submitting search for %s", snapshot.current)
        self._pending = self._executor.submit(self._run, snapshot)
        return self._pending

    def _run(self, snapshot: GameState) -> Optional[int]:
        move = self.strategist.best_move(snapshot)
        return None if move is None else move.column

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "SearchWorker":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
