from __future__ import annotations
import sys
import time

from connectfour.config import AI_THINKING_SPINNER, AI_THINK_CEILING_SEC

SPINNER_FRAMES = "|/-\\"
SPINNER_TICK_SEC = 0.08


def thinking_delay(search_sec: float, ceiling_sec: float = AI_THINK_CEILING_SEC) -> float:
    """
    Extra pause after a search so the reply is not instant: as long as the
    search itself took, but never pushing the total past the ceiling.
    """
    search_sec = max(0.0, search_sec)
    return max(0.0, min(ceiling_sec - search_sec, search_sec))


def ai_thinking(seconds: float, label: str = "AI is thinking") -> None:
    """Wait `seconds`, drawing a spinner on the current line if enabled."""
    if seconds <= 0:
        return
    if not AI_THINKING_SPINNER:
        time.sleep(seconds)
        return

    out = sys.stdout
    deadline = time.monotonic() + seconds
    tick = 0
    while (left := deadline - time.monotonic()) > 0:
        out.write(f"\r{label}... {SPINNER_FRAMES[tick % len(SPINNER_FRAMES)]}")
        out.flush()
        time.sleep(min(SPINNER_TICK_SEC, left))
        tick += 1
    # wipe the spinner line
    out.write("\r\033[K")
    out.flush()
