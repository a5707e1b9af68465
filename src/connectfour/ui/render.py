from __future__ import annotations
from typing import Iterable, List, Optional, Set

from connectfour import config
from connectfour.core.board import Board
from connectfour.types import Chip, Coord

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def _piece(chip: Chip) -> str:
    if chip == Chip.RED:
        return c("R", FG_RED)
    if chip == Chip.BLACK:
        return c("B", FG_BLUE)
    return c("·", FG_GRAY)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """Board as text, top row first. Highlighted cells are shown in reverse video."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.width)), DIM)]
    for row in range(board.height - 1, -1, -1):
        parts = []
        for col in range(board.width):
            p = _piece(board.chip_at(col, row))
            if (col, row) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.width - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.width} to drop. Enter q to quit.", DIM))
