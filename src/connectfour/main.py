from __future__ import annotations

import argparse
import logging

from connectfour.config import LOOKAHEAD_DEPTH
from connectfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect 4 against a minimax opponent.")
    ap.add_argument("--depth", type=int, default=LOOKAHEAD_DEPTH, help="Look-ahead depth in plies")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the AI tie-breaking random source")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_menu(depth=args.depth, seed=args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
