from __future__ import annotations

import sys

from connectfour.scripts.arena import main as arena_main

from .cli.analyze_csv import main as analyze_main

COMMANDS = {
    "analyze": analyze_main,
    "arena": arena_main,
}

USAGE = """\
usage: connectfour-analysis [analyze] [--csv PATH] [--metric NAME] ...
       connectfour-analysis arena [--depths N ...] [--games-per-pair N] ...

With no command, or only flags, the latest arena CSV is analyzed."""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    command = COMMANDS.get(argv[0].lower())
    if command is None:
        print(USAGE)
        return 2
    return command(argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
