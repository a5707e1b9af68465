from __future__ import annotations

import argparse
import csv
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from functools import partial
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from connectfour.ai.minimax_agent import MinimaxStrategist
from connectfour.ai.random_agent import RandomAgent
from connectfour.config import DEFAULT_RULES, RuleSet

from .arena_play import chunked, run_pairings_batch
from .arena_stats import Agg, Entrant, add_result, avg_depth, avg_ms_per_move, ppg, strength_score

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
]


def default_entrants(depths: Sequence[int] = (1, 2, 3, 4)) -> List[Entrant]:
    entrants = [Entrant("Random", partial(RandomAgent, name="Random"))]
    for d in depths:
        name = f"Minimax d{d}"
        entrants.append(Entrant(name, partial(MinimaxStrategist, name=name, depth=d)))
    return entrants


def run_arena(
    entrants: Sequence[Entrant],
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: Optional[int] = None,
    batch_pairings: int = 4,
    rules: RuleSet = DEFAULT_RULES,
) -> Dict[str, Agg]:
    """
    Round-robin between all entrants. With max_workers == 1 the games run in
    this process, otherwise in a process pool.
    """
    agg: Dict[str, Agg] = {e.name: Agg() for e in entrants}

    pair_items = []
    n = len(entrants)
    for i in range(n):
        for j in range(i + 1, n):
            a, b = entrants[i], entrants[j]
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((a.name, b.name, a.make, b.make, base_seed))

    logger.info("Arena: %d entrants, %d pairings, %d games each", n, len(pair_items), games_per_pair)

    def apply_results(results) -> None:
        for (a_name, b_name, a_is_red, outcome, stats) in results:
            add_result(agg[a_name], agg[b_name], outcome, a_is_red)
            red_name, black_name = (a_name, b_name) if a_is_red else (b_name, a_name)
            agg[red_name].add_side(stats["Red"])
            agg[black_name].add_side(stats["Black"])

    batches = [(chunk, games_per_pair, rules) for chunk in chunked(pair_items, batch_pairings)]

    if max_workers == 1:
        for batch in batches:
            apply_results(run_pairings_batch(batch))
        return agg

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
        for done, fut in enumerate(as_completed(futures), start=1):
            apply_results(fut.result())
            logger.info("Arena: batch %d/%d complete", done, len(futures))

    return agg


def ranking(agg: Dict[str, Agg], z: float = 1.28) -> List[tuple[str, Agg]]:
    return sorted(agg.items(), key=lambda kv: (strength_score(kv[1], z), ppg(kv[1])), reverse=True)


def write_csv(agg: Dict[str, Agg], out_dir: Path, z: float = 1.28) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"arena_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in ranking(agg, z):
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes, round(avg_depth(a), 3),
            ])

    return out_path


def print_table(agg: Dict[str, Agg], z: float = 1.28) -> None:
    print(f"{'rk':>3}  {'name':<16} {'G':>4} {'W-D-L':>10} {'PPG':>6} {'LCB':>6} {'ms/mv':>8} {'nodes':>10}")
    for rk, (name, a) in enumerate(ranking(agg, z), start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{rk:>3}  {name:<16} {a.games:>4} {wdl:>10} {ppg(a):>6.3f} "
            f"{strength_score(a, z):>6.3f} {avg_ms_per_move(a):>8.1f} {a.nodes:>10}"
        )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-arena", description="Self-play arena for Connect 4 agents.")
    ap.add_argument("--depths", type=int, nargs="+", default=[1, 2, 3, 4], help="Minimax depths to enter")
    ap.add_argument("--games-per-pair", type=int, default=2, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for openings and tie-breaks")
    ap.add_argument("--workers", type=int, default=None, help="Process pool size (1 = run in-process)")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where to write arena_results_*.csv")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower confidence bound")
    ap.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    start = time.perf_counter()
    agg = run_arena(
        default_entrants(args.depths),
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        max_workers=args.workers,
    )
    elapsed = time.perf_counter() - start

    print_table(agg, args.z)
    out_path = write_csv(agg, Path(args.results_dir), args.z)
    print(f"\nWrote CSV: {out_path}")
    print(f"Total runtime: {elapsed:.1f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
