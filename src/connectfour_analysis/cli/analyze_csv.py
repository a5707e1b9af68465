from __future__ import annotations

import argparse
from pathlib import Path
from typing import get_args

import pandas as pd

from ..io.load_results import ARENA_GLOB, LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import MetricKey, SummaryConfig, depth_profile, filter_rows, numeric_summary, top_table
from ..plots.chart import plot_depth_profile, plot_scatter, plot_top_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connectfour-analysis analyze",
        description="Rank arena entrants and chart strength against search cost.",
    )
    src = ap.add_argument_group("input")
    src.add_argument("--csv", type=Path, default=None, help="Arena CSV to read (default: newest in --results-dir)")
    src.add_argument("--results-dir", type=Path, default=Path("data/results"), help="Where connectfour-arena writes its CSVs")
    src.add_argument("--pattern", default=ARENA_GLOB, help="Glob used to find the newest CSV")

    out = ap.add_argument_group("output")
    out.add_argument("--outdir", type=Path, default=Path("data/figures"), help="Directory for PNG charts")
    out.add_argument("--show", action="store_true", help="Open charts in a window instead of saving")
    out.add_argument("--no-plots", action="store_true", help="Print tables only")

    sel = ap.add_argument_group("selection")
    sel.add_argument("--top", type=int, default=20, help="Rows in the ranking and bars in the chart")
    sel.add_argument("--metric", choices=get_args(MetricKey), default="strength_wilson_lcb", help="Ranking metric")
    sel.add_argument("--min-games", type=int, default=0, help="Drop entrants with fewer games")
    sel.add_argument("--max-ms", type=float, default=None, help="Drop entrants slower than this per move")
    return ap


def _section(title: str, frame: pd.DataFrame, index: bool = False) -> None:
    if frame.empty:
        return
    print(f"\n=== {title} ===")
    print(frame.to_string(index=index))


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = args.csv or load_latest_from_dir(args.results_dir, pattern=args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path))
    print(f"\n{csv_path}: {len(df)} entrants")

    cfg = SummaryConfig(
        metric=args.metric,
        top_n=args.top,
        min_games=args.min_games,
        max_avg_ms_per_move=args.max_ms,
    )
    profile = depth_profile(df)

    _section(f"Ranking by {cfg.metric}", top_table(df, cfg))
    _section("Numeric summary", numeric_summary(df), index=True)
    _section("Minimax by search depth", profile)

    if args.no_plots:
        return 0

    kept = filter_rows(df, cfg)
    charts = (
        plot_top_bar(kept, args.outdir, metric=cfg.metric, top_n=cfg.top_n, show=args.show),
        plot_scatter(kept, args.outdir, x="avg_ms_per_move", y=cfg.metric, show=args.show),
        plot_depth_profile(profile, args.outdir, show=args.show),
    )
    for path in charts:
        if path is not None:
            print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
