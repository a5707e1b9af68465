"""
Read arena exports (`arena_results_<timestamp>.csv`) into DataFrames.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from connectfour.scripts.arena import CSV_COLUMNS

ARENA_GLOB = "arena_results_*.csv"
NUMERIC_COLS = tuple(c for c in CSV_COLUMNS if c != "name")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    numeric_cols: tuple[str, ...] = NUMERIC_COLS


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    One row per arena entrant. Numeric columns are coerced (bad cells become
    NaN), unnamed rows dropped, and `nodes_per_move` added when the export
    carries search counters.
    """
    path = spec.csv_path
    if not path.is_file():
        raise FileNotFoundError(f"Arena CSV not found: {path}")

    df = pd.read_csv(path).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"{path.name} has no 'name' column (got {list(df.columns)})")

    present = [c for c in spec.numeric_cols if c in df.columns]
    df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df.loc[df["name"] != ""]

    if {"nodes", "moves"} <= set(df.columns):
        per_move = df["nodes"] / df["moves"].where(df["moves"] > 0)
        df = df.assign(nodes_per_move=per_move.fillna(0.0))

    return df.reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = ARENA_GLOB) -> Path:
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    # timestamped names sort chronologically
    latest = max(results_dir.glob(pattern), default=None)
    if latest is None:
        raise FileNotFoundError(f"No {pattern} in {results_dir}")
    return latest
