from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "nodes_per_move",
    "wins",
    "points",
]

# lower is better for these
COST_METRICS = {"avg_ms_per_move", "nodes_per_move"}


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0
    max_avg_ms_per_move: float | None = None


# columns shown in the ranking, in arena CSV order
RANKING_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb",
    "avg_ms_per_move", "nodes_per_move", "avg_depth",
]


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Arena results lack {missing}; have {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Entrants with enough games and, when capped, fast enough per move."""
    keep = pd.Series(True, index=df.index)

    if cfg.min_games > 0:
        _require_cols(df, ["games"])
        keep &= df["games"].fillna(0) >= cfg.min_games

    if cfg.max_avg_ms_per_move is not None:
        _require_cols(df, ["avg_ms_per_move"])
        keep &= df["avg_ms_per_move"].fillna(float("inf")) <= cfg.max_avg_ms_per_move

    return df.loc[keep].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Best `top_n` entrants by `cfg.metric` with a 1-based `rk` column."""
    _require_cols(df, ["name", cfg.metric])

    ranked = filter_rows(df, cfg).sort_values(cfg.metric, ascending=cfg.metric in COST_METRICS)
    shown = [c for c in RANKING_COLS if c in ranked.columns]

    table = ranked[shown].head(cfg.top_n).reset_index(drop=True)
    table.insert(0, "rk", range(1, len(table) + 1))
    return table


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T


def depth_profile(df: pd.DataFrame) -> pd.DataFrame:
    """
    Strength and cost grouped by the average search depth each entrant
    reached. Entrants that never searched (avg_depth == 0) are left out.
    """
    _require_cols(df, ["avg_depth", "ppg", "avg_ms_per_move"])

    searched = df[df["avg_depth"].fillna(0) > 0].copy()
    if searched.empty:
        return pd.DataFrame(columns=["avg_depth", "ppg", "avg_ms_per_move"])

    searched["avg_depth"] = searched["avg_depth"].round(1)
    return (
        searched.groupby("avg_depth", as_index=False)[["ppg", "avg_ms_per_move"]]
        .mean()
        .sort_values("avg_depth")
        .reset_index(drop=True)
    )
