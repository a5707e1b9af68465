from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from connectfour_analysis.__main__ import main as analysis_main
from connectfour_analysis.cli.analyze_csv import main as analyze_main
from connectfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connectfour_analysis.metrics.summarize import SummaryConfig, depth_profile, top_table
from connectfour_analysis.plots.chart import plot_depth_profile, plot_scatter, plot_top_bar

ROWS = [
    {"name": "Random", "games": 6, "wins": 0, "draws": 0, "losses": 6, "points": 0.0, "ppg": 0.0,
     "strength_wilson_lcb": 0.0, "avg_ms_per_move": 1.0, "moves": 30, "time_ms": 30, "nodes": 0, "avg_depth": 0.0},
    {"name": "Minimax d1", "games": 6, "wins": 2, "draws": 1, "losses": 3, "points": 2.5, "ppg": 0.4167,
     "strength_wilson_lcb": 0.2, "avg_ms_per_move": 2.0, "moves": 30, "time_ms": 60, "nodes": 210, "avg_depth": 1.0},
    {"name": "Minimax d3", "games": 6, "wins": 5, "draws": 1, "losses": 0, "points": 5.5, "ppg": 0.9167,
     "strength_wilson_lcb": 0.7, "avg_ms_per_move": 30.0, "moves": 28, "time_ms": 840, "nodes": 5600, "avg_depth": 3.0},
]


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "arena_results_20260101_120000.csv"
    pd.DataFrame(ROWS).to_csv(path, index=False)
    return path


class TestLoad:
    def test_numeric_columns_and_cost(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        assert len(df) == 3
        assert pd.api.types.is_numeric_dtype(df["ppg"])
        assert df.loc[df["name"] == "Minimax d3", "nodes_per_move"].item() == pytest.approx(200.0)
        assert df.loc[df["name"] == "Random", "nodes_per_move"].item() == 0.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))

    def test_requires_name(self, tmp_path):
        path = tmp_path / "bad.csv"
        pd.DataFrame([{"games": 1}]).to_csv(path, index=False)
        with pytest.raises(ValueError, match="name"):
            load_results(LoadSpec(csv_path=path))

    def test_latest_file(self, tmp_path, results_csv):
        newer = tmp_path / "arena_results_20260102_080000.csv"
        newer.write_text(results_csv.read_text())
        assert load_latest_from_dir(tmp_path) == newer


class TestSummaries:
    def test_top_table_by_strength(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        table = top_table(df, SummaryConfig(metric="strength_wilson_lcb", top_n=2))
        assert list(table["name"]) == ["Minimax d3", "Minimax d1"]
        assert list(table["rk"]) == [1, 2]

    def test_cost_metric_sorts_ascending(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        table = top_table(df, SummaryConfig(metric="avg_ms_per_move"))
        assert table["name"].iloc[0] == "Random"

    def test_depth_profile_skips_non_searchers(self, results_csv):
        df = load_results(LoadSpec(csv_path=results_csv))
        profile = depth_profile(df)
        assert list(profile["avg_depth"]) == [1.0, 3.0]


class TestPlots:
    def test_figures_written(self, results_csv, tmp_path):
        df = load_results(LoadSpec(csv_path=results_csv))
        outdir = tmp_path / "figures"

        paths = [
            plot_top_bar(df, outdir, metric="ppg", top_n=3, show=False),
            plot_scatter(df, outdir, x="avg_ms_per_move", y="ppg", show=False),
            plot_depth_profile(depth_profile(df), outdir, show=False),
        ]

        assert all(p is not None and p.exists() for p in paths)

    def test_unknown_metric_is_skipped(self, results_csv, tmp_path):
        df = load_results(LoadSpec(csv_path=results_csv))
        assert plot_top_bar(df, tmp_path, metric="missing", top_n=3, show=False) is None


class TestCli:
    def test_analyze_prints_ranking(self, results_csv, capsys):
        assert analyze_main(["--csv", str(results_csv), "--no-plots", "--metric", "ppg"]) == 0
        out = capsys.readouterr().out
        assert "Ranking by ppg" in out
        assert "Minimax d3" in out

    def test_flags_alone_route_to_analyze(self, results_csv, capsys):
        assert analysis_main(["--csv", str(results_csv), "--no-plots"]) == 0
        assert "3 entrants" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert analysis_main(["bogus"]) == 2
        assert "usage" in capsys.readouterr().out
