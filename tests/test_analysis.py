"""Tests for batch puzzle analysis."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from c4threat_analysis.__main__ import main as analysis_main
from c4threat_analysis.io.load_cases import LoadSpec, load_cases, load_latest_from_dir
from c4threat_analysis.metrics.summarize import (
    SummaryConfig,
    cell_counts,
    evaluate_cases,
    orientation_counts,
    top_table,
)
from c4threat_analysis.plots import plot_cell_heatmap, plot_orientation_bar

DEMO_CSV = Path(__file__).resolve().parents[1] / "data" / "cases" / "cases_demo.csv"


@pytest.fixture
def results() -> pd.DataFrame:
    return evaluate_cases(load_cases(LoadSpec(csv_path=DEMO_CSV)))


class TestLoad:

    def test_load_demo(self):
        """The sample CSV loads one row per puzzle."""
        df = load_cases(LoadSpec(csv_path=DEMO_CSV))
        assert len(df) == 7
        assert df.loc[0, "row6"] == "(R,R,R,x,R,Y,Y)"

    def test_names_added_when_missing(self, tmp_path):
        """Puzzles without a name column get case1, case2, ..."""
        p = tmp_path / "cases_a.csv"
        p.write_text(
            "player,row1,row2,row3,row4,row5,row6\n"
            'R,"(x,x,x,x,x,x,x)","(x,x,x,x,x,x,x)","(x,x,x,x,x,x,x)",'
            '"(x,x,x,x,x,x,x)","(x,x,x,x,x,x,x)","(R,R,R,x,x,x,x)"\n'
        )
        df = load_cases(LoadSpec(csv_path=p))
        assert list(df["name"]) == ["case1"]

    def test_missing_columns(self, tmp_path):
        """A CSV without the row columns is a ValueError."""
        p = tmp_path / "bad.csv"
        p.write_text("player,row1\nR,x\n")
        with pytest.raises(ValueError):
            load_cases(LoadSpec(csv_path=p))

    def test_missing_file(self, tmp_path):
        """A missing CSV is a FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_cases(LoadSpec(csv_path=tmp_path / "nope.csv"))

    def test_latest_from_dir(self, tmp_path):
        """The lexicographically last matching file is picked."""
        (tmp_path / "cases_2024.csv").write_text("")
        (tmp_path / "cases_2025.csv").write_text("")
        assert load_latest_from_dir(tmp_path).name == "cases_2025.csv"
        with pytest.raises(FileNotFoundError):
            load_latest_from_dir(tmp_path, pattern="other_*.csv")


class TestEvaluate:

    def test_results_per_puzzle(self, results):
        """Each puzzle gets its own per-orientation and combined result."""
        by_name = results.set_index("name")
        assert by_name.loc["demo", "result"] == "(6x4)(3x5)"
        assert by_name.loc["demo_yellow", "result"] == ""
        assert by_name.loc["top_row", "result"] == "(1x3)(3x4)"
        assert by_name.loc["blocked_top_row", "result"] == "(3x4)"
        assert by_name.loc["diagonal", "diagonal"] == "(3x5)"
        assert by_name.loc["empty", "n_completions"] == 0

    def test_malformed_kept_as_invalid(self, results):
        """Unparseable puzzles stay in the table with valid=False."""
        row = results.set_index("name").loc["malformed"]
        assert not row["valid"]
        assert row["result"] == ""
        assert int(results["valid"].sum()) == 6

    def test_orientation_counts(self, results):
        """Puzzles are counted per orientation that yields a move."""
        counts = orientation_counts(results)
        assert counts.to_dict() == {"horizontal": 2, "vertical": 3, "diagonal": 1}

    def test_cell_counts(self, results):
        """Reported cells are tallied on a 6x7 grid."""
        grid = cell_counts(results)
        assert grid.shape == (6, 7)
        assert grid.loc[6, 4] == 1
        assert grid.loc[3, 5] == 2
        assert grid.loc[3, 4] == 2
        assert grid.loc[1, 3] == 1
        assert int(grid.to_numpy().sum()) == 6

    def test_top_table(self, results):
        """The table is ranked by number of completions."""
        table = top_table(results, SummaryConfig(top_n=3, only_valid=True))
        assert list(table["rk"]) == [1, 2, 3]
        assert table.loc[0, "n_completions"] == 2
        assert table["valid"].all()


class TestPlots:

    def test_figures_written(self, results, tmp_path):
        """Both charts are saved as files."""
        bar = plot_orientation_bar(orientation_counts(results), tmp_path, show=False)
        heat = plot_cell_heatmap(cell_counts(results), tmp_path, show=False)
        assert bar is not None and bar.exists()
        assert heat is not None and heat.exists()


class TestCli:

    def test_analyze_writes_results(self, tmp_path, capsys):
        """The analyze command writes the per-puzzle results CSV."""
        out = tmp_path / "results.csv"
        code = analysis_main(["analyze", "--csv", str(DEMO_CSV), "--out", str(out), "--no-plots"])
        assert code == 0
        written = pd.read_csv(out, dtype=str, keep_default_na=False)
        assert list(written["result"])[0] == "(6x4)(3x5)"
        assert "Puzzles: 7" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        """An unknown subcommand prints usage and returns 2."""
        assert analysis_main(["frobnicate"]) == 2
