"""Tests for sweep experiments, growth fitting and figures."""

import numpy as np
import pandas as pd
import pytest

import analysis
from towers.stats import growth_fit, summarize_by_n
from towers.sweep import resolve_n_values, run_sweep
from towers.types import TowersResult
from towers.selector import TwoTowers
from towers.visualize import generate_plots, plot_from_sweep_dir


def _write_config(path, n_values="[1, 2, 3, 4]", repeats=2, plots="false", root="out"):
    path.write_text(
        "sweep:\n"
        f"  n_values: {n_values}\n"
        "  n_min: 1\n"
        "  n_max: 3\n"
        f"  repeats: {repeats}\n"
        "output:\n"
        f"  root: {root}\n"
        "  run_id_prefix: test\n"
        f"  generate_plots: {plots}\n",
        encoding="utf-8",
    )
    return path


class TestResolveNValues:
    def test_explicit_list_wins(self) -> None:
        assert resolve_n_values({"n_values": [5, 2], "n_min": 1, "n_max": 3}) == [5, 2]

    def test_range_fallback(self) -> None:
        assert resolve_n_values({"n_values": [], "n_min": 2, "n_max": 5}) == [2, 3, 4, 5]

    def test_comma_string(self) -> None:
        assert resolve_n_values({"n_values": "1,3"}) == [1, 3]

    def test_empty_range(self) -> None:
        with pytest.raises(ValueError):
            resolve_n_values({"n_min": 4, "n_max": 2})

    def test_negative(self) -> None:
        with pytest.raises(ValueError):
            resolve_n_values({"n_values": [3, -1]})


class TestTowersResultRow:
    def test_as_row(self) -> None:
        row = TwoTowers(4).find_best_sets().as_row()
        assert row["n"] == 4
        assert row["best_set"] == "1 4"
        assert row["second_best_set"] == "1 3"
        assert row["subsets_checked"] == 16
        assert row["gap"] == pytest.approx(row["half_height"] - 3.0)

    def test_empty_sets_render_blank(self) -> None:
        result = TwoTowers(0).find_best_sets()
        assert isinstance(result, TowersResult)
        assert result.as_row()["best_set"] == ""
        assert result.gap == 0.0


class TestGrowthFit:
    def test_doubling_runtime(self) -> None:
        df = pd.DataFrame({"n": [1, 2, 3, 4, 5], "runtime_sec": [2.0**n * 1e-6 for n in range(1, 6)]})
        fit = growth_fit(df)
        assert fit.loc[0, "slope"] == pytest.approx(1.0)
        assert fit.loc[0, "growth_base"] == pytest.approx(2.0)
        assert fit.loc[0, "r2"] == pytest.approx(1.0)
        assert fit.loc[0, "sample_size"] == 5

    def test_single_n_gives_nan(self) -> None:
        fit = growth_fit(pd.DataFrame({"n": [3, 3], "runtime_sec": [0.1, 0.2]}))
        assert np.isnan(fit.loc[0, "slope"])
        assert fit.loc[0, "sample_size"] == 2

    def test_empty(self) -> None:
        assert growth_fit(pd.DataFrame()).empty


def test_run_sweep_writes_results(tmp_path) -> None:
    config = _write_config(tmp_path / "sweep.yaml", root=tmp_path / "out")
    run_dir = run_sweep(config)

    results = run_dir / "results"
    runs = pd.read_csv(results / "runs.csv")
    summary = pd.read_csv(results / "summary_by_n.csv")
    assert len(runs) == 8
    assert summary["n"].tolist() == [1, 2, 3, 4]
    assert summary["subsets_checked"].tolist() == [2, 4, 8, 16]
    assert (results / "growth_fit.csv").exists()
    assert (results / "run_meta.csv").exists()
    assert not (run_dir / "figures").exists()
    assert run_dir.name.startswith("test_")


def test_run_sweep_overrides(tmp_path) -> None:
    config = _write_config(tmp_path / "sweep.yaml", n_values="[]", root=tmp_path / "out")
    run_dir = run_sweep(config, overrides={"sweep.repeats": 1, "sweep.n_max": 5})
    runs = pd.read_csv(run_dir / "results" / "runs.csv")
    assert runs["n"].tolist() == [1, 2, 3, 4, 5]


def test_run_sweep_rejects_bad_repeats(tmp_path) -> None:
    config = _write_config(tmp_path / "sweep.yaml", repeats=0, root=tmp_path / "out")
    with pytest.raises(ValueError):
        run_sweep(config)


def test_sweep_with_plots_and_redraw(tmp_path) -> None:
    config = _write_config(
        tmp_path / "sweep.yaml", n_values="[4, 6, 8, 10]", repeats=1, plots="true", root=tmp_path / "out"
    )
    run_dir = run_sweep(config)
    assert (run_dir / "figures" / "line_heights.png").exists()

    paths = plot_from_sweep_dir(run_dir)
    assert any(p.endswith("line_heights.png") for p in paths)


def test_generate_plots_on_empty_summary(tmp_path) -> None:
    assert generate_plots(pd.DataFrame(), pd.DataFrame(), tmp_path / "fig") == []


def test_plot_from_missing_dir(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        plot_from_sweep_dir(tmp_path / "nope")


def test_summarize_by_n() -> None:
    rows = [TwoTowers(n).find_best_sets().as_row() for n in (3, 2, 3)]
    summary = summarize_by_n(pd.DataFrame(rows))
    assert summary["n"].tolist() == [2, 3]
    assert summary["run_count"].tolist() == [1, 2]


def test_analysis_sweep_command(tmp_path, capsys) -> None:
    config = _write_config(tmp_path / "sweep.yaml", root=tmp_path / "unused")
    analysis.main(
        [
            "sweep",
            "--config",
            str(config),
            "--n-values",
            "2,3",
            "--repeats",
            "1",
            "--output-root",
            str(tmp_path / "cli"),
            "--no-plots",
        ]
    )
    out = capsys.readouterr().out
    assert "穷举实验完成" in out
    run_dirs = list((tmp_path / "cli").iterdir())
    assert len(run_dirs) == 1
    runs = pd.read_csv(run_dirs[0] / "results" / "runs.csv")
    assert runs["n"].tolist() == [2, 3]
