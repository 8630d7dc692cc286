from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def _maybe_save(fig, path: Path) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return str(path)


def _plot_runtime(summary_df: pd.DataFrame, fit_df: pd.DataFrame, out_dir: Path) -> list[str]:
    if summary_df.empty or "runtime_sec_mean" not in summary_df.columns:
        return []

    df = summary_df.sort_values("n")
    x = df["n"].to_numpy(dtype=float)
    y = df["runtime_sec_mean"].to_numpy(dtype=float)
    if not np.any(y > 0):
        return []

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(x, y, marker="o", label="runtime_sec_mean")

    if not fit_df.empty and np.isfinite(fit_df["slope"].iloc[0]):
        slope = float(fit_df["slope"].iloc[0])
        intercept = float(fit_df["intercept"].iloc[0])
        base = float(fit_df["growth_base"].iloc[0])
        ax.plot(x, 2.0 ** (slope * x + intercept), linestyle="--", label=f"fit ~ {base:.3f}^n")

    ax.set_yscale("log")
    ax.set_title("Exhaustive Search: Runtime vs n")
    ax.set_xlabel("n")
    ax.set_ylabel("runtime_sec (log)")
    ax.grid(alpha=0.25)
    ax.legend()
    return [_maybe_save(fig, out_dir / "line_runtime.png")]


def _plot_heights(summary_df: pd.DataFrame, out_dir: Path) -> list[str]:
    if summary_df.empty or "best_height" not in summary_df.columns:
        return []

    df = summary_df.sort_values("n")
    x = df["n"].to_numpy(dtype=float)

    fig, ax = plt.subplots(figsize=(7, 4))
    for column, style in [
        ("half_height", "-"),
        ("best_height", "o"),
        ("second_best_height", "x"),
    ]:
        ax.plot(x, df[column].to_numpy(dtype=float), style, label=column)
    ax.set_title("Left Stack Height vs Half Height")
    ax.set_xlabel("n")
    ax.set_ylabel("height")
    ax.grid(alpha=0.25)
    ax.legend()
    return [_maybe_save(fig, out_dir / "line_heights.png")]


def generate_plots(
    summary_df: pd.DataFrame,
    fit_df: pd.DataFrame,
    out_dir: str | Path,
) -> list[str]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    generated: list[str] = []
    generated.extend(_plot_runtime(summary_df, fit_df, out))
    generated.extend(_plot_heights(summary_df, out))
    return generated


def plot_from_sweep_dir(sweep_dir: str | Path) -> list[str]:
    exp = Path(sweep_dir)
    runs_path = exp / "results" / "runs.csv"
    summary_path = exp / "results" / "summary_by_n.csv"
    fit_path = exp / "results" / "growth_fit.csv"

    if not runs_path.exists():
        raise FileNotFoundError(f"未找到 runs.csv: {runs_path}")

    if summary_path.exists():
        summary_df = pd.read_csv(summary_path)
    else:
        from towers.stats import summarize_by_n

        summary_df = summarize_by_n(pd.read_csv(runs_path))
    fit_df = pd.read_csv(fit_path) if fit_path.exists() else pd.DataFrame()

    return generate_plots(summary_df=summary_df, fit_df=fit_df, out_dir=exp / "figures")
