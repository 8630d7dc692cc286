from __future__ import annotations

import numpy as np
import pandas as pd


FIT_COLUMNS = ["slope", "intercept", "r2", "growth_base", "sample_size"]


def growth_fit(runs_df: pd.DataFrame) -> pd.DataFrame:
    """Fit log2(runtime_sec) = slope * n + intercept over all runs.

    ``growth_base`` is ``2 ** slope``; an exhaustive search should land near 2.
    """

    if runs_df.empty or "runtime_sec" not in runs_df.columns:
        return pd.DataFrame(columns=FIT_COLUMNS)

    work = runs_df[runs_df["runtime_sec"] > 0]
    x = work["n"].to_numpy(dtype=float)
    y = np.log2(work["runtime_sec"].to_numpy(dtype=float))

    if len(x) < 2 or float(np.var(x)) == 0.0:
        return pd.DataFrame(
            [
                {
                    "slope": np.nan,
                    "intercept": np.nan,
                    "r2": np.nan,
                    "growth_base": np.nan,
                    "sample_size": int(len(x)),
                }
            ],
            columns=FIT_COLUMNS,
        )

    slope, intercept = np.polyfit(x, y, deg=1)
    y_pred = slope * x + intercept
    ss_res = float(np.sum((y - y_pred) ** 2))
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    r2 = 1.0 - ss_res / ss_tot if ss_tot != 0 else np.nan

    return pd.DataFrame(
        [
            {
                "slope": float(slope),
                "intercept": float(intercept),
                "r2": float(r2),
                "growth_base": float(2.0 ** slope),
                "sample_size": int(len(x)),
            }
        ],
        columns=FIT_COLUMNS,
    )


def summarize_by_n(runs_df: pd.DataFrame) -> pd.DataFrame:
    if runs_df.empty:
        return pd.DataFrame()

    return (
        runs_df.groupby("n", as_index=False)
        .agg(
            run_count=("runtime_sec", "count"),
            runtime_sec_mean=("runtime_sec", "mean"),
            runtime_sec_std=("runtime_sec", "std"),
            half_height=("half_height", "first"),
            best_height=("best_height", "first"),
            second_best_height=("second_best_height", "first"),
            gap=("gap", "first"),
            subsets_checked=("subsets_checked", "first"),
            qualifying_count=("qualifying_count", "first"),
            best_set=("best_set", "first"),
        )
        .sort_values("n")
        .reset_index(drop=True)
    )
