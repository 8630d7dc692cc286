from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from omegaconf import OmegaConf

from towers.selector import TwoTowers
from towers.stats import growth_fit, summarize_by_n
from towers.utils import apply_overrides, ensure_dir, timestamp_id

_logger = logging.getLogger(__name__)


def resolve_n_values(sweep_cfg: dict[str, Any]) -> list[int]:
    raw = sweep_cfg.get("n_values") or []
    if isinstance(raw, str):
        raw = [token for token in raw.split(",") if token.strip()]
    if raw:
        values = [int(x) for x in raw]
    else:
        n_min = int(sweep_cfg.get("n_min", 1))
        n_max = int(sweep_cfg.get("n_max", n_min))
        values = list(range(n_min, n_max + 1))

    if not values:
        raise ValueError("n_values 不能为空")
    negative = [n for n in values if n < 0]
    if negative:
        raise ValueError(f"n 必须 >= 0: {negative}")
    return values


def load_config(config_path: str | Path, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    cfg = OmegaConf.to_container(OmegaConf.load(str(config_path)), resolve=True)
    assert isinstance(cfg, dict)
    return apply_overrides(cfg, overrides)


def run_sweep(
    config_path: str | Path,
    overrides: dict[str, Any] | None = None,
) -> Path:
    cfg = load_config(config_path, overrides)
    sweep_cfg = dict(cfg.get("sweep", {}))
    output_cfg = dict(cfg.get("output", {}))

    n_values = resolve_n_values(sweep_cfg)
    repeats = int(sweep_cfg.get("repeats", 1))
    if repeats < 1:
        raise ValueError("repeats 必须 >= 1")

    run_id = timestamp_id(str(output_cfg.get("run_id_prefix", "sweep")))
    run_dir = ensure_dir(Path(output_cfg.get("root", "outputs/sweeps")) / run_id)
    results_dir = ensure_dir(run_dir / "results")

    _logger.info("sweep %s: n=%s repeats=%d", run_id, n_values, repeats)

    rows: list[dict[str, Any]] = []
    for n in n_values:
        for repeat_idx in range(repeats):
            result = TwoTowers(n).find_best_sets()
            row = {"run_id": run_id, "repeat_idx": repeat_idx}
            row.update(result.as_row())
            rows.append(row)
        _logger.info("n=%d done, last runtime %.4fs", n, rows[-1]["runtime_sec"])

    runs_df = pd.DataFrame(rows)
    summary_df = summarize_by_n(runs_df)
    fit_df = growth_fit(runs_df)

    runs_df.to_csv(results_dir / "runs.csv", index=False)
    summary_df.to_csv(results_dir / "summary_by_n.csv", index=False)
    fit_df.to_csv(results_dir / "growth_fit.csv", index=False)
    pd.DataFrame(
        [
            {"key": "run_id", "value": run_id},
            {"key": "config_path", "value": str(config_path)},
            {"key": "n_values", "value": ",".join(str(n) for n in n_values)},
            {"key": "repeats", "value": repeats},
        ]
    ).to_csv(results_dir / "run_meta.csv", index=False)

    if bool(output_cfg.get("generate_plots", True)):
        from towers.visualize import generate_plots

        generate_plots(
            summary_df=summary_df,
            fit_df=fit_df,
            out_dir=ensure_dir(run_dir / "figures"),
        )

    return run_dir
