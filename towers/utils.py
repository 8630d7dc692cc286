from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any


def timestamp_id(prefix: str = "sweep") -> str:
    return f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"


def ensure_dir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def parse_csv_list(text: str, cast: type = str) -> list[Any]:
    values = [x.strip() for x in text.split(",") if x.strip()]
    if cast is str:
        return values
    return [cast(v) for v in values]


def set_nested(config: dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    cur = config
    for part in parts[:-1]:
        node = cur.get(part)
        if not isinstance(node, dict):
            node = {}
            cur[part] = node
        cur = node
    cur[parts[-1]] = value


def apply_overrides(config: dict[str, Any], overrides: dict[str, Any] | None) -> dict[str, Any]:
    if not overrides:
        return config
    for key, value in overrides.items():
        if value is None:
            continue
        set_nested(config, key, value)
    return config
