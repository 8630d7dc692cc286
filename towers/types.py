from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def face_area(height: float) -> int:
    return int(round(height * height))


@dataclass(frozen=True)
class SelectionRecord:
    height: float = 0.0
    blocks: tuple[float, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.blocks) == 0

    @property
    def size(self) -> int:
        return len(self.blocks)

    @property
    def face_areas(self) -> tuple[int, ...]:
        return tuple(face_area(h) for h in self.blocks)


@dataclass(frozen=True)
class TowersResult:
    n: int
    half_height: float
    best: SelectionRecord
    second_best: SelectionRecord
    subsets_checked: int
    qualifying_count: int
    runtime_sec: float

    @property
    def gap(self) -> float:
        return self.half_height - self.best.height

    def as_row(self) -> dict[str, Any]:
        return {
            "n": self.n,
            "half_height": float(self.half_height),
            "best_height": float(self.best.height),
            "second_best_height": float(self.second_best.height),
            "gap": float(self.gap),
            "best_size": self.best.size,
            "second_best_size": self.second_best.size,
            "best_set": " ".join(str(x) for x in self.best.face_areas),
            "second_best_set": " ".join(str(x) for x in self.second_best.face_areas),
            "subsets_checked": int(self.subsets_checked),
            "qualifying_count": int(self.qualifying_count),
            "runtime_sec": float(self.runtime_sec),
        }
