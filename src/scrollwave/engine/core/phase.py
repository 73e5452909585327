"""
どこで: `scrollwave.engine.core.phase`
何を: スクロール量から 5 つの位相値 `sin(scroll / 1250 + k)`（k=0..4）を求める `PhaseTable`。
なぜ: 要素ごとに三角関数を評価せず、1 フレームあたり 5 回の評価＋添字参照で済ませるため。

設計方針:
- 純粋・決定的。副作用なし。
- 要素インデックス i の位相は `values[i % 5]`。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

PHASE_CLASSES = 5
SCROLL_DIVISOR = 1250.0
AMPLITUDE_PX = 1000.0

_CLASS_OFFSETS = np.arange(PHASE_CLASSES, dtype=np.float64)


@dataclass(frozen=True)
class PhaseTable:
    """1 フレーム分の位相表（長さは常に `PHASE_CLASSES`）。"""

    scroll_offset_px: float
    values: tuple[float, ...]

    @classmethod
    def from_scroll(cls, scroll_offset_px: float) -> "PhaseTable":
        base = float(scroll_offset_px) / SCROLL_DIVISOR
        vals = np.sin(base + _CLASS_OFFSETS)
        return cls(scroll_offset_px=float(scroll_offset_px), values=tuple(float(v) for v in vals))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float64)

    def take(self, classes: np.ndarray) -> np.ndarray:
        """位相クラス配列（`index % 5` 済み）に対応する位相をまとめて引く。"""
        return self.as_array()[classes]

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["PhaseTable", "PHASE_CLASSES", "SCROLL_DIVISOR", "AMPLITUDE_PX"]
