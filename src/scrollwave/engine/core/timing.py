"""
どこで: `scrollwave.engine.core.timing`
何を: 1 フレームの所要時間 `FrameTiming`、区間集計 `TimingAggregate`、その保持先 `TimingLog`、
      集計の受け手 `TimingReporter` Protocol を定義。
なぜ: フレーム計測の記録と報告先（ログ/メトリクス/テスト捕捉）を切り離すため。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Protocol

import numpy as np


@dataclass(frozen=True)
class FrameTiming:
    frame_index: int
    duration_ms: float


@dataclass(frozen=True)
class TimingAggregate:
    """前回集計以降のフレーム群の平均/最大所要時間。"""

    frame_range_start: int
    frame_range_end: int
    mean_duration_ms: float
    max_duration_ms: float

    @property
    def frames(self) -> int:
        return self.frame_range_end - self.frame_range_start + 1


class TimingReporter(Protocol):
    """集計イベントの受け手。"""

    def report(self, aggregate: TimingAggregate) -> None:
        """`aggregate` を出力/保持する。"""


class TimingLog:
    """直近 `maxlen` 件の履歴と、前回集計以降のバッチを保持する。"""

    def __init__(self, maxlen: int = 600) -> None:
        if maxlen < 1:
            raise ValueError("maxlen must be >= 1")
        self._history: deque[FrameTiming] = deque(maxlen=maxlen)
        self._batch: list[FrameTiming] = []

    def append(self, timing: FrameTiming) -> None:
        self._history.append(timing)
        self._batch.append(timing)

    def drain_aggregate(self) -> TimingAggregate | None:
        """バッチを集計して空にする。空なら None。"""
        if not self._batch:
            return None
        durations = np.fromiter((t.duration_ms for t in self._batch), dtype=np.float64)
        agg = TimingAggregate(
            frame_range_start=self._batch[0].frame_index,
            frame_range_end=self._batch[-1].frame_index,
            mean_duration_ms=float(durations.mean()),
            max_duration_ms=float(durations.max()),
        )
        self._batch = []
        return agg

    def mean_ms(self) -> float:
        """履歴全体の平均（空なら 0.0）。"""
        if not self._history:
            return 0.0
        return float(np.mean([t.duration_ms for t in self._history]))

    def clear(self) -> None:
        self._history.clear()
        self._batch = []

    def __len__(self) -> int:
        return len(self._history)

    def __iter__(self) -> Iterator[FrameTiming]:
        return iter(tuple(self._history))


__all__ = ["FrameTiming", "TimingAggregate", "TimingLog", "TimingReporter"]
