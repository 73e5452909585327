"""
どこで: `scrollwave.engine.monitor` の計測報告層。
何を: `TimingAggregate` の受け手（ログ出力・テスト捕捉・プロセスメトリクス付きサンプラ）。
なぜ: 集計の出力先を差し替え可能にし、Animator 本体を出力手段から独立させるため。
"""

from __future__ import annotations

import logging
import os
import time
from typing import Callable

import psutil

from ..core.timing import TimingAggregate, TimingReporter

logger = logging.getLogger(__name__)


class LoggingReporter:
    """集計 1 件につき 1 行をロガーへ出す。"""

    def __init__(self, log: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._log = log or logger
        self._level = level

    def report(self, aggregate: TimingAggregate) -> None:
        self._log.log(
            self._level,
            "average frame time over frames %d-%d: %.3fms (max %.3fms)",
            aggregate.frame_range_start,
            aggregate.frame_range_end,
            aggregate.mean_duration_ms,
            aggregate.max_duration_ms,
        )


class CaptureReporter:
    """受け取った集計をリストに溜める（テスト/診断用）。"""

    def __init__(self) -> None:
        self.events: list[TimingAggregate] = []

    def report(self, aggregate: TimingAggregate) -> None:
        self.events.append(aggregate)

    def clear(self) -> None:
        self.events.clear()


class ProcessMetricSampler:
    """集計ごとに実効FPS・CPU・MEM をサンプリングし dict に保持する。"""

    def __init__(
        self,
        inner: TimingReporter | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._inner = inner
        self._clock = clock
        self._proc = psutil.Process(os.getpid())
        # 前回集計の時刻（実効FPS算出に使用）
        self._last = 0.0
        self.data: dict[str, str] = {}

    def report(self, aggregate: TimingAggregate) -> None:
        now = self._clock()
        dt = now - self._last if self._last > 0.0 else 0.0
        self._last = now
        fps = (aggregate.frames / dt) if dt > 0.0 else 0.0

        # 表示順序：FPS を最初に
        self.data.update(
            FPS=f"{fps:4.1f}",
            FRAME=f"{aggregate.mean_duration_ms:.3f}ms",
            CPU=f"{self._proc.cpu_percent(0.0):4.1f}%",
            MEM=self._human(self._proc.memory_info().rss),
        )
        logger.info(
            "frames %d-%d %s",
            aggregate.frame_range_start,
            aggregate.frame_range_end,
            " ".join(f"{k}={v.strip()}" for k, v in self.data.items()),
        )
        if self._inner is not None:
            self._inner.report(aggregate)

    # -------- helpers --------
    @staticmethod
    def _human(n: float) -> str:
        for u in "B KB MB GB TB".split():
            if n < 1024:
                return f"{n:4.1f}{u}"
            n /= 1024
        return f"{n:4.1f}PB"


__all__ = ["LoggingReporter", "CaptureReporter", "ProcessMetricSampler"]
