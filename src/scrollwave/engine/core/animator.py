"""
どこで: `scrollwave.engine.core.animator`
何を: 登録済み要素の横オフセットをスクロール量から毎フレーム計算する `Animator`。
      `compute_frame` は純粋計算のみ、`tick` はその計測と集計報告を担う。
なぜ: DOM 等の描画環境に依存せず、位置計算と性能計測を単体でテスト可能にするため。

注意:
- 出力の適用（compositor-only な transform への反映）はホスト側の責務。`tick(apply=...)` で
  渡されたコールバックはロックの外で呼ばれ、その時間も計測に含まれる。
- 登録系（register/resize/unregister/reset）と計算系は単一の RLock で排他する。
"""

from __future__ import annotations

import logging
import numbers
import threading
import time
from typing import Callable, NamedTuple, Sequence

import numpy as np

from scrollwave.common import settings

from .config import AnimatorConfig, InvalidConfig
from .element import ElementId, MovableElement, make_element, make_elements
from .phase import AMPLITUDE_PX, PHASE_CLASSES, PhaseTable
from .timing import FrameTiming, TimingAggregate, TimingLog, TimingReporter

logger = logging.getLogger(__name__)


class ElementOffset(NamedTuple):
    element_id: ElementId
    offset_px: float


ApplyCallback = Callable[[Sequence[ElementOffset]], None]


class Animator:
    """スクロール駆動の横移動アニメータ。

    引数:
        reporter: `report_interval` フレームごとの集計イベントの受け手（省略時は DEBUG ログのみ）。
        report_interval: 集計間隔 [tick]。省略時は設定 `REPORT_INTERVAL`（既定 10）。
        timing_maxlen: 保持するフレーム計測履歴の上限。省略時は設定 `TIMING_LOG_MAXLEN`。
    """

    def __init__(
        self,
        reporter: TimingReporter | None = None,
        *,
        report_interval: int | None = None,
        timing_maxlen: int | None = None,
    ) -> None:
        s = settings.get()
        interval = s.REPORT_INTERVAL if report_interval is None else report_interval
        if not isinstance(interval, numbers.Integral) or isinstance(interval, bool):
            raise ValueError(f"report_interval must be an integer: {interval!r}")
        if interval < 1:
            raise ValueError("report_interval must be >= 1")
        interval = int(interval)
        self._reporter = reporter
        self._report_interval = interval
        self._log_timings = s.LOG_TIMINGS
        self._lock = threading.RLock()

        self._config: AnimatorConfig | None = None
        self._elements: dict[ElementId, MovableElement] = {}
        # 次に発行するインデックス（unregister では下げない）
        self._next_index = 0
        self._ids = np.empty(0, dtype=np.int64)
        self._bases = np.empty(0, dtype=np.float64)
        self._classes = np.empty(0, dtype=np.intp)

        self._frame_count = 0
        self._timings = TimingLog(s.TIMING_LOG_MAXLEN if timing_maxlen is None else timing_maxlen)
        self._last_aggregate: TimingAggregate | None = None

    # -------- registry --------
    def register(
        self,
        count: int,
        columns: int,
        column_spacing_px: float,
        element_width_px: float,
        element_height_px: float,
    ) -> None:
        """`count` 個の要素でレジストリを置き換える。不正設定は `InvalidConfig`（状態は不変）。"""
        config = AnimatorConfig(
            count=count,
            columns=columns,
            column_spacing_px=column_spacing_px,
            element_width_px=element_width_px,
            element_height_px=element_height_px,
        ).validate()
        elements = make_elements(config)
        with self._lock:
            self._config = config
            self._elements = {e.element_id: e for e in elements}
            self._next_index = config.count
            self._rebuild_arrays()
        logger.debug("registered %d elements (%d columns)", config.count, config.columns)

    def resize(self, count: int) -> None:
        """登録済み設定のまま生存要素数を `count` に揃える。

        増加分は未発行のインデックスから末尾に追加し、減少分は末尾から破棄する。
        unregister 済みの要素は復活しない。
        """
        with self._lock:
            if self._config is None:
                raise InvalidConfig("count", count, "resize requires a prior register")
            config = self._config.with_count(count).validate()
            live = list(self._elements.values())
            if count < len(live):
                self._elements = {e.element_id: e for e in live[:count]}
            else:
                start = self._next_index
                for index in range(start, start + count - len(live)):
                    e = make_element(index, config)
                    self._elements[e.element_id] = e
                self._next_index = start + count - len(live)
            self._config = config
            self._rebuild_arrays()
        logger.debug("resized to %d elements", len(self._elements))

    def unregister(self, element_id: ElementId) -> bool:
        """要素を 1 つ破棄する。残りの要素のインデックス/基準オフセットは変わらない。"""
        with self._lock:
            if element_id not in self._elements:
                return False
            del self._elements[element_id]
            if self._config is not None:
                self._config = self._config.with_count(len(self._elements))
            self._rebuild_arrays()
        return True

    def _rebuild_arrays(self) -> None:
        # 登録順（= 重なり順）を保った配列キャッシュ
        elems = list(self._elements.values())
        self._ids = np.fromiter((e.element_id for e in elems), dtype=np.int64, count=len(elems))
        self._bases = np.fromiter(
            (e.base_offset_px for e in elems), dtype=np.float64, count=len(elems)
        )
        self._classes = np.fromiter(
            (e.index % PHASE_CLASSES for e in elems), dtype=np.intp, count=len(elems)
        )

    # -------- compute --------
    def compute_frame(self, scroll_offset_px: float) -> list[ElementOffset]:
        """全要素の横オフセット `-base + 1000 * sin(scroll / 1250 + i % 5)` を登録順で返す。

        純粋関数（同じレジストリ・同じ入力なら同じ出力）。未登録なら空リスト。
        """
        with self._lock:
            if self._ids.size == 0:
                return []
            ids = self._ids
            bases = self._bases
            classes = self._classes
        table = PhaseTable.from_scroll(scroll_offset_px)
        offsets = -bases + AMPLITUDE_PX * table.take(classes)
        return [ElementOffset(i, o) for i, o in zip(ids.tolist(), offsets.tolist())]

    def tick(self, scroll_offset_px: float, apply: ApplyCallback | None = None) -> FrameTiming:
        """1 フレームを進める。計算（＋ `apply`）の所要時間を記録し、集計間隔ごとに報告する。"""
        t0 = time.perf_counter()
        offsets = self.compute_frame(scroll_offset_px)
        if apply is not None:
            apply(offsets)
        duration_ms = (time.perf_counter() - t0) * 1000.0

        with self._lock:
            self._frame_count += 1
            timing = FrameTiming(frame_index=self._frame_count, duration_ms=duration_ms)
            self._timings.append(timing)
            aggregate = None
            if self._frame_count % self._report_interval == 0:
                aggregate = self._timings.drain_aggregate()
                self._last_aggregate = aggregate

        if self._log_timings:
            logger.debug("frame %d: %.3fms", timing.frame_index, timing.duration_ms)
        if aggregate is not None:
            logger.debug(
                "frames %d-%d mean=%.3fms max=%.3fms",
                aggregate.frame_range_start,
                aggregate.frame_range_end,
                aggregate.mean_duration_ms,
                aggregate.max_duration_ms,
            )
            if self._reporter is not None:
                self._reporter.report(aggregate)
        return timing

    def reset(self) -> None:
        """フレームカウンタと計測履歴を初期化する（レジストリは保持）。"""
        with self._lock:
            self._frame_count = 0
            self._timings.clear()
            self._last_aggregate = None

    # -------- accessors --------
    @property
    def elements(self) -> tuple[MovableElement, ...]:
        with self._lock:
            return tuple(self._elements.values())

    @property
    def config(self) -> AnimatorConfig | None:
        return self._config

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def report_interval(self) -> int:
        return self._report_interval

    @property
    def timings(self) -> tuple[FrameTiming, ...]:
        with self._lock:
            return tuple(self._timings)

    @property
    def mean_duration_ms(self) -> float:
        """保持中の計測履歴の平均所要時間（未計測なら 0.0）。"""
        with self._lock:
            return self._timings.mean_ms()

    @property
    def last_aggregate(self) -> TimingAggregate | None:
        return self._last_aggregate

    def __len__(self) -> int:
        return len(self._elements)


__all__ = ["Animator", "ApplyCallback", "ElementOffset"]
