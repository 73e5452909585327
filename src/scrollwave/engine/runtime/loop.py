"""
どこで: `scrollwave.engine.runtime` のフレーム駆動層。
何を: スクロールイベントを記録し、次のフレーム `tick(dt)` で 1 回だけ Animator を進めて
      スタイル変更命令をホストの sink へ渡す `ScrollAnimationLoop`。
なぜ: 1 フレーム内に複数届くスクロールイベントを最新値 1 回の更新にまとめ、
      イベントハンドラ内で直接スタイルを書き換えないようにするため。
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..core.animator import Animator, ElementOffset
from ..core.tickable import Tickable
from ..core.timing import FrameTiming
from ..render.style import StyleMutation, transform_mutations

logger = logging.getLogger(__name__)

StyleSink = Callable[[Sequence[StyleMutation]], None]


class ScrollAnimationLoop(Tickable):
    """最新のスクロール量を保持し、更新が必要なフレームでだけ Animator を進める。"""

    def __init__(
        self,
        animator: Animator,
        sink: StyleSink | None = None,
        initial_scroll_px: float = 0,
    ) -> None:
        """
        _animator: 位置計算と計測を担う Animator
        _sink: スタイル変更命令の適用先（ホスト UI 層）。None なら計算と計測のみ
        _latest: 最後に受け取ったスクロール量
        _pending: 次の tick で更新が必要か（初回は配置のため True）
        _has_event: 次の tick までにスクロールイベントを受け取ったか
        """
        self._animator = animator
        self._sink = sink
        self._latest = initial_scroll_px
        self._pending = True
        self._has_event = False
        self.last_timing: FrameTiming | None = None
        self.coalesced = 0

    # -------- host events --------
    def on_scroll(self, scroll_offset_px: float) -> None:
        if self._has_event:
            # 同一フレーム内の後続イベントは最新値で上書きするだけ
            self.coalesced += 1
        self._latest = scroll_offset_px
        self._has_event = True
        self._pending = True

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def latest_scroll(self) -> float:
        return self._latest

    # -------- Tickable interface --------
    def tick(self, dt: float) -> None:
        if not self._pending:
            return
        self._pending = False
        self._has_event = False
        self.last_timing = self._animator.tick(self._latest, apply=self._apply)

    def _apply(self, offsets: Sequence[ElementOffset]) -> None:
        if self._sink is None:
            return
        self._sink(transform_mutations(offsets))


__all__ = ["ScrollAnimationLoop", "StyleSink"]
