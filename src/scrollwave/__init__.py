"""
どこで: `scrollwave` 入口（高レベル公開 API）。
何を: `Animator`・設定/エラー型・計測報告・スタイル命令・スクロールループを再輸出。
なぜ: 利用者が単一名前空間から登録→毎フレーム計算→適用まで完結できるようにするため。

Usage:
    from scrollwave import Animator, ScrollAnimationLoop

    animator = Animator(reporter=LoggingReporter())
    animator.register(count=200, columns=8, column_spacing_px=256,
                      element_width_px=73.333, element_height_px=100)
    loop = ScrollAnimationLoop(animator, sink=host.apply_styles)
    # スクロールイベントで loop.on_scroll(y)、アニメーションフレームで loop.tick(dt)
"""

from scrollwave.engine.core.animator import Animator, ElementOffset
from scrollwave.engine.core.config import AnimatorConfig, InvalidConfig
from scrollwave.engine.core.element import MovableElement
from scrollwave.engine.core.frame_clock import FrameClock
from scrollwave.engine.core.phase import PhaseTable
from scrollwave.engine.core.sizing import grid_count, viewport_count
from scrollwave.engine.core.timing import FrameTiming, TimingAggregate, TimingReporter
from scrollwave.engine.monitor.reporter import (
    CaptureReporter,
    LoggingReporter,
    ProcessMetricSampler,
)
from scrollwave.engine.render.style import (
    StyleMutation,
    initial_styles,
    transform_mutations,
    transform_value,
)
from scrollwave.engine.runtime.loop import ScrollAnimationLoop

__all__ = [
    # メインAPI
    "Animator",
    "ScrollAnimationLoop",
    "FrameClock",
    # データ型
    "AnimatorConfig",
    "InvalidConfig",
    "MovableElement",
    "ElementOffset",
    "PhaseTable",
    "FrameTiming",
    "TimingAggregate",
    # 計測報告
    "TimingReporter",
    "LoggingReporter",
    "CaptureReporter",
    "ProcessMetricSampler",
    # スタイル命令
    "StyleMutation",
    "transform_value",
    "transform_mutations",
    "initial_styles",
    # 件数ポリシー
    "viewport_count",
    "grid_count",
]

# バージョン情報
__version__ = "2025.10"
