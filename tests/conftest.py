"""共通フィクスチャ。

- 集計捕捉付きの Animator
- 8 列 × 1 行（間隔 256px）のグリッド
- 設定のスナップショット復元
"""

from __future__ import annotations

from typing import Iterator

import pytest

from scrollwave.common import settings
from scrollwave.engine.core.animator import Animator
from scrollwave.engine.monitor.reporter import CaptureReporter


@pytest.fixture(autouse=True)
def settings_restore() -> Iterator[None]:
    """環境変数から読み直した状態で開始し、テスト後も読み直す。"""
    settings.reload_from_env()
    yield
    settings.reload_from_env()


@pytest.fixture()
def capture() -> CaptureReporter:
    return CaptureReporter()


@pytest.fixture()
def animator(capture: CaptureReporter) -> Animator:
    return Animator(reporter=capture, report_interval=10)


@pytest.fixture()
def grid8(animator: Animator) -> Animator:
    animator.register(
        count=8, columns=8, column_spacing_px=256, element_width_px=73.333, element_height_px=100
    )
    return animator
