from __future__ import annotations

import logging
import math
import time
import warnings

import pytest

from scrollwave.engine.core.animator import Animator
from tests._utils.perf import load_baseline, maybe_update_baseline

logger = logging.getLogger(__name__)

COUNT = 2000


def _animator() -> Animator:
    a = Animator()
    a.register(
        count=COUNT, columns=8, column_spacing_px=256, element_width_px=73.333, element_height_px=100
    )
    return a


@pytest.mark.perf
# What this tests
# - Measures compute_frame for a large grid and compares against a JSON baseline.
# - Regressions >30% raise a warning (do not fail); baseline can be updated with env.
def test_perf_smoke_compute_frame():
    """Measure one frame of offset computation for COUNT elements.

    - Never fails on timing; only logs and optionally warns on >30% regression.
    - Baseline is persisted under tests/_snapshots/perf when SCW_UPDATE_SNAPSHOTS=1.
    """
    a = _animator()
    _ = a.compute_frame(0)  # warm-up

    runs = 5
    times: list[float] = []
    for i in range(runs):
        t0 = time.perf_counter()
        _ = a.compute_frame(i * 37)
        times.append(time.perf_counter() - t0)
    measured = min(times)

    name = "perf_smoke_compute_frame_v1"
    baseline = load_baseline(name)
    maybe_update_baseline(name, measured, count=COUNT)

    if baseline is not None:
        ratio = measured / baseline if baseline > 0 else float("inf")
        msg = (
            f"perf[{name}] measured={measured*1e3:.3f}ms baseline={baseline*1e3:.3f}ms "
            f"ratio={ratio:.2f}x"
        )
        if ratio > 1.30:
            warnings.warn("Performance regression >30%: " + msg)
        else:
            logger.info(msg)
    else:
        logger.info(
            "perf[%s] measured=%.3fms (no baseline). Set SCW_UPDATE_SNAPSHOTS=1 to record.",
            name,
            measured * 1e3,
        )


@pytest.mark.perf
def test_phase_table_matches_per_element_sine():
    # 位相表の結果は要素ごとの sin 評価と一致する（最適化で値が変わらない）
    a = _animator()
    scroll = 4321
    for e, (_, off) in zip(a.elements, a.compute_frame(scroll)):
        naive = -e.base_offset_px + 1000 * math.sin(scroll / 1250 + e.index % 5)
        assert off == pytest.approx(naive, rel=1e-12, abs=1e-9)
