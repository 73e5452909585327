from __future__ import annotations

import logging

import pytest

from scrollwave.engine.core.animator import Animator
from scrollwave.engine.monitor.reporter import CaptureReporter


def test_frame_counter_equals_tick_count(grid8: Animator) -> None:
    for k in range(1, 26):
        t = grid8.tick(k * 10)
        assert t.frame_index == k
    assert grid8.frame_count == 25
    assert [t.frame_index for t in grid8.timings] == list(range(1, 26))


def test_aggregate_fires_once_per_ten_ticks(grid8: Animator, capture: CaptureReporter) -> None:
    for k in range(9):
        grid8.tick(k)
    assert capture.events == []
    grid8.tick(9)
    assert len(capture.events) == 1
    for k in range(25):
        grid8.tick(k)
    assert len(capture.events) == 3
    ranges = [(e.frame_range_start, e.frame_range_end) for e in capture.events]
    assert ranges == [(1, 10), (11, 20), (21, 30)]
    assert all(e.frames == 10 for e in capture.events)


def test_aggregate_mean_matches_recorded_timings(grid8: Animator, capture: CaptureReporter) -> None:
    timings = [grid8.tick(k).duration_ms for k in range(10)]
    agg = capture.events[0]
    assert agg.mean_duration_ms == pytest.approx(sum(timings) / 10)
    assert agg.max_duration_ms == pytest.approx(max(timings))
    assert grid8.last_aggregate == agg


def test_tick_before_register_is_counted_noop(capture: CaptureReporter) -> None:
    a = Animator(reporter=capture)
    seen = []
    t = a.tick(100, apply=seen.append)
    assert t.frame_index == 1
    assert t.duration_ms >= 0.0
    assert seen == [[]]


def test_apply_receives_computed_frame(grid8: Animator) -> None:
    seen = []
    grid8.tick(640, apply=seen.append)
    assert seen == [grid8.compute_frame(640)]


def test_apply_error_propagates_and_tick_is_not_counted(grid8: Animator) -> None:
    def boom(_offsets) -> None:
        raise RuntimeError("host failed")

    with pytest.raises(RuntimeError):
        grid8.tick(0, apply=boom)
    assert grid8.frame_count == 0


def test_reset_restarts_counter_and_keeps_registry(grid8: Animator, capture: CaptureReporter) -> None:
    for k in range(15):
        grid8.tick(k)
    grid8.reset()
    assert grid8.frame_count == 0
    assert grid8.timings == ()
    assert grid8.last_aggregate is None
    assert len(grid8) == 8
    for k in range(10):
        grid8.tick(k)
    assert (capture.events[-1].frame_range_start, capture.events[-1].frame_range_end) == (1, 10)


def test_custom_report_interval() -> None:
    cap = CaptureReporter()
    a = Animator(reporter=cap, report_interval=3)
    for k in range(7):
        a.tick(k)
    assert [(e.frame_range_start, e.frame_range_end) for e in cap.events] == [(1, 3), (4, 6)]


def test_report_interval_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    from scrollwave.common import settings

    monkeypatch.setenv("SCW_REPORT_INTERVAL", "4")
    settings.reload_from_env()
    cap = CaptureReporter()
    a = Animator(reporter=cap)
    assert a.report_interval == 4
    for k in range(8):
        a.tick(k)
    assert len(cap.events) == 2


@pytest.mark.parametrize("interval", [0, -3, 2.5, True, "10"])
def test_invalid_report_interval(interval) -> None:
    with pytest.raises(ValueError):
        Animator(report_interval=interval)


def test_mean_duration_ms_follows_history(grid8: Animator) -> None:
    assert grid8.mean_duration_ms == 0.0
    durations = [grid8.tick(k).duration_ms for k in range(4)]
    assert grid8.mean_duration_ms == pytest.approx(sum(durations) / 4)
    grid8.reset()
    assert grid8.mean_duration_ms == 0.0


def test_timing_history_is_bounded() -> None:
    a = Animator(timing_maxlen=5)
    for k in range(12):
        a.tick(k)
    assert [t.frame_index for t in a.timings] == [8, 9, 10, 11, 12]
    assert a.frame_count == 12


def test_aggregate_is_logged_at_debug(grid8: Animator, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="scrollwave.engine.core.animator")
    for k in range(10):
        grid8.tick(k)
    assert any("frames 1-10" in r.getMessage() for r in caplog.records)


def test_independent_animators_do_not_share_state() -> None:
    a = Animator()
    b = Animator()
    a.tick(0)
    a.tick(1)
    assert a.frame_count == 2
    assert b.frame_count == 0
