"""
scrollwave のコマンドライン入口。

Usage:
  python -m scrollwave simulate --count 200 --frames 120 --scroll-step 15
  python -m scrollwave simulate --viewport 1280x800 --metrics
  python -m scrollwave bench --count 2000 --iters 500

Notes:
  - simulate は FrameClock + ScrollAnimationLoop で合成スクロールを流し、
    10 フレームごとの平均所要時間をログへ出す。
  - bench は位相表（5 回の sin）と要素ごとの math.sin 評価を比較する。
"""

from __future__ import annotations

import argparse
import math
import time
from typing import Sequence

from scrollwave.common.logging import setup_default_logging
from scrollwave.engine.core.animator import Animator
from scrollwave.engine.core.config import InvalidConfig
from scrollwave.engine.core.element import MovableElement
from scrollwave.engine.core.frame_clock import FrameClock
from scrollwave.engine.core.phase import AMPLITUDE_PX, PHASE_CLASSES, SCROLL_DIVISOR
from scrollwave.engine.core.sizing import viewport_count
from scrollwave.engine.monitor.reporter import LoggingReporter, ProcessMetricSampler
from scrollwave.engine.render.style import StyleMutation
from scrollwave.engine.runtime.loop import ScrollAnimationLoop


def _parse_viewport(text: str) -> tuple[int, int]:
    try:
        w, h = text.lower().split("x", 1)
        return int(w), int(h)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"viewport must look like 1280x800: {text!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="scrollwave")
    ap.add_argument("--log-level", default=None, help="ログレベル（既定: SCW_LOG_LEVEL または INFO）")
    sub = ap.add_subparsers(dest="command", required=True)

    def add_grid(p: argparse.ArgumentParser) -> None:
        p.add_argument("--count", type=int, default=200)
        p.add_argument("--viewport", type=_parse_viewport, default=None, help="WxH から件数を決める")
        p.add_argument("--columns", type=int, default=8)
        p.add_argument("--spacing", type=float, default=256.0)
        p.add_argument("--width", type=float, default=73.333)
        p.add_argument("--height", type=float, default=100.0)

    sim = sub.add_parser("simulate", help="合成スクロールでフレームを駆動する")
    add_grid(sim)
    sim.add_argument("--frames", type=int, default=100)
    sim.add_argument("--scroll-step", type=float, default=10.0)
    sim.add_argument("--metrics", action="store_true", help="psutil で CPU/MEM も記録する")

    bench = sub.add_parser("bench", help="位相表と要素ごとの sin を比較する")
    add_grid(bench)
    bench.add_argument("--iters", type=int, default=200)
    return ap


def _count_from(args: argparse.Namespace) -> int:
    if args.viewport is not None:
        return viewport_count(*args.viewport)
    return args.count


def _register(animator: Animator, args: argparse.Namespace) -> None:
    animator.register(
        count=_count_from(args),
        columns=args.columns,
        column_spacing_px=args.spacing,
        element_width_px=args.width,
        element_height_px=args.height,
    )


def run_simulate(args: argparse.Namespace) -> int:
    reporter = ProcessMetricSampler() if args.metrics else LoggingReporter()
    animator = Animator(reporter=reporter)
    _register(animator, args)

    applied = 0

    def sink(mutations: Sequence[StyleMutation]) -> None:
        nonlocal applied
        applied += len(mutations)

    loop = ScrollAnimationLoop(animator, sink=sink)
    clock = FrameClock([loop])
    scroll = 0.0
    for _ in range(args.frames):
        scroll += args.scroll_step
        loop.on_scroll(scroll)
        clock.tick()

    mean_ms = animator.mean_duration_ms
    print(
        f"elements={len(animator)} frames={animator.frame_count} mutations={applied} "
        f"mean={mean_ms:.3f}ms/frame"
    )
    return 0


def _naive_offsets(elements: Sequence[MovableElement], scroll: float) -> list[float]:
    # 要素ごとに sin を評価する比較用の素朴実装
    return [
        -e.base_offset_px + AMPLITUDE_PX * math.sin(scroll / SCROLL_DIVISOR + e.index % PHASE_CLASSES)
        for e in elements
    ]


def run_bench(args: argparse.Namespace) -> int:
    animator = Animator()
    _register(animator, args)
    elements = animator.elements

    t0 = time.perf_counter()
    for i in range(args.iters):
        _ = animator.compute_frame(i)
    table_sec = time.perf_counter() - t0

    t0 = time.perf_counter()
    for i in range(args.iters):
        _ = _naive_offsets(elements, i)
    naive_sec = time.perf_counter() - t0

    iters = max(1, args.iters)
    print(
        f"elements={len(elements)} iters={args.iters} "
        f"phase_table={table_sec / iters * 1000:.3f} ms/call "
        f"naive={naive_sec / iters * 1000:.3f} ms/call"
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_default_logging(args.log_level)
    try:
        if args.command == "simulate":
            return run_simulate(args)
        return run_bench(args)
    except InvalidConfig as e:
        print(f"error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
