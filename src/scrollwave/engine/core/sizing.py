"""
どこで: `scrollwave.engine.core.sizing`
何を: ビューポート寸法から登録件数を決める例示的なポリシー関数。
なぜ: 画面に収まる分だけ要素を作り、毎フレームの計算量を抑えるため（採用は呼び出し側の任意）。
"""

from __future__ import annotations

import math


def viewport_count(viewport_width_px: float, viewport_height_px: float, cell_px: float = 75.0) -> int:
    """`height / cell + width / cell` を切り捨てた件数（負にはならない）。"""
    if cell_px <= 0:
        raise ValueError("cell_px must be > 0")
    return max(0, int(viewport_height_px / cell_px + viewport_width_px / cell_px))


def grid_count(viewport_height_px: float, columns: int, spacing_px: float) -> int:
    """画面の高さを埋める行数 × 列数。"""
    if columns <= 0 or spacing_px <= 0:
        raise ValueError("columns and spacing_px must be > 0")
    rows = max(0, math.ceil(viewport_height_px / spacing_px))
    return rows * columns


__all__ = ["viewport_count", "grid_count"]
