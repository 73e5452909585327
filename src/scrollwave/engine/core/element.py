"""
どこで: `scrollwave.engine.core` の要素モデル。
何を: 登録時に位置が確定する不変の `MovableElement` と、その生成関数を提供。
なぜ: 基準オフセット/縦位置を毎フレーム再計算しないよう、生成時に一度だけ決めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import AnimatorConfig

ElementId = int


@dataclass(frozen=True)
class MovableElement:
    """スクロールに応じて横方向へ動く 1 要素。

    `element_id` はホスト側のハンドル（登録インデックスと同値）。
    `index` は位相クラス（`index % 5`）の決定に使い、登録解除後も変わらない。
    """

    element_id: ElementId
    index: int
    base_offset_px: float
    top_px: float
    width_px: float
    height_px: float
    row_index: int
    col_index: int


def make_element(index: int, config: AnimatorConfig) -> MovableElement:
    """`index` 番目の要素を `config` のグリッドに従って生成する。"""
    row, col = divmod(index, config.columns)
    spacing = float(config.column_spacing_px)
    return MovableElement(
        element_id=index,
        index=index,
        base_offset_px=col * spacing,
        top_px=row * spacing,
        width_px=float(config.element_width_px),
        height_px=float(config.element_height_px),
        row_index=row,
        col_index=col,
    )


def make_elements(config: AnimatorConfig, start: int = 0) -> list[MovableElement]:
    """インデックス `start` から `config.count` 未満までの要素列を生成する。"""
    return [make_element(i, config) for i in range(start, config.count)]


__all__ = ["ElementId", "MovableElement", "make_element", "make_elements"]
