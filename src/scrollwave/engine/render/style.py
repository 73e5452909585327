"""
どこで: `scrollwave.engine.render.style`
何を: Animator の出力（要素ごとの横オフセット）をホストが適用するスタイル変更命令へ変換する。
なぜ: レイアウトを再計算させるプロパティ（left/top）ではなく、合成段だけで済む `transform`
      に限定して毎フレームの変更を表現するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scrollwave.common import settings

from ..core.animator import ElementOffset
from ..core.element import ElementId, MovableElement

TRANSFORM = "transform"
# フレーム毎の変更で触ってはならないプロパティ
LAYOUT_PROPERTIES = frozenset({"left", "top", "right", "bottom", "width", "height", "margin-left"})


@dataclass(frozen=True)
class StyleMutation:
    element_id: ElementId
    property: str
    value: str


def _px(value: float, precision: int) -> str:
    # -0.00 を 0.00 に寄せる
    rounded = round(float(value), precision) + 0.0
    return f"{rounded:.{precision}f}px"


def transform_value(offset_px: float, precision: int | None = None) -> str:
    """横オフセットを `translateX(<x>px)` 文字列にする。"""
    p = settings.get().TRANSFORM_PRECISION if precision is None else precision
    return f"translateX({_px(offset_px, p)})"


def transform_mutations(
    offsets: Iterable[ElementOffset], precision: int | None = None
) -> list[StyleMutation]:
    """1 要素につき `transform` の変更を 1 件返す（順序は入力順）。"""
    return [
        StyleMutation(element_id, TRANSFORM, transform_value(offset_px, precision))
        for element_id, offset_px in offsets
    ]


def initial_styles(element: MovableElement, precision: int | None = None) -> dict[str, str]:
    """登録時に 1 度だけ適用する静的配置と合成レイヤ指定。"""
    p = settings.get().TRANSFORM_PRECISION if precision is None else precision
    return {
        "left": _px(element.base_offset_px, p),
        "top": _px(element.top_px, p),
        "width": _px(element.width_px, p),
        "height": _px(element.height_px, p),
        "will-change": TRANSFORM,
    }


__all__ = [
    "StyleMutation",
    "TRANSFORM",
    "LAYOUT_PROPERTIES",
    "transform_value",
    "transform_mutations",
    "initial_styles",
]
