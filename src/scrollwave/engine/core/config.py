"""
どこで: `scrollwave.engine.core` の登録設定。
何を: `register` に渡すグリッド構成 `AnimatorConfig` と、その検証エラー `InvalidConfig` を定義。
なぜ: 検証を状態変更の前に一括で行い、部分登録（all-or-nothing 違反）を起こさないため。
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass


class InvalidConfig(ValueError):
    """登録設定が不正なときに送出する。`field` に問題の項目名を保持。"""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


def _is_int(value: object) -> bool:
    # bool は int のサブクラスだが件数としては受け付けない
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class AnimatorConfig:
    """グリッド構成（件数・列数・列間隔・要素サイズ）。"""

    count: int
    columns: int
    column_spacing_px: float
    element_width_px: float
    element_height_px: float

    def validate(self) -> "AnimatorConfig":
        """不正なら `InvalidConfig`。妥当なら self を返す（メソッドチェーン用）。"""
        if not _is_int(self.count):
            raise InvalidConfig("count", self.count, "must be an integer")
        if self.count < 0:
            raise InvalidConfig("count", self.count, "must be >= 0")
        if not _is_int(self.columns):
            raise InvalidConfig("columns", self.columns, "must be an integer")
        if self.columns <= 0:
            raise InvalidConfig("columns", self.columns, "must be > 0")
        for name in ("column_spacing_px", "element_width_px", "element_height_px"):
            v = getattr(self, name)
            if not _is_real(v):
                raise InvalidConfig(name, v, "must be a number")
            # NaN は比較が常に False になるため `> 0` で弾く
            if not v > 0:
                raise InvalidConfig(name, v, "must be > 0")
        return self

    def with_count(self, count: int) -> "AnimatorConfig":
        """件数だけ差し替えた設定を返す（検証は呼び出し側）。"""
        return AnimatorConfig(
            count=count,
            columns=self.columns,
            column_spacing_px=self.column_spacing_px,
            element_width_px=self.element_width_px,
            element_height_px=self.element_height_px,
        )


__all__ = ["AnimatorConfig", "InvalidConfig"]
