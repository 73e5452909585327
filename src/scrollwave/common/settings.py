"""
どこで: `scrollwave.common.settings`
何を: アニメータ周辺の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を保つため。
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import env_bool, env_int


@dataclass
class _Settings:
    # 計測
    REPORT_INTERVAL: int = 10
    TIMING_LOG_MAXLEN: int = 600
    LOG_TIMINGS: bool = False

    # 出力
    TRANSFORM_PRECISION: int = 2

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 不正値は既定値、下限を割る値は下限へ丸める。
    """
    _settings.REPORT_INTERVAL = env_int("SCW_REPORT_INTERVAL", 10, min_value=1) or 10
    _settings.TIMING_LOG_MAXLEN = env_int("SCW_TIMING_LOG_MAXLEN", 600, min_value=1) or 600
    _settings.LOG_TIMINGS = env_bool("SCW_LOG_TIMINGS", False)

    precision = env_int("SCW_TRANSFORM_PRECISION", 2, min_value=0)
    _settings.TRANSFORM_PRECISION = 2 if precision is None else precision

    level = (os.getenv("SCW_LOG_LEVEL") or "INFO").strip().upper()
    _settings.LOG_LEVEL = level or "INFO"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
