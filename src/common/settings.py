"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`PENDRAW_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_int

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_FRAMES: bool = False

    # Window / GL
    MSAA_SAMPLES: int = 4
    VSYNC: bool = True

    # Stroke
    CAP_SEGMENTS: int = 16


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、列挙は `env_choice` を使用。
    - 数値は下限丸めを適用。
    """
    _settings.LOG_LEVEL = env_choice("PENDRAW_LOG_LEVEL", LOG_LEVELS, "INFO")
    _settings.DEBUG_FRAMES = env_bool("PENDRAW_DEBUG_FRAMES", False)

    _settings.MSAA_SAMPLES = env_int("PENDRAW_MSAA_SAMPLES", 4, min_value=0) or 0
    _settings.VSYNC = env_bool("PENDRAW_VSYNC", True)

    _settings.CAP_SEGMENTS = env_int("PENDRAW_CAP_SEGMENTS", 16, min_value=3) or 16


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["LOG_LEVELS", "get", "reload_from_env", "_Settings"]
