"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/bool/列挙）を提供。
なぜ: 設定読込で `os.getenv` と例外/境界ガードを繰り返さないため。
"""

from __future__ import annotations

import os
from typing import Iterable, Optional

_TRUE = {"true", "t", "yes", "y", "on"}
_FALSE = {"false", "f", "no", "n", "off"}


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（未設定/不正値は既定値、`min_value` 指定時は下限に丸める）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, yes/no, on/off を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        # 数値優先
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return bool(default)


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """列挙値の環境変数を取得（大文字に正規化。候補外は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().upper()
    allowed = {c.upper() for c in choices}
    return s if s in allowed else default


__all__ = ["env_bool", "env_choice", "env_int"]
