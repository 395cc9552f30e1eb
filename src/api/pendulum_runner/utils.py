"""
どこで: `api.pendulum_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウ寸法・色・振り子定数を「引数 > 設定ファイル > 既定値」の順で解決する。
なぜ: `api.pendulum` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from engine.core.pendulum import PendulumConfig
from util.color import RGBA, contrast_line_color, normalize_color
from util.constants import DEFAULT_BACKGROUND, DEFAULT_CAPTION, DEFAULT_FPS, DEFAULT_WINDOW_SIZE
from util.utils import config_section

logger = logging.getLogger(__name__)


def resolve_fps(
    requested_fps: int | None, cfg: Mapping[str, Any] | None = None, *, default: int = DEFAULT_FPS
) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - それ以外は設定 `canvas_controller.fps`、失敗時は既定値。
    """
    if requested_fps is not None:
        try:
            return max(1, int(requested_fps))
        except (TypeError, ValueError):
            return max(1, int(default))
    ccfg = config_section(dict(cfg or {}), "canvas_controller")
    try:
        return max(1, int(ccfg.get("fps", default)))
    except (TypeError, ValueError):
        logger.debug("invalid canvas_controller.fps=%r; using %d", ccfg.get("fps"), default)
        return max(1, int(default))


def resolve_window_size(
    width: int | None, height: int | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウ寸法 [px] を解決する。

    - 明示指定が正でなければ `ValueError`。
    - 未指定は設定 `window.width/height`、不正値は既定値。
    """
    wcfg = config_section(dict(cfg or {}), "window")
    resolved: list[int] = []
    for name, value, fallback in (
        ("width", width, DEFAULT_WINDOW_SIZE[0]),
        ("height", height, DEFAULT_WINDOW_SIZE[1]),
    ):
        if value is not None:
            v = int(value)
            if v <= 0:
                raise ValueError(f"window {name} must be > 0, got {value}")
            resolved.append(v)
            continue
        try:
            v = int(wcfg.get(name, fallback))
        except (TypeError, ValueError):
            v = fallback
        resolved.append(v if v > 0 else fallback)
    return resolved[0], resolved[1]


def resolve_caption(caption: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    if caption:
        return str(caption)
    wcfg = config_section(dict(cfg or {}), "window")
    return str(wcfg.get("caption") or DEFAULT_CAPTION)


def resolve_colors(
    background: Any, line_color: Any, cfg: Mapping[str, Any] | None = None
) -> tuple[RGBA, RGBA]:
    """背景色と線色を解決する（指定 → 設定 `canvas.*` → 既定/自動）。

    線色が未指定かつ設定にも無い場合は、背景の輝度から黒/白を選ぶ。
    明示指定の不正値は `ValueError`、設定ファイル側の不正値は既定へフォールバック。
    """
    ccfg = config_section(dict(cfg or {}), "canvas")

    if background is not None:
        bg = normalize_color(background)
    else:
        bg = _normalize_or(ccfg.get("background_color"), DEFAULT_BACKGROUND)

    if line_color is not None:
        line = normalize_color(line_color)
    else:
        line = _normalize_or(ccfg.get("line_color"), contrast_line_color(bg))
    return bg, line


def resolve_pendulum_config(
    config: PendulumConfig | None, cfg: Mapping[str, Any] | None = None
) -> PendulumConfig:
    """明示の `PendulumConfig` を優先し、無ければ設定 `pendulum` セクションから生成する。"""
    if config is not None:
        return config
    return PendulumConfig.from_mapping(config_section(dict(cfg or {}), "pendulum"))


def _normalize_or(value: Any, fallback: RGBA) -> RGBA:
    if value is None:
        return fallback
    try:
        return normalize_color(value)
    except ValueError:
        logger.debug("invalid color in config: %r", value)
        return fallback


__all__ = [
    "resolve_caption",
    "resolve_colors",
    "resolve_fps",
    "resolve_pendulum_config",
    "resolve_window_size",
]
