"""
どこで: `engine.export.image`。
何を: 現在の描画ウィンドウ内容を PNG として保存するラッパ。
なぜ: ワンアクション（P キー）でアニメーションのスクリーンショットを得られるようにするため。
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pyglet

from util.paths import ensure_screenshots_dir, unique_path

logger = logging.getLogger(__name__)


def default_png_path(width: int, height: int, out_dir: Path | None = None) -> Path:
    """`<out_dir>/<YYYYmmdd_HHMMSS>_<W>x<H>.png`（衝突時は連番付き）を返す。"""
    directory = out_dir if out_dir is not None else ensure_screenshots_dir()
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return unique_path(directory / f"{ts}_{int(width)}x{int(height)}.png")


def save_png(window: "pyglet.window.Window", path: Path | None = None) -> Path:
    """現在のウィンドウのカラーバッファを PNG として保存し、保存先を返す。

    Raises
    ------
    RuntimeError
        保存先ディレクトリを作れない、または pyglet がバッファを取得・保存できない場合（ヘッドレス等）。
    """
    try:
        if path is None:
            path = default_png_path(window.width, window.height)
        buffer = pyglet.image.get_buffer_manager().get_color_buffer()
        buffer.save(str(path))
    except Exception as e:
        raise RuntimeError(f"PNG 保存に失敗: {e}") from e
    logger.info("saved screenshot: %s", path)
    return path


__all__ = ["default_png_path", "save_png"]
