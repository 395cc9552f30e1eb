"""
どこで: `api.pendulum_runner.render`
何を: RenderWindow/ModernGL/CanvasSurface の初期化。
なぜ: `api.pendulum` を薄くし、描画初期化の責務と失敗時の扱い（SurfaceError）を分離するため。
"""

from __future__ import annotations

import logging

import moderngl

from engine.core.surface import SurfaceError
from util.color import RGBA

logger = logging.getLogger(__name__)


def create_window_and_surface(
    window_width: int,
    window_height: int,
    *,
    caption: str,
    background: RGBA,
    line_color: RGBA,
):
    """ウィンドウ/ModernGL/CanvasSurface を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, surface)

    Raises
    ------
    SurfaceError
        ウィンドウまたは GL コンテキストを用意できない場合（ヘッドレス環境など）。
    """
    from common.settings import get as _get_settings
    from engine.core.render_window import RenderWindow
    from engine.render.canvas import CanvasSurface

    settings = _get_settings()
    try:
        rendering_window = RenderWindow(
            window_width,
            window_height,
            caption=caption,
            bg_color=background,
            samples=settings.MSAA_SAMPLES,
            vsync=settings.VSYNC,
        )
    except Exception as e:
        raise SurfaceError(f"failed to create window: {e}") from e

    try:
        # ModernGL コンテキスト（pyglet のカレントコンテキストへ接続）
        mgl_ctx: moderngl.Context = moderngl.create_context()
        mgl_ctx.enable(moderngl.BLEND)
        mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)
        surface = CanvasSurface(
            mgl_ctx,
            rendering_window.get_size,
            background=background,
            line_color=line_color,
            cap_segments=settings.CAP_SEGMENTS,
        )
    except Exception as e:
        rendering_window.close()
        raise SurfaceError(f"failed to initialize GL surface: {e}") from e

    logger.debug(
        "window ready: %dx%d gl=%s", window_width, window_height, mgl_ctx.info.get("GL_VERSION")
    )
    return rendering_window, mgl_ctx, surface


__all__ = ["create_window_and_surface"]
