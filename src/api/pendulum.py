"""
どこで: `api.pendulum`（実行ランナー）。
何を: 二重振り子アニメーションをウィンドウ上で実行する。設定解決 → ウィンドウ/描画面 → ループ結線 → イベント。
なぜ: 少ない記述でアニメーションを起動でき、コア（`engine.core`）をウィンドウ無しで検証可能に保つため。

実行フロー（概要）:
1) 設定解決: 引数 > `util.utils.load_config()` の YAML > 既定値 で FPS/寸法/色/振り子定数を確定。
2) アニメータ生成: `PendulumAnimator(PendulumConfig)`（初期角 270°/0°、pivot は原点）。
3) ウィンドウ/GL: `RenderWindow` と ModernGL の `CanvasSurface` を生成（失敗時は `SurfaceError`）。
4) ループ結線: `FrameScheduler.run_pending` を描画イベントへ、`AnimationLoop.handle_resize` をリサイズへ。
5) 開始: `AnimationLoop.start()` が描画面を検証し、初回リサイズ後に最初のフレームを登録。
6) イベント: `ESC` で終了、`P` で PNG 保存。終了時にループ停止と GL リソース解放を行う。

スレッド:
- すべて pyglet のイベントループ（主スレッド）上で実行され、リサイズとフレーム更新は交互に直列化される。

例:
    from api import run_pendulum

    run_pendulum(width=800, height=600, fps=60)
"""

from __future__ import annotations

import logging
from typing import Any

from engine.core.animation_loop import AnimationLoop
from engine.core.frame_clock import FrameScheduler
from engine.core.pendulum import PendulumAnimator, PendulumConfig

from .pendulum_runner.utils import (
    resolve_caption,
    resolve_colors,
    resolve_fps,
    resolve_pendulum_config,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


def run_pendulum(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    caption: str | None = None,
    background: Any = None,
    line_color: Any = None,
    config: PendulumConfig | None = None,
    init_only: bool = False,
) -> PendulumAnimator:
    """アニメーションを実行する（ウィンドウを閉じるまで戻らない）。

    Parameters
    ----------
    width, height : int | None
        ウィンドウ寸法 [px]。None で設定ファイル/既定 (1280x720)。
    fps : int | None
        表示更新レート。None で設定ファイル/既定 (60)。経過時間は実測値を用いる。
    caption : str | None
        ウィンドウタイトル。
    background, line_color : str | tuple | None
        RGBA 0–1 / 0–255 または #RRGGBB[AA]。線色 None は背景から黒/白を自動選択。
    config : PendulumConfig | None
        振り子定数。None で設定ファイル `pendulum` セクション/既定。
    init_only : bool, default False
        True で設定解決とアニメータ生成のみ行い、ウィンドウを開かずに返す。

    Returns
    -------
    PendulumAnimator
        使用したアニメータ（終了後の状態を参照できる）。

    Raises
    ------
    SurfaceError
        ウィンドウ/GL 描画面を用意できない場合（アニメーションは開始しない）。
    ValueError
        明示引数（寸法/色）が不正な場合。
    """
    from util.utils import load_config

    cfg = load_config()
    fps = resolve_fps(fps, cfg)
    window_width, window_height = resolve_window_size(width, height, cfg)
    bg_rgba, line_rgba = resolve_colors(background, line_color, cfg)
    pendulum_config = resolve_pendulum_config(config, cfg)
    animator = PendulumAnimator(pendulum_config)

    if init_only:
        return animator

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.surface import SurfaceError
    from engine.export.image import save_png

    from .pendulum_runner.render import create_window_and_surface

    rendering_window, _mgl_ctx, surface = create_window_and_surface(
        window_width,
        window_height,
        caption=resolve_caption(caption, cfg),
        background=bg_rgba,
        line_color=line_rgba,
    )

    scheduler = FrameScheduler()
    loop = AnimationLoop(animator, surface, scheduler)
    rendering_window.add_draw_callback(scheduler.run_pending)
    rendering_window.add_resize_callback(loop.handle_resize)
    try:
        loop.start()
    except SurfaceError:
        surface.release()
        rendering_window.close()
        raise

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.dispatch_event("on_close")
            return pyglet.event.EVENT_HANDLED
        # PNG 保存（P）
        if sym == key.P:
            try:
                save_png(rendering_window)
            except RuntimeError as e:
                logger.error("%s", e)
            return pyglet.event.EVENT_HANDLED
        return None

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        loop.stop()
        scheduler.cancel_all()
        surface.release()
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    logger.info(
        "running pendulum: window=%dx%d fps=%d (ESC: quit, P: screenshot)",
        window_width,
        window_height,
        fps,
    )
    pyglet.app.run(1 / fps)
    return animator


__all__ = ["run_pendulum"]
