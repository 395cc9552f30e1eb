"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア/リサイズ可）と描画・リサイズコールバック登録を提供。
なぜ: アニメータ/描画面から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(1280, 720, bg_color=(1, 1, 1, 1))
    scheduler = FrameScheduler()

    win.add_draw_callback(scheduler.run_pending)
    win.add_resize_callback(loop.handle_resize)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Double Pendulum",
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        samples: int = 4,
        vsync: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
            bg_color: 背景色 RGBA（0.0〜1.0）。
            samples: MSAA サンプル数（0 で無効）。
            vsync: 垂直同期（表示更新ごとのフレーム駆動に使用）。
        """
        # 生成中の on_resize に備えて先に用意する
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._resize_callbacks: list[Callable[[int, int], None]] = []
        if samples > 0:
            # 線描画を滑らかにするために MSAA を有効化
            config = Config(double_buffer=True, sample_buffers=1, samples=samples, vsync=vsync)
        else:
            config = Config(double_buffer=True, vsync=vsync)
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=True
        )

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_resize_callback(self, func: Callable[[int, int], None]) -> None:
        """ウィンドウ寸法の変更時に `func(width, height)` を呼ぶ。"""
        self._resize_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):  # Pyglet 既定のイベント名
        """既定のビューポート更新の後、登録されたリサイズコールバックへ通知する。"""
        super().on_resize(width, height)
        for cb in self._resize_callbacks:
            cb(width, height)

