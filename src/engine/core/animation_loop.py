"""
どこで: `engine.core` のアニメーションループ。
何を: タイムスタンプ → 経過時間 → `advance` → `draw` → 再登録、の 1 フレーム手順とリサイズ処理を束ねる。
なぜ: グローバル状態を排し、状態/描画面/スケジューラを明示的に受け取ってウィンドウ無しで検証できるようにするため。

スレッド:
- フレームコールバックとリサイズ処理は同一の GUI イベントループ上で実行される前提。
  マルチスレッドのホストへ移す場合は、両者を同じスレッドへ直列化すること。
"""

from __future__ import annotations

import logging

from .frame_clock import FrameRequester
from .pendulum import PendulumAnimator
from .surface import Surface, validate_surface

logger = logging.getLogger(__name__)


class AnimationLoop:
    """`PendulumAnimator` を描画面とスケジューラに結線する。"""

    def __init__(
        self,
        animator: PendulumAnimator,
        surface: Surface,
        scheduler: FrameRequester,
        *,
        debug_frames: bool | None = None,
    ):
        self.animator = animator
        self.surface = surface
        self.scheduler = scheduler
        # 直近タイムスタンプ [ms] と経過時間 [ms]
        self.time: float = 0.0
        self.delta_time: float = 0.0
        self.frame_count: int = 0
        self._running = False
        if debug_frames is None:
            from common.settings import get as _get_settings

            debug_frames = bool(_get_settings().DEBUG_FRAMES)
        self._debug_frames = debug_frames

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """描画面を検証し、初回リサイズを適用してから最初のフレームを登録する。

        Raises
        ------
        SurfaceError
            描画面が存在しない/不正な場合（ループは開始しない）。
        """
        validate_surface(self.surface)
        self.handle_resize(self.surface.width, self.surface.height)
        self._running = True
        self.scheduler.request_frame(self.frame_step)
        logger.info(
            "animation started: surface=%dx%d", int(self.surface.width), int(self.surface.height)
        )

    def stop(self) -> None:
        """次フレームの再登録を止める（既に登録済みの 1 回は何もせず終わる）。"""
        if self._running:
            logger.info("animation stopped after %d frames", self.frame_count)
        self._running = False

    def handle_resize(self, width: float, height: float) -> None:
        self.animator.on_resize(width, height)

    def frame_step(self, timestamp: float) -> None:
        """1 フレーム分の更新と描画を行い、次フレームを再登録する。"""
        if not self._running:
            return
        self.delta_time = timestamp - self.time
        self.time += self.delta_time
        self.animator.advance(self.delta_time)
        self.animator.draw(self.surface)
        self.frame_count += 1
        if self._debug_frames:
            st = self.animator.state
            logger.debug(
                "frame %d: dt=%.3fms angles=(%.3f, %.3f)",
                self.frame_count,
                self.delta_time,
                st.first_angle,
                st.second_angle,
            )
        self.scheduler.request_frame(self.frame_step)


__all__ = ["AnimationLoop"]
