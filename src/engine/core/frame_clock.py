"""
どこで: `engine.core` のフレームスケジューラ。
何を: 「次の表示更新の直前に 1 度だけ呼ぶ」単発コールバック登録 `FrameScheduler` を提供（ms タイムスタンプ付き）。
なぜ: ループ側が毎フレーム自分自身を再登録する契約を保ち、GUI ループ（pyglet の on_draw）から駆動するため。
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

FrameCallback = Callable[[float], None]


class FrameRequester(Protocol):
    """単発フレームコールバックを受け付けるインターフェース。"""

    def request_frame(self, callback: FrameCallback) -> None:
        """次の表示更新の直前に `callback(timestamp_ms)` を 1 度だけ呼ぶ。"""


class FrameScheduler:
    """登録された単発コールバックを表示更新ごとにまとめて実行する極小クラス。

    - タイムスタンプは生成時点からの経過 [ms]（単調増加）。
    - 同一更新で実行されるコールバックには同じタイムスタンプを渡す。
    - 実行中に登録されたコールバックは次の更新まで持ち越す。
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._origin = clock()
        self._pending: list[FrameCallback] = []

    def now(self) -> float:
        """生成時点からの経過時間 [ms]。"""
        return (self._clock() - self._origin) * 1000.0

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # GUI フレームワークの描画イベントから呼ばせる
    def run_pending(self) -> int:
        """保留中のコールバックを実行し、実行数を返す。"""
        if not self._pending:
            return 0
        callbacks, self._pending = self._pending, []
        timestamp = self.now()
        for cb in callbacks:
            cb(timestamp)
        return len(callbacks)

    def cancel_all(self) -> None:
        self._pending.clear()


__all__ = ["FrameCallback", "FrameRequester", "FrameScheduler"]
