"""
どこで: `api` 入口（高レベル公開 API）。
何を: 実行関数 `run_pendulum`、振り子の型、幾何関数を再輸出。
なぜ: 利用者が単一名前空間から定数指定→実行、または状態の単体検証まで完結できるようにするため。

Usage:
    from api import PendulumConfig, run

    run(config=PendulumConfig(stroke_width=6), fps=60)
"""

from engine.core.animation_loop import AnimationLoop
from engine.core.frame_clock import FrameScheduler
from engine.core.geometry import Point, distance, rotate
from engine.core.pendulum import PendulumAnimator, PendulumConfig, PendulumState
from engine.core.surface import Surface, SurfaceError

from .pendulum import run_pendulum as run
from .pendulum import run_pendulum as run_pendulum

__all__ = [
    # 実行
    "run_pendulum",
    "run",
    # 振り子
    "PendulumAnimator",
    "PendulumConfig",
    "PendulumState",
    "AnimationLoop",
    "FrameScheduler",
    # 幾何
    "Point",
    "rotate",
    "distance",
    # 描画面
    "Surface",
    "SurfaceError",
]

# バージョン情報
__version__ = "2026.10"
