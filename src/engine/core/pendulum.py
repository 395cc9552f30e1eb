"""
どこで: `engine.core` の振り子アニメータ。
何を: 振り子の運動学状態 `PendulumState` を保持し、角度の前進・関節位置の導出・描画・リサイズ再計算を行う。
なぜ: フレーム更新の中核ロジックを描画技術から独立させ、決定的に再生/検証できるようにするため。

構造（画面座標、Y 下向き）:

    pivot                      second_joint
      O==========================O
          first_arm_length       ‖
                                 ‖ second_arm_length
                                 O
                                  end_point

- `pivot` はリサイズ時のみ更新し、フレーム間では不変。
- 関節は「導出 → 角度加算」の順に更新する（表示位置は加算前の角度に基づく）。
- 物理シミュレーションではない（重力/質量/連成なし、角度は独立した一定レートで増加）。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .geometry import ORIGIN, Point, rotate
from .surface import LINE_CAPS, Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendulumConfig:
    """振り子の定数群。既定値は画面高さ基準の相対寸法と ms 単位の角速度。"""

    # ピボット位置（画面幅/高さに対する比率）
    horizontal_pos: float = 0.5
    vertical_pos: float = 0.5
    # 腕の長さ（画面高さに対する比率）
    first_length: float = 0.1
    second_length: float = 0.1
    # 線幅 [px] とキャップ
    stroke_width: float = 10.0
    line_cap: str = "round"
    # 角速度 [deg/ms]
    first_rate: float = 0.1
    second_rate: float = 0.05
    # 初期角 [deg]（第1腕は真下、第2腕は水平）
    first_angle: float = 270.0
    second_angle: float = 0.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "PendulumConfig":
        """設定辞書から生成する（フェイルソフト）。

        - 未知キーは無視。
        - 数値化できない値・非有限値（.inf/.nan）や未知の `line_cap` は既定値にフォールバック。
        """
        if not isinstance(data, Mapping):
            return cls()
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            if f.name == "line_cap":
                cap = str(raw).strip().lower()
                if cap in LINE_CAPS:
                    values[f.name] = cap
                else:
                    logger.debug("ignoring unknown line_cap in config: %r", raw)
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                value = math.nan
            if math.isfinite(value):
                values[f.name] = value
            else:
                logger.debug(
                    "ignoring invalid pendulum.%s=%r (default %r)",
                    f.name,
                    raw,
                    getattr(defaults, f.name),
                )
        return cls(**values)


@dataclass
class PendulumState:
    """振り子の運動学状態（プロセス存続中は単一インスタンス）。"""

    pivot: Point = ORIGIN
    second_joint: Point = ORIGIN
    end_point: Point = ORIGIN
    first_angle: float = 270.0
    second_angle: float = 0.0
    first_arm_length: float = 0.0
    second_arm_length: float = 0.0

    @classmethod
    def initial(cls, config: PendulumConfig | None = None) -> "PendulumState":
        cfg = config or PendulumConfig()
        return cls(first_angle=float(cfg.first_angle), second_angle=float(cfg.second_angle))


def advance(
    state: PendulumState,
    delta_time: float,
    *,
    first_rate: float = 0.1,
    second_rate: float = 0.05,
) -> None:
    """関節位置を現在の角度から導出し、その後で角度を `delta_time` [ms] 分進める。"""
    # 第1関節: pivot から水平に腕を伸ばし、第1角で回転
    reach = Point(state.pivot.x + state.first_arm_length, state.pivot.y)
    state.second_joint = rotate(state.pivot, reach, state.first_angle)

    # 先端: 第1関節から水平に腕を伸ばし、第2角で回転
    reach = Point(state.second_joint.x + state.second_arm_length, state.second_joint.y)
    state.end_point = rotate(state.second_joint, reach, state.second_angle)

    state.first_angle += delta_time * first_rate
    state.second_angle += delta_time * second_rate


def on_resize(
    state: PendulumState,
    surface_width: float,
    surface_height: float,
    *,
    horizontal_pos: float = 0.5,
    vertical_pos: float = 0.5,
    first_length: float = 0.1,
    second_length: float = 0.1,
) -> None:
    """画面寸法から pivot と腕の長さを再計算する（角度は変更しない）。"""
    state.pivot = Point(surface_width * horizontal_pos, surface_height * vertical_pos)
    state.first_arm_length = surface_height * first_length
    state.second_arm_length = surface_height * second_length


def draw(
    state: PendulumState,
    surface: Surface,
    *,
    stroke_width: float = 10.0,
    line_cap: str = "round",
) -> None:
    """面をクリアし、pivot→第1関節→先端の 2 線分を描く。"""
    surface.clear()
    surface.begin_path()
    surface.line_width = stroke_width
    surface.line_cap = line_cap
    surface.move_to(state.pivot.x, state.pivot.y)
    surface.line_to(state.second_joint.x, state.second_joint.y)
    surface.move_to(state.second_joint.x, state.second_joint.y)
    surface.line_to(state.end_point.x, state.end_point.y)
    surface.stroke()


class PendulumAnimator:
    """`PendulumState` と `PendulumConfig` を束ね、ホストループ向けの 3 操作を提供する。"""

    def __init__(
        self,
        config: PendulumConfig | None = None,
        state: PendulumState | None = None,
    ):
        self.config = config or PendulumConfig()
        self.state = state if state is not None else PendulumState.initial(self.config)

    def advance(self, delta_time: float) -> None:
        advance(
            self.state,
            delta_time,
            first_rate=self.config.first_rate,
            second_rate=self.config.second_rate,
        )

    def on_resize(self, surface_width: float, surface_height: float) -> None:
        on_resize(
            self.state,
            surface_width,
            surface_height,
            horizontal_pos=self.config.horizontal_pos,
            vertical_pos=self.config.vertical_pos,
            first_length=self.config.first_length,
            second_length=self.config.second_length,
        )
        logger.debug(
            "pendulum resized: surface=%sx%s pivot=%s arms=(%.1f, %.1f)",
            surface_width,
            surface_height,
            self.state.pivot.as_tuple(),
            self.state.first_arm_length,
            self.state.second_arm_length,
        )

    def draw(self, surface: Surface) -> None:
        draw(
            self.state,
            surface,
            stroke_width=self.config.stroke_width,
            line_cap=self.config.line_cap,
        )


__all__ = [
    "PendulumAnimator",
    "PendulumConfig",
    "PendulumState",
    "advance",
    "draw",
    "on_resize",
]
