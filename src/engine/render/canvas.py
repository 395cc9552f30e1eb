"""
どこで: `engine.render` の描画面実装。
何を: `engine.core.surface.Surface` を ModernGL 上に実装する `CanvasSurface`（Canvas 2D 風のパス API）。
なぜ: 振り子の描画手順（clear → path → stroke）をそのまま GPU 描画へ写像するため。
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import moderngl as mgl
import numpy as np

from engine.core.surface import LINE_CAPS

from .stroke import tessellate_path

RGBA = tuple[float, float, float, float]

logger = logging.getLogger(__name__)


def build_projection(width: float, height: float) -> np.ndarray:
    """ピクセル座標（原点左上・Y 下向き）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    proj = np.array(
        [
            [2 / width, 0, 0, -1],
            [0, -2 / height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


class CanvasSurface:
    """ウィンドウ寸法に追従する線描画面。

    - 寸法は `size_provider()`（例: `window.get_size`）から毎回取得する。
    - `stroke()` の度に射影を現在の寸法で更新するため、リサイズ後も座標はピクセル基準のまま。
    """

    def __init__(
        self,
        mgl_context: Any,
        size_provider: Callable[[], tuple[int, int]],
        *,
        background: RGBA = (1.0, 1.0, 1.0, 1.0),
        line_color: RGBA = (0.0, 0.0, 0.0, 1.0),
        cap_segments: int = 16,
    ):
        self.ctx = mgl_context
        self._size_provider = size_provider
        self.background = background
        self.cap_segments = int(cap_segments)

        from .line_mesh import LineMesh  # local import
        from .shader import Shader  # local import

        self.program = Shader.create_shader(mgl_context)
        self.program["color"].value = tuple(float(c) for c in line_color)
        self.mesh = LineMesh(ctx=mgl_context, program=self.program)

        self._line_width: float = 1.0
        self._line_cap: str = "butt"
        self._subpaths: list[list[tuple[float, float]]] = []
        self._projected_size: tuple[int, int] | None = None

    # ---- 寸法 ----
    @property
    def width(self) -> int:
        return int(self._size_provider()[0])

    @property
    def height(self) -> int:
        return int(self._size_provider()[1])

    # ---- スタイル ----
    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        # 0 以下/非有限値は無視（Canvas 2D と同じ扱い）
        try:
            v = float(value)
        except (TypeError, ValueError):
            return
        if v > 0.0 and np.isfinite(v):
            self._line_width = v

    @property
    def line_cap(self) -> str:
        return self._line_cap

    @line_cap.setter
    def line_cap(self, value: str) -> None:
        if value in LINE_CAPS:
            self._line_cap = value
        else:
            logger.debug("ignoring unknown line cap: %r", value)

    # ---- パス ----
    def clear(self) -> None:
        """画面を背景色でクリア"""
        self.ctx.clear(*self.background)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        # サブパスが無ければ move_to と同じ扱い
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append((float(x), float(y)))

    def stroke(self) -> None:
        """現在のパスを三角形化してGPUへ送り、描画する。"""
        verts = tessellate_path(
            self._subpaths, self._line_width, self._line_cap, segments=self.cap_segments
        )
        if verts.shape[0] == 0:
            return
        self._update_projection()
        self.mesh.upload(verts)
        self.mesh.render(mgl.TRIANGLES)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.mesh.release()
        self.program.release()

    # ---- internal ----
    def _update_projection(self) -> None:
        size = (self.width, self.height)
        if size == self._projected_size or size[0] <= 0 or size[1] <= 0:
            return
        proj = build_projection(float(size[0]), float(size[1]))
        self.program["projection"].write(proj.tobytes())
        self._projected_size = size
        logger.debug("projection updated for %dx%d", size[0], size[1])


__all__ = ["CanvasSurface", "build_projection"]
