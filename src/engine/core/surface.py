"""
どこで: `engine.core` の描画面インターフェース。
何を: 振り子が依存する最小の描画能力 `Surface` Protocol と、起動時検証 `validate_surface()`。
なぜ: コアを具体的な描画技術（ModernGL/pyglet）から切り離し、ウィンドウ無しでテスト可能にするため。
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

LINE_CAPS = ("butt", "round", "square")

_REQUIRED_METHODS = ("clear", "begin_path", "move_to", "line_to", "stroke")


class SurfaceError(RuntimeError):
    """描画面が存在しない/不正なときの致命的エラー（アニメーションは開始しない）。"""


@runtime_checkable
class Surface(Protocol):
    """Canvas 2D 風の線描画面。

    - `width`/`height` は現在のピクセル寸法。
    - `line_width`/`line_cap` は次の `stroke()` に適用されるスタイル。
    - パスは `begin_path()` で破棄し、`move_to()` でサブパスを開始する。
    """

    line_width: float
    line_cap: str

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self) -> None:
        """面全体を背景色で塗り潰す。"""

    def begin_path(self) -> None:
        """現在のパスを破棄する。"""

    def move_to(self, x: float, y: float) -> None:
        """新しいサブパスを (x, y) から開始する。"""

    def line_to(self, x: float, y: float) -> None:
        """現在のサブパスへ (x, y) までの線分を追加する。"""

    def stroke(self) -> None:
        """現在のパスを線幅/キャップに従って描く。"""


def validate_surface(surface: Any) -> Surface:
    """描画面を検証し、そのまま返す。

    Raises
    ------
    SurfaceError
        `None`、必須メソッドの欠落、寸法が正でない場合。
    """
    if surface is None:
        raise SurfaceError("surface is missing")
    missing = [name for name in _REQUIRED_METHODS if not callable(getattr(surface, name, None))]
    if missing:
        raise SurfaceError(f"surface lacks drawing capabilities: {', '.join(missing)}")
    try:
        width = int(surface.width)
        height = int(surface.height)
    except (AttributeError, TypeError, ValueError) as e:
        raise SurfaceError(f"surface has no usable size: {e}") from e
    if width <= 0 or height <= 0:
        raise SurfaceError(f"surface size must be positive, got {(width, height)}")
    return surface


__all__ = ["LINE_CAPS", "Surface", "SurfaceError", "validate_surface"]
