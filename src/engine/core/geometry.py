"""
どこで: `engine.core` の幾何プリミティブ（最内層・依存なし）。
何を: 2D 点 `Point` と、ピボット回りの回転 `rotate()`・距離 `distance()` を提供。
なぜ: 振り子の関節位置を毎フレーム純関数で導出し、描画/ランタイムから切り離して検証可能にするため。

座標系:
- 画面ピクセル空間（原点は左上、Y は下向きに増加）。
- `rotate()` は数学の反時計回り回転行列ではなく、Y 項の符号が反転した次式を用いる。

      nx = cos(θ)·(px - cx) + sin(θ)·(py - cy) + cx
      ny = cos(θ)·(py - cy) - sin(θ)·(px - cx) + cy

  例: `rotate(Point(0, 0), Point(10, 0), 270)` は `Point(0, 10)`（画面上で真下）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEG2RAD = math.pi / 180.0


@dataclass(frozen=True)
class Point:
    """画面ピクセル空間の 2D 点（値オブジェクト）。"""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


def rotate(pivot: Point, point: Point, angle_deg: float) -> Point:
    """`point` を `pivot` 回りに `angle_deg` 度回転した新しい点を返す。

    Parameters
    ----------
    pivot : Point
        回転中心。
    point : Point
        回転対象の点。
    angle_deg : float
        回転角 [deg]。360 の周期性を持つため正規化は不要。

    Returns
    -------
    Point
        回転後の点（入力は変更しない）。
    """
    radians = DEG2RAD * float(angle_deg)
    cos = math.cos(radians)
    sin = math.sin(radians)
    dx = point.x - pivot.x
    dy = point.y - pivot.y
    nx = (cos * dx) + (sin * dy) + pivot.x
    ny = (cos * dy) - (sin * dx) + pivot.y
    return Point(nx, ny)


def distance(a: Point, b: Point) -> float:
    """2 点間のユークリッド距離。"""
    return math.hypot(b.x - a.x, b.y - a.y)


__all__ = ["DEG2RAD", "ORIGIN", "Point", "distance", "rotate"]
