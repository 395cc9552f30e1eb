"""
どこで: `engine.render` のストローク分割（CPU 側・純関数）。
何を: ポリライン（サブパス）を線幅/キャップに従って三角形列 (K, 2) float32 へ変換する。
なぜ: GL の線幅制限に依存せず、太線と丸キャップを三角形で確実に描くため。

方針:
- 各線分は幅 `width` の長方形（2 三角形）。
- キャップ: "butt" は端で切る、"square" は半幅だけ延長、"round" は端点に半径 `width/2` の円盤。
- 中間頂点の継ぎ目は円盤で埋める（round join）。
- 長さ 0 のサブパスは "round"/"square" のときのみ点（円盤/正方形）を描く。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from engine.core.surface import LINE_CAPS

_EPS = 1e-9


def _empty() -> np.ndarray:
    return np.zeros((0, 2), dtype=np.float32)


def disc_triangles(centers: np.ndarray, radius: float, segments: int) -> np.ndarray:
    """各中心に扇形分割の円盤を作り、(C*segments*3, 2) の三角形頂点を返す。"""
    centers = np.asarray(centers, dtype=np.float64).reshape(-1, 2)
    if centers.shape[0] == 0 or radius <= 0.0:
        return _empty()
    n = max(3, int(segments))
    theta = np.linspace(0.0, 2.0 * np.pi, n + 1)
    rim = np.stack([np.cos(theta), np.sin(theta)], axis=1) * float(radius)  # (n+1, 2)
    tris = np.empty((centers.shape[0], n, 3, 2), dtype=np.float64)
    tris[:, :, 0, :] = centers[:, None, :]
    tris[:, :, 1, :] = centers[:, None, :] + rim[None, :-1, :]
    tris[:, :, 2, :] = centers[:, None, :] + rim[None, 1:, :]
    return tris.reshape(-1, 2).astype(np.float32)


def _square_triangles(center: np.ndarray, half: float) -> np.ndarray:
    cx, cy = float(center[0]), float(center[1])
    v0 = (cx - half, cy - half)
    v1 = (cx + half, cy - half)
    v2 = (cx + half, cy + half)
    v3 = (cx - half, cy + half)
    return np.array([v0, v1, v2, v0, v2, v3], dtype=np.float32)


def tessellate_subpath(
    points: Sequence[Sequence[float]] | np.ndarray,
    width: float,
    cap: str = "round",
    *,
    segments: int = 16,
) -> np.ndarray:
    """1 本のサブパスを三角形頂点列へ変換する。

    Parameters
    ----------
    points : (N, 2) 配列相当
        サブパスの頂点。
    width : float
        線幅 [px]。0 以下なら空を返す。
    cap : {"butt", "round", "square"}
        端点のキャップ形状。
    segments : int, default 16
        円盤の分割数（3 以上に丸める）。

    Returns
    -------
    np.ndarray
        `GL_TRIANGLES` 用の (K, 2) float32 配列（K は 3 の倍数）。

    Raises
    ------
    ValueError
        未知の `cap`。
    """
    if cap not in LINE_CAPS:
        raise ValueError(f"invalid line cap: {cap!r}; allowed={', '.join(LINE_CAPS)}")
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    half = float(width) * 0.5
    if pts.shape[0] == 0 or half <= 0.0:
        return _empty()

    a = pts[:-1]
    b = pts[1:]
    d = b - a
    length = np.hypot(d[:, 0], d[:, 1])
    keep = length > _EPS
    if not np.any(keep):
        # 長さ 0 のサブパス: キャップのみ
        if cap == "round":
            return disc_triangles(pts[:1], half, segments)
        if cap == "square":
            return _square_triangles(pts[0], half)
        return _empty()

    a = a[keep].copy()
    b = b[keep].copy()
    dirs = d[keep] / length[keep][:, None]
    if cap == "square":
        a[0] -= dirs[0] * half
        b[-1] += dirs[-1] * half

    normals = np.stack([-dirs[:, 1], dirs[:, 0]], axis=1) * half
    v0 = a + normals
    v1 = a - normals
    v2 = b - normals
    v3 = b + normals
    quads = np.stack([v0, v1, v2, v0, v2, v3], axis=1).reshape(-1, 2).astype(np.float32)

    parts = [quads]
    # 中間頂点の継ぎ目
    if a.shape[0] > 1:
        parts.append(disc_triangles(b[:-1], half, segments))
    if cap == "round":
        parts.append(disc_triangles(np.stack([a[0], b[-1]]), half, segments))
    return np.concatenate(parts, axis=0)


def tessellate_path(
    subpaths: Iterable[Sequence[Sequence[float]] | np.ndarray],
    width: float,
    cap: str = "round",
    *,
    segments: int = 16,
) -> np.ndarray:
    """複数サブパスを連結した三角形頂点列を返す。"""
    parts = [tessellate_subpath(sp, width, cap, segments=segments) for sp in subpaths]
    parts = [p for p in parts if p.shape[0] > 0]
    if not parts:
        return _empty()
    return np.concatenate(parts, axis=0)


__all__ = ["disc_triangles", "tessellate_path", "tessellate_subpath"]
