from __future__ import annotations

import numpy as np
import pytest

from engine.render.stroke import disc_triangles, tessellate_path, tessellate_subpath

SEG = 12


def _point_segment_distance(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    ab = b - a
    t = np.clip(((p - a) @ ab) / float(ab @ ab), 0.0, 1.0)
    proj = a + t[:, None] * ab[None, :]
    return np.hypot(*(p - proj).T)


def test_butt_segment_is_two_triangles_with_exact_extent() -> None:
    verts = tessellate_subpath([(0.0, 0.0), (10.0, 0.0)], 4.0, "butt")
    assert verts.dtype == np.float32
    assert verts.shape == (6, 2)
    assert verts[:, 0].min() == pytest.approx(0.0)
    assert verts[:, 0].max() == pytest.approx(10.0)
    assert verts[:, 1].min() == pytest.approx(-2.0)
    assert verts[:, 1].max() == pytest.approx(2.0)


def test_square_cap_extends_by_half_width() -> None:
    verts = tessellate_subpath([(0.0, 0.0), (10.0, 0.0)], 4.0, "square")
    assert verts.shape == (6, 2)
    assert verts[:, 0].min() == pytest.approx(-2.0)
    assert verts[:, 0].max() == pytest.approx(12.0)


def test_round_cap_adds_disc_at_each_end() -> None:
    verts = tessellate_subpath([(0.0, 0.0), (0.0, 10.0)], 6.0, "round", segments=SEG)
    assert verts.shape == (6 + 2 * SEG * 3, 2)
    assert verts[:, 1].min() == pytest.approx(-3.0, abs=1e-5)
    assert verts[:, 1].max() == pytest.approx(13.0, abs=1e-5)


def test_round_stroke_stays_within_half_width_of_segment() -> None:
    a = np.array([3.0, 4.0])
    b = np.array([40.0, -7.0])
    verts = tessellate_subpath([a, b], 10.0, "round", segments=SEG).astype(np.float64)
    d = _point_segment_distance(verts, a, b)
    assert np.all(d <= 5.0 + 1e-4)


def test_zero_length_subpath_draws_dot_only_for_round_and_square() -> None:
    pts = [(5.0, 5.0), (5.0, 5.0)]
    assert tessellate_subpath(pts, 4.0, "butt").shape == (0, 2)
    assert tessellate_subpath(pts, 4.0, "round", segments=SEG).shape == (SEG * 3, 2)
    square = tessellate_subpath(pts, 4.0, "square")
    assert square.shape == (6, 2)
    assert tuple(square.min(axis=0)) == pytest.approx((3.0, 3.0))


def test_interior_vertices_get_round_joins() -> None:
    verts = tessellate_subpath([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)], 2.0, "butt", segments=SEG)
    # 2 本の長方形 + 中間頂点 1 つの円盤
    assert verts.shape == (2 * 6 + SEG * 3, 2)


@pytest.mark.parametrize("width", [0.0, -1.0])
def test_non_positive_width_is_empty(width: float) -> None:
    assert tessellate_subpath([(0.0, 0.0), (1.0, 1.0)], width, "round").shape == (0, 2)


def test_invalid_cap_raises() -> None:
    with pytest.raises(ValueError):
        tessellate_subpath([(0.0, 0.0), (1.0, 0.0)], 1.0, "pointy")


def test_path_concatenates_subpaths() -> None:
    sub = [(0.0, 0.0), (10.0, 0.0)]
    one = tessellate_subpath(sub, 2.0, "round", segments=SEG)
    both = tessellate_path([sub, [(10.0, 0.0), (10.0, 10.0)]], 2.0, "round", segments=SEG)
    assert both.shape[0] == 2 * one.shape[0]
    assert tessellate_path([], 2.0).shape == (0, 2)


def test_disc_has_minimum_three_segments() -> None:
    tris = disc_triangles(np.array([[0.0, 0.0]]), 1.0, segments=1)
    assert tris.shape == (9, 2)
    assert np.allclose(np.hypot(*tris.T)[1::3], 1.0, atol=1e-6)
