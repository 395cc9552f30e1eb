from __future__ import annotations

import dataclasses
import math

import pytest

from engine.core.geometry import ORIGIN, Point, distance, rotate

ANGLES = [0.0, 15.0, 90.0, 180.0, 270.0, 359.5, -45.0, 1234.5]


def _approx_point(p: Point, abs_tol: float = 1e-9):
    return pytest.approx((p.x, p.y), abs=abs_tol)


@pytest.mark.parametrize("angle", ANGLES)
def test_rotating_pivot_about_itself_is_noop(angle: float) -> None:
    pivot = Point(12.5, -3.0)
    assert rotate(pivot, pivot, angle).as_tuple() == _approx_point(pivot)


@pytest.mark.parametrize("angle", ANGLES)
def test_rotate_preserves_distance_to_pivot(angle: float) -> None:
    pivot = Point(400.0, 300.0)
    pt = Point(460.0, 277.0)
    rotated = rotate(pivot, pt, angle)
    assert distance(pivot, rotated) == pytest.approx(distance(pivot, pt), abs=1e-9)


def test_full_turn_returns_to_start() -> None:
    pivot = Point(-5.0, 7.0)
    pt = Point(3.0, 11.0)
    assert rotate(pivot, pt, 360.0).as_tuple() == _approx_point(pt)
    assert rotate(pivot, pt, 0.0).as_tuple() == _approx_point(pt)


def test_rotate_quarter_turn_moves_positive_x_to_negative_y() -> None:
    # nx = cos·dx + sin·dy, ny = cos·dy − sin·dx
    out = rotate(ORIGIN, Point(10.0, 0.0), 90.0)
    assert out.as_tuple() == _approx_point(Point(0.0, -10.0))


def test_rotate_three_quarter_turn_points_down_on_screen() -> None:
    # 270° は Y 下向きの画面で真下
    out = rotate(ORIGIN, Point(10.0, 0.0), 270.0)
    assert out.as_tuple() == _approx_point(Point(0.0, 10.0))


def test_rotate_sign_pattern_differs_from_counterclockwise_matrix() -> None:
    pivot = Point(1.0, 2.0)
    pt = Point(4.0, 6.0)
    theta = math.radians(30.0)
    dx, dy = pt.x - pivot.x, pt.y - pivot.y
    expected = (
        math.cos(theta) * dx + math.sin(theta) * dy + pivot.x,
        math.cos(theta) * dy - math.sin(theta) * dx + pivot.y,
    )
    textbook = (
        math.cos(theta) * dx - math.sin(theta) * dy + pivot.x,
        math.sin(theta) * dx + math.cos(theta) * dy + pivot.y,
    )
    out = rotate(pivot, pt, 30.0)
    assert out.as_tuple() == pytest.approx(expected, abs=1e-12)
    assert out.as_tuple() != pytest.approx(textbook, abs=1e-6)


def test_rotate_does_not_mutate_inputs() -> None:
    pivot = Point(0.0, 0.0)
    pt = Point(1.0, 0.0)
    rotate(pivot, pt, 45.0)
    assert pt == Point(1.0, 0.0)
    assert pivot == ORIGIN


def test_point_is_immutable_value() -> None:
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0  # type: ignore[misc]
    assert p == Point(1.0, 2.0)
    assert hash(p) == hash(Point(1.0, 2.0))


def test_distance_basic() -> None:
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)
    assert distance(Point(2.0, 2.0), Point(2.0, 2.0)) == 0.0
