import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.core.geometry import Point, distance, rotate
from engine.core.pendulum import PendulumState, advance, on_resize

coords = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
angles = st.floats(-720.0, 720.0, allow_nan=False, allow_infinity=False)


@given(px=coords, py=coords, x=coords, y=coords, angle=angles)
def test_rotate_preserves_radius(px, py, x, y, angle):
    pivot = Point(px, py)
    pt = Point(x, y)
    r0 = distance(pivot, pt)
    r1 = distance(pivot, rotate(pivot, pt, angle))
    assert math.isclose(r0, r1, rel_tol=1e-9, abs_tol=1e-6)


@given(x=coords, y=coords, a=angles, b=angles)
def test_rotate_composition(x, y, a, b):
    pivot = Point(0.0, 0.0)
    pt = Point(x, y)
    left = rotate(pivot, rotate(pivot, pt, a), b)
    right = rotate(pivot, pt, a + b)
    assert left.as_tuple() == pytest.approx(right.as_tuple(), rel=1e-7, abs=1e-6)


@given(
    w=st.integers(1, 4000),
    h=st.integers(1, 4000),
    dts=st.lists(st.floats(0.0, 100.0, allow_nan=False), min_size=1, max_size=30),
)
def test_arm_lengths_invariant(w, h, dts):
    st_ = PendulumState()
    on_resize(st_, w, h)
    for dt in dts:
        a1, a2 = st_.first_angle, st_.second_angle
        advance(st_, dt)
        assert st_.first_angle >= a1
        assert st_.second_angle >= a2
        assert math.isclose(
            distance(st_.pivot, st_.second_joint), st_.first_arm_length, abs_tol=1e-6
        )
        assert math.isclose(
            distance(st_.second_joint, st_.end_point), st_.second_arm_length, abs_tol=1e-6
        )
