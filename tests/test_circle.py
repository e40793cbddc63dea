import math

from hypothesis import given, strategies as st

from rasterkit.circle import bresenham_circle

center = st.integers(min_value=-200, max_value=200)
radius = st.integers(min_value=1, max_value=80)


def test_first_points_are_top_and_right():
    points = list(bresenham_circle(5, 5, 10))
    assert points[0] == (5, 15)
    assert points[1] == (15, 5)


def test_zero_radius_is_center_only():
    points = list(bresenham_circle(3, 4, 0))
    assert set(points) == {(3, 4)}
    assert len(points) == 8


@given(center, center, radius)
def test_point_count_is_multiple_of_eight(xc, yc, r):
    assert len(list(bresenham_circle(xc, yc, r))) % 8 == 0


@given(center, center, radius)
def test_eight_way_symmetry(xc, yc, r):
    offsets = {(x - xc, y - yc) for x, y in bresenham_circle(xc, yc, r)}
    for dx, dy in offsets:
        assert (dy, dx) in offsets
        assert (-dx, dy) in offsets
        assert (dx, -dy) in offsets


@given(center, center, radius)
def test_extreme_points_present(xc, yc, r):
    points = set(bresenham_circle(xc, yc, r))
    assert {(xc, yc + r), (xc, yc - r), (xc + r, yc), (xc - r, yc)} <= points


@given(center, center, radius)
def test_translation_invariance(xc, yc, r):
    moved = [(x - xc, y - yc) for x, y in bresenham_circle(xc, yc, r)]
    assert moved == list(bresenham_circle(0, 0, r))