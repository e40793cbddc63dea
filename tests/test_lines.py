import pytest
from hypothesis import given, strategies as st

from rasterkit.lines import (
    LineStyle,
    bresenham_line,
    dda_line,
    polygon_outline,
    round_half_up,
)

coord = st.integers(min_value=0, max_value=60)


def _adjacent(points):
    return all(
        abs(x1 - x0) <= 1 and abs(y1 - y0) <= 1
        for (x0, y0), (x1, y1) in zip(points, points[1:])
    )


def test_round_half_up_values():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.7) == 0


def test_bresenham_horizontal_example():
    assert list(bresenham_line(0, 0, 3, 0)) == [(1, 0), (2, 0), (3, 0)]


@given(coord, coord, coord, coord)
def test_dda_endpoints_and_length(xa, ya, xb, yb):
    points = list(dda_line(xa, ya, xb, yb))
    steps = max(abs(xb - xa), abs(yb - ya))
    assert points[0] == (xa, ya)
    assert points[-1] == (xb, yb)
    assert len(points) == max(steps, 0) + 1
    assert _adjacent(points)


@given(coord, coord, coord, coord)
def test_dda_flags_trim_ends(xa, ya, xb, yb):
    full = list(dda_line(xa, ya, xb, yb))
    if len(full) > 1:
        assert list(dda_line(xa, ya, xb, yb, include_start=False)) == full[1:]
        assert list(dda_line(xa, ya, xb, yb, include_end=False)) == full[:-1]
    else:
        assert list(dda_line(xa, ya, xb, yb, include_start=False)) == full


def test_dda_zero_length():
    assert list(dda_line(7, 9, 7, 9)) == [(7, 9)]
    assert list(dda_line(7, 9, 7, 9, include_start=False, include_end=False)) == []


@given(coord, coord, coord, coord)
def test_bresenham_solid_invariants(xa, ya, xb, yb):
    points = list(bresenham_line(xa, ya, xb, yb))
    assert len(points) == max(abs(xb - xa), abs(yb - ya))
    if points:
        assert points[-1] in {(xa, ya), (xb, yb)}
        assert _adjacent(points)


@given(coord, coord, coord, coord)
def test_bresenham_is_symmetric_in_endpoints(xa, ya, xb, yb):
    if abs(xb - xa) != abs(yb - ya):
        forward = set(bresenham_line(xa, ya, xb, yb))
        backward = set(bresenham_line(xb, yb, xa, ya))
        assert forward == backward


@pytest.mark.parametrize(
    "style", [LineStyle.DOTTED, LineStyle.DASHED, LineStyle.DOT_DASH]
)
@given(xb=coord, yb=coord)
def test_styles_select_indexed_subset(style, xb, yb):
    solid = list(bresenham_line(0, 0, xb, yb))
    styled = list(bresenham_line(0, 0, xb, yb, style))
    assert styled == [p for i, p in enumerate(solid) if style.includes(i)]


def test_style_accepts_integer_code():
    assert list(bresenham_line(0, 0, 20, 3, 1)) == list(
        bresenham_line(0, 0, 20, 3, LineStyle.DOTTED)
    )


def test_style_patterns():
    assert [i for i in range(8) if LineStyle.DOTTED.includes(i)] == [0, 4]
    assert [LineStyle.DASHED.includes(i) for i in range(10)] == [True] * 5 + [False] * 5
    assert [i for i in range(15) if LineStyle.DOT_DASH.includes(i)] == [0, 1, 2, 3, 4, 9]
    assert all(LineStyle.SOLID.includes(i) for i in range(30))


def test_invalid_style_raises():
    with pytest.raises(ValueError):
        list(bresenham_line(0, 0, 5, 5, 9))


def test_polygon_outline_rectangle():
    vertices = [(10, 10), (30, 10), (30, 20), (10, 20)]
    points = list(polygon_outline(vertices))
    for vertex in vertices:
        assert vertex in points
    for x, y in points:
        assert x in (10, 30) or y in (10, 20)
        assert 10 <= x <= 30 and 10 <= y <= 20


def test_polygon_outline_empty():
    assert list(polygon_outline([])) == []


@given(st.lists(st.tuples(coord, coord), min_size=1, max_size=6))
def test_polygon_outline_contains_vertices(vertices):
    points = set(polygon_outline(vertices))
    assert set(vertices) <= points