"""Bezier curves and Koch fractal curves built from rasterised lines."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from .lines import Point, dda_line, round_half_up

ControlPoint = tuple[float, float]

_SNOWFLAKE = ((100, 100), (400, 100), (250, 400))


def _bernstein_weights(count: int, t: float) -> tuple[float, ...]:
    s = 1 - t
    if count == 2:
        return (s, t)
    if count == 3:
        return (s**2, 2 * s * t, t**2)
    if count == 4:
        return (s**3, 3 * s**2 * t, 3 * s * t**2, t**3)
    raise ValueError(
        f"a Bezier curve needs 2, 3 or 4 control points, got {count}"
    )


def bezier_point(control_points: Sequence[ControlPoint], t: float) -> tuple[float, float]:
    """Return the point at parameter ``t`` of a linear, quadratic or cubic curve."""
    points = list(control_points)
    weights = _bernstein_weights(len(points), t)
    x = sum(w * px for w, (px, _) in zip(weights, points))
    y = sum(w * py for w, (_, py) in zip(weights, points))
    return (x, y)


def bezier_curve(
    control_points: Sequence[ControlPoint], step: float = 0.001
) -> Iterator[Point]:
    """Yield rounded curve points for t = 0, step, 2*step, ... while t <= 1."""
    if step <= 0:
        raise ValueError("step must be positive")
    points = list(control_points)
    _bernstein_weights(len(points), 0.0)
    t = 0.0
    while t <= 1.0:
        x, y = bezier_point(points, t)
        yield (round_half_up(x), round_half_up(y))
        t += step


def control_polygon(control_points: Sequence[ControlPoint]) -> Iterator[Point]:
    """Yield the DDA points of the open polyline joining the control points."""
    points = list(control_points)
    for (xa, ya), (xb, yb) in zip(points, points[1:]):
        yield from dda_line(xa, ya, xb, yb)


def _koch_segment(xa: float, ya: float, xb: float, yb: float) -> Iterator[Point]:
    # The segment starts at its first point and takes one increment past the end.
    xa, ya, xb, yb = int(xa), int(ya), int(xb), int(yb)
    dx = xb - xa
    dy = yb - ya
    steps = max(abs(dx), abs(dy))
    yield (xa, ya)
    if steps == 0:
        return
    xinc = dx / steps
    yinc = dy / steps
    x = float(xa)
    y = float(ya)
    for _ in range(steps + 1):
        x += xinc
        y += yinc
        yield (round_half_up(x), round_half_up(y))


def koch_curve(
    xa: float, ya: float, xb: float, yb: float, depth: int = 5
) -> Iterator[Point]:
    """Yield the points of a Koch curve of the given recursion depth."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    if depth == 0:
        yield from _koch_segment(xa, ya, xb, yb)
        return
    x1 = xa + (xb - xa) / 3
    y1 = ya + (yb - ya) / 3
    x2 = xa + 2 * (xb - xa) / 3
    y2 = ya + 2 * (yb - ya) / 3
    dx = x2 - x1
    dy = y2 - y1
    angle = math.pi / 3
    x3 = x1 + dx * math.cos(angle) - dy * math.sin(angle)
    y3 = y1 + dx * math.sin(angle) + dy * math.cos(angle)
    yield from koch_curve(xa, ya, x1, y1, depth - 1)
    yield from koch_curve(x1, y1, x3, y3, depth - 1)
    yield from koch_curve(x3, y3, x2, y2, depth - 1)
    yield from koch_curve(x2, y2, xb, yb, depth - 1)


def koch_snowflake(depth: int = 5) -> Iterator[Point]:
    """Yield the points of three Koch curves on the fixed triangle."""
    corners = list(_SNOWFLAKE)
    for (xa, ya), (xb, yb) in zip(corners, corners[1:] + corners[:1]):
        yield from koch_curve(xa, ya, xb, yb, depth)