"""Cohen-Sutherland line clipping and Sutherland-Hodgman polygon clipping."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from .lines import Point, polygon_outline

Vertex = tuple[float, float]
Outcode = tuple[int, int, int, int]


class ClipStatus(enum.Enum):
    """Outcome of clipping a line against a window."""

    ACCEPTED = "Fully Accepted"
    PARTIAL = "Partially Accepted"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class ClipWindow:
    """An axis-aligned clipping rectangle."""

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    def outcode(self, x: float, y: float) -> Outcode:
        """Return the region bits (top, bottom, right, left) of a point."""
        return (
            int(y > self.ymax),
            int(y < self.ymin),
            int(x > self.xmax),
            int(x < self.xmin),
        )

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the window or on its border."""
        return not any(self.outcode(x, y))

    def outline(self) -> Iterator[Point]:
        """Yield the DDA points of the window's border."""
        return polygon_outline(
            [
                (self.xmin, self.ymin),
                (self.xmax, self.ymin),
                (self.xmax, self.ymax),
                (self.xmin, self.ymax),
            ]
        )


@dataclass(frozen=True)
class LineClipResult:
    """The clipped segment, or no segment when the line is rejected."""

    status: ClipStatus
    start: Vertex | None
    end: Vertex | None
    slope: float | None = None


def _slope(xa: float, ya: float, xb: float, yb: float) -> float:
    dx = xb - xa
    dy = yb - ya
    if dx == 0:
        return math.copysign(math.inf, dy) if dy else math.nan
    return dy / dx


def _move_to_boundary(
    window: ClipWindow, x: float, y: float, code: Outcode, m: float
) -> Vertex:
    top, bottom, right, left = code
    nx, ny = x, y
    if top:
        nx, ny = x + (window.ymax - y) / m, float(window.ymax)
    if bottom:
        nx, ny = x + (window.ymin - y) / m, float(window.ymin)
    if right:
        nx, ny = float(window.xmax), y + m * (window.xmax - x)
    if left:
        nx, ny = float(window.xmin), y + m * (window.xmin - x)
    return (nx, ny)


def clip_line(
    window: ClipWindow, x1: float, y1: float, x2: float, y2: float
) -> LineClipResult:
    """Clip a line against ``window`` in a single Cohen-Sutherland pass."""
    x1, y1, x2, y2 = float(x1), float(y1), float(x2), float(y2)
    code1 = window.outcode(x1, y1)
    code2 = window.outcode(x2, y2)
    if not any(code1) and not any(code2):
        return LineClipResult(ClipStatus.ACCEPTED, (x1, y1), (x2, y2))
    if any(a and b for a, b in zip(code1, code2)):
        return LineClipResult(ClipStatus.REJECTED, None, None)
    m = _slope(x1, y1, x2, y2)
    return LineClipResult(
        ClipStatus.PARTIAL,
        _move_to_boundary(window, x1, y1, code1, m),
        _move_to_boundary(window, x2, y2, code2, m),
        m,
    )


Inside = Callable[[float, float], bool]
Intersect = Callable[[int, int, int, int], Vertex]


def _x_boundary(bound: int) -> Intersect:
    def intersect(xa: int, ya: int, xb: int, yb: int) -> Vertex:
        return (float(bound), ya + _slope(xa, ya, xb, yb) * (bound - xa))

    return intersect


def _y_boundary(bound: int) -> Intersect:
    def intersect(xa: int, ya: int, xb: int, yb: int) -> Vertex:
        return (xa + (bound - ya) / _slope(xa, ya, xb, yb), float(bound))

    return intersect


def _clip_pass(
    vertices: list[Vertex], inside: Inside, intersect: Intersect
) -> list[Vertex]:
    # Each pass takes its input vertices as whole numbers, truncating toward zero.
    points = [(int(x), int(y)) for x, y in vertices]
    output: list[Vertex] = []
    for (xa, ya), (xb, yb) in zip(points, points[1:] + points[:1]):
        a_in = inside(xa, ya)
        b_in = inside(xb, yb)
        if a_in and b_in:
            output.append((float(xb), float(yb)))
        elif a_in:
            output.append(intersect(xa, ya, xb, yb))
        elif b_in:
            output.append(intersect(xa, ya, xb, yb))
            output.append((float(xb), float(yb)))
    return output


def clip_polygon(window: ClipWindow, vertices: Sequence[Vertex]) -> list[Vertex]:
    """Clip a polygon against the left, right, bottom and top window edges."""
    passes: list[tuple[Inside, Intersect]] = [
        (lambda x, y: x >= window.xmin, _x_boundary(window.xmin)),
        (lambda x, y: x <= window.xmax, _x_boundary(window.xmax)),
        (lambda x, y: y >= window.ymin, _y_boundary(window.ymin)),
        (lambda x, y: y <= window.ymax, _y_boundary(window.ymax)),
    ]
    result = list(vertices)
    for inside, intersect in passes:
        result = _clip_pass(result, inside, intersect)
    return result