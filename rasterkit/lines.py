"""Line rasterisation: DDA and Bresenham, with dash patterns."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence

Point = tuple[int, int]


class LineStyle(enum.IntEnum):
    """Dash patterns applied to the points of a Bresenham line."""

    SOLID = 0
    DOTTED = 1
    DASHED = 2
    DOT_DASH = 3

    def includes(self, index: int) -> bool:
        """Whether the point at ``index`` along the line is drawn."""
        if self is LineStyle.SOLID:
            return True
        if self is LineStyle.DOTTED:
            return index % 4 == 0
        if self is LineStyle.DASHED:
            return index % 10 < 5
        phase = index % 15
        return phase < 5 or 8 < phase < 10


def round_half_up(a: float) -> int:
    """Add one half and truncate toward zero."""
    return int(a + 0.5)


def dda_line(
    xa: int,
    ya: int,
    xb: int,
    yb: int,
    include_start: bool = True,
    include_end: bool = True,
) -> Iterator[Point]:
    """Yield the points of a DDA line from (xa, ya) to (xb, yb).

    The start point is yielded as given; every following point is the
    rounded position after one more increment along the major axis.
    """
    xa, ya, xb, yb = int(xa), int(ya), int(xb), int(yb)
    dx = xb - xa
    dy = yb - ya
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        if include_start or include_end:
            yield (xa, ya)
        return
    if include_start:
        yield (xa, ya)
    xinc = dx / steps
    yinc = dy / steps
    x = float(xa)
    y = float(ya)
    last = steps if include_end else steps - 1
    for _ in range(last):
        x += xinc
        y += yinc
        yield (round_half_up(x), round_half_up(y))


def bresenham_line(
    xa: int,
    ya: int,
    xb: int,
    yb: int,
    style: LineStyle = LineStyle.SOLID,
) -> Iterator[Point]:
    """Yield the points of a Bresenham line, filtered by ``style``.

    The line is always walked in increasing direction of its major axis,
    and the first point of that walk is not yielded.
    """
    xa, ya, xb, yb = int(xa), int(ya), int(xb), int(yb)
    style = LineStyle(style)
    dx = xb - xa
    dy = yb - ya
    adx, ady = abs(dx), abs(dy)
    same_sign = (dx > 0 and dy > 0) or (dx < 0 and dy < 0)
    minor_step = 1 if same_sign else -1
    index = 0

    if adx > ady:
        d = 2 * ady - adx
        c, r, f = (xa, ya, xb) if dx > 0 else (xb, yb, xa)
        while f > c:
            if d < 0:
                d += 2 * ady
            else:
                r += minor_step
                d += 2 * ady - 2 * adx
            c += 1
            if style.includes(index):
                yield (c, r)
            index += 1
    else:
        d = 2 * adx - ady
        c, r, f = (xa, ya, yb) if dy > 0 else (xb, yb, ya)
        while f > r:
            if d < 0:
                d += 2 * adx
            else:
                c += minor_step
                d += 2 * adx - 2 * ady
            r += 1
            if style.includes(index):
                yield (c, r)
            index += 1


def polygon_outline(vertices: Sequence[tuple[float, float]]) -> Iterator[Point]:
    """Yield the DDA points of the closed polygon through ``vertices``."""
    points = list(vertices)
    for (xa, ya), (xb, yb) in zip(points, points[1:] + points[:1]):
        yield from dda_line(xa, ya, xb, yb)