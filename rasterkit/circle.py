"""Bresenham circle rasterisation."""

from __future__ import annotations

from collections.abc import Iterator

Point = tuple[int, int]


def bresenham_circle(xc: int, yc: int, r: int) -> Iterator[Point]:
    """Yield the eight-way symmetric points of a circle of radius ``r``.

    Each step of the first octant yields its eight mirrored points; the
    first step is always taken.
    """
    xc, yc, r = int(xc), int(yc), int(r)
    x, y = 0, r
    d = 3 - 2 * r
    while True:
        yield (xc + x, yc + y)
        yield (xc + y, yc + x)
        yield (xc - x, yc - y)
        yield (xc - y, yc - x)
        yield (xc + x, yc - y)
        yield (xc - x, yc + y)
        yield (xc - y, yc + x)
        yield (xc + y, yc - x)
        x += 1
        if d < 0:
            d += 4 * x + 6
        else:
            y -= 1
            d += 4 * x - 4 * y + 10
        if y < x:
            break