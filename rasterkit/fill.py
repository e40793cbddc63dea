"""A small raster canvas with boundary and flood fill."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .lines import Point

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)


def _color(value: Sequence[float]) -> Color:
    components = tuple(float(c) for c in value)
    if len(components) != 3:
        raise ValueError(f"a colour needs 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


class Canvas:
    """A grid of RGB pixels with its origin at the bottom-left corner."""

    def __init__(self, width: int, height: int, background: Sequence[float] = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = int(width)
        self.height = int(height)
        self.background = _color(background)
        self._pixels: list[Color] = [self.background] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return y * self.width + x

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        """Return the colour of a pixel."""
        return self._pixels[self._index(int(x), int(y))]

    def set(self, x: int, y: int, color: Sequence[float]) -> None:
        """Paint one pixel."""
        self._pixels[self._index(int(x), int(y))] = _color(color)

    def plot(self, points: Iterable[Point], color: Sequence[float]) -> int:
        """Paint every point that lies on the canvas; return how many did."""
        paint = _color(color)
        painted = 0
        for x, y in points:
            x, y = int(x), int(y)
            if self._inside(x, y):
                self._pixels[y * self.width + x] = paint
                painted += 1
        return painted

    def to_ppm(self) -> bytes:
        """Encode the canvas as a binary PPM image, top row first."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for y in reversed(range(self.height)):
            row = self._pixels[y * self.width:(y + 1) * self.width]
            for pixel in row:
                body.extend(round(min(1.0, max(0.0, c)) * 255) for c in pixel)
        return header + bytes(body)


def _fill(canvas: Canvas, x: int, y: int, fill: Color, should_paint) -> int:
    filled = 0
    stack: list[Point] = [(int(x), int(y))]
    while stack:
        px, py = stack.pop()
        if not canvas._inside(px, py):
            continue
        if not should_paint(canvas.get(px, py)):
            continue
        canvas.set(px, py, fill)
        filled += 1
        # Reversed so the neighbours are visited up, down, right, left.
        stack.extend(((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1)))
    return filled


def boundary_fill(
    canvas: Canvas,
    x: int,
    y: int,
    boundary: Sequence[float],
    fill: Sequence[float],
) -> int:
    """Paint the 4-connected region around (x, y) up to the boundary colour.

    Returns the number of pixels painted.
    """
    boundary_color = _color(boundary)
    fill_color = _color(fill)
    return _fill(
        canvas,
        x,
        y,
        fill_color,
        lambda current: current != boundary_color and current != fill_color,
    )


def flood_fill(
    canvas: Canvas,
    x: int,
    y: int,
    background: Sequence[float],
    fill: Sequence[float],
) -> int:
    """Repaint the 4-connected background-coloured region around (x, y).

    Returns the number of pixels painted.
    """
    background_color = _color(background)
    fill_color = _color(fill)
    return _fill(
        canvas,
        x,
        y,
        fill_color,
        lambda current: current == background_color and current != fill_color,
    )