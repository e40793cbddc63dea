"""Fixed demonstration pictures and a command that renders them to PPM."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .circle import bresenham_circle
from .fill import WHITE, Canvas, Color
from .lines import LineStyle, Point, bresenham_line

Layer = tuple[Color, list[Point]]

BLACK: Color = (0.0, 0.0, 0.0)
RED: Color = (1.0, 0.0, 0.0)
GREEN: Color = (0.0, 1.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0)

_ROBOT_LINES = (
    (200, 50, 220, 50), (220, 50, 220, 150), (220, 150, 200, 150), (200, 150, 200, 50),
    (260, 50, 280, 50), (280, 50, 280, 150), (280, 150, 260, 150), (260, 150, 260, 50),
    (200, 150, 280, 150), (280, 150, 280, 280), (280, 280, 200, 280), (200, 280, 200, 150),
    (235, 280, 235, 290), (245, 280, 245, 290),
    (200, 280, 150, 220), (150, 220, 200, 260),
    (280, 280, 330, 220), (330, 220, 280, 260),
    (240, 320, 235, 315), (235, 315, 245, 315), (245, 315, 240, 320),
    (230, 310, 230, 305), (230, 305, 250, 305), (250, 305, 250, 310), (250, 310, 230, 310),
)

_ROBOT_CIRCLES = ((240, 320, 30), (225, 325, 5), (255, 325, 5))


def axes_demo() -> list[Layer]:
    """Axes and four styled lines, in coordinates centred on a 640x480 view."""
    points: list[Point] = [(-320, 100)]
    points.extend(bresenham_line(-320, 0, 320, 0, LineStyle.SOLID))
    points.extend(bresenham_line(0, -240, 0, 240, LineStyle.SOLID))
    for end_y, style in zip((100, 120, 140, 160), LineStyle):
        points.extend(bresenham_line(0, 0, -200, end_y, style))
    return [(BLACK, points)]


def rings(xc: int, yc: int, r: int) -> list[Layer]:
    """Five interlocking circles of radius ``r`` around (xc, yc)."""
    r1 = int(r * 2.2)
    r2 = int(r * 1.2)
    centres = (
        (BLACK, xc, yc),
        (RED, xc + r1, yc),
        (BLUE, xc - r1, yc),
        (YELLOW, int(xc + r1 * -0.5), int(yc + r2 * -0.866)),
        (GREEN, int(xc + r1 * 0.5), int(yc + r2 * -0.866)),
    )
    return [(color, list(bresenham_circle(cx, cy, r))) for color, cx, cy in centres]


def robot_figure() -> list[Layer]:
    """A stick robot drawn from Bresenham lines and circles."""
    points: list[Point] = []
    for line in _ROBOT_LINES:
        points.extend(bresenham_line(*line))
    for circle in _ROBOT_CIRCLES:
        points.extend(bresenham_circle(*circle))
    return [(BLACK, points)]


def render(
    layers: Iterable[tuple[Sequence[float], Iterable[Point]]],
    width: int = 640,
    height: int = 480,
    background: Sequence[float] = WHITE,
) -> Canvas:
    """Paint the layers, in order, onto a fresh canvas."""
    canvas = Canvas(width, height, background)
    for color, points in layers:
        canvas.plot(points, color)
    return canvas


def _shift(layers: list[Layer], dx: int, dy: int) -> list[Layer]:
    return [(color, [(x + dx, y + dy) for x, y in points]) for color, points in layers]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterkit", description="Render a demonstration picture as PPM."
    )
    parser.add_argument(
        "-o", "--output", default="-", help="output file, or - for standard output"
    )
    scenes = parser.add_subparsers(dest="scene", required=True)
    scenes.add_parser("axes", help="axes with solid, dotted, dashed and dot-dash lines")
    ring_parser = scenes.add_parser("rings", help="five interlocking circles")
    ring_parser.add_argument("radius", type=int)
    ring_parser.add_argument("--x", type=int, default=0, help="centre x")
    ring_parser.add_argument("--y", type=int, default=0, help="centre y")
    scenes.add_parser("robot", help="a stick robot")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Render the chosen scene and write it as a binary PPM image."""
    args = _parser().parse_args(argv)
    if args.scene == "axes":
        canvas = render(_shift(axes_demo(), 320, 240), 640, 480)
    elif args.scene == "rings":
        canvas = render(rings(args.x, args.y, args.radius), 1080, 720)
    else:
        canvas = render(robot_figure(), 640, 480)
    data = canvas.to_ppm()
    if args.output == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(args.output, "wb") as handle:
            handle.write(data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())