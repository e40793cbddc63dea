# rasterkit

Textbook raster graphics algorithms on integer pixel grids, with no
drawing library required. The rasterising routines are generators of
`(x, y)` integer points; clipping returns plain vertices and result
objects. Plot the output wherever you like, or paint it onto the built-in
`Canvas` and save it as a PPM image.

## What is inside

- `rasterkit.lines`
  - `round_half_up(a)`: adds one half and truncates toward zero.
  - `dda_line(xa, ya, xb, yb, include_start=True, include_end=True)`: DDA
    line points; the two flags drop the first or last point.
  - `bresenham_line(xa, ya, xb, yb, style=LineStyle.SOLID)`: Bresenham
    line points, always walked along the increasing major axis; the first
    point of that walk is not yielded.
  - `LineStyle`: `SOLID`, `DOTTED` (every 4th point), `DASHED` (5 on,
    5 off) and `DOT_DASH` (a 15-point dash-dot pattern).
  - `polygon_outline(vertices)`: DDA points of a closed polygon.
- `rasterkit.circle`
  - `bresenham_circle(xc, yc, r)`: the eight-way symmetric circle points.
- `rasterkit.curves`
  - `bezier_point(control_points, t)` and `bezier_curve(control_points,
    step=0.001)` for linear, quadratic and cubic curves (2, 3 or 4 control
    points; any other count raises `ValueError`).
  - `control_polygon(control_points)`: the open polyline through the
    control points.
  - `koch_curve(xa, ya, xb, yb, depth=5)` and `koch_snowflake(depth=5)`,
    the latter on the triangle (100, 100), (400, 100), (250, 400).
- `rasterkit.clipping`
  - `ClipWindow(xmin, ymin, xmax, ymax)` with `outcode` (top, bottom,
    right, left bits), `contains` and `outline`.
  - `clip_line(window, x1, y1, x2, y2)`: a single Cohen–Sutherland pass,
    returning a `LineClipResult` with a `ClipStatus` (`ACCEPTED`,
    `PARTIAL` or `REJECTED`), the clipped end points and, for partial
    clips, the slope.
  - `clip_polygon(window, vertices)`: Sutherland–Hodgman clipping against
    the left, right, bottom and top edges in that order; each pass
    truncates its input vertices to whole numbers.
- `rasterkit.fill`
  - `Canvas(width, height, background=(1.0, 1.0, 1.0))`: RGB pixels with
    the origin at the bottom-left; `get`, `set`, `plot` (skips points off
    the canvas and returns how many were painted) and `to_ppm`
    (binary P6 bytes, top row first).
  - `boundary_fill` and `flood_fill`: 4-connected seed fills that return
    the number of pixels painted.
- `rasterkit.scenes`
  - `axes_demo()`, `rings(xc, yc, r)` and `robot_figure()` return layers
    of `(colour, points)`; `render(layers, width=640, height=480,
    background=(1.0, 1.0, 1.0))` paints them onto a new `Canvas`.

## Installation

```
pip install .
```

Install with `pip install .[test]` to run the test suite with `pytest`.

## Examples

```python
from rasterkit.lines import bresenham_line, LineStyle
from rasterkit.clipping import ClipWindow, clip_line
from rasterkit.fill import Canvas, flood_fill

points = list(bresenham_line(0, 0, 20, 8, LineStyle.DASHED))

window = ClipWindow(10, 10, 100, 100)
result = clip_line(window, 0, 50, 150, 50)
print(result.status, result.start, result.end)  # ClipStatus.PARTIAL (10.0, 50.0) (100.0, 50.0)

canvas = Canvas(128, 128)
canvas.plot(window.outline(), (0.0, 0.0, 0.0))
flood_fill(canvas, 50, 50, (1.0, 1.0, 1.0), (1.0, 0.0, 0.0))
with open("window.ppm", "wb") as handle:
    handle.write(canvas.to_ppm())
```

## Command line

The `rasterkit` command renders one of the built-in scenes as a binary
PPM image, to standard output or to the file given with `-o/--output`:

```
rasterkit -o axes.ppm axes
rasterkit -o rings.ppm rings 60 --x 540 --y 400
rasterkit -o robot.ppm robot
```

`axes` and `robot` are 640×480; `rings` is 1080×720 and takes the circle
radius plus an optional centre (`--x`, `--y`, both 0 by default). Run
`rasterkit --help` for the full list of options.

## What it does not do

rasterkit has no display window and takes no mouse or keyboard input:
points, polygons and clip windows are passed in as arguments, and
pictures are only written out as PPM images.