"""Raster graphics algorithms: lines, circles, curves, clipping, fills and PPM scenes."""

__version__ = "0.1.0"

__all__ = ["lines", "circle", "curves", "clipping", "fill", "scenes"]