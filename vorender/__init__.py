"""Voronoi diagram renderer."""
from vorender.types import (
    Point,
    PackedPoint,
    RenderConfig,
    RenderMode,
    SaveMode,
    VoronoiError,
    CoordinateRangeError,
    UnknownModeError,
    ImageWriteError,
)
from vorender.canvas import Canvas

__version__ = "0.1.0"

__all__ = [
    "Point",
    "PackedPoint",
    "RenderConfig",
    "RenderMode",
    "SaveMode",
    "VoronoiError",
    "CoordinateRangeError",
    "UnknownModeError",
    "ImageWriteError",
    "Canvas",
]
