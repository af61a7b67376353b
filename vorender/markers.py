"""Seed marker overlay."""
from typing import Sequence

from vorender.canvas import Canvas
from vorender.color import COLOR_BLACK
from vorender.types import Point, RenderMode

SEED_MARKER_RADIUS = 5
SEED_MARKER_COLOR = COLOR_BLACK

# Modes whose output is drawn with markers unless told otherwise
MARKED_MODES = frozenset({RenderMode.INTERESTING, RenderMode.PACKED})


def render_seed_markers(
    canvas: Canvas,
    seeds: Sequence[Point],
    radius: int = SEED_MARKER_RADIUS,
    color: int = SEED_MARKER_COLOR
) -> Canvas:
    """Stamp a filled circle at every seed. Call after rasterization."""
    for seed in seeds:
        canvas.stamp_circle(seed, radius, color)
    return canvas
