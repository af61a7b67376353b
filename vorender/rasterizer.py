"""Voronoi rasterization: assign every pixel to its nearest seed."""
import logging
from typing import Callable, Optional, Sequence

import numpy as np

from vorender.canvas import Canvas
from vorender.geometry import (
    manhattan_distance_field,
    packed_to_points,
    pixel_grid,
    point_to_packed_color,
    points_to_packed,
    squared_distance_field,
)
from vorender.types import Point, RenderMode

logger = logging.getLogger(__name__)

DistanceField = Callable[[Point, int, int], np.ndarray]


def _check_inputs(seeds: Sequence[Point], palette: Optional[Sequence[int]]):
    if len(seeds) == 0:
        raise ValueError("seeds must not be empty")
    if palette is not None and len(palette) == 0:
        raise ValueError("palette must not be empty")


def _palette_array(palette: Sequence[int]) -> np.ndarray:
    return np.asarray([int(c) for c in palette], dtype=np.uint32)


def nearest_seed_indices(
    seeds: Sequence[Point],
    width: int,
    height: int,
    metric: DistanceField = squared_distance_field
) -> np.ndarray:
    """
    Label map of the nearest seed index for every pixel.

    Seeds are scanned in index order and a later seed only takes a pixel on
    a strictly smaller distance, so ties go to the lowest index.

    Args:
        seeds: Seed points (non-empty)
        width: Canvas width
        height: Canvas height
        metric: Function returning the (height, width) distance field of a seed

    Returns:
        int64 array (height, width) of seed indices
    """
    _check_inputs(seeds, None)

    best = metric(seeds[0], width, height)
    labels = np.zeros((height, width), dtype=np.int64)

    for i in range(1, len(seeds)):
        dist = metric(seeds[i], width, height)
        closer = dist < best
        best[closer] = dist[closer]
        labels[closer] = i

    return labels


def _render_direct(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Sequence[int],
    metric: DistanceField
) -> Canvas:
    _check_inputs(seeds, palette)
    colors = _palette_array(palette)
    labels = nearest_seed_indices(seeds, canvas.width, canvas.height, metric)
    canvas.pixels[...] = colors[labels % len(colors)]
    return canvas


def render_voronoi_euclidean(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Sequence[int]
) -> Canvas:
    """Color every pixel by its nearest seed under squared Euclidean distance."""
    logger.debug(f"Euclidean Voronoi: {len(seeds)} seeds on {canvas}")
    return _render_direct(canvas, seeds, palette, squared_distance_field)


def render_voronoi_manhattan(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Sequence[int]
) -> Canvas:
    """Color every pixel by its nearest seed under Manhattan distance."""
    logger.debug(f"Manhattan Voronoi: {len(seeds)} seeds on {canvas}")
    return _render_direct(canvas, seeds, palette, manhattan_distance_field)


def relax_seed(canvas: Canvas, depth: np.ndarray, seed: Point, color: int) -> int:
    """
    Let one seed claim every pixel it is strictly closer to than the depth buffer.

    Updates ``depth`` and ``canvas`` in place.

    Returns:
        Number of pixels claimed
    """
    dist = squared_distance_field(seed, canvas.width, canvas.height)
    closer = dist < depth
    depth[closer] = dist[closer]
    canvas.pixels[closer] = color
    return int(np.count_nonzero(closer))


def render_voronoi_interesting(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Sequence[int]
) -> Canvas:
    """
    Incremental nearest-seed rendering with a depth buffer.

    The depth buffer starts at the largest int64 and seeds are relaxed in
    index order, so the result matches :func:`render_voronoi_euclidean`
    pixel for pixel, ties included.
    """
    _check_inputs(seeds, palette)
    colors = _palette_array(palette)

    depth = np.full((canvas.height, canvas.width), np.iinfo(np.int64).max, dtype=np.int64)

    for i, seed in enumerate(seeds):
        claimed = relax_seed(canvas, depth, seed, colors[i % len(colors)])
        logger.debug(f"Seed {i} at ({seed.x}, {seed.y}) claimed {claimed} pixels")

    return canvas


def apply_next_seed(canvas: Canvas, seed: Point) -> int:
    """
    Let ``seed`` take every pixel whose packed owner is strictly farther away.

    The canvas must hold packed coordinates (see :class:`PackedPoint`).

    Returns:
        Number of pixels taken
    """
    packed = point_to_packed_color(seed)

    owner_x, owner_y = packed_to_points(canvas.pixels)
    xs, ys = pixel_grid(canvas.width, canvas.height)
    owner_dist = (xs - owner_x) ** 2 + (ys - owner_y) ** 2

    dist = squared_distance_field(seed, canvas.width, canvas.height)
    closer = dist < owner_dist
    canvas.pixels[closer] = packed
    return int(np.count_nonzero(closer))


def resolve_packed_owners(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Sequence[int]
) -> Canvas:
    """
    Replace packed owner coordinates with palette colors.

    Seeds sharing a position resolve to the lowest index.
    """
    _check_inputs(seeds, palette)
    colors = _palette_array(palette)

    packed = canvas.pixels.copy()
    seen = set()
    for i, seed in enumerate(seeds):
        value = point_to_packed_color(seed)
        if value in seen:
            continue
        seen.add(value)
        canvas.pixels[packed == value] = colors[i % len(colors)]

    return canvas


def render_voronoi_packed(
    canvas: Canvas,
    seeds: Sequence[Point],
    palette: Optional[Sequence[int]] = None
) -> Canvas:
    """
    Nearest-seed rendering that stores each pixel's owner in the pixel itself.

    Every pixel starts as seed 0's packed coordinate and later seeds take
    over pixels they are strictly closer to. Without a palette the canvas is
    left holding raw packed coordinates.

    Raises:
        CoordinateRangeError: If a seed cannot be packed
    """
    _check_inputs(seeds, palette)

    canvas.fill(point_to_packed_color(seeds[0]))
    for i in range(1, len(seeds)):
        taken = apply_next_seed(canvas, seeds[i])
        logger.debug(f"Seed {i} took {taken} pixels")

    if palette is not None:
        resolve_packed_owners(canvas, seeds, palette)

    return canvas


def render_point_gradient(canvas: Canvas) -> Canvas:
    """Set every pixel to the packed coordinate of its own position."""
    xs, ys = pixel_grid(canvas.width, canvas.height)
    canvas.pixels[...] = points_to_packed(xs, ys)
    return canvas


def render(
    canvas: Canvas,
    mode: RenderMode,
    seeds: Sequence[Point],
    palette: Sequence[int]
) -> Canvas:
    """Dispatch to the renderer for ``mode``."""
    if mode is RenderMode.EUCLIDEAN:
        return render_voronoi_euclidean(canvas, seeds, palette)
    if mode is RenderMode.MANHATTAN:
        return render_voronoi_manhattan(canvas, seeds, palette)
    if mode is RenderMode.INTERESTING:
        return render_voronoi_interesting(canvas, seeds, palette)
    if mode is RenderMode.PACKED:
        return render_voronoi_packed(canvas, seeds)
    if mode is RenderMode.GRADIENT:
        return render_point_gradient(canvas)
    raise ValueError(f"Unsupported render mode: {mode}")
