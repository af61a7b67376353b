"""Distance metrics and packed coordinate encoding."""
from typing import Tuple

import numpy as np

from vorender.types import Point, PackedPoint, CoordinateRangeError, PACKED_COORD_LIMIT


def squared_euclidean_distance(p1: Point, p2: Point) -> int:
    """Squared Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def manhattan_distance(p1: Point, p2: Point) -> int:
    """Manhattan (taxicab) distance between two points."""
    return abs(p1.x - p2.x) + abs(p1.y - p2.y)


def pixel_grid(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pixel coordinate grids for a canvas.

    Returns:
        Tuple of (xs, ys), each int64 with shape (height, width)
    """
    ys, xs = np.mgrid[0:height, 0:width].astype(np.int64)
    return xs, ys


def squared_distance_field(point: Point, width: int, height: int) -> np.ndarray:
    """Squared Euclidean distance from every pixel to ``point`` as int64 (H, W)."""
    xs, ys = pixel_grid(width, height)
    dx = xs - point.x
    dy = ys - point.y
    return dx * dx + dy * dy


def manhattan_distance_field(point: Point, width: int, height: int) -> np.ndarray:
    """Manhattan distance from every pixel to ``point`` as int64 (H, W)."""
    xs, ys = pixel_grid(width, height)
    return np.abs(xs - point.x) + np.abs(ys - point.y)


def point_to_packed_color(point: Point) -> int:
    """
    Encode a point as a 32-bit color (x in the low 16 bits, y in the high 16 bits).

    Raises:
        CoordinateRangeError: If a coordinate is negative or >= 65535
    """
    return PackedPoint.from_point(point).value


def packed_color_to_point(color: int) -> Point:
    """Decode a 32-bit packed color back into a point."""
    return PackedPoint.from_color(color).to_point()


def points_to_packed(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Array form of :func:`point_to_packed_color`.

    Raises:
        CoordinateRangeError: If any coordinate is negative or >= 65535
    """
    xs = np.asarray(xs, dtype=np.int64)
    ys = np.asarray(ys, dtype=np.int64)
    if xs.size and (xs.min() < 0 or xs.max() >= PACKED_COORD_LIMIT):
        raise CoordinateRangeError(
            f"x coordinates out of packed range [0, {PACKED_COORD_LIMIT})"
        )
    if ys.size and (ys.min() < 0 or ys.max() >= PACKED_COORD_LIMIT):
        raise CoordinateRangeError(
            f"y coordinates out of packed range [0, {PACKED_COORD_LIMIT})"
        )
    return ((ys << 16) | xs).astype(np.uint32)


def packed_to_points(values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Array form of :func:`packed_color_to_point`.

    Returns:
        Tuple of (xs, ys) as int64 arrays with the shape of ``values``
    """
    values = np.asarray(values, dtype=np.uint32).astype(np.int64)
    return values & 0xFFFF, (values >> 16) & 0xFFFF
