"""Fixed-size pixel buffer of packed colors."""
from typing import Optional

import numpy as np

from vorender.color import packed_to_rgb
from vorender.types import Point


class Canvas:
    """Row-major (height, width) buffer of packed 0xAABBGGRR colors."""

    def __init__(self, width: int, height: int, pixels: Optional[np.ndarray] = None):
        """
        Initialize canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            pixels: Optional existing (height, width) buffer to adopt
        """
        if width < 1 or height < 1:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        if pixels is None:
            self.pixels = np.zeros((height, width), dtype=np.uint32)
        else:
            if pixels.shape != (height, width):
                raise ValueError(
                    f"Pixel buffer shape {pixels.shape} does not match {height}x{width}"
                )
            self.pixels = pixels.astype(np.uint32, copy=False)

    @property
    def shape(self):
        return self.pixels.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return int(self.pixels[y, x])

    def set_pixel(self, x: int, y: int, color: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        self.pixels[y, x] = color

    def fill(self, color: int):
        """Set every pixel to ``color``."""
        self.pixels.fill(color)

    def stamp_circle(self, center: Point, radius: int, color: int):
        """
        Fill a disc of pixels with ``dx*dx + dy*dy <= radius*radius``.

        Pixels falling outside the canvas are skipped.
        """
        x0 = max(center.x - radius, 0)
        y0 = max(center.y - radius, 0)
        x1 = min(center.x + radius, self.width - 1)
        y1 = min(center.y + radius, self.height - 1)
        if x0 > x1 or y0 > y1:
            return

        ys, xs = np.mgrid[y0:y1 + 1, x0:x1 + 1]
        dx = xs - center.x
        dy = ys - center.y
        mask = dx * dx + dy * dy <= radius * radius
        self.pixels[y0:y1 + 1, x0:x1 + 1][mask] = color

    def shifted(self, dx: int, dy: int) -> np.ndarray:
        """
        Cyclically shifted copy of the pixels.

        Output pixel (x, y) holds input pixel ((x + dx) mod width, (y + dy) mod height).
        """
        shifted = np.roll(self.pixels, shift=(-dy, -dx), axis=(0, 1))
        shifted.flags.writeable = False
        return shifted

    def to_rgb(self) -> np.ndarray:
        """(height, width, 3) uint8 RGB array; alpha is dropped."""
        return packed_to_rgb(self.pixels)

    def copy(self) -> "Canvas":
        return Canvas(self.width, self.height, self.pixels.copy())

    def __eq__(self, other):
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self):
        return f"Canvas({self.width}x{self.height})"
