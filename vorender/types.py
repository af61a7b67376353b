"""Core types for the Voronoi renderer."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from vorender.color import BACKGROUND_COLOR, COLOR_BLACK, CYBERPUNK_PALETTE

# Packed coordinates reject 0xFFFF itself, one below the true 16-bit limit
PACKED_COORD_LIMIT = 0xFFFF


class VoronoiError(Exception):
    """Base exception for rendering errors."""
    pass


class CoordinateRangeError(VoronoiError, ValueError):
    """Raised when a coordinate cannot be stored in a packed color."""
    pass


class UnknownModeError(VoronoiError, ValueError):
    """Raised when a render or save mode string is not recognized."""
    pass


class ImageWriteError(VoronoiError):
    """Raised when an output image cannot be written."""

    def __init__(self, path: Union[str, Path], error: OSError):
        self.path = Path(path)
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"could not write file {self.path}: {reason}")


@dataclass(frozen=True)
class Point:
    """2D point with integer coordinates."""
    x: int
    y: int


@dataclass(frozen=True)
class PackedPoint:
    """A point stored in a 32-bit color value (x low 16 bits, y high 16 bits).

    Only meant for bookkeeping buffers; the value is not a display color.
    """
    value: int

    @classmethod
    def from_point(cls, point: Point) -> "PackedPoint":
        """Pack a point, rejecting negative or >= 65535 coordinates."""
        if not (0 <= point.x < PACKED_COORD_LIMIT and 0 <= point.y < PACKED_COORD_LIMIT):
            raise CoordinateRangeError(
                f"Point ({point.x}, {point.y}) out of packed range "
                f"[0, {PACKED_COORD_LIMIT})"
            )
        return cls((point.y << 16) | point.x)

    @classmethod
    def from_color(cls, color: int) -> "PackedPoint":
        """Reinterpret any 32-bit value as a packed point."""
        return cls(int(color) & 0xFFFFFFFF)

    @property
    def x(self) -> int:
        return self.value & 0x0000FFFF

    @property
    def y(self) -> int:
        return (self.value & 0xFFFF0000) >> 16

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class RenderMode(Enum):
    """Rasterization algorithm selected for a run."""
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    INTERESTING = "interesting"
    PACKED = "packed"
    GRADIENT = "gradient"

    @classmethod
    def parse(cls, name: str) -> "RenderMode":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownModeError(f"Unknown render mode: {name}") from None


class SaveMode(Enum):
    """Output format selected for a run."""
    PIXEL_MAP = "ppm"
    FRAME_SEQUENCE = "mp4"

    @classmethod
    def parse(cls, name: str) -> "SaveMode":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownModeError(f"Unknown save mode: {name}") from None


@dataclass
class RenderConfig:
    """Configuration for a rendering run."""
    # Canvas
    width: int = 1920
    height: int = 1080
    background_color: int = BACKGROUND_COLOR

    # Seeds
    seed_count: int = 9
    random_seed: Optional[int] = None  # None = fresh OS entropy
    palette: Tuple[int, ...] = CYBERPUNK_PALETTE

    # Markers (None = draw only for modes that default to markers)
    draw_markers: Optional[bool] = None
    marker_radius: int = 5
    marker_color: int = COLOR_BLACK

    # Output
    output_path: Path = Path("img.ppm")
    frames_dir: Path = Path(".")
    frame_count: int = 60 * 10
    frame_pattern: str = "output-%02d.ppm"
    fps: int = 60
    video_path: Path = Path("output.mp4")
    ffmpeg: str = "ffmpeg"

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.seed_count < 1:
            raise ValueError(f"seed_count must be >= 1, got {self.seed_count}")
        if len(self.palette) == 0:
            raise ValueError("palette must not be empty")
        if self.frame_count < 0:
            raise ValueError(f"frame_count must be >= 0, got {self.frame_count}")
        self.palette = tuple(int(c) for c in self.palette)
        self.output_path = Path(self.output_path)
        self.frames_dir = Path(self.frames_dir)
        self.video_path = Path(self.video_path)
