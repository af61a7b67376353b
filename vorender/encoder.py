"""Binary PPM (P6) output and frame sequence export."""
import logging
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from vorender.canvas import Canvas
from vorender.color import packed_to_rgb
from vorender.types import ImageWriteError, VoronoiError

logger = logging.getLogger(__name__)

FRAME_COUNT = 60 * 10
FRAME_PATTERN = "output-%02d.ppm"

ImageLike = Union[Canvas, np.ndarray]


def _as_rgb(image: ImageLike) -> np.ndarray:
    """Normalize a canvas, packed (H, W) array or RGB (H, W, 3) array to uint8 RGB."""
    if isinstance(image, Canvas):
        rgb = image.to_rgb()
    else:
        image = np.asarray(image)
        if image.ndim == 2:
            rgb = packed_to_rgb(image)
        elif image.ndim == 3 and image.shape[2] == 3:
            rgb = image.astype(np.uint8)
        else:
            raise VoronoiError(f"Expected packed (H, W) or RGB (H, W, 3) image, got {image.shape}")
    return np.ascontiguousarray(rgb)


def write_ppm(image: ImageLike, path: Union[str, Path]) -> Path:
    """
    Write an image as binary PPM.

    Layout is ``P6\\n<width> <height>\\n255\\n`` followed by width*height RGB
    triples, row-major from the top row. Alpha is not stored, so reading the
    file back only restores the RGB channels.

    Args:
        image: Canvas or array to write
        path: Output file path

    Returns:
        The written path

    Raises:
        ImageWriteError: If the file cannot be written
    """
    path = Path(path)
    rgb = _as_rgb(image)

    try:
        Image.fromarray(rgb).save(path, format="PPM")
    except OSError as e:
        raise ImageWriteError(path, e) from e

    logger.debug(f"Wrote {rgb.shape[1]}x{rgb.shape[0]} PPM to {path}")
    return path


def read_ppm(path: Union[str, Path]) -> np.ndarray:
    """
    Read a PPM file back as a (height, width, 3) uint8 array.

    Raises:
        FileNotFoundError: If file doesn't exist
        VoronoiError: If the file is not a PPM image
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    try:
        with Image.open(path) as img:
            if img.format != "PPM":
                raise VoronoiError(f"Not a PPM image: {path} ({img.format})")
            return np.array(img.convert("RGB"))
    except (IOError, OSError) as e:
        raise VoronoiError(f"Failed to read image {path}: {e}") from e


def frame_path(directory: Union[str, Path], index: int, pattern: str = FRAME_PATTERN) -> Path:
    """Path of frame ``index`` for a printf-style ``pattern``."""
    return Path(directory) / (pattern % index)


def write_frames(
    canvas: Canvas,
    directory: Union[str, Path],
    count: int = FRAME_COUNT,
    pattern: str = FRAME_PATTERN
) -> List[Path]:
    """
    Write ``count`` frames, frame ``i`` being the canvas shifted by ``i`` on both axes.

    Returns:
        Paths of the written frames in order

    Raises:
        ImageWriteError: If a frame cannot be written
    """
    directory = Path(directory)
    logger.info(f"Writing {count} frames to {directory}")

    paths = []
    for i in range(count):
        paths.append(write_ppm(canvas.shifted(i, i), frame_path(directory, i, pattern)))

    return paths
