"""Random seed point generation."""
import logging
from typing import Optional, Tuple

import numpy as np

from vorender.types import Point

logger = logging.getLogger(__name__)


def generate_seeds(
    count: int,
    width: int,
    height: int,
    rng: np.random.Generator
) -> Tuple[Point, ...]:
    """
    Generate seed points uniformly inside a canvas.

    Duplicate positions are allowed.

    Args:
        count: Number of seeds (must be >= 1)
        width: Canvas width; x is drawn from [0, width)
        height: Canvas height; y is drawn from [0, height)
        rng: Random generator supplied by the caller

    Returns:
        Tuple of seed points, index order preserved
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if width < 1 or height < 1:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")

    seeds = []
    for _ in range(count):
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        seeds.append(Point(x, y))

    logger.debug(f"Generated {count} seeds: {seeds}")
    return tuple(seeds)


def make_rng(random_seed: Optional[int] = None) -> np.random.Generator:
    """Create a generator; ``None`` draws fresh entropy from the OS."""
    return np.random.default_rng(random_seed)
