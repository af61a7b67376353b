"""Pytest configuration and fixtures."""

import logging

import numpy as np
import pytest

from vorender.canvas import Canvas
from vorender.color import COLOR_BLUE, COLOR_RED, COLOR_GREEN, COLOR_WHITE
from vorender.types import Point


@pytest.fixture
def two_color_palette():
    """RED, BLUE palette."""
    return (COLOR_RED, COLOR_BLUE)


@pytest.fixture
def four_color_palette():
    return (COLOR_RED, COLOR_GREEN, COLOR_BLUE, COLOR_WHITE)


@pytest.fixture
def corner_seeds():
    """Seeds at opposite corners of an 8x8 canvas."""
    return (Point(0, 0), Point(7, 7))


@pytest.fixture
def small_canvas():
    """Empty 8x8 canvas."""
    return Canvas(8, 8)


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("vorender")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
