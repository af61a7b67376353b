"""Tests for seed generation."""
import numpy as np
import pytest

from vorender.seeds import generate_seeds, make_rng
from vorender.types import Point


class TestGenerateSeeds:
    """Test random seed placement."""

    def test_count_and_type(self, rng):
        seeds = generate_seeds(9, 1920, 1080, rng)

        assert len(seeds) == 9
        assert isinstance(seeds, tuple)
        assert all(isinstance(s, Point) for s in seeds)

    def test_within_bounds(self, rng):
        seeds = generate_seeds(500, 7, 3, rng)

        assert all(0 <= s.x < 7 for s in seeds)
        assert all(0 <= s.y < 3 for s in seeds)

    def test_covers_range(self, rng):
        """Test that both ends of each axis are reachable."""
        seeds = generate_seeds(500, 4, 2, rng)

        assert {s.x for s in seeds} == {0, 1, 2, 3}
        assert {s.y for s in seeds} == {0, 1}

    def test_reproducible(self):
        a = generate_seeds(9, 1920, 1080, make_rng(42))
        b = generate_seeds(9, 1920, 1080, make_rng(42))
        assert a == b

    def test_duplicates_allowed(self, rng):
        """Test that a 1x1 canvas yields repeated positions."""
        seeds = generate_seeds(3, 1, 1, rng)
        assert seeds == (Point(0, 0), Point(0, 0), Point(0, 0))

    def test_plain_ints(self, rng):
        seed = generate_seeds(1, 10, 10, rng)[0]
        assert type(seed.x) is int
        assert type(seed.y) is int

    @pytest.mark.parametrize("count,width,height", [(0, 10, 10), (3, 0, 10), (3, 10, -1)])
    def test_invalid_arguments(self, rng, count, width, height):
        with pytest.raises(ValueError):
            generate_seeds(count, width, height, rng)


class TestMakeRng:
    """Test generator construction."""

    def test_returns_generator(self):
        assert isinstance(make_rng(), np.random.Generator)
        assert isinstance(make_rng(7), np.random.Generator)
