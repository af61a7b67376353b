"""Tests for distance metrics and packed coordinate encoding."""
import numpy as np
import pytest

from vorender.geometry import (
    manhattan_distance,
    manhattan_distance_field,
    packed_color_to_point,
    packed_to_points,
    point_to_packed_color,
    points_to_packed,
    squared_distance_field,
    squared_euclidean_distance,
)
from vorender.types import CoordinateRangeError, PackedPoint, Point


class TestDistances:
    """Test scalar distance functions."""

    def test_squared_euclidean(self):
        """Test squared Euclidean distance on a 3-4-5 triangle."""
        assert squared_euclidean_distance(Point(0, 0), Point(3, 4)) == 25

    def test_manhattan(self):
        """Test Manhattan distance with negative offsets."""
        assert manhattan_distance(Point(5, 1), Point(2, 7)) == 9

    def test_zero_distance(self):
        p = Point(10, 20)
        assert squared_euclidean_distance(p, p) == 0
        assert manhattan_distance(p, p) == 0

    @pytest.mark.parametrize("a,b", [
        (Point(0, 0), Point(1919, 1079)),
        (Point(-3, 8), Point(4, -2)),
        (Point(100, 5), Point(5, 100)),
    ])
    def test_symmetry(self, a, b):
        """Test that both metrics are symmetric."""
        assert squared_euclidean_distance(a, b) == squared_euclidean_distance(b, a)
        assert manhattan_distance(a, b) == manhattan_distance(b, a)

    def test_large_coordinates_do_not_overflow(self):
        """Test distances beyond the 32-bit range."""
        d = squared_euclidean_distance(Point(0, 0), Point(100000, 100000))
        assert d == 2 * 100000 ** 2


class TestDistanceFields:
    """Test whole-canvas distance fields against the scalar functions."""

    def test_squared_field_matches_scalar(self):
        seed = Point(2, 3)
        field = squared_distance_field(seed, 6, 5)

        assert field.shape == (5, 6)
        assert field.dtype == np.int64
        for y in range(5):
            for x in range(6):
                assert field[y, x] == squared_euclidean_distance(seed, Point(x, y))

    def test_manhattan_field_matches_scalar(self):
        seed = Point(4, 0)
        field = manhattan_distance_field(seed, 6, 5)

        for y in range(5):
            for x in range(6):
                assert field[y, x] == manhattan_distance(seed, Point(x, y))

    def test_seed_outside_canvas(self):
        """Test a field for a seed that lies off the canvas."""
        field = squared_distance_field(Point(-1, -1), 2, 2)
        np.testing.assert_array_equal(field, [[2, 5], [5, 8]])


class TestPackedColor:
    """Test the coordinate-in-color encoding."""

    def test_layout(self):
        """Test that x goes to the low 16 bits and y to the high 16 bits."""
        assert point_to_packed_color(Point(0x1234, 0x5678)) == 0x56781234

    @pytest.mark.parametrize("p", [
        Point(0, 0),
        Point(1919, 1079),
        Point(65534, 0),
        Point(0, 65534),
        Point(65534, 65534),
        Point(12345, 54321),
    ])
    def test_round_trip(self, p):
        assert packed_color_to_point(point_to_packed_color(p)) == p

    @pytest.mark.parametrize("p", [
        Point(65535, 0),
        Point(0, 65535),
        Point(-1, 0),
        Point(0, -1),
        Point(70000, 70000),
    ])
    def test_out_of_range(self, p):
        """Test that negative and >= 65535 coordinates are rejected."""
        with pytest.raises(CoordinateRangeError):
            point_to_packed_color(p)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            point_to_packed_color(Point(65535, 65535))

    def test_decode_any_32_bit_value(self):
        """Test that decoding never fails, even at the 0xFFFF boundary."""
        assert packed_color_to_point(0xFFFFFFFF) == Point(0xFFFF, 0xFFFF)
        assert packed_color_to_point(0) == Point(0, 0)
        assert packed_color_to_point(0xFF181818) == Point(0x1818, 0xFF18)

    def test_packed_point_accessors(self):
        packed = PackedPoint.from_point(Point(7, 9))

        assert packed.x == 7
        assert packed.y == 9
        assert packed.to_point() == Point(7, 9)
        assert PackedPoint.from_color(packed.value) == packed


class TestPackedArrays:
    """Test the array forms of the packed encoding."""

    def test_array_round_trip(self):
        xs = np.array([[0, 1], [2, 65534]])
        ys = np.array([[3, 4], [5, 65534]])

        packed = points_to_packed(xs, ys)
        assert packed.dtype == np.uint32

        back_x, back_y = packed_to_points(packed)
        np.testing.assert_array_equal(back_x, xs)
        np.testing.assert_array_equal(back_y, ys)

    def test_array_matches_scalar(self):
        packed = points_to_packed(np.array([10]), np.array([20]))
        assert int(packed[0]) == point_to_packed_color(Point(10, 20))

    def test_array_out_of_range(self):
        with pytest.raises(CoordinateRangeError):
            points_to_packed(np.array([0, 65535]), np.array([0, 0]))
        with pytest.raises(CoordinateRangeError):
            points_to_packed(np.array([0]), np.array([-1]))
