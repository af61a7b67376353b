"""Tests for core types and color helpers."""
import numpy as np
import pytest

from vorender.color import (
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    CYBERPUNK_PALETTE,
    format_color,
    pack_rgba,
    packed_to_rgb,
    parse_hex_color,
    rgb_to_packed,
    unpack_rgba,
)
from vorender.types import ImageWriteError, RenderMode, SaveMode, UnknownModeError


class TestModes:
    """Test parsing of mode strings."""

    @pytest.mark.parametrize("name,mode", [
        ("euclidean", RenderMode.EUCLIDEAN),
        ("manhattan", RenderMode.MANHATTAN),
        ("interesting", RenderMode.INTERESTING),
        ("packed", RenderMode.PACKED),
        ("gradient", RenderMode.GRADIENT),
        (" Euclidean ", RenderMode.EUCLIDEAN),
    ])
    def test_render_modes(self, name, mode):
        assert RenderMode.parse(name) is mode

    def test_save_modes(self):
        assert SaveMode.parse("ppm") is SaveMode.PIXEL_MAP
        assert SaveMode.parse("mp4") is SaveMode.FRAME_SEQUENCE

    def test_unknown(self):
        with pytest.raises(UnknownModeError, match="render mode"):
            RenderMode.parse("voronoi")
        with pytest.raises(UnknownModeError, match="save mode"):
            SaveMode.parse("png")


class TestImageWriteError:
    """Test the write error message."""

    def test_message(self):
        error = ImageWriteError("out/img.ppm", FileNotFoundError(2, "No such file or directory"))
        assert str(error) == "could not write file out/img.ppm: No such file or directory"


class TestColors:
    """Test packed color helpers."""

    def test_byte_order(self):
        """Test the 0xAABBGGRR layout of the named constants."""
        assert pack_rgba(255, 0, 0) == COLOR_RED
        assert pack_rgba(0, 255, 0) == COLOR_GREEN
        assert pack_rgba(0, 0, 255) == COLOR_BLUE

    def test_unpack(self):
        assert unpack_rgba(0x80302010) == (0x10, 0x20, 0x30, 0x80)

    def test_pack_validation(self):
        with pytest.raises(ValueError):
            pack_rgba(256, 0, 0)

    def test_hex(self):
        assert parse_hex_color("#FF3D94") == 0xFF943DFF
        assert format_color(0xFF943DFF) == "#ff3d94"
        with pytest.raises(ValueError):
            parse_hex_color("#FFF")

    def test_palette(self):
        assert len(CYBERPUNK_PALETTE) == 9
        assert len(set(CYBERPUNK_PALETTE)) == 9
        assert all(c >> 24 == 0xFF for c in CYBERPUNK_PALETTE)

    def test_array_conversion(self):
        packed = np.array([[COLOR_RED, COLOR_BLUE]], dtype=np.uint32)

        rgb = packed_to_rgb(packed)

        np.testing.assert_array_equal(rgb, [[[255, 0, 0], [0, 0, 255]]])
        np.testing.assert_array_equal(rgb_to_packed(rgb), packed)
