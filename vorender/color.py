"""Packed 32-bit colors in 0xAABBGGRR byte order."""
from typing import Tuple, Union

import numpy as np

COLOR_WHITE = 0xFFFFFFFF
COLOR_BLACK = 0xFF000000
COLOR_MAGENTA = 0xFFFF00FF
COLOR_RED = 0xFF0000FF
COLOR_GREEN = 0xFF00FF00
COLOR_BLUE = 0xFFFF0000

CYBERPUNK_WILD_STRAWBERRY = 0xFF943DFF
CYBERPUNK_MEDIUM_RED_VIOLET = 0xFF7E30B5
CYBERPUNK_DAISY_BUSH = 0xFF982A6A
CYBERPUNK_METEORITE = 0xFF6D1C3F
CYBERPUNK_VIOLET = 0xFF4B0B21
CYBERPUNK_SAFFRON_MANGO = 0xFF4EC5F9
CYBERPUNK_PERSIAN_GREEN = 0xFFA1B300
CYBERPUNK_TEAL = 0xFF807F00
CYBERPUNK_ORIENT = 0xFF805B00

BACKGROUND_COLOR = 0xFF181818

CYBERPUNK_PALETTE = (
    CYBERPUNK_WILD_STRAWBERRY,
    CYBERPUNK_MEDIUM_RED_VIOLET,
    CYBERPUNK_DAISY_BUSH,
    CYBERPUNK_METEORITE,
    CYBERPUNK_VIOLET,
    CYBERPUNK_SAFFRON_MANGO,
    CYBERPUNK_PERSIAN_GREEN,
    CYBERPUNK_TEAL,
    CYBERPUNK_ORIENT,
)


def pack_rgba(r: int, g: int, b: int, a: int = 255) -> int:
    """
    Pack 8-bit channels into a 0xAABBGGRR color.

    Args:
        r, g, b, a: Channel values in range [0, 255]

    Returns:
        Packed 32-bit color
    """
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel {name} must be in [0, 255], got {value}")
    return (a << 24) | (b << 16) | (g << 8) | r


def unpack_rgba(color: int) -> Tuple[int, int, int, int]:
    """Split a packed color into (r, g, b, a)."""
    color = int(color)
    return (
        color & 0xFF,
        (color >> 8) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 24) & 0xFF,
    )


def parse_hex_color(hex_str: str, alpha: int = 255) -> int:
    """
    Parse a '#RRGGBB' or 'RRGGBB' string into a packed color.

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        raise ValueError(f"Expected 6 hex digits, got {hex_str!r}")
    r = int(val[0:2], 16)
    g = int(val[2:4], 16)
    b = int(val[4:6], 16)
    return pack_rgba(r, g, b, alpha)


def format_color(color: int) -> str:
    """Format a packed color as '#RRGGBB' (alpha dropped)."""
    r, g, b, _ = unpack_rgba(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def packed_to_rgb(pixels: Union[np.ndarray, int]) -> np.ndarray:
    """
    Convert packed colors to 8-bit RGB, dropping alpha.

    Args:
        pixels: Packed colors, any shape

    Returns:
        uint8 array with a trailing channel axis of size 3
    """
    pixels = np.asarray(pixels, dtype=np.uint32)
    rgb = np.stack([
        pixels & 0xFF,
        (pixels >> 8) & 0xFF,
        (pixels >> 16) & 0xFF,
    ], axis=-1)
    return rgb.astype(np.uint8)


def rgb_to_packed(rgb: np.ndarray, alpha: int = 255) -> np.ndarray:
    """Convert an (..., 3) uint8 RGB array to packed colors with a fixed alpha."""
    rgb = np.asarray(rgb, dtype=np.uint32)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected 3 channels, got {rgb.shape[-1]}")
    return (
        (np.uint32(alpha) << np.uint32(24))
        | (rgb[..., 2] << np.uint32(16))
        | (rgb[..., 1] << np.uint32(8))
        | rgb[..., 0]
    ).astype(np.uint32)
