"""
Color math for LED strips.

Features:
- Packed 24-bit RGB integers (0xRRGGBB)
- Fixed-point HSL to RGB conversion (no floating point)
- Well known named colors
- Integer helpers with truncating division

All arithmetic reproduces the integer behavior of the strip firmware so that
colors computed here are bit-exact with colors computed on the device.
"""

import math
from enum import IntEnum


class NamedColor(IntEnum):
    """Well known colors as packed RGB values."""
    RED = 0xFF0000
    ORANGE = 0xFFA500
    YELLOW = 0xFFFF00
    GREEN = 0x00FF00
    BLUE = 0x0000FF
    INDIGO = 0x4B0082
    VIOLET = 0x8A2BE2
    PURPLE = 0xFF00FF
    WHITE = 0xFFFFFF
    BLACK = 0x000000


class HueDirection(IntEnum):
    """Direction to travel around the hue wheel when interpolating."""
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1
    SHORTEST = 2


# ============================================================================
# Integer helpers
# ============================================================================

def to_int(value) -> int:
    """Truncate a number toward zero, like a `value >> 0` cast."""
    return int(value)


def idiv(a: int, b: int) -> int:
    """
    Integer division truncating toward zero.

    Python's `//` floors, which differs for negative operands. Division by
    zero yields 0.

    Example:
        idiv(-7, 2)  # -3, where -7 // 2 == -4
    """
    if b == 0:
        return 0
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def round_half_up(value) -> int:
    """Round to nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


# ============================================================================
# Packed RGB
# ============================================================================

def pack(r: int, g: int, b: int) -> int:
    """
    Pack red, green and blue into a 24-bit integer.

    Each channel is masked to 8 bits, out-of-range values are never rejected.

    Example:
        pack(255, 128, 0)  # 0xFF8000
    """
    return ((to_int(r) & 0xFF) << 16) | ((to_int(g) & 0xFF) << 8) | (to_int(b) & 0xFF)


def rgb(red: int, green: int, blue: int) -> int:
    """Convert red, green and blue channels (0-255) to a packed RGB color."""
    return pack(red, green, blue)


def unpack_r(color: int) -> int:
    return (to_int(color) >> 16) & 0xFF


def unpack_g(color: int) -> int:
    return (to_int(color) >> 8) & 0xFF


def unpack_b(color: int) -> int:
    return to_int(color) & 0xFF


def color(named: NamedColor) -> int:
    """Return the packed RGB value of a named color."""
    return int(NamedColor(named))


# ============================================================================
# HSL
# ============================================================================

def hsl(h: float, s: float, l: float) -> int:
    """
    Convert hue, saturation and luminosity to a packed RGB color.

    Args:
        h: Hue in degrees (wraps modulo 360)
        s: Saturation percentage (clamped to 0-99)
        l: Luminosity percentage (clamped to 0-99)

    Returns:
        Packed 24-bit RGB color

    Algorithm:
        Chroma and the second largest component are computed on a x256 fixed
        point scale, the hue sector (0-5) picks which channels receive them
        and the lightness offset is added to all three channels. Every
        division truncates.
    """
    h = round_half_up(h) % 360
    s = max(0, min(99, round_half_up(s)))
    l = max(0, min(99, round_half_up(l)))

    c = idiv(((100 - abs(2 * l - 100)) * s) << 8, 10000)  # chroma, [0,255]
    h1 = idiv(h, 60)  # sector, [0,5]
    h2 = idiv((h - h1 * 60) * 256, 60)  # position within sector, [0,255]
    temp = abs((((h1 % 2) << 8) + h2) - 256)
    x = (c * (256 - temp)) >> 8  # second largest component

    if h1 == 0:
        r, g, b = c, x, 0
    elif h1 == 1:
        r, g, b = x, c, 0
    elif h1 == 2:
        r, g, b = 0, c, x
    elif h1 == 3:
        r, g, b = 0, x, c
    elif h1 == 4:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    m = idiv(idiv((l * 2) << 8, 100) - c, 2)
    return pack(r + m, g + m, b + m)
