"""
Buffer rendering algorithms for LED strips.

Supports:
- Rainbow gradients (hue interpolation in HSL space)
- Bar graphs (blue to red ramp)
- Parabolic brightness easing

All math is integer only, scaled x100 where fractional steps are needed,
so output is identical on every platform.
"""

from neostrip.colors import HueDirection, NamedColor, hsl, idiv, rgb, to_int
from neostrip.logger import get_logger

logger = get_logger(__name__)

RAINBOW_SATURATION = 100
RAINBOW_LUMINANCE = 50

# Shown on pixel 0 when a bar graph value rounds down to nothing
BAR_GRAPH_EMPTY = 0x666600


# ============================================================================
# Rainbow
# ============================================================================

def hue_step(start_hue: int, end_hue: int, steps: int,
             direction: HueDirection = HueDirection.CLOCKWISE) -> int:
    """
    Per-pixel hue increment, scaled x100.

    Args:
        start_hue: First hue in degrees
        end_hue: Last hue in degrees
        steps: Number of pixels to spread the hues over
        direction: Way around the hue wheel

    Returns:
        Signed step (negative when travelling counter-clockwise)
    """
    dist_cw = ((end_hue + 360) - start_hue) % 360
    step_cw = idiv(dist_cw * 100, steps)
    dist_ccw = ((start_hue + 360) - end_hue) % 360
    step_ccw = idiv(-(dist_ccw * 100), steps)

    if direction == HueDirection.CLOCKWISE:
        return step_cw
    if direction == HueDirection.COUNTER_CLOCKWISE:
        return step_ccw
    return step_cw if dist_cw < dist_ccw else step_ccw


def show_rainbow(strip, start_hue: int = 1, end_hue: int = 360,
                 direction: HueDirection = HueDirection.CLOCKWISE):
    """
    Fill the strip with a rainbow and show it.

    The first and last pixels get exactly `start_hue` and `end_hue`, the ones
    in between step through the hue wheel. A single pixel strip gets the hue
    one step past `start_hue`.

    Returns:
        TransmitResult of the flush, or None for an empty strip
    """
    steps = strip.length()
    if steps <= 0:
        return None

    start_hue = to_int(start_hue)
    end_hue = to_int(end_hue)
    step = hue_step(start_hue, end_hue, steps, direction)

    if steps == 1:
        strip.set_pixel_color(0, hsl(start_hue + step, RAINBOW_SATURATION, RAINBOW_LUMINANCE))
    else:
        strip.set_pixel_color(0, hsl(start_hue, RAINBOW_SATURATION, RAINBOW_LUMINANCE))
        for i in range(1, steps - 1):
            h = idiv(start_hue * 100 + i * step, 100) + 360
            strip.set_pixel_color(i, hsl(h, RAINBOW_SATURATION, RAINBOW_LUMINANCE))
        strip.set_pixel_color(steps - 1, hsl(end_hue, RAINBOW_SATURATION, RAINBOW_LUMINANCE))

    return strip.show()


# ============================================================================
# Bar graph
# ============================================================================

def show_bar_graph(strip, value: int, high: int):
    """
    Show `value` out of `high` as a bar lit from pixel 0.

    Lit pixels are colored by position, blue at pixel 0 to red at the last
    pixel. A non-positive `high` shows a single yellow pixel instead.

    Returns:
        TransmitResult of the flush
    """
    value = to_int(value)
    high = to_int(high)

    if high <= 0:
        logger.debug(f"Bar graph scale {high} is not positive, showing indicator")
        strip.clear()
        strip.set_pixel_color(0, NamedColor.YELLOW)
        return strip.show()

    value = abs(value)
    n = strip.length()
    n1 = n - 1
    v = idiv(value * n, high)

    if v == 0:
        strip.set_pixel_color(0, BAR_GRAPH_EMPTY)
        for i in range(1, n):
            strip.set_pixel_color(i, 0)
    else:
        for i in range(n):
            if i <= v:
                b = idiv(i * 255, n1)
                strip.set_pixel_color(i, rgb(b, 0, 255 - b))
            else:
                strip.set_pixel_color(i, 0)

    return strip.show()


# ============================================================================
# Easing
# ============================================================================

def ease_factor(k: int, length: int) -> int:
    """Brightness (0-255) at position `k` of a parabolic window over `length` pixels."""
    mid = length // 2
    if k > mid:
        return idiv(255 * (length - 1 - k) * (length - 1 - k), mid * mid)
    return idiv(255 * k * k, mid * mid)


def ease_brightness(strip):
    """
    Dim the ends of the strip along a parabola, brightest in the middle.

    Rescales the channel bytes already in the buffer; does not show.
    """
    length = strip.length()
    buffer = strip.buffer
    for k in range(length):
        br = ease_factor(k, length)
        pixel = strip.start + k
        channels = buffer.read_pixel(pixel)
        buffer.write_channels(pixel, tuple((c * br) >> 8 for c in channels))
