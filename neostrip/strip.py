"""
LED strip views over a shared pixel buffer.

Features:
- Pixel, white channel and row-major matrix addressing
- Brightness applied at write time (0-255, `(c * b) >> 8`)
- Sub-ranges that alias the parent's buffer
- Shift / rotate within a view
- Power estimate
- Explicit flush through a Transmitter

Out-of-range coordinates and unsupported channel operations are silently
ignored; nothing in here raises for bad pixel input.
"""

from typing import Optional
from pydantic import BaseModel, Field

from neostrip import config
from neostrip import rendering
from neostrip.buffer import PixelBuffer, PixelMode
from neostrip.colors import HueDirection, idiv, to_int, unpack_b, unpack_g, unpack_r
from neostrip.logger import get_logger
from neostrip.transmit import Transmitter, TransmitResult, get_transmitter

logger = get_logger(__name__)

DEFAULT_BRIGHTNESS = 128


class StripSettings(BaseModel):
    """Validated parameters for creating a root strip."""
    pin: int = Field(..., ge=0, description="Hardware output pin (BCM numbering)")
    count: int = Field(..., ge=0, description="Number of pixels")
    mode: PixelMode = Field(PixelMode.RGB_GRB, description="Channel layout")
    brightness: int = Field(DEFAULT_BRIGHTNESS, ge=0, le=255, description="Write-time brightness (0-255)")


class Strip:
    """
    A window of `length` pixels starting at pixel `start` of a PixelBuffer.

    Several strips may reference the same buffer (see `range`); a write
    through one is visible through all of them.
    """

    def __init__(self, buffer: PixelBuffer, transmitter: Transmitter, pin: int = 0,
                 start: int = 0, length: Optional[int] = None,
                 brightness: int = DEFAULT_BRIGHTNESS):
        self.buffer = buffer
        self.transmitter = transmitter
        self.pin = pin
        # Keep start + length <= capacity
        self.start = max(0, min(buffer.capacity, to_int(start)))
        room = buffer.capacity - self.start
        self._length = room if length is None else max(0, min(room, to_int(length)))
        self.brightness = brightness & 0xFF
        self.matrix_width = 0

    @property
    def mode(self) -> PixelMode:
        return self.buffer.mode

    @property
    def stride(self) -> int:
        return self.buffer.stride

    def __len__(self) -> int:
        return self._length

    def length(self) -> int:
        """Number of pixels in this view."""
        return self._length

    # -------------------------------------------------------------
    # Buffer writes

    def _scale(self, value: int) -> int:
        if self.brightness < 255:
            return (value * self.brightness) >> 8
        return value

    def _set_buffer_rgb(self, pixel: int, red: int, green: int, blue: int):
        if self.mode == PixelMode.RGB_RGB:
            self.buffer.write_channels(pixel, (red, green, blue))
        else:
            self.buffer.write_channels(pixel, (green, red, blue))

    def _set_all_rgb(self, rgb: int):
        red = self._scale(unpack_r(rgb))
        green = self._scale(unpack_g(rgb))
        blue = self._scale(unpack_b(rgb))
        for pixel in range(self.start, self.start + self._length):
            self._set_buffer_rgb(pixel, red, green, blue)

    def _set_all_w(self, white: int):
        if self.mode != PixelMode.RGBW:
            return
        white = self._scale(white)
        for pixel in range(self.start, self.start + self._length):
            self.buffer.write_channels(pixel, (white,), first=3)

    # -------------------------------------------------------------
    # Pixel addressing

    def set_pixel_color(self, index: int, rgb: int):
        """
        Set one pixel to a packed RGB color.

        Args:
            index: Position within this view (0-based)
            rgb: Packed 0xRRGGBB color

        Does nothing if `index` is outside the view. Call `show()` to send
        the change to the strip.
        """
        index = to_int(index)
        rgb = to_int(rgb)
        if index < 0 or index >= self._length:
            return

        red = self._scale(unpack_r(rgb))
        green = self._scale(unpack_g(rgb))
        blue = self._scale(unpack_b(rgb))
        self._set_buffer_rgb(self.start + index, red, green, blue)

    def set_pixel_white_led(self, index: int, white: int):
        """Set the white channel of one pixel (RGBW strips only)."""
        if self.mode != PixelMode.RGBW:
            return

        index = to_int(index)
        if index < 0 or index >= self._length:
            return

        white = self._scale(to_int(white))
        self.buffer.write_channels(self.start + index, (white,), first=3)

    def set_matrix_width(self, width: int):
        """Treat the view as a row-major matrix `width` pixels wide."""
        self.matrix_width = min(self._length, to_int(width))

    def set_matrix_color(self, x: int, y: int, rgb: int):
        """
        Set the pixel at column `x`, row `y` of a matrix.

        Ignored when no matrix width is set or the coordinate is outside the
        matrix. The number of rows is `length // matrix_width`.
        """
        if self.matrix_width <= 0:
            return

        x = to_int(x)
        y = to_int(y)
        rows = self._length // self.matrix_width
        if x < 0 or x >= self.matrix_width or y < 0 or y >= rows:
            return
        self.set_pixel_color(x + y * self.matrix_width, rgb)

    # -------------------------------------------------------------
    # Whole-view operations

    def show_color(self, rgb: int) -> TransmitResult:
        """Set all pixels to a packed RGB color and show it."""
        self._set_all_rgb(to_int(rgb))
        return self.show()

    def show_white(self, white: int) -> TransmitResult:
        """Set the white channel of all pixels (RGBW strips) and show it."""
        self._set_all_w(to_int(white))
        return self.show()

    def show_rainbow(self, start_hue: int = 1, end_hue: int = 360,
                     direction: HueDirection = HueDirection.CLOCKWISE) -> Optional[TransmitResult]:
        return rendering.show_rainbow(self, start_hue, end_hue, direction)

    def show_bar_graph(self, value: int, high: int) -> TransmitResult:
        return rendering.show_bar_graph(self, value, high)

    def ease_brightness(self):
        rendering.ease_brightness(self)

    def clear(self):
        """Turn off all pixels of this view (in the buffer only)."""
        self.buffer.fill(0, self.start, self._length)

    def set_brightness(self, brightness: int):
        """Set brightness (0-255) for subsequent writes."""
        self.brightness = to_int(brightness) & 0xFF

    def range(self, start: int, length: int) -> "Strip":
        """
        Create a view over part of this one.

        Both bounds are clamped into this view. The new strip shares the
        buffer, pin and transmitter and starts with a copy of the brightness.
        """
        start = to_int(start)
        length = to_int(length)
        offset = max(0, min(self._length - 1, start))
        sub_length = max(0, min(self._length - offset, length))
        return Strip(
            self.buffer,
            self.transmitter,
            pin=self.pin,
            start=self.start + offset,
            length=sub_length,
            brightness=self.brightness,
        )

    def shift(self, offset: int = 1):
        """Move pixels toward higher indices by `offset`, zero filling."""
        self.buffer.shift_pixels(to_int(offset), self.start, self._length)

    def rotate(self, offset: int = 1):
        """Move pixels toward higher indices by `offset`, wrapping around."""
        self.buffer.rotate_pixels(to_int(offset), self.start, self._length)

    def power(self) -> int:
        """
        Rough current draw estimate in mA.

        0.5 mA idle per pixel plus 0.0433 mA per channel unit. Not calibrated.
        """
        total = sum(self.buffer.region(self.start, self._length))
        return idiv(self._length, 2) + idiv(total * 433, 10000)

    # -------------------------------------------------------------
    # Hardware

    def set_pin(self, pin: int):
        """Assign the output pin and drive it to idle."""
        self.pin = to_int(pin)
        self.transmitter.configure_output(self.pin)
        logger.info(f"Strip output pin set to {self.pin}")

    def show(self) -> TransmitResult:
        """Send the whole buffer to the strip."""
        return self.transmitter.transmit(bytes(self.buffer), self.pin, self.stride)


# ============================================================================
# Factories
# ============================================================================

def create(pin: int, num_leds: int, mode: PixelMode = PixelMode.RGB_GRB,
           transmitter: Optional[Transmitter] = None) -> Strip:
    """
    Create a strip with its own buffer.

    Args:
        pin: Output pin the strip data line is attached to
        num_leds: Number of pixels
        mode: Channel layout
        transmitter: Hardware boundary (default: get_transmitter())

    Example:
        strip = create(18, 30)
        strip.show_rainbow()
    """
    num_leds = to_int(num_leds)
    mode = PixelMode(mode)
    logger.info(f"Creating LED strip: count={num_leds}, pin={pin}, mode={mode.name}")

    buffer = PixelBuffer(num_leds, mode)
    strip = Strip(buffer, transmitter or get_transmitter(), start=0, length=num_leds)
    strip.set_brightness(DEFAULT_BRIGHTNESS)
    strip.set_pin(pin)
    return strip


def create_from_settings(settings: StripSettings, transmitter: Optional[Transmitter] = None) -> Strip:
    strip = create(settings.pin, settings.count, settings.mode, transmitter)
    strip.set_brightness(settings.brightness)
    return strip


def create_default_strip(transmitter: Optional[Transmitter] = None) -> Strip:
    """Create a strip from the LED_* environment configuration."""
    try:
        mode = PixelMode[config.LED_MODE]
    except KeyError:
        raise ValueError(f"Unknown LED_MODE '{config.LED_MODE}'") from None

    settings = StripSettings(
        pin=config.LED_PIN,
        count=config.LED_COUNT,
        mode=mode,
        brightness=config.LED_BRIGHTNESS,
    )
    return create_from_settings(settings, transmitter)
