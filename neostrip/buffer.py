"""
Pixel storage shared by strip views.

A PixelBuffer is a flat bytearray holding the channel bytes of every pixel in
wire order. Views (see neostrip.strip.Strip) address it in whole pixels, the
buffer converts pixel positions to byte offsets using the stride of its mode.
"""

from enum import IntEnum
from typing import Optional


class PixelMode(IntEnum):
    """Channel layout of a strip."""
    RGB_GRB = 0  # green, red, blue (most WS2812 strips)
    RGBW = 1  # green, red, blue, white
    RGB_RGB = 2  # red, green, blue

    @property
    def stride(self) -> int:
        """Bytes per pixel."""
        return 4 if self is PixelMode.RGBW else 3


class PixelBuffer:
    """
    Contiguous channel bytes for `capacity` pixels.

    Shift and rotate operate on a pixel range and are expressed in pixels;
    a positive offset moves data toward higher pixel indices.
    """

    def __init__(self, capacity: int, mode: PixelMode = PixelMode.RGB_GRB):
        if capacity < 0:
            raise ValueError(f"Pixel count must be non-negative, got {capacity}")
        self.mode = PixelMode(mode)
        self.stride = self.mode.stride
        self.capacity = capacity
        self.data = bytearray(capacity * self.stride)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def offset_of(self, pixel: int) -> int:
        return pixel * self.stride

    def _span(self, start_pixel: int, count_pixels: int) -> tuple[int, int]:
        """Byte slice bounds for a pixel range, clipped to the buffer."""
        begin = max(0, min(len(self.data), self.offset_of(start_pixel)))
        end = max(begin, min(len(self.data), self.offset_of(start_pixel + count_pixels)))
        return begin, end

    # -------------------------------------------------------------

    def read_pixel(self, pixel: int) -> tuple[int, ...]:
        """Raw channel bytes of one pixel, in buffer order."""
        offset = self.offset_of(pixel)
        return tuple(self.data[offset:offset + self.stride])

    def write_channels(self, pixel: int, channels: tuple[int, ...], first: int = 0):
        """
        Write channel bytes for one pixel starting at channel `first`.

        Values are masked to 8 bits.
        """
        offset = self.offset_of(pixel) + first
        for i, value in enumerate(channels):
            self.data[offset + i] = value & 0xFF

    def region(self, start_pixel: int, count_pixels: int) -> bytes:
        begin, end = self._span(start_pixel, count_pixels)
        return bytes(self.data[begin:end])

    # -------------------------------------------------------------

    def fill(self, value: int, start_pixel: int = 0, count_pixels: Optional[int] = None):
        """Set every byte of a pixel range to `value` (0 clears)."""
        if count_pixels is None:
            count_pixels = self.capacity - start_pixel
        begin, end = self._span(start_pixel, count_pixels)
        self.data[begin:end] = bytes([value & 0xFF]) * (end - begin)

    def shift_pixels(self, offset: int, start_pixel: int, count_pixels: int):
        """
        Move pixel data within a range, zero filling the vacated pixels.

        Data pushed past either edge of the range is lost.
        """
        begin, end = self._span(start_pixel, count_pixels)
        size = end - begin
        n = offset * self.stride
        if size == 0 or n == 0:
            return
        if abs(n) >= size:
            self.data[begin:end] = bytes(size)
        elif n > 0:
            self.data[begin:end] = bytes(n) + self.data[begin:end - n]
        else:
            self.data[begin:end] = self.data[begin - n:end] + bytes(-n)

    def rotate_pixels(self, offset: int, start_pixel: int, count_pixels: int):
        """Move pixel data within a range circularly, nothing is lost."""
        begin, end = self._span(start_pixel, count_pixels)
        size = end - begin
        if size == 0:
            return
        n = (offset * self.stride) % size
        if n == 0:
            return
        chunk = self.data[begin:end]
        self.data[begin:end] = chunk[-n:] + chunk[:-n]
