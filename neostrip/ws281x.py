"""
WS2812 / SK6812 output through rpi_ws281x.

Features:
- DMA driven output (rpi_ws281x)
- Buffer bytes sent in the order they are stored (no re-encoding)
- Output pin set to a known idle LOW level (RPi.GPIO)

Only imported when MOCK_MODE is off; needs the `hardware` extra.
"""

from typing import Dict

from rpi_ws281x import PixelStrip, ws

try:
    import RPi.GPIO as GPIO
    GPIO_AVAILABLE = True
except (ImportError, RuntimeError):
    GPIO_AVAILABLE = False

from neostrip import config
from neostrip.logger import get_logger
from neostrip.transmit import Transmitter, TransmitResult

logger = get_logger(__name__)


def pack_wire_color(channels: bytes) -> int:
    """
    Pack one pixel's wire bytes into an rpi_ws281x color word.

    With an RGB/RGBW strip type rpi_ws281x emits red, green, blue (then white),
    so placing byte 0, 1, 2 in those fields sends them unchanged.
    """
    value = (channels[0] << 16) | (channels[1] << 8) | channels[2]
    if len(channels) == 4:
        value |= channels[3] << 24
    return value


class Ws281xTransmitter(Transmitter):
    """Transmitter backed by rpi_ws281x.PixelStrip."""

    def __init__(self, freq_hz: int = config.LED_FREQ_HZ, dma: int = config.LED_DMA,
                 channel: int = config.LED_CHANNEL):
        self.freq_hz = freq_hz
        self.dma = dma
        self.channel = channel
        self._strips: Dict[tuple[int, int, int], PixelStrip] = {}

    def _strip_for(self, pin: int, num_pixels: int, stride: int) -> PixelStrip:
        key = (pin, num_pixels, stride)
        strip = self._strips.get(key)
        if strip is None:
            strip_type = ws.SK6812_STRIP_RGBW if stride == 4 else ws.WS2811_STRIP_RGB
            logger.info(
                f"Initializing rpi_ws281x output: pixels={num_pixels}, pin={pin}, "
                f"dma={self.dma}, stride={stride}"
            )
            strip = PixelStrip(
                num_pixels,
                pin,
                self.freq_hz,
                self.dma,
                False,
                255,
                self.channel,
                strip_type,
            )
            strip.begin()
            self._strips[key] = strip
        return strip

    def transmit(self, buffer: bytes, pin: int, stride: int = 3) -> TransmitResult:
        num_pixels = len(buffer) // stride
        try:
            strip = self._strip_for(pin, num_pixels, stride)
            for i in range(num_pixels):
                offset = i * stride
                strip.setPixelColor(i, pack_wire_color(buffer[offset:offset + stride]))
            strip.show()
        except RuntimeError as e:
            logger.error(f"Failed to transmit {num_pixels} pixels on pin {pin}", exc_info=True)
            return TransmitResult(ok=False, error=str(e))

        logger.debug(f"Transmitted {num_pixels} pixels on pin {pin}")
        return TransmitResult(ok=True)

    def configure_output(self, pin: int) -> None:
        if not GPIO_AVAILABLE:
            logger.warning(f"Cannot configure pin {pin} (GPIO library not available)")
            return

        GPIO.setmode(GPIO.BCM)
        GPIO.setup(pin, GPIO.OUT)
        GPIO.output(pin, GPIO.LOW)
        logger.debug(f"Pin {pin} configured as idle output")
