"""
Mock hardware implementations for development without physical devices.

Enable mock mode by setting MOCK_MODE=true in .env

Features:
- Mock transmitter keeping a bounded history of recent frames
- Visual logging of first, middle and last pixel
- Compatible interface with neostrip.ws281x.Ws281xTransmitter
"""

from collections import deque
from typing import Deque, List

from neostrip.logger import get_logger
from neostrip.transmit import Transmitter, TransmitResult

logger = get_logger(__name__)

# Frames kept by MockTransmitter; older ones are dropped
FRAME_HISTORY = 32


class MockTransmitter(Transmitter):
    """
    In-memory transmitter.

    Drop-in replacement for Ws281xTransmitter when MOCK_MODE=true
    """

    def __init__(self, history: int = FRAME_HISTORY):
        self.frames: Deque[tuple[int, bytes]] = deque(maxlen=history)
        self.frame_count = 0
        self.configured_pins: List[int] = []
        logger.info("[MOCK] Transmitter ready (mock mode)")

    @property
    def last_frame(self) -> bytes:
        """Bytes of the most recent frame (empty if nothing was sent)."""
        return self.frames[-1][1] if self.frames else b""

    def transmit(self, buffer: bytes, pin: int, stride: int = 3) -> TransmitResult:
        frame = bytes(buffer)
        self.frames.append((pin, frame))
        self.frame_count += 1

        num_pixels = len(frame) // stride
        if num_pixels > 0:
            first = tuple(frame[0:stride])
            mid = (num_pixels // 2) * stride
            middle = tuple(frame[mid:mid + stride])
            last = tuple(frame[-stride:])

            # Only log if there's visible color (not all black)
            if any(sum(pixel) > 0 for pixel in [first, middle, last]):
                logger.debug(
                    f"[MOCK] LED update on pin {pin}: first={first}, "
                    f"middle={middle}, last={last}"
                )
        return TransmitResult(ok=True)

    def configure_output(self, pin: int) -> None:
        self.configured_pins.append(pin)
        logger.debug(f"[MOCK] Pin {pin} configured as idle output")
