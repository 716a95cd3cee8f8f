"""
Hardware boundary: pushing a pixel buffer out to a physical strip.

Features:
- Transmitter contract shared by real and mock hardware
- Hardware failures reported as TransmitResult, never swallowed
- Real hardware modules only imported outside MOCK_MODE
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from neostrip import config


@dataclass(frozen=True)
class TransmitResult:
    """Outcome of sending a buffer to the hardware."""
    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


class Transmitter(ABC):
    """Contract for anything a Strip can flush its buffer to."""

    @abstractmethod
    def transmit(self, buffer: bytes, pin: int, stride: int = 3) -> TransmitResult:
        """Send the full buffer to the strip attached to `pin`.

        Args:
            buffer: Channel bytes, already in wire order
            pin: Hardware output identifier
            stride: Bytes per pixel (3 or 4)
        """

    @abstractmethod
    def configure_output(self, pin: int) -> None:
        """Put `pin` into a known idle output state."""


def get_transmitter() -> Transmitter:
    """Return the mock transmitter in MOCK_MODE, the rpi_ws281x one otherwise."""
    if config.MOCK_MODE:
        from neostrip.mock_hardware import MockTransmitter
        return MockTransmitter()

    from neostrip.ws281x import Ws281xTransmitter
    return Ws281xTransmitter()
