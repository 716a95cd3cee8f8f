"""Shared pytest fixtures for all tests."""

import pytest
import sys
from unittest.mock import MagicMock

# Mock hardware libraries BEFORE any neostrip imports
# This must happen at module level, before pytest collects tests

# Mock rpi_ws281x
mock_ws281x = MagicMock()
mock_ws281x.PixelStrip = MagicMock
sys.modules['rpi_ws281x'] = mock_ws281x

# Mock GPIO-related modules
mock_rpi = MagicMock()
sys.modules['RPi'] = mock_rpi
sys.modules['RPi.GPIO'] = mock_rpi.GPIO

# Now we can import neostrip modules safely
from neostrip.buffer import PixelMode  # noqa: E402
from neostrip.mock_hardware import MockTransmitter  # noqa: E402
from neostrip.strip import create  # noqa: E402


@pytest.fixture
def transmitter():
    """In-memory transmitter that records frames."""
    return MockTransmitter()


@pytest.fixture
def strip(transmitter):
    """10 pixel GRB strip at full brightness."""
    s = create(18, 10, PixelMode.RGB_GRB, transmitter=transmitter)
    s.set_brightness(255)
    return s


@pytest.fixture
def rgbw_strip(transmitter):
    """8 pixel RGBW strip at full brightness."""
    s = create(18, 8, PixelMode.RGBW, transmitter=transmitter)
    s.set_brightness(255)
    return s


@pytest.fixture
def rgb_strip(transmitter):
    """6 pixel RGB-ordered strip at full brightness."""
    s = create(18, 6, PixelMode.RGB_RGB, transmitter=transmitter)
    s.set_brightness(255)
    return s
