"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from neostrip/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Mock hardware mode (for development without a strip attached)
MOCK_MODE: bool = os.getenv("MOCK_MODE", "false").lower() == "true"

# Strip defaults
LED_COUNT: int = int(os.getenv("LED_COUNT", "30"))
LED_PIN: int = int(os.getenv("LED_PIN", "18"))
LED_MODE: Literal["RGB_GRB", "RGBW", "RGB_RGB"] = os.getenv("LED_MODE", "RGB_GRB").upper()
LED_BRIGHTNESS: int = int(os.getenv("LED_BRIGHTNESS", "128"))

# rpi_ws281x parameters
LED_FREQ_HZ: int = 800000
LED_DMA: int = 10
LED_CHANNEL: int = 0
