"""
Logging for neostrip.

Every module logs through a child of the "neostrip" logger (see get_logger),
so one configuration covers the whole package: DEBUG and INFO go to stdout,
WARNING and above to stderr. The level comes from LOG_LEVEL.
"""

import logging
import sys
from neostrip.config import LOG_LEVEL

ROOT_NAME = "neostrip"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LevelFilter(logging.Filter):
    """Pass only records with level_min <= level <= level_max."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def _stream_handler(stream, level_min: int, level_max: int = logging.CRITICAL) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_min)
    if level_max < logging.CRITICAL:
        handler.addFilter(LevelFilter(level_min, level_max))
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    (Re)configure the package logger.

    Safe to call repeatedly; existing handlers are replaced.

    Returns:
        The "neostrip" logger
    """
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)
    root.propagate = False
    root.handlers.clear()

    root.addHandler(_stream_handler(sys.stdout, logging.DEBUG, logging.INFO))
    root.addHandler(_stream_handler(sys.stderr, logging.WARNING))
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, e.g. get_logger(__name__) in neostrip.strip.

    Names outside the package are nested under "neostrip" so they share
    its handlers.
    """
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(ROOT_NAME).getChild(name)


logger = setup_logging()
