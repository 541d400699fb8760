"""Logging configuration with Rich formatting.

Provides setup_logging() for application/script initialization and get_logger()
for module-level loggers. The library itself never configures logging.
"""

import logging
from typing import Optional
from rich.logging import RichHandler
from .config import get_settings

def setup_logging(level: Optional[str] = None):
    if level is None:
        level = get_settings().LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )

    # Request lines from httpx duplicate our own debug output
    logging.getLogger("httpx").setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)
