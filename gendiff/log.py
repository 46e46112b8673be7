"""
Logging setup for the gendiff command line.

The library only emits records through loguru's ``logger``; handlers
are installed here, by the CLI, never at import time.
"""
import sys
from typing import Optional

from loguru import logger

from gendiff.config import LogLevel

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def setup_logger(verbose: bool = False, level: Optional[LogLevel] = None) -> None:
    """
    Configure console logging.

    Args:
        verbose: Log DEBUG and above to stderr (otherwise WARNING and above)
        level: Explicit level, takes precedence over ``verbose``
    """
    logger.remove()

    if level is None:
        level = LogLevel.DEBUG if verbose else LogLevel.WARNING

    logger.add(sys.stderr, level=level.value, format=LOG_FORMAT, colorize=None)
