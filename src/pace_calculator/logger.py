"""Logger configuration for the pace calculator."""

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Configure loguru with a single stderr sink.

    Standard output is reserved for calculator results, so logs always go
    to stderr.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=None,
    )
    logger.debug(f"Logger initialized with level={level}")
