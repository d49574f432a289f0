from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> int:
    """Replace loguru's default sink with a single stderr sink at ``level``.

    Returns the sink id so callers (tests) can remove it again.
    """
    logger.remove()
    try:
        return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    except ValueError:
        # unknown level name in config
        sink_id = logger.add(sys.stderr, level="INFO", format=LOG_FORMAT)
        logger.warning("Unknown log level {!r}, using INFO", level)
        return sink_id
