"""Logging configuration using loguru.

Every record, including uvicorn's stdlib ones, ends up on stderr so that
``wayfinder detect`` can keep stdout for its JSON output.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# One line per HTTP request; only shown when debugging.
ACCESS_LOGGER = "uvicorn.access"


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, attributed to their original caller."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", *, colorize: bool | None = None) -> None:
    """Make loguru the only sink, at ``level``.

    Called once by the CLI and by the app lifespan.
    """
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, colorize=colorize, format=LOG_FORMAT)
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    access_level = logging.NOTSET if level in ("TRACE", "DEBUG") else logging.WARNING
    logging.getLogger(ACCESS_LOGGER).setLevel(access_level)

    logger.debug("Logging initialised (level={})", level)
