"""Logger configuration for applications using lazyseq."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LAZYSEQ_LOG_LEVEL"


def setup_logger(
    name: str = "lazyseq",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the library logger and return it.

    Args:
        name: Logger name, "lazyseq" or one of its submodules
        level: Log level name; falls back to $LAZYSEQ_LOG_LEVEL, then WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"setup_logger(): unknown log level {level!r}")

    logger = logging.getLogger(name)

    # Only configure once; NullHandler from the package root does not count
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


__all__ = ("LOG_LEVEL_ENV", "setup_logger")
