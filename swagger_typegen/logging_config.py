"""
Logging configuration for swagger_typegen.

Library modules only ask for loggers; handlers are installed once by the
CLI through ``setup_logging``. Logs go to stderr so generated code on
stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path

PARENT_LOGGER = "swagger_typegen"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@lru_cache()
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``swagger_typegen`` parent logger.

    Args:
        name: Module name. Full names such as ``swagger_typegen.utils`` are
            used as-is instead of being nested twice.

    Returns:
        The requested logger.
    """
    parent_logger = logging.getLogger(PARENT_LOGGER)

    if not name:
        return parent_logger

    if name == PARENT_LOGGER or name.startswith(PARENT_LOGGER + "."):
        return logging.getLogger(name)

    return parent_logger.getChild(name)


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure package logging.

    - Logs to stderr
    - Optionally also logs to a file
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(log_level)
    handlers.append(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    formatter = logging.Formatter(LOG_FORMAT)
    logger = logging.getLogger(PARENT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(log_level)
    logger.propagate = False
