"""Logging setup for the stash-tagger CLI.

configure_logging() installs handlers on the ``stash_tagger`` package logger
and leaves the root logger untouched.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from stash_tagger.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from stash_tagger.config.models import LoggingConfig

PACKAGE_LOGGER = "stash_tagger"


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.casefold() == "json":
        return JSONFormatter()
    return TextFormatter()


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Open the rotating log file, or return None if it is unusable."""
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the stash_tagger logger from LoggingConfig.

    Logs go to a rotating file when ``config.file`` is set, and to stderr
    when no file is set, the file cannot be opened, or
    ``config.include_stderr`` is true. Handlers from a previous call are
    closed and replaced; records do not propagate to the root logger.

    Args:
        config: Logging configuration.

    Returns:
        The configured package logger.
    """
    level = logging.getLevelName(config.level.upper())
    formatter = _build_formatter(config)

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger
