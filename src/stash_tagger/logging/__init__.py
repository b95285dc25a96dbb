"""Structured logging module for the scene tagger.

Configurable text or JSON logging with file rotation; tagger record context
passed via extra= is rendered by both formats.
"""

from stash_tagger.logging.config import configure_logging
from stash_tagger.logging.handlers import JSONFormatter, TextFormatter

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "configure_logging",
]
