"""Log formatters for the scene tagger.

Tagger failures are logged with the identifying fields of the provider
record (or path) that could not be imported, passed via ``extra=``:

    logger.error("Unable to import ...", extra=error.log_context())

Both formatters surface those fields: JSONFormatter groups them under a
"record" object, TextFormatter appends them as key=value pairs.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Fields lifted from extra= into the record context, in display order
RECORD_CONTEXT_KEYS: tuple[str, ...] = (
    "record_type",
    "record_name",
    "path",
    "input_file",
)

# Attributes every LogRecord carries; anything else came from extra=
_BUILTIN_ATTRS: frozenset[str] = frozenset(
    vars(logging.makeLogRecord({}))
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the tagger record fields attached to a log record."""
    context = {}
    for key in RECORD_CONTEXT_KEYS:
        value = getattr(record, key, None)
        if value is not None:
            context[key] = value
    return context


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Keys: timestamp (ISO-8601 UTC), level, logger, message, plus "record"
    for tagger record context, "extra" for any other extra= fields and
    "exception" with the exception type and message when exc_info is set.
    Tracebacks are left to the text format.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = record_context(record)
        if context:
            entry["record"] = context

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _BUILTIN_ATTRS
            and key not in RECORD_CONTEXT_KEYS
            and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            entry["exception"] = {
                "type": type(error).__name__,
                "message": str(error),
            }

        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Plain text format with tagger record context appended.

    Example:
        2024-05-01T10:00:00+0000 ERROR stash_tagger.cli.normalize: Unable
        to import ... [record_type='studio' record_name='Example Studio']
    """

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = record_context(record)
        if not context:
            return text
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        # Keep the context on the message line, ahead of any traceback
        first, sep, rest = text.partition("\n")
        return f"{first} [{pairs}]{sep}{rest}"
