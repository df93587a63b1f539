"""
Log formatting for swimlane.

Both formatters print the fields callers attach with extra=, e.g.
logger.info("Assigned lanes", extra={"events": 12, "lanes": 3}).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from .context import RunFilter

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Everything a bare LogRecord carries; the rest arrived via extra= or RunFilter
_BUILTIN_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


def resolve_level(name: str) -> int:
    """
    Map a level name (any case) to its logging constant.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    upper = str(name).strip().upper()
    if upper not in LOG_LEVELS:
        raise ValueError(f"unknown log level {name!r} (expected one of {', '.join(LOG_LEVELS)})")
    return getattr(logging, upper)


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Non-builtin attributes of a record, in the order they were set."""
    return {k: v for k, v in vars(record).items() if k not in _BUILTIN_ATTRS}


class JSONFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg, then extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(record_fields(record))
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """
    Terminal format:

        14:02:31 INFO  swimlane.cli: Assigned lanes events=12 lanes=3 [run-1a2b3c]
    """

    def format(self, record: logging.LogRecord) -> str:
        fields = record_fields(record)
        run_id = fields.pop("run_id", None)
        fields.pop("command", None)

        when = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        parts = [f"{when} {record.levelname:<5} {record.name}: {record.getMessage()}"]
        parts.extend(f"{key}={value}" for key, value in fields.items())
        if run_id:
            parts.append(f"[{run_id}]")

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """
    Install the swimlane handler on the root logger.

    Replaces a handler from an earlier call; other handlers are left alone.

    Args:
        level: One of LOG_LEVELS, any case
        json_format: JSON lines if True, human format if False, JSON only
            when the stream is not a TTY if None
        stream: Defaults to stderr

    Raises:
        ValueError: On an unknown level, before anything is changed
    """
    numeric = resolve_level(level)
    stream = stream or sys.stderr
    if json_format is None:
        json_format = not stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())
    handler.addFilter(RunFilter())
    handler._swimlane = True

    root = logging.getLogger()
    for old in [h for h in root.handlers if getattr(h, "_swimlane", False)]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(numeric)
    return handler
