"""
Observability module: log formatting and run context.

Usage:
    from swimlane.observability import configure_logging, run_context

    configure_logging("DEBUG", json_format=False)

    with run_context(command="lanes"):
        logger.info("Loaded events", extra={"events": 42})
"""

from .context import RunFilter, RunInfo, current_run, run_context
from .logging import (
    LOG_LEVELS,
    HumanFormatter,
    JSONFormatter,
    configure_logging,
    record_fields,
    resolve_level,
)

__all__ = [
    "LOG_LEVELS",
    "HumanFormatter",
    "JSONFormatter",
    "RunFilter",
    "RunInfo",
    "configure_logging",
    "current_run",
    "record_fields",
    "resolve_level",
    "run_context",
]
