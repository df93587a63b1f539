"""
Run-scoped logging context.

A run is one CLI invocation. Its id and command name are stamped onto
every log record emitted while the run is active, by RunFilter.
"""

import contextvars
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(frozen=True)
class RunInfo:
    run_id: str
    command: str | None = None


_current_run: contextvars.ContextVar[RunInfo | None] = contextvars.ContextVar(
    "swimlane_run", default=None
)


def current_run() -> RunInfo | None:
    return _current_run.get()


@contextmanager
def run_context(command: str | None = None, run_id: str | None = None) -> Iterator[RunInfo]:
    """
    Mark a run as active for the duration of the block.

    Usage:
        with run_context(command="lanes") as run:
            logger.info("Assigned lanes", extra={"lanes": 3})  # tagged with run.run_id
    """
    run = RunInfo(run_id=run_id or f"run-{uuid.uuid4().hex[:12]}", command=command)
    token = _current_run.set(run)
    try:
        yield run
    finally:
        _current_run.reset(token)


class RunFilter(logging.Filter):
    """Copies the active run's id and command onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        run = _current_run.get()
        if run is not None:
            record.run_id = run.run_id
            if run.command:
                record.command = run.command
        return True
