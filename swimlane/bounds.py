"""
Timeline bounds and day arithmetic.

Helpers a presenter uses to place lanes on a shared date axis:
global min/max dates, inclusive day counts, and per-event offsets.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from swimlane.models import Event


def find_timeline_bounds(events: Sequence[Event]) -> tuple[date, date]:
    """
    Earliest start and latest end across all events.

    Raises:
        ValueError: If events is empty
    """
    if not events:
        raise ValueError("cannot compute timeline bounds of no events")
    return min(e.start_date for e in events), max(e.end_date for e in events)


def days_between_inclusive(start: date, end: date) -> int:
    """Inclusive day count between two dates (same date = 1, never below 1)."""
    return max(1, (end - start).days + 1)


def total_days(events: Sequence[Event]) -> int:
    """Inclusive day span of the whole timeline."""
    min_date, max_date = find_timeline_bounds(events)
    return days_between_inclusive(min_date, max_date)


def event_position(event: Event, min_date: date) -> tuple[int, int]:
    """
    Offset from min_date and inclusive duration, in days.

    Values are raw: an event before min_date has a negative offset and a
    backward event a non-positive duration.
    """
    offset = (event.start_date - min_date).days
    duration = (event.end_date - event.start_date).days + 1
    return offset, duration


def clamped_position(event: Event, min_date: date) -> tuple[int, int]:
    """Like event_position, with offset >= 0 and duration >= 1."""
    offset, duration = event_position(event, min_date)
    return max(0, offset), max(1, duration)


def scale_dates(events: Iterable[Event]) -> list[date]:
    """Sorted distinct start and end dates (the labelled points of a date scale)."""
    seen: set[date] = set()
    for event in events:
        seen.add(event.start_date)
        seen.add(event.end_date)
    return sorted(seen)
