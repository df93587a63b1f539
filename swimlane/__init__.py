"""
swimlane - Greedy lane assignment for timeline events.

Usage:
    from swimlane import Event, assign_lanes

    lanes = assign_lanes(events)
"""

from .bounds import (
    clamped_position,
    days_between_inclusive,
    event_position,
    find_timeline_bounds,
    scale_dates,
    total_days,
)
from .invariants import (
    ALL_INVARIANTS,
    InvariantViolation,
    enforce_invariants,
    enforce_invariants_strict,
    overlap_depth,
)
from .lanes import InvalidIntervalError, LaneAssigner, assign_lanes, validate_events
from .loader import EventLoadError, events_from_records, load_events
from .models import Event

__version__ = "0.1.0"

__all__ = [
    "Event",
    "assign_lanes",
    "LaneAssigner",
    "validate_events",
    "InvalidIntervalError",
    "find_timeline_bounds",
    "days_between_inclusive",
    "total_days",
    "event_position",
    "clamped_position",
    "scale_dates",
    "ALL_INVARIANTS",
    "InvariantViolation",
    "enforce_invariants",
    "enforce_invariants_strict",
    "overlap_depth",
    "EventLoadError",
    "events_from_records",
    "load_events",
]
