"""
Lane Assignment - Greedy first-fit interval partitioning.

Packs events into the fewest horizontal lanes such that no two events
sharing a lane overlap in time.

Invariants:
- Every input event appears in exactly one lane
- Adjacent events in a lane satisfy A.end_date < B.start_date (strict:
  an event ending on the day another starts does NOT share its lane)
- Lane count equals the maximum overlap depth of the input
- Equal start dates keep their input order (stable sort)
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from swimlane.models import Event

logger = logging.getLogger(__name__)


class InvalidIntervalError(ValueError):
    """Raised in strict mode when an event ends before it starts."""

    def __init__(self, events: Sequence[Event]):
        self.events = list(events)
        listed = ", ".join(str(e) for e in self.events[:5])
        more = f" (+{len(self.events) - 5} more)" if len(self.events) > 5 else ""
        super().__init__(
            f"{len(self.events)} event(s) end before they start: {listed}{more}"
        )


def validate_events(events: Iterable[Event]) -> None:
    """
    Reject events whose end_date precedes their start_date.

    Raises:
        InvalidIntervalError: Listing every malformed event
    """
    bad = [e for e in events if not e.is_well_formed]
    if bad:
        raise InvalidIntervalError(bad)


def assign_lanes(events: Iterable[Event], *, strict: bool = False) -> list[list[Event]]:
    """
    Assign events to lanes, first-fit in start-date order.

    Args:
        events: Events to place (any iterable, consumed once)
        strict: Validate date ordering first instead of placing
            backward-spanning events by plain comparison

    Returns:
        Lanes in creation order, each holding its events in assignment order

    Raises:
        InvalidIntervalError: Only when strict and an event ends before it starts
    """
    events = list(events)
    if strict:
        validate_events(events)

    lanes: list[list[Event]] = []
    last_ends: list[date] = []

    for event in sorted(events, key=lambda e: e.start_date):
        for index, last_end in enumerate(last_ends):
            if last_end < event.start_date:
                lanes[index].append(event)
                last_ends[index] = event.end_date
                break
        else:
            # No free lane
            lanes.append([event])
            last_ends.append(event.end_date)

    logger.debug("Assigned %d events to %d lanes", len(events), len(lanes))
    return lanes


class LaneAssigner:
    """
    Reusable assigner bound to a validation mode.

    Usage:
        assigner = LaneAssigner(strict=True)
        lanes = assigner.assign(events)
        positions = assigner.lane_index(lanes)
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def assign(self, events: Iterable[Event]) -> list[list[Event]]:
        return assign_lanes(events, strict=self.strict)

    @staticmethod
    def lane_index(lanes: Sequence[Sequence[Event]]) -> dict[int, int]:
        """
        Map each placed event to its lane position.

        Keys are object identities (id()) so duplicate events stay distinct.
        Lane positions are only meaningful within this result.
        """
        return {id(event): index for index, lane in enumerate(lanes) for event in lane}
