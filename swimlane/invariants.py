"""
Invariants Module — Semantic Correctness Checks for lane results.

Each check takes the input events and the lanes produced for them and
raises InvariantViolation when the result is wrong. Checks compare
events by object identity, so duplicate events (same id, same dates)
count separately.

- check_partition: no event lost or duplicated
- check_strict_order: no overlap within a lane, touching days included
- check_optimal_lane_count: lane count equals the overlap depth
"""

from collections import Counter
from collections.abc import Sequence

from swimlane.models import Event


class InvariantViolation(Exception):
    """Raised when a lane invariant is violated."""

    pass


# =============================================================================
# OVERLAP DEPTH
# =============================================================================


def overlap_depth(events: Sequence[Event]) -> int:
    """
    Maximum number of events covering any single day.

    Intervals are inclusive of both endpoints. Events ending before they
    start cover no day and are ignored.
    """
    points: list[tuple[int, int]] = []
    for event in events:
        if not event.is_well_formed:
            continue
        points.append((event.start_date.toordinal(), 1))
        # Closes the day after end_date
        points.append((event.end_date.toordinal() + 1, -1))

    # At equal ordinals, closings (-1) sort before openings (+1)
    points.sort()

    depth = best = 0
    for _, delta in points:
        depth += delta
        best = max(best, depth)
    return best


# =============================================================================
# INVARIANT FUNCTIONS
# =============================================================================


def check_partition(events: Sequence[Event], lanes: Sequence[Sequence[Event]]) -> None:
    """
    INVARIANT: every input event appears in exactly one lane.

    Raises:
        InvariantViolation: If an event is missing, duplicated, or foreign
    """
    expected = Counter(id(e) for e in events)
    placed = Counter(id(e) for lane in lanes for e in lane)

    if expected == placed:
        return

    missing = sum((expected - placed).values())
    extra = sum((placed - expected).values())
    raise InvariantViolation(
        f"Lane partition mismatch: {missing} event(s) missing, {extra} extra placement(s)"
    )


def check_strict_order(events: Sequence[Event], lanes: Sequence[Sequence[Event]]) -> None:
    """
    INVARIANT: adjacent events in a lane satisfy A.end_date < B.start_date.

    Raises:
        InvariantViolation: On the first overlapping or touching pair
    """
    for index, lane in enumerate(lanes):
        if not lane:
            raise InvariantViolation(f"Lane {index} is empty")
        for before, after in zip(lane, lane[1:]):
            if not before.end_date < after.start_date:
                raise InvariantViolation(
                    f"Lane {index} overlap: {before} does not end before {after} starts"
                )


def check_optimal_lane_count(events: Sequence[Event], lanes: Sequence[Sequence[Event]]) -> None:
    """
    INVARIANT: number of lanes equals the overlap depth of the input.

    Skipped when any event ends before it starts, since such events have
    no meaningful depth.

    Raises:
        InvariantViolation: If the lane count differs from the depth
    """
    if not all(e.is_well_formed for e in events):
        return

    depth = overlap_depth(events)
    if len(lanes) != depth:
        raise InvariantViolation(f"Lane count {len(lanes)} != overlap depth {depth}")


# =============================================================================
# INVARIANT REGISTRY
# =============================================================================

ALL_INVARIANTS = [
    check_partition,
    check_strict_order,
    check_optimal_lane_count,
]


# =============================================================================
# ENFORCEMENT
# =============================================================================


def enforce_invariants(events: Sequence[Event], lanes: Sequence[Sequence[Event]]) -> list[str]:
    """
    Run all invariants. Returns list of violations.

    Args:
        events: The events that were assigned
        lanes: The lanes produced for them

    Returns:
        List of violation messages. Empty = pass.
    """
    violations = []

    for invariant in ALL_INVARIANTS:
        try:
            invariant(events, lanes)
        except InvariantViolation as e:
            violations.append(f"INVARIANT_VIOLATION: {str(e)}")

    return violations


def enforce_invariants_strict(events: Sequence[Event], lanes: Sequence[Sequence[Event]]) -> None:
    """
    Strict enforcement — raises on first violation.

    Raises:
        InvariantViolation: If any invariant fails
    """
    for invariant in ALL_INVARIANTS:
        invariant(events, lanes)
