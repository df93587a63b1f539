"""
swimlane CLI

Usage:
    python -m swimlane lanes events.yaml            # Lanes as text
    python -m swimlane lanes events.yaml --json     # Lanes as JSON
    python -m swimlane lanes events.yaml --strict   # Reject end < start
    python -m swimlane check events.yaml            # Verify lane invariants
    python -m swimlane bounds events.yaml           # Timeline date range

Exit codes: 0 ok, 1 invariant violation, 2 bad input.
"""

import argparse
import json
import logging
import sys
from datetime import date

from swimlane import config
from swimlane.bounds import find_timeline_bounds, total_days
from swimlane.invariants import enforce_invariants, overlap_depth
from swimlane.lanes import InvalidIntervalError, LaneAssigner
from swimlane.loader import EventLoadError, load_events
from swimlane.models import Event
from swimlane.observability import LOG_LEVELS, configure_logging, run_context

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_BAD_INPUT = 2


def format_date(value: date, pattern: str | None = None) -> str:
    """Display string for a date; pattern defaults to SWIMLANE_DATE_FORMAT."""
    return value.strftime(pattern or config.DATE_DISPLAY_FORMAT)


def format_event(event: Event) -> str:
    label = event.name or str(event.id)
    return f"{label} ({format_date(event.start_date)}..{format_date(event.end_date)})"


def event_to_dict(event: Event) -> dict:
    return {
        "id": event.id,
        "name": event.name,
        "start_date": event.start_date.isoformat(),
        "end_date": event.end_date.isoformat(),
    }


def cmd_lanes(args) -> int:
    """Assign and print lanes."""
    events = load_events(args.file)
    lanes = LaneAssigner(strict=args.strict).assign(events)
    logger.info("Assigned lanes", extra={"events": len(events), "lanes": len(lanes)})

    if args.json:
        print(json.dumps([[event_to_dict(e) for e in lane] for lane in lanes], indent=2))
        return EXIT_OK

    if not lanes:
        print("No events to display")
        return EXIT_OK

    for index, lane in enumerate(lanes):
        print(f"lane {index}: " + ", ".join(format_event(e) for e in lane))
    return EXIT_OK


def cmd_check(args) -> int:
    """Assign lanes and verify every invariant."""
    events = load_events(args.file)
    lanes = LaneAssigner(strict=args.strict).assign(events)
    violations = enforce_invariants(events, lanes)

    print(f"events:        {len(events)}")
    print(f"lanes:         {len(lanes)}")
    print(f"overlap depth: {overlap_depth(events)}")

    if violations:
        for violation in violations:
            print(violation)
        logger.error("Lane invariants failed", extra={"violations": len(violations)})
        return EXIT_VIOLATION

    print("OK")
    return EXIT_OK


def cmd_bounds(args) -> int:
    """Print the timeline date range."""
    events = load_events(args.file)
    if not events:
        print("No events to display")
        return EXIT_OK

    min_date, max_date = find_timeline_bounds(events)
    print(f"start: {min_date.isoformat()}")
    print(f"end:   {max_date.isoformat()}")
    print(f"days:  {total_days(events)}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swimlane",
        description="Pack timeline events into non-overlapping lanes",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override SWIMLANE_LOG_LEVEL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_lanes = subparsers.add_parser("lanes", help="Assign events to lanes")
    p_lanes.add_argument("file", help="YAML or JSON event file")
    p_lanes.add_argument("--json", action="store_true", help="Emit JSON")
    p_lanes.set_defaults(func=cmd_lanes)

    p_check = subparsers.add_parser("check", help="Verify lane invariants")
    p_check.add_argument("file", help="YAML or JSON event file")
    p_check.set_defaults(func=cmd_check)

    p_bounds = subparsers.add_parser("bounds", help="Show timeline date range")
    p_bounds.add_argument("file", help="YAML or JSON event file")
    p_bounds.set_defaults(func=cmd_bounds)

    for sub in (p_lanes, p_check):
        sub.add_argument(
            "--strict",
            action=argparse.BooleanOptionalAction,
            default=config.STRICT_INTERVALS,
            help="Reject events that end before they start",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level or config.LOG_LEVEL, config.log_json_format())
    except ValueError as exc:
        # Only reachable through SWIMLANE_LOG_LEVEL; argparse vets --log-level
        print(f"error: SWIMLANE_LOG_LEVEL: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    with run_context(command=args.command):
        try:
            return args.func(args)
        except (EventLoadError, InvalidIntervalError) as exc:
            logger.debug("Input rejected", exc_info=True)
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
