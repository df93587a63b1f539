"""
Test fixtures for deterministic testing.

This module provides:
- make_event: Builds an Event from day offsets
- sample_events: Pinned timeline with known lane layout
"""

from .sample_events import BASE_DATE, SAMPLE_LANE_IDS, make_event, sample_events

__all__ = ["BASE_DATE", "SAMPLE_LANE_IDS", "make_event", "sample_events"]
