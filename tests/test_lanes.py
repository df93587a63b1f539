"""Tests for greedy first-fit lane assignment."""

from datetime import date

import pytest

from swimlane.lanes import InvalidIntervalError, LaneAssigner, assign_lanes, validate_events
from swimlane.models import Event
from tests.fixtures import SAMPLE_LANE_IDS


def lane_ids(lanes):
    return [[e.id for e in lane] for lane in lanes]


class TestBasicShapes:
    """Small inputs with obvious layouts."""

    def test_empty_input_gives_no_lanes(self):
        assert assign_lanes([]) == []

    def test_single_event_gives_single_lane(self, event):
        a = event("a", 0, 3)
        assert assign_lanes([a]) == [[a]]

    def test_disjoint_events_share_a_lane(self, event):
        lanes = assign_lanes([event("a", 0, 2), event("b", 5, 7)])
        assert lane_ids(lanes) == [["a", "b"]]

    def test_fully_overlapping_events_need_two_lanes(self, event):
        lanes = assign_lanes([event("a", 0, 5), event("b", 0, 5)])
        assert lane_ids(lanes) == [["a"], ["b"]]

    def test_nested_and_staggered(self, event):
        """A=[1,5], B=[2,3], C=[4,6] -> lane0=[A], lane1=[B, C]."""
        a, b, c = event("A", 1, 5), event("B", 2, 3), event("C", 4, 6)
        assert lane_ids(assign_lanes([a, b, c])) == [["A"], ["B", "C"]]

    def test_accepts_any_iterable(self, event):
        events = (event(i, i * 3, i * 3 + 1) for i in range(3))
        assert lane_ids(assign_lanes(events)) == [[0, 1, 2]]


class TestBoundaries:
    """Touching and zero-length intervals."""

    def test_touching_end_and_start_do_not_share_lane(self, event):
        lanes = assign_lanes([event("a", 1, 5), event("b", 5, 8)])
        assert lane_ids(lanes) == [["a"], ["b"]]

    def test_next_day_start_shares_lane(self, event):
        lanes = assign_lanes([event("a", 1, 5), event("b", 6, 8)])
        assert lane_ids(lanes) == [["a", "b"]]

    def test_same_day_events_on_same_day_need_separate_lanes(self, event):
        lanes = assign_lanes([event("a", 3, 3), event("b", 3, 3), event("c", 3, 3)])
        assert lane_ids(lanes) == [["a"], ["b"], ["c"]]

    def test_consecutive_single_day_events_share_lane(self, event):
        lanes = assign_lanes([event(i, i, i) for i in range(5)])
        assert lane_ids(lanes) == [[0, 1, 2, 3, 4]]


class TestOrdering:
    """Sorting, tie-breaks and first-fit preference."""

    def test_unsorted_input_is_sorted_by_start(self, event):
        lanes = assign_lanes([event("late", 10, 12), event("early", 0, 2)])
        assert lane_ids(lanes) == [["early", "late"]]

    def test_equal_starts_keep_input_order(self, event):
        first = assign_lanes([event("x", 0, 4), event("y", 0, 1), event("z", 2, 3)])
        assert lane_ids(first) == [["x"], ["y", "z"]]

        swapped = assign_lanes([event("y", 0, 1), event("x", 0, 4), event("z", 2, 3)])
        assert lane_ids(swapped) == [["y", "z"], ["x"]]

    def test_repeated_runs_are_identical(self, timeline_events):
        runs = [lane_ids(assign_lanes(timeline_events)) for _ in range(5)]
        assert all(run == runs[0] for run in runs)

    def test_first_fit_prefers_earliest_lane(self, event):
        # Both lanes are free for "d"; it must land in lane 0
        events = [event("a", 0, 2), event("b", 0, 3), event("d", 10, 11)]
        assert lane_ids(assign_lanes(events)) == [["a", "d"], ["b"]]

    def test_lane_events_sorted_by_start(self, timeline_events):
        for lane in assign_lanes(reversed(timeline_events)):
            starts = [e.start_date for e in lane]
            assert starts == sorted(starts)

    def test_sample_timeline_layout(self, timeline_events):
        assert lane_ids(assign_lanes(timeline_events)) == SAMPLE_LANE_IDS


class TestDuplicates:
    """Identical events are placed independently."""

    def test_duplicate_events_each_placed(self, event):
        a = event(1, 0, 2)
        lanes = assign_lanes([a, a])
        assert len(lanes) == 2
        assert lanes[0][0] is a and lanes[1][0] is a

    def test_same_id_different_dates(self, event):
        lanes = assign_lanes([event(1, 0, 2), event(1, 4, 6)])
        assert lane_ids(lanes) == [[1, 1]]


class TestMalformedIntervals:
    """Events that end before they start."""

    def test_non_strict_places_by_comparison(self, event):
        backward = event("back", 5, 1)
        same_start = event("same", 5, 6)
        # lane0 last end is day 1 < day 5, so "same" joins it
        assert lane_ids(assign_lanes([backward, same_start])) == [["back", "same"]]

    def test_non_strict_backward_event_after_overlap(self, event):
        lanes = assign_lanes([event("a", 0, 3), event("back", 2, 1), event("c", 3, 4)])
        assert lane_ids(lanes) == [["a"], ["back", "c"]]

    def test_strict_rejects_backward_event(self, event):
        backward = event("back", 5, 1)
        with pytest.raises(InvalidIntervalError, match="1 event") as excinfo:
            assign_lanes([event("ok", 0, 1), backward], strict=True)
        assert excinfo.value.events == [backward]

    def test_invalid_interval_error_is_value_error(self, event):
        with pytest.raises(ValueError):
            validate_events([event("back", 2, 0)])

    def test_validate_lists_every_bad_event(self, event):
        bad = [event(i, 10, 0) for i in range(7)]
        with pytest.raises(InvalidIntervalError, match=r"7 event\(s\).*\+2 more") as excinfo:
            validate_events(bad)
        assert len(excinfo.value.events) == 7

    def test_validate_passes_well_formed(self, event):
        validate_events([event(1, 0, 0), event(2, 0, 9)])

    def test_strict_accepts_well_formed(self, timeline_events):
        assert lane_ids(assign_lanes(timeline_events, strict=True)) == SAMPLE_LANE_IDS


class TestLaneAssigner:
    """Class form of the assigner."""

    def test_assign_delegates(self, timeline_events):
        assert lane_ids(LaneAssigner().assign(timeline_events)) == SAMPLE_LANE_IDS

    def test_strict_flag(self, event):
        with pytest.raises(InvalidIntervalError):
            LaneAssigner(strict=True).assign([event(1, 3, 2)])

    def test_lane_index_by_identity(self, event):
        a = event(1, 0, 5)
        twin = event(1, 0, 5)
        later = event(2, 7, 8)
        lanes = assign_lanes([a, twin, later])
        index = LaneAssigner.lane_index(lanes)
        assert index[id(a)] == 0
        assert index[id(twin)] == 1
        assert index[id(later)] == 0


class TestInputUntouched:
    def test_input_list_not_mutated(self, event):
        events = [event("b", 5, 6), event("a", 0, 1)]
        snapshot = list(events)
        assign_lanes(events)
        assert events == snapshot

    def test_event_is_frozen(self):
        e = Event(id=1, start_date=date(2021, 1, 1), end_date=date(2021, 1, 2))
        with pytest.raises(Exception):
            e.name = "changed"
