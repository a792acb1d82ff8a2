from datetime import date

import pytest

from weekgrid.config import LayoutConfig
from weekgrid.hour_density import HourAxis, compute_hour_axis, current_time_marker, dense_hours

from conftest import MONDAY, WEDNESDAY, ts

STANDARD = 4.0
COMPACT = 2.0


def test_empty_week_is_all_compact(week_days):
    axis = compute_hour_axis([], week_days)
    assert axis.heights == (COMPACT,) * 24
    assert axis.total_height == 48.0
    assert axis.offsets[0] == 0.0
    assert axis.offsets[23] == 46.0


def test_event_hours_and_neighbours_are_dense(make_event):
    event = make_event(start=9, end=10)
    assert dense_hours([event]) == {8, 9, 10}


def test_partial_hours_round_outwards(make_event):
    event = make_event(start=9.5, end=11.25)
    assert dense_hours([event]) == {8, 9, 10, 11, 12}


def test_dense_hours_clamped_to_day(make_event):
    early = make_event(start=0, end=1)
    late = make_event(start=22.5, end=23.75)
    assert dense_hours([early]) == {0, 1}
    assert dense_hours([late]) == {21, 22, 23}


def test_offsets_are_prefix_sums(make_event, week_days):
    axis = compute_hour_axis([make_event(start=9, end=10)], week_days)
    assert axis.heights[8] == axis.heights[9] == axis.heights[10] == STANDARD
    assert axis.heights[7] == axis.heights[11] == COMPACT
    for h in range(1, 24):
        assert axis.offsets[h] == axis.offsets[h - 1] + axis.heights[h - 1]
    assert axis.total_height == sum(axis.heights)
    assert axis.offsets[9] == 8 * COMPACT + STANDARD


def test_heights_are_shared_across_days(make_event, week_days):
    monday = make_event(day=MONDAY, start=7, end=8)
    wednesday = make_event(day=WEDNESDAY, start=15, end=16)
    axis = compute_hour_axis([monday, wednesday], week_days)
    dense = {h for h, height in enumerate(axis.heights) if height == STANDARD}
    assert dense == {6, 7, 8, 14, 15, 16}


def test_multi_day_and_out_of_week_events_ignored(make_event, week_days):
    all_day = make_event(day=MONDAY, start=9, end_day=WEDNESDAY, end=17, multi_day=True)
    next_week = make_event(day=date(2024, 3, 13), start=12, end=13)
    axis = compute_hour_axis([all_day, next_week], week_days)
    assert set(axis.heights) == {COMPACT}


def test_custom_heights_and_unit(make_event, week_days):
    config = LayoutConfig(standard_hour_height=60, compact_hour_height=20, unit="px")
    axis = compute_hour_axis([make_event(start=12, end=13)], week_days, config)
    assert axis.unit == "px"
    assert axis.heights[12] == 60.0
    assert axis.heights[0] == 20.0


def test_position_interpolates_inside_hour():
    heights = [COMPACT] * 24
    heights[9] = STANDARD
    axis = HourAxis.from_heights(heights)
    assert axis.position(9) == axis.offsets[9]
    assert axis.position(9.5) == axis.offsets[9] + 2.0
    assert axis.position(10) == axis.offsets[10]
    assert axis.position(24) == axis.total_height


def test_axis_needs_24_heights():
    with pytest.raises(ValueError):
        HourAxis.from_heights([1.0] * 23)


def test_hour_labels():
    axis = HourAxis.from_heights([COMPACT] * 24)
    labels = axis.hour_labels()
    assert [l.label for l in labels[:2]] == ["12 AM", "1 AM"]
    assert labels[13].label == "1 PM"
    assert labels[13].top == 26.0
    assert labels[13].height == COMPACT


def test_current_time_marker(week_days):
    axis = HourAxis.from_heights([COMPACT] * 24)
    marker = current_time_marker(week_days, axis, ts(WEDNESDAY, 10, 30))
    assert marker.day_index == 3
    assert marker.hour == 10.5
    assert marker.top == 21.0


def test_current_time_marker_outside_week(week_days):
    axis = HourAxis.from_heights([COMPACT] * 24)
    assert current_time_marker(week_days, axis, ts(date(2024, 4, 1), 9)) is None


def test_event_ending_at_midnight_marks_its_hour(make_event, week_days):
    late = make_event(day=WEDNESDAY, start=23, end_day=date(2024, 3, 7), end=0)
    assert dense_hours([late]) == {22, 23}

    axis = compute_hour_axis([late], week_days)
    assert axis.heights[23] == STANDARD
    assert axis.heights[0] == COMPACT


def test_midnight_crossing_marks_both_days(make_event, week_days):
    late = make_event(day=WEDNESDAY, start=23, end_day=date(2024, 3, 7), end=1)
    assert dense_hours([late]) == {0, 1, 22, 23}
    assert dense_hours([late], [WEDNESDAY]) == {22, 23}
