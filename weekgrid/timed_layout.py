"""
Placement of timed (single-day) events inside the day columns of a week.

Each day's events are split into collision groups; events of a group with
more than one member share the group width in greedily assigned columns.
Overlap is half-open everywhere, so back-to-back events never collide.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from .config import LayoutConfig
from .event_model import Event, PositionedEvent, WeekDay, format_percent
from .hour_density import HourAxis
from .interval_tree import IntervalTree
from .intervals import day_hour_span, events_in_week, has_time_on_date, hour_fraction
from .logger_config import get_logger
from .week import date_key

logger = get_logger(__name__)


@dataclass
class _Placement:
    """Working record: a positioned event with its hour span on the axis."""
    positioned: PositionedEvent
    start_hour: float
    end_hour: float

    @property
    def duration(self) -> float:
        return self.end_hour - self.start_hour


def _position(event: Event, axis: HourAxis, layout_config: LayoutConfig, day: Optional[date]) -> _Placement:
    if day is None:
        start_hour = hour_fraction(event.start_timestamp)
        end_hour = hour_fraction(event.end_timestamp)
    else:
        start_hour, end_hour = day_hour_span(event, day)
    top = axis.position(start_hour)
    bottom = axis.position(end_hour)
    positioned = PositionedEvent(
        event=event,
        top=top,
        height=bottom - top,
        left=format_percent(0),
        width=format_percent(layout_config.default_event_width),
        z_index=layout_config.single_z_index,
        unit=axis.unit,
    )
    return _Placement(positioned, start_hour, end_hour)


def group_collisions(placements: list[_Placement]) -> list[list[_Placement]]:
    """
    Split placements into collision groups.

    Placements are visited by start ascending, then end descending; each
    joins the earliest-created group holding a placement it overlaps.
    """
    ordered = sorted(placements, key=lambda p: (p.start_hour, -p.end_hour))

    groups: list[list[_Placement]] = []
    tree: IntervalTree[float] = IntervalTree()  # span -> group index

    for placement in ordered:
        hits = tree.overlapping(placement.start_hour, placement.end_hour)
        if hits:
            group_index = min(hit.data for hit in hits)
            groups[group_index].append(placement)
        else:
            group_index = len(groups)
            groups.append([placement])
        tree.insert(placement.start_hour, placement.end_hour, group_index)

    return groups


def assign_columns(group: list[_Placement]) -> list[list[_Placement]]:
    """
    Greedy interval coloring of one collision group.

    Visits by start ascending, then duration descending, and puts each
    placement into the first column with nothing overlapping it.
    """
    ordered = sorted(group, key=lambda p: (p.start_hour, -p.duration))

    columns: list[list[_Placement]] = []
    column_trees: list[IntervalTree[float]] = []

    for placement in ordered:
        for index, tree in enumerate(column_trees):
            if not tree.any_overlapping(placement.start_hour, placement.end_hour):
                columns[index].append(placement)
                tree.insert(placement.start_hour, placement.end_hour)
                break
        else:
            tree = IntervalTree()
            tree.insert(placement.start_hour, placement.end_hour)
            column_trees.append(tree)
            columns.append([placement])

    return columns


def position_day_events(
    events: Iterable[Event],
    axis: HourAxis,
    layout_config: Optional[LayoutConfig] = None,
    day: Optional[date] = None,
) -> list[PositionedEvent]:
    """
    Position one day's timed events.

    Args:
        events: Timed events occurring on the day.
        axis: The week's hour axis.
        layout_config: Widths and z-indices; defaults apply when None.
        day: The day column; spans running past its midnights are clipped
            to it. Without a day, raw start and end hours are used.

    Returns:
        Positioned events, group by group; inside a multi-member group,
        column by column.
    """
    if layout_config is None:
        layout_config = LayoutConfig()

    placements = [_position(event, axis, layout_config, day) for event in events]
    result: list[PositionedEvent] = []

    for group in group_collisions(placements):
        if len(group) == 1:
            result.append(group[0].positioned)
            continue

        columns = assign_columns(group)
        column_count = len(columns)
        column_width = layout_config.group_width / column_count

        for column_index, column in enumerate(columns):
            for placement in column:
                positioned = placement.positioned
                positioned.left = format_percent(column_index * column_width)
                positioned.width = format_percent(column_width)
                positioned.z_index = layout_config.group_z_index_base + column_index
                positioned.column = column_index
                positioned.column_count = column_count
                result.append(positioned)

    return result


def layout_timed_events(
    events: Iterable[Event],
    week_days: list[WeekDay],
    axis: HourAxis,
    layout_config: Optional[LayoutConfig] = None,
) -> dict[str, list[PositionedEvent]]:
    """
    Position the timed events of every visible day.

    Returns a mapping from ISO date key to that day's positioned events;
    every visible day has a key. An event spanning midnight appears on
    each day it takes up time on, clipped to that day; one ending exactly
    at midnight is not shown on the following day.
    """
    timed = [e for e in events_in_week(events, week_days) if not e.is_multi_day]
    by_day: dict[str, list[PositionedEvent]] = {}

    for week_day in week_days:
        day_events = [e for e in timed if has_time_on_date(e, week_day.date)]
        by_day[date_key(week_day.date)] = position_day_events(day_events, axis, layout_config, week_day.date)
        if day_events:
            logger.debug("Positioned %d timed events on %s", len(day_events), week_day.date)

    return by_day
