"""
Placement of multi-day (all-day) events in the header band of a week.

Each event covers the day columns between its start and end day, clipped
to the visible week, and takes the first row where those columns are free.
Longer spans pick rows first.
"""

from typing import Iterable, Optional

from .event_model import Event, MultiDayLayout, ProcessedMultiDayEvent, WeekDay
from .intervals import event_days, events_in_week
from .logger_config import get_logger
from .week import DAYS_IN_WEEK

logger = get_logger(__name__)


def column_span(event: Event, week_days: list[WeekDay]) -> Optional[tuple[int, int]]:
    """
    0-based inclusive (start_col, end_col) of an event in the week.

    Returns None when the event does not touch the visible days.
    """
    if not week_days:
        return None
    start_day, end_day = event_days(event)
    first, last = week_days[0].date, week_days[-1].date
    if end_day < first or start_day > last:
        return None

    index_of = {week_day.date: i for i, week_day in enumerate(week_days)}
    start_col = 0 if start_day < first else index_of.get(start_day, 0)
    end_col = len(week_days) - 1 if end_day > last else index_of.get(end_day, len(week_days) - 1)
    return start_col, end_col


def assign_rows(spans: list[tuple[int, int]]) -> list[int]:
    """
    Greedy row packing for inclusive column spans, in the given order.

    Returns the 0-based row of each span.
    """
    occupied: list[set[int]] = []  # row -> taken columns
    rows = []
    for start_col, end_col in spans:
        columns = set(range(start_col, end_col + 1))
        for row, taken in enumerate(occupied):
            if not taken & columns:
                taken |= columns
                rows.append(row)
                break
        else:
            occupied.append(columns)
            rows.append(len(occupied) - 1)
    return rows


def process_multi_day_events(events: Iterable[Event], week_days: list[WeekDay]) -> MultiDayLayout:
    """
    Place the week's multi-day events on the all-day grid.

    Args:
        events: Any events; only visible ones flagged is_multi_day are placed.
        week_days: The seven visible days.

    Returns:
        MultiDayLayout with events in placement order (longest span first)
        and the number of rows used.
    """
    spanned: list[tuple[Event, tuple[int, int]]] = []
    for event in events_in_week(events, week_days):
        if not event.is_multi_day:
            continue
        span = column_span(event, week_days)
        if span is not None:
            spanned.append((event, span))

    if not spanned:
        return MultiDayLayout(events=[], row_count=0)

    # Stable: equal spans keep input order
    spanned.sort(key=lambda item: item[1][1] - item[1][0], reverse=True)
    rows = assign_rows([span for _, span in spanned])

    placed = [
        ProcessedMultiDayEvent(
            event=event,
            grid_row_start=row + 1,
            grid_row_end=row + 2,
            grid_column_start=start_col + 1,
            grid_column_end=end_col + 2,
        )
        for (event, (start_col, end_col)), row in zip(spanned, rows)
    ]
    row_count = max(rows) + 1
    logger.debug("Placed %d multi-day events in %d rows", len(placed), row_count)

    if len(week_days) != DAYS_IN_WEEK:
        logger.warning("Expected %d visible days, got %d", DAYS_IN_WEEK, len(week_days))

    return MultiDayLayout(events=placed, row_count=row_count)
