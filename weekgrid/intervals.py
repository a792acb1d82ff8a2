"""
Calendar-day membership and time-axis coordinates for events.
"""

from datetime import date
from typing import Iterable

from .event_model import Event, WeekDay
from .timezone_utils import local_date, to_local_hour
from .week import HOURS_IN_DAY


def event_days(event: Event) -> tuple[date, date]:
    """Local calendar days on which the event starts and ends."""
    return local_date(event.start_timestamp), local_date(event.end_timestamp)


def is_event_on_date(event: Event, day: date) -> bool:
    """
    Check whether an event occurs on a calendar day.

    True if the day is the event's start day, its end day, or lies strictly
    between them. An event ending at any time during a day occurs on it.
    """
    start_day, end_day = event_days(event)
    return day == start_day or day == end_day or start_day < day < end_day


def hour_fraction(timestamp_ms: int) -> float:
    """Local hour of day plus minutes/60 (14:30 -> 14.5)."""
    return to_local_hour(timestamp_ms)


def day_hour_span(event: Event, day: date) -> tuple[float, float]:
    """
    Hour span of an event within one day column.

    A start on an earlier day clips to 0 and an end on a later day clips
    to 24, so an event running past midnight keeps a positive span.
    """
    start_day, end_day = event_days(event)
    start_hour = 0.0 if start_day < day else hour_fraction(event.start_timestamp)
    end_hour = float(HOURS_IN_DAY) if end_day > day else hour_fraction(event.end_timestamp)
    return start_hour, end_hour


def has_time_on_date(event: Event, day: date) -> bool:
    """
    Check whether an event takes up time within a day column.

    An event ending exactly at midnight touches the next day without
    occupying it. Degenerate events (start >= end) stay on their days.
    """
    if event.start_timestamp >= event.end_timestamp:
        return is_event_on_date(event, day)
    if not is_event_on_date(event, day):
        return False
    start_hour, end_hour = day_hour_span(event, day)
    return start_hour < end_hour


def intervals_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """Half-open overlap test; intervals that only touch do not overlap."""
    return a_start < b_end and a_end > b_start


def events_on_day(events: Iterable[Event], day: date) -> list[Event]:
    return [event for event in events if is_event_on_date(event, day)]


def events_in_week(events: Iterable[Event], week_days: list[WeekDay]) -> list[Event]:
    """Events occurring on at least one of the visible days, input order kept."""
    days = [week_day.date for week_day in week_days]
    return [event for event in events if any(is_event_on_date(event, d) for d in days)]
