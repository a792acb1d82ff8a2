"""
Week navigation helpers: the seven visible days, week shifting, date keys
and hour labels.
"""

from datetime import date, timedelta
from typing import Optional

from .event_model import WeekDay
from .config import WeekConfig
from .timezone_utils import local_today, local_to_timestamp

DAYS_IN_WEEK = 7
HOURS_IN_DAY = 24
DEFAULT_EVENT_DURATION_HOURS = 1


def date_key(day: date) -> str:
    """ISO date key (YYYY-MM-DD) used to index per-day layouts."""
    return day.isoformat()


def week_start(anchor: date, first_weekday: int = 6) -> date:
    """First day of the week containing anchor (first_weekday: 0=Monday, 6=Sunday)."""
    return anchor - timedelta(days=(anchor.weekday() - first_weekday) % DAYS_IN_WEEK)


def get_week_days(
    anchor: date,
    week_config: Optional[WeekConfig] = None,
    today: Optional[date] = None,
) -> list[WeekDay]:
    """
    Build the seven visible days of the week containing anchor.

    Args:
        anchor: Any day inside the wanted week.
        week_config: First weekday and day names; defaults to a Sunday-first week.
        today: Day flagged is_today; defaults to today in the local timezone.
    """
    if week_config is None:
        week_config = WeekConfig()
    if today is None:
        today = local_today()

    first = week_start(anchor, week_config.first_weekday)
    days = []
    for offset in range(DAYS_IN_WEEK):
        day = first + timedelta(days=offset)
        days.append(WeekDay(
            date=day,
            day_name=week_config.get_day_name(day.weekday()),
            day_number=day.day,
            is_today=(day == today),
        ))
    return days


def shift_week(anchor: date, weeks: int) -> date:
    """Move a date by whole weeks (negative for earlier weeks)."""
    return anchor + timedelta(days=DAYS_IN_WEEK * weeks)


def format_hour(hour: int) -> str:
    """12-hour label for an hour of day (0 -> '12 AM', 13 -> '1 PM')."""
    h = hour % 12 or 12
    ampm = 'AM' if hour < 12 else 'PM'
    return f"{h} {ampm}"


def default_event_span(day: date, hour: int, duration_hours: int = DEFAULT_EVENT_DURATION_HOURS) -> tuple[int, int]:
    """
    Start/end timestamps of a new event created by clicking an hour cell.

    The span starts on the clicked hour and lasts duration_hours; it may
    run into the next day for late hours.
    """
    start = local_to_timestamp(day, hour)
    return start, start + duration_hours * 3600 * 1000
