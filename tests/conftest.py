"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Add the project root to the path so the CLI module imports without install
sys.path.insert(0, str(Path(__file__).parent.parent))

from weekgrid import timezone_utils
from weekgrid.event_model import Event, EventType
from weekgrid.week import get_week_days

# Sunday-first week of 2024-03-03 .. 2024-03-09
WEEK_ANCHOR = date(2024, 3, 6)
SUNDAY = date(2024, 3, 3)
MONDAY = date(2024, 3, 4)
WEDNESDAY = date(2024, 3, 6)
FRIDAY = date(2024, 3, 8)
SATURDAY = date(2024, 3, 9)


def ts(day: date, hour: int = 0, minute: int = 0) -> int:
    """Epoch ms of a wall-clock time in the pinned test timezone."""
    return timezone_utils.local_to_timestamp(day, hour, minute)


@pytest.fixture(autouse=True)
def utc_timezone():
    """Pin wall-clock conversions to UTC for every test."""
    previous = timezone_utils.get_timezone_name()
    timezone_utils.set_timezone("UTC")
    yield
    timezone_utils.set_timezone(previous)


@pytest.fixture
def week_days():
    """The visible test week, with Tuesday as today."""
    return get_week_days(WEEK_ANCHOR, today=date(2024, 3, 5))


@pytest.fixture
def make_event():
    """Factory for events given a day and (fractional) start/end hours."""
    counter = {'n': 0}

    def _make(day=WEDNESDAY, start=9.0, end=10.0, end_day=None, multi_day=False,
              event_id=None, event_type=EventType.WORK, name=None):
        counter['n'] += 1
        event_id = event_id or f"evt-{counter['n']}"
        end_day = end_day or day
        start_ms = ts(day) + int(round(start * 3600 * 1000))
        end_ms = ts(end_day) + int(round(end * 3600 * 1000))
        return Event(
            id=event_id,
            name=name or event_id,
            start_timestamp=start_ms,
            end_timestamp=end_ms,
            is_multi_day=multi_day,
            type=event_type,
            created_at="2024-03-01T00:00:00.000Z",
            updated_at="2024-03-01T00:00:00.000Z",
        )

    return _make


def day_after(day: date, n: int = 1) -> date:
    return day + timedelta(days=n)
