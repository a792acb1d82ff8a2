"""
Weekgrid Layout Engine

This package computes where the events of a week are drawn:
- Configuration parsing (config.py)
- Event records and layout outputs (event_model.py)
- Day membership and hour fractions (intervals.py, timezone_utils.py)
- Hour heights and the time axis (hour_density.py)
- Timed event columns (timed_layout.py, interval_tree.py)
- All-day event rows (allday_layout.py)
- Whole-week facade (week_layout.py) and view session (session.py)
- Event file loading (event_loader.py, ical_import.py)
"""

from .config import Config, LayoutConfig, WeekConfig, ColorsConfig
from .event_model import (
    Event, EventType, EventValidationError, WeekDay,
    PositionedEvent, ProcessedMultiDayEvent, MultiDayLayout,
    validate_event_data,
)
from .intervals import is_event_on_date, hour_fraction, events_in_week, events_on_day
from .hour_density import HourAxis, compute_hour_axis, current_time_marker
from .timed_layout import position_day_events, layout_timed_events
from .allday_layout import process_multi_day_events
from .week import get_week_days, shift_week, date_key, format_hour
from .week_layout import WeekLayout, compute_week_layout
from .session import CalendarSession
from .event_loader import load_events, events_from_records
from .ical_import import events_from_ical

__version__ = "0.1.0"

__all__ = [
    'Config',
    'LayoutConfig',
    'WeekConfig',
    'ColorsConfig',
    'Event',
    'EventType',
    'EventValidationError',
    'WeekDay',
    'PositionedEvent',
    'ProcessedMultiDayEvent',
    'MultiDayLayout',
    'validate_event_data',
    'is_event_on_date',
    'hour_fraction',
    'events_in_week',
    'events_on_day',
    'HourAxis',
    'compute_hour_axis',
    'current_time_marker',
    'position_day_events',
    'layout_timed_events',
    'process_multi_day_events',
    'get_week_days',
    'shift_week',
    'date_key',
    'format_hour',
    'WeekLayout',
    'compute_week_layout',
    'CalendarSession',
    'load_events',
    'events_from_records',
    'events_from_ical',
]
