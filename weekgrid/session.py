"""
View session state passed explicitly to the rendering layer.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .config import Config
from .event_model import Event, WeekDay
from .week import get_week_days, shift_week
from .week_layout import WeekLayout, compute_week_layout


@dataclass
class CalendarSession:
    """
    Selected date, selected event and edit-form flags of one calendar view.

    The week shown is the one containing selected_date.
    """
    selected_date: date
    config: Config = field(default_factory=Config)
    today: Optional[date] = None
    selected_event_id: Optional[str] = None
    hour_clicked: Optional[int] = None
    is_edit_mode: bool = False

    @property
    def week_days(self) -> list[WeekDay]:
        return get_week_days(self.selected_date, self.config.week, today=self.today)

    def next_week(self):
        self.selected_date = shift_week(self.selected_date, 1)

    def prev_week(self):
        self.selected_date = shift_week(self.selected_date, -1)

    def select_day(self, day: date):
        self.selected_date = day

    def open_event(self, event: Event):
        """Select an existing event for editing."""
        self.selected_event_id = event.id
        self.hour_clicked = None
        self.is_edit_mode = True

    def open_new_event(self, day: date, hour: int):
        """Start creating an event from a click on an hour cell."""
        self.selected_date = day
        self.selected_event_id = None
        self.hour_clicked = hour
        self.is_edit_mode = False

    def close_form(self):
        self.selected_event_id = None
        self.hour_clicked = None
        self.is_edit_mode = False

    def layout(self, events: list[Event], now_ms: Optional[int] = None) -> WeekLayout:
        return compute_week_layout(events, self.week_days, self.config, now_ms=now_ms)
