"""
One-call layout of a visible week: hour axis, timed placements per day and
the all-day band.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .allday_layout import process_multi_day_events
from .config import Config
from .event_model import Event, MultiDayLayout, PositionedEvent, WeekDay
from .hour_density import HourAxis, TimeMarker, compute_hour_axis, current_time_marker
from .intervals import events_in_week
from .logger_config import get_logger
from .timed_layout import layout_timed_events
from .week import date_key

logger = get_logger(__name__)


@dataclass
class WeekLayout:
    """Everything the week view needs to draw its events."""
    week_days: list[WeekDay]
    hour_axis: HourAxis
    positioned_events_by_day: dict[str, list[PositionedEvent]]
    multi_day: MultiDayLayout
    time_marker: Optional[TimeMarker] = None
    colors: dict[str, str] = field(default_factory=dict)  # event id -> color

    @property
    def visible_event_count(self) -> int:
        ids = {e.id for e in self.multi_day.events}
        for day_events in self.positioned_events_by_day.values():
            ids.update(e.id for e in day_events)
        return len(ids)

    def to_dict(self) -> dict:
        data = {
            'weekDays': [
                {
                    'date': date_key(d.date),
                    'dayName': d.day_name,
                    'dayNumber': d.day_number,
                    'isToday': d.is_today,
                }
                for d in self.week_days
            ],
            **self.hour_axis.to_dict(),
            'hourLabels': [
                {'hour': label.hour, 'label': label.label, 'top': label.top, 'height': label.height}
                for label in self.hour_axis.hour_labels()
            ],
            'positionedEventsByDay': {
                key: [self._with_color(e.to_dict()) for e in events]
                for key, events in self.positioned_events_by_day.items()
            },
            'multiDayEvents': {
                'events': [self._with_color(e.to_dict()) for e in self.multi_day.events],
                'rowCount': self.multi_day.row_count,
            },
        }
        if self.time_marker is not None:
            data['currentTime'] = {
                'dayIndex': self.time_marker.day_index,
                'hour': self.time_marker.hour,
                'top': self.time_marker.top,
            }
        return data

    def _with_color(self, data: dict) -> dict:
        color = self.colors.get(data['id'])
        if color:
            data['color'] = color
        return data


def compute_week_layout(
    events: Iterable[Event],
    week_days: list[WeekDay],
    config: Optional[Config] = None,
    now_ms: Optional[int] = None,
) -> WeekLayout:
    """
    Lay out a week of events.

    Args:
        events: Events in any order; those outside the week are dropped.
        week_days: The seven visible days, in order.
        config: Layout and color settings; defaults apply when None.
        now_ms: Current time, for the current-time marker (omitted when None).
    """
    if config is None:
        config = Config()

    visible = events_in_week(list(events), week_days)
    axis = compute_hour_axis(visible, week_days, config.layout)
    by_day = layout_timed_events(visible, week_days, axis, config.layout)
    multi_day = process_multi_day_events(visible, week_days)

    marker = current_time_marker(week_days, axis, now_ms) if now_ms is not None else None
    colors = {event.id: config.colors.for_type(event.type) for event in visible}

    logger.debug(
        "Week layout: %d visible events, %d all-day rows, total height %s%s",
        len(visible), multi_day.row_count, axis.total_height, axis.unit,
    )
    return WeekLayout(
        week_days=list(week_days),
        hour_axis=axis,
        positioned_events_by_day=by_day,
        multi_day=multi_day,
        time_marker=marker,
        colors=colors,
    )
