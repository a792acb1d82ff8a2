"""
Hour-density estimation and the non-uniform time axis.

Hours that host or border a timed event in the visible week are drawn at
the standard height; the others are compact. The resulting 24 heights are
shared by all seven days, so a fractional hour maps to the same vertical
position in every day column.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from .config import LayoutConfig
from .event_model import Event, WeekDay
from .intervals import day_hour_span, event_days, events_in_week, has_time_on_date, hour_fraction
from .logger_config import get_logger
from .timezone_utils import local_date
from .week import HOURS_IN_DAY, format_hour

logger = get_logger(__name__)


@dataclass(frozen=True)
class HourLabel:
    """Time-column label for one hour row."""
    hour: int
    label: str
    top: float
    height: float


@dataclass(frozen=True)
class HourAxis:
    """
    Piecewise-linear time axis: heights[h] is the height of hour h and
    offsets[h] the position where hour h starts.
    """
    heights: tuple[float, ...]
    offsets: tuple[float, ...]
    total_height: float
    unit: str = "rem"

    @classmethod
    def from_heights(cls, heights: Iterable[float], unit: str = "rem") -> 'HourAxis':
        heights = tuple(float(h) for h in heights)
        if len(heights) != HOURS_IN_DAY:
            raise ValueError(f"Expected {HOURS_IN_DAY} hour heights, got {len(heights)}")
        offsets = [0.0]
        for h in range(1, HOURS_IN_DAY):
            offsets.append(offsets[h - 1] + heights[h - 1])
        return cls(heights=heights, offsets=tuple(offsets), total_height=sum(heights), unit=unit)

    def position(self, hour: float) -> float:
        """Map a fractional hour of day to its position on the axis."""
        if hour >= HOURS_IN_DAY:
            return self.total_height
        if hour <= 0:
            return 0.0
        whole = math.floor(hour)
        return self.offsets[whole] + (hour - whole) * self.heights[whole]

    def hour_labels(self) -> list[HourLabel]:
        return [
            HourLabel(hour=h, label=format_hour(h), top=self.offsets[h], height=self.heights[h])
            for h in range(HOURS_IN_DAY)
        ]

    def to_dict(self) -> dict:
        return {
            'hourHeights': list(self.heights),
            'hourOffsets': list(self.offsets),
            'totalHeight': self.total_height,
            'unit': self.unit,
        }


def _days_spanned(event: Event) -> list[date]:
    start_day, end_day = event_days(event)
    return [start_day + timedelta(days=n) for n in range(max((end_day - start_day).days, 0) + 1)]


def dense_hours(events: Iterable[Event], days: Optional[Iterable[date]] = None) -> set[int]:
    """
    Hours of day touched by the given timed events, plus one hour of
    padding before each start and after each end.

    An event counts on every day it takes up time (only the given days,
    when passed), with its span clipped to that day.
    """
    dense: set[int] = set()
    for event in events:
        for day in (_days_spanned(event) if days is None else days):
            if not has_time_on_date(event, day):
                continue
            start_hour, end_hour = day_hour_span(event, day)
            first = math.floor(start_hour)
            last = math.ceil(end_hour) - 1

            for h in range(max(first, 0), min(last, HOURS_IN_DAY - 1) + 1):
                dense.add(h)

            # Breathing room around the event
            if 0 <= first - 1 < HOURS_IN_DAY:
                dense.add(first - 1)
            if 0 <= last + 1 < HOURS_IN_DAY:
                dense.add(last + 1)
    return dense


def compute_hour_axis(
    events: Iterable[Event],
    week_days: list[WeekDay],
    layout_config: Optional[LayoutConfig] = None,
) -> HourAxis:
    """
    Build the week's hour axis from its timed events.

    Multi-day events and events outside the visible week are ignored.
    """
    if layout_config is None:
        layout_config = LayoutConfig()

    timed = [e for e in events_in_week(events, week_days) if not e.is_multi_day]
    dense = dense_hours(timed, [week_day.date for week_day in week_days])
    logger.debug("Dense hours for week of %s: %s", week_days[0].date if week_days else None, sorted(dense))

    heights = [
        layout_config.standard_hour_height if h in dense else layout_config.compact_hour_height
        for h in range(HOURS_IN_DAY)
    ]
    return HourAxis.from_heights(heights, unit=layout_config.unit)


@dataclass(frozen=True)
class TimeMarker:
    """Position of the current-time line: which day column and where on the axis."""
    day_index: int
    hour: float
    top: float


def current_time_marker(week_days: list[WeekDay], axis: HourAxis, now_ms: int) -> Optional[TimeMarker]:
    """
    Locate "now" in the week view.

    Returns None when today's date is not one of the visible days.
    """
    today = local_date(now_ms)
    for index, week_day in enumerate(week_days):
        if week_day.date == today:
            hour = hour_fraction(now_ms)
            return TimeMarker(day_index=index, hour=hour, top=axis.position(hour))
    return None
