"""
Event records and layout output records.

Event mirrors the record kept by the event store (camelCase keys in its
JSON form). PositionedEvent and ProcessedMultiDayEvent wrap an Event with
the geometry computed by the layout engines; they delegate to the wrapped
event rather than copying its fields.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional


class EventType(str, Enum):
    WORK = "work"
    PERSONAL = "personal"
    MEETING = "meeting"
    SOCIAL = "social"
    HEALTH = "health"
    TRAVEL = "travel"
    EDUCATION = "education"


DEFAULT_EVENT_TYPE = EventType.PERSONAL
EVENT_TYPE_VALUES = frozenset(t.value for t in EventType)


class EventValidationError(ValueError):
    """Raised when an event record fails validation."""

    def __init__(self, errors: list[str], record_id: Optional[str] = None):
        self.errors = list(errors)
        self.record_id = record_id
        prefix = f"Invalid event {record_id!r}" if record_id else "Invalid event"
        super().__init__(f"{prefix}: {'; '.join(self.errors)}")


def validate_event_data(data: dict[str, Any]) -> list[str]:
    """
    Validate a raw event record.

    Args:
        data: Record with camelCase keys (name, startTimestamp, ...).

    Returns:
        List of error messages; empty if the record is valid.
    """
    errors: list[str] = []

    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        errors.append('Event name is required')

    start = data.get('startTimestamp')
    end = data.get('endTimestamp')
    if not _is_timestamp(start):
        errors.append('Start time is required')
    if not _is_timestamp(end):
        errors.append('End time is required')
    if _is_timestamp(start) and _is_timestamp(end) and start >= end:
        errors.append('End time must be after start time')

    event_type = data.get('type')
    if event_type is not None and event_type not in EVENT_TYPE_VALUES:
        errors.append(f'Unknown event type: {event_type}')

    return errors


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def format_number(value: float) -> str:
    """Render a number the way the browser stringifies it (95 -> '95', 32.5 -> '32.5')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_percent(value: float) -> str:
    return f"{format_number(value)}%"


@dataclass(frozen=True)
class Event:
    """A calendar event as delivered by the event store."""
    id: str
    name: str
    start_timestamp: int  # epoch ms
    end_timestamp: int    # epoch ms
    is_multi_day: bool = False
    type: EventType = DEFAULT_EVENT_TYPE
    created_at: str = ""
    updated_at: str = ""

    @property
    def duration_ms(self) -> int:
        return self.end_timestamp - self.start_timestamp

    @classmethod
    def from_dict(cls, data: dict[str, Any], validate: bool = True) -> 'Event':
        """
        Build an Event from its camelCase JSON record.

        Raises:
            EventValidationError: if validate is set and the record is invalid.
        """
        record_id = data.get('id')
        if validate:
            errors = validate_event_data(data)
            if not record_id:
                errors.insert(0, 'Event id is required')
            if errors:
                raise EventValidationError(errors, record_id)

        return cls(
            id=str(record_id),
            name=str(data.get('name', '')),
            start_timestamp=int(data['startTimestamp']),
            end_timestamp=int(data['endTimestamp']),
            is_multi_day=bool(data.get('isMultiDay', False)),
            type=EventType(data.get('type') or DEFAULT_EVENT_TYPE),
            created_at=str(data.get('createdAt', '')),
            updated_at=str(data.get('updatedAt', '')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'startTimestamp': self.start_timestamp,
            'endTimestamp': self.end_timestamp,
            'isMultiDay': self.is_multi_day,
            'type': self.type.value,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass(frozen=True)
class WeekDay:
    """One column of the visible week."""
    date: date
    day_name: str
    day_number: int
    is_today: bool = False


@dataclass
class PositionedEvent:
    """
    A timed event placed on the hour grid of one day.

    top and height are lengths in `unit`; left and width are percentage
    strings of the day column.
    """
    event: Event
    top: float
    height: float
    left: str = "0%"
    width: str = "95%"
    z_index: int = 1
    column: int = 0
    column_count: int = 1
    unit: str = "rem"

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def name(self) -> str:
        return self.event.name

    @property
    def start_timestamp(self) -> int:
        return self.event.start_timestamp

    @property
    def end_timestamp(self) -> int:
        return self.event.end_timestamp

    @property
    def left_percent(self) -> float:
        return float(self.left.rstrip('%'))

    @property
    def width_percent(self) -> float:
        return float(self.width.rstrip('%'))

    def to_dict(self) -> dict[str, Any]:
        data = self.event.to_dict()
        data.update({
            'top': f"{format_number(self.top)}{self.unit}",
            'height': f"{format_number(self.height)}{self.unit}",
            'left': self.left,
            'width': self.width,
            'zIndex': self.z_index,
        })
        return data


@dataclass
class ProcessedMultiDayEvent:
    """An all-day event placed in the header band grid (1-based, exclusive ends)."""
    event: Event
    grid_row_start: int
    grid_row_end: int
    grid_column_start: int
    grid_column_end: int

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def name(self) -> str:
        return self.event.name

    @property
    def row(self) -> int:
        """0-based row index."""
        return self.grid_row_start - 1

    @property
    def span(self) -> int:
        """Number of visible day columns covered."""
        return self.grid_column_end - self.grid_column_start

    def to_dict(self) -> dict[str, Any]:
        data = self.event.to_dict()
        data.update({
            'gridRowStart': self.grid_row_start,
            'gridRowEnd': self.grid_row_end,
            'gridColumnStart': self.grid_column_start,
            'gridColumnEnd': self.grid_column_end,
        })
        return data


@dataclass
class MultiDayLayout:
    """All-day placements plus the number of rows the band needs."""
    events: list[ProcessedMultiDayEvent] = field(default_factory=list)
    row_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'events': [e.to_dict() for e in self.events],
            'rowCount': self.row_count,
        }
