"""
Conversion of iCalendar VEVENTs into layout Events.

DATE-valued events are all-day and become multi-day events covering the
days up to (not including) DTEND. Timed events are multi-day when they end
on a later local day than they start. Recurrence rules are not expanded;
only the master occurrence is imported.
"""

import hashlib
from datetime import datetime, date, timedelta
from typing import Optional, Union

import pytz
from icalendar import Calendar as ICalCalendar, Event as ICalEvent

from .event_model import DEFAULT_EVENT_TYPE, EVENT_TYPE_VALUES, Event, EventType, EventValidationError
from .logger_config import get_logger
from .timezone_utils import get_local_timezone, local_date, local_to_timestamp

logger = get_logger(__name__)


def parse_icalendar(ical_text: Union[str, bytes]) -> ICalCalendar:
    """
    Parse iCalendar text into an icalendar.Calendar object.

    Raises:
        ValueError: if the text is not valid iCalendar data.
    """
    return ICalCalendar.from_ical(ical_text)


def _is_date_only(value) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def _datetime_to_ms(value: datetime) -> int:
    """Epoch ms of a datetime; naive values are local wall-clock time."""
    if value.tzinfo is None:
        value = get_local_timezone().localize(value)
    return int(round(value.astimezone(pytz.UTC).timestamp() * 1000))


def _text(component: ICalEvent, key: str, default: str = '') -> str:
    value = component.get(key)
    return str(value) if value else default


def _timestamp_text(component: ICalEvent, key: str) -> str:
    prop = component.get(key)
    if prop is None or not hasattr(prop, 'dt'):
        return ''
    return prop.dt.isoformat()


def _categories(component: ICalEvent) -> list[str]:
    cats = component.get('CATEGORIES')
    if cats is None:
        return []
    if not isinstance(cats, list):
        cats = [cats]
    names = []
    for cat in cats:
        names.extend(str(name) for name in getattr(cat, 'cats', [cat]))
    return names


def event_type_from_categories(categories: list[str]) -> EventType:
    """First category naming a known event type, else the default type."""
    for name in categories:
        key = name.strip().lower()
        if key in EVENT_TYPE_VALUES:
            return EventType(key)
    return DEFAULT_EVENT_TYPE


def _fallback_uid(component: ICalEvent) -> str:
    seed = f"{_text(component, 'SUMMARY')}|{_timestamp_text(component, 'DTSTART')}"
    return hashlib.md5(seed.encode()).hexdigest()[:12]


def event_from_vevent(component: ICalEvent) -> Event:
    """
    Convert one VEVENT into an Event.

    Missing DTEND means one day for all-day events and one hour otherwise.

    Raises:
        EventValidationError: if DTSTART is missing or the span is empty.
    """
    uid = _text(component, 'UID') or _fallback_uid(component)
    dtstart = component.get('DTSTART')
    if dtstart is None:
        raise EventValidationError(['Start time is required'], uid)

    start_val = dtstart.dt
    dtend = component.get('DTEND')
    end_val: Optional[Union[date, datetime]] = dtend.dt if dtend is not None else None

    if component.get('RRULE') is not None:
        logger.warning("Event %s is recurring; only its first occurrence is laid out", uid)

    if _is_date_only(start_val):
        if end_val is None:
            end_val = start_val + timedelta(days=1)
        elif not _is_date_only(end_val):
            end_val = end_val.date()
        # DTEND of an all-day event is exclusive: end just before its midnight
        start_ms = local_to_timestamp(start_val)
        end_ms = local_to_timestamp(end_val) - 1
        is_multi_day = True
    else:
        if end_val is None:
            end_val = start_val + timedelta(hours=1)
        elif _is_date_only(end_val):
            end_val = datetime.combine(end_val, datetime.min.time())
        start_ms = _datetime_to_ms(start_val)
        end_ms = _datetime_to_ms(end_val)
        is_multi_day = end_ms > start_ms and local_date(start_ms) != local_date(end_ms - 1)

    if end_ms <= start_ms:
        raise EventValidationError(['End time must be after start time'], uid)

    return Event(
        id=uid,
        name=_text(component, 'SUMMARY', 'Untitled'),
        start_timestamp=start_ms,
        end_timestamp=end_ms,
        is_multi_day=is_multi_day,
        type=event_type_from_categories(_categories(component)),
        created_at=_timestamp_text(component, 'CREATED'),
        updated_at=_timestamp_text(component, 'LAST-MODIFIED'),
    )


def events_from_ical(ical_text: Union[str, bytes]) -> list[Event]:
    """
    Import every VEVENT of an iCalendar document.

    VEVENTs that cannot be converted are skipped with a warning.
    """
    calendar = parse_icalendar(ical_text)
    events = []
    for component in calendar.walk('VEVENT'):
        try:
            events.append(event_from_vevent(component))
        except EventValidationError as e:
            logger.warning("Skipping VEVENT: %s", e)
    logger.debug("Imported %d events from iCalendar data", len(events))
    return events
