"""
Read-only loading of event snapshots from files.

Supported inputs:
- JSON: a list of event records, or the event store's mapping of
  date key -> list of records (events may repeat across keys).
- iCalendar (.ics): VEVENTs converted by ical_import.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Union

from .event_model import Event, EventValidationError
from .ical_import import events_from_ical
from .logger_config import get_logger

logger = get_logger(__name__)

ICAL_SUFFIXES = {'.ics', '.ical', '.ifb'}


def _iter_records(data: Any) -> Iterable[dict]:
    if isinstance(data, list):
        yield from data
    elif isinstance(data, dict):
        for key, records in data.items():
            if not isinstance(records, list):
                raise ValueError(f"Expected a list of events under {key!r}")
            yield from records
    else:
        raise ValueError(f"Unsupported event data of type {type(data).__name__}")


def events_from_records(data: Any, strict: bool = False) -> list[Event]:
    """
    Build Events from decoded JSON data, dropping duplicate ids.

    Args:
        data: A list of records or a date-keyed mapping of lists.
        strict: Raise on the first invalid record instead of skipping it.

    Raises:
        EventValidationError: for an invalid record when strict is set.
        ValueError: if the data has neither supported shape.
    """
    events: list[Event] = []
    seen: set[str] = set()

    for record in _iter_records(data):
        if not isinstance(record, dict):
            if strict:
                raise EventValidationError([f'Expected an object, got {type(record).__name__}'])
            logger.warning("Skipping non-object event record: %r", record)
            continue
        try:
            event = Event.from_dict(record)
        except EventValidationError as e:
            if strict:
                raise
            logger.warning("Skipping event: %s", e)
            continue
        if event.id in seen:
            continue
        seen.add(event.id)
        events.append(event)

    return events


def load_events(path: Union[str, Path], strict: bool = False) -> list[Event]:
    """
    Load events from a JSON or iCalendar file, chosen by suffix.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the contents cannot be decoded.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Events file not found: {path}")

    if path.suffix.lower() in ICAL_SUFFIXES:
        events = events_from_ical(path.read_bytes())
    else:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        events = events_from_records(data, strict=strict)

    logger.debug("Loaded %d events from %s", len(events), path)
    return events
