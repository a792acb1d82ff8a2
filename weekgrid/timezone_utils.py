"""
Timezone utilities for Weekgrid.

Event timestamps are epoch milliseconds (UTC). Everything the layout engine
compares (calendar days, hour fractions) is local wall-clock time in the
configured timezone.
"""

from datetime import date, datetime, time as dt_time
import os
import time as _time
import pytz

from .logger_config import get_logger

logger = get_logger(__name__)

# Empty means the system timezone; overridden by [General] timezone in the config
_local_timezone_name: str = ""


def set_timezone(timezone_name: str):
    """Set the local timezone used for wall-clock conversions."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def get_timezone_name() -> str:
    """Get the configured timezone name."""
    return _local_timezone_name


def get_local_timezone():
    """
    Get the local timezone as a pytz timezone object.

    With no configured name, or an unknown one, the system timezone is
    used instead.
    """
    if not _local_timezone_name:
        return get_system_timezone()
    try:
        return pytz.timezone(_local_timezone_name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r, falling back to system timezone", _local_timezone_name)
        return get_system_timezone()


def get_system_timezone():
    """
    The system timezone: the TZ environment variable, then the C library's
    zone name, then a fixed UTC offset taken from the C library.
    """
    for name in (os.environ.get('TZ', '').lstrip(':'), _time.tzname[0]):
        if not name:
            continue
        try:
            return pytz.timezone(name)
        except pytz.UnknownTimeZoneError:
            continue
    if _time.localtime().tm_isdst:
        offset_seconds = -_time.altzone
    else:
        offset_seconds = -_time.timezone
    return pytz.FixedOffset(offset_seconds // 60)


def to_local_datetime(timestamp_ms: int) -> datetime:
    """
    Convert an epoch-millisecond timestamp to an aware local datetime.

    Args:
        timestamp_ms: Milliseconds since the epoch.

    Returns:
        A timezone-aware datetime in the local timezone.
    """
    utc_dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=pytz.UTC)
    return utc_dt.astimezone(get_local_timezone())


def local_date(timestamp_ms: int) -> date:
    """Calendar day (local) that contains the timestamp."""
    return to_local_datetime(timestamp_ms).date()


def to_local_hour(timestamp_ms: int) -> float:
    """
    Hour of the local day as a float (e.g., 14.5 for 14:30).

    Seconds are ignored.
    """
    local_dt = to_local_datetime(timestamp_ms)
    return local_dt.hour + local_dt.minute / 60.0


def local_to_timestamp(day: date, hour: int = 0, minute: int = 0) -> int:
    """
    Epoch milliseconds of a local wall-clock time on the given day.

    Args:
        day: The local calendar day.
        hour: Hour of day (0-23).
        minute: Minute of hour.
    """
    local_tz = get_local_timezone()
    naive = datetime.combine(day, dt_time(hour=hour, minute=minute))
    local_dt = local_tz.localize(naive)
    return int(round(local_dt.astimezone(pytz.UTC).timestamp() * 1000))


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(_time.time() * 1000)


def local_today() -> date:
    """Today's date in the local timezone."""
    return local_date(now_ms())
