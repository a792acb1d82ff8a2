from datetime import date

from weekgrid import timezone_utils
from weekgrid.timezone_utils import get_local_timezone, local_date, local_to_timestamp, set_timezone


def test_empty_name_uses_tz_environment(monkeypatch):
    monkeypatch.setenv('TZ', 'Asia/Tokyo')
    set_timezone('')
    assert get_local_timezone().zone == 'Asia/Tokyo'


def test_unknown_name_falls_back_to_system(monkeypatch):
    monkeypatch.setenv('TZ', ':Europe/Amsterdam')
    set_timezone('Not/AZone')
    assert get_local_timezone().zone == 'Europe/Amsterdam'


def test_system_fallback_to_fixed_offset(monkeypatch):
    monkeypatch.delenv('TZ', raising=False)
    monkeypatch.setattr(timezone_utils._time, 'tzname', ('NOT-A-ZONE', 'NOT-A-ZONE'))
    set_timezone('')
    start = local_to_timestamp(date(2024, 3, 6), 9)
    assert local_date(start) == date(2024, 3, 6)


def test_configured_zone_sets_local_midnight():
    utc_midnight = 1709683200000  # 2024-03-06T00:00:00Z
    assert local_to_timestamp(date(2024, 3, 6)) == utc_midnight

    set_timezone('Asia/Tokyo')
    assert local_to_timestamp(date(2024, 3, 6)) == utc_midnight - 9 * 3600 * 1000
    assert local_date(utc_midnight - 1) == date(2024, 3, 6)
