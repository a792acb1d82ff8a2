from datetime import date

from weekgrid.config import Config, WeekConfig
from weekgrid.event_model import Event
from weekgrid.hour_density import HourAxis
from weekgrid.intervals import hour_fraction
from weekgrid.session import CalendarSession
from weekgrid.week import default_event_span, format_hour, get_week_days, shift_week, week_start

from conftest import MONDAY, SUNDAY, WEDNESDAY, ts


def test_sunday_first_week(week_days):
    assert [d.date for d in week_days][0] == SUNDAY
    assert [d.day_number for d in week_days] == [3, 4, 5, 6, 7, 8, 9]
    assert [d.day_name for d in week_days] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert [d.is_today for d in week_days] == [False, False, True, False, False, False, False]


def test_monday_first_week_with_custom_names():
    config = WeekConfig(first_weekday=0, day_names=["Ma", "Di", "Wo", "Do", "Vr", "Za", "Zo"])
    days = get_week_days(date(2024, 3, 3), config, today=date(2000, 1, 1))
    assert days[0].date == date(2024, 2, 26)
    assert days[0].day_name == "Ma"
    assert days[-1].date == date(2024, 3, 3)
    assert days[-1].day_name == "Zo"


def test_week_start_of_first_day_is_itself():
    assert week_start(SUNDAY, 6) == SUNDAY
    assert week_start(MONDAY, 0) == MONDAY


def test_week_crossing_month_end():
    days = get_week_days(date(2024, 3, 31), today=date(2024, 3, 31))
    assert [d.day_number for d in days] == [31, 1, 2, 3, 4, 5, 6]


def test_shift_week():
    assert shift_week(WEDNESDAY, 1) == date(2024, 3, 13)
    assert shift_week(WEDNESDAY, -1) == date(2024, 2, 28)


def test_format_hour():
    assert format_hour(0) == "12 AM"
    assert format_hour(9) == "9 AM"
    assert format_hour(12) == "12 PM"
    assert format_hour(23) == "11 PM"


def test_default_event_span():
    start, end = default_event_span(WEDNESDAY, 14)
    assert start == ts(WEDNESDAY, 14)
    assert end - start == 3600 * 1000
    assert hour_fraction(start) == 14.0


def test_session_navigation():
    session = CalendarSession(selected_date=WEDNESDAY, today=date(2024, 3, 5))
    assert session.week_days[0].date == SUNDAY

    session.next_week()
    assert session.week_days[0].date == date(2024, 3, 10)
    session.prev_week()
    session.prev_week()
    assert session.week_days[0].date == date(2024, 2, 25)


def test_session_form_state():
    session = CalendarSession(selected_date=WEDNESDAY)
    event = Event(id="x", name="X", start_timestamp=ts(WEDNESDAY, 9), end_timestamp=ts(WEDNESDAY, 10))

    session.open_event(event)
    assert session.selected_event_id == "x"
    assert session.is_edit_mode

    session.open_new_event(MONDAY, 15)
    assert session.selected_event_id is None
    assert session.hour_clicked == 15
    assert session.selected_date == MONDAY
    assert not session.is_edit_mode

    session.close_form()
    assert session.hour_clicked is None


def test_session_layout(make_event):
    session = CalendarSession(selected_date=WEDNESDAY, config=Config(), today=date(2024, 3, 5))
    layout = session.layout([make_event(day=WEDNESDAY, start=9, end=10)])
    assert isinstance(layout.hour_axis, HourAxis)
    assert len(layout.positioned_events_by_day["2024-03-06"]) == 1
