from datetime import date, datetime

import pytest

from src.workforce_payroll.workforce_payroll.attendance.model import PunchEvent
from src.workforce_payroll.workforce_payroll.attendance.normalizer import normalize_punch
from src.workforce_payroll.workforce_payroll.common.datetime_utils import format_clock, format_hours


@pytest.mark.parametrize(
    "text, minutes",
    [
        ("12:00:00 AM", 0),
        ("12:30 AM", 30),
        ("9:00:00 AM", 540),
        ("12:30 PM", 750),
        ("1:05:30 pm", 785.5),
        ("  07:05:00 PM ", 1145),
    ],
)
def test_twelve_hour_clock_parsed_to_minutes(text, minutes):
    p = normalize_punch(PunchEvent(time_text=text, is_presence_in=True, calendar_date=date(2025, 6, 2)))

    assert p.minutes == minutes
    assert p.issue is None


@pytest.mark.parametrize("text", ["09:00:00", "13:00:00 PM", "9:60 AM", "", "noon"])
def test_malformed_time_reads_as_midnight_with_issue(text):
    p = normalize_punch(PunchEvent(time_text=text, is_presence_in=True, calendar_date=date(2025, 6, 2)))

    assert p.minutes == 0
    assert "Unparsable" in p.issue


def test_seconds_are_kept_as_fraction():
    p = normalize_punch(PunchEvent(time_text="9:00:30 AM", is_presence_in=False, calendar_date=date(2025, 6, 2)))

    assert p.minutes == 540.5
    assert p.is_presence_in is False


def test_clock_and_hours_formatting():
    assert format_clock(0) == "12:00 AM"
    assert format_clock(785.5) == "1:05 PM"
    assert format_clock(720) == "12:00 PM"
    assert format_clock(None) == "-"
    assert format_hours(540) == "09:00"
    assert format_hours(75) == "01:15"


def test_datetime_calendar_date_is_reduced_to_date():
    p = normalize_punch(PunchEvent("9:00 AM", True, datetime(2025, 6, 2, 5, 30)))

    assert p.calendar_date == date(2025, 6, 2)
    assert type(p.calendar_date) is date
