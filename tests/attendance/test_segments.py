from datetime import date

from src.workforce_payroll.workforce_payroll.attendance.model import NormalizedPunch
from src.workforce_payroll.workforce_payroll.attendance.segments import calculate_segments, pair_segments
from src.workforce_payroll.workforce_payroll.schedules.resolver import resolve_schedule

D = date(2025, 6, 2)


def _p(hhmm: str, is_in=True) -> NormalizedPunch:
    h, m = hhmm.split(":")
    return NormalizedPunch(calendar_date=D, minutes=int(h) * 60 + int(m), is_presence_in=is_in, time_text=hhmm)


def test_full_day_subtracts_unpaid_lunch(make_schedule):
    totals = calculate_segments([_p("08:55"), _p("19:05", False)], resolve_schedule(make_schedule()))

    assert totals.worked_minutes == 540
    assert totals.overtime_minutes == 0
    assert totals.segment_count == 1


def test_split_day_around_lunch(make_schedule):
    punches = [_p("09:00"), _p("13:00", False), _p("14:00"), _p("19:00", False)]

    totals = calculate_segments(punches, resolve_schedule(make_schedule()))

    assert totals.worked_minutes == 540
    assert totals.segment_count == 2


def test_unpaid_breaks_subtract_independently(make_schedule, unpaid_break):
    schedule = resolve_schedule(make_schedule(break_intervals=(unpaid_break,)))

    totals = calculate_segments([_p("09:00"), _p("19:00", False)], schedule)

    assert totals.worked_minutes == 600 - 60 - 15


def test_paid_lunch_counts_as_worked(make_schedule):
    totals = calculate_segments([_p("09:00"), _p("19:00", False)], resolve_schedule(make_schedule(is_lunch_paid=True)))

    assert totals.worked_minutes == 600


def test_repeated_in_pairs_with_next_later_out(make_schedule):
    punches = [_p("09:00"), _p("09:30"), _p("12:00", False)]

    totals = calculate_segments(punches, resolve_schedule(make_schedule()))

    assert totals.worked_minutes == 180
    assert any("Repeated IN" in i for i in totals.issues)


def test_only_out_punches_yield_no_segment(make_schedule):
    totals = calculate_segments([_p("09:00", False), _p("19:00", False)], resolve_schedule(make_schedule()))

    assert totals.worked_minutes == 0
    assert totals.segment_count == 0
    assert len(totals.issues) == 2


def test_untagged_punches_pair_by_position():
    punches = [_p("09:00", None), _p("13:00", None), _p("14:00", None), _p("19:00", None), _p("20:00", None)]

    pairs, issues = pair_segments(punches)

    assert pairs == [(540, 780), (840, 1140)]
    assert issues[0] == "Untagged punches paired by position"
    assert "no matching OUT" in issues[1]


def test_segment_outside_window_is_discarded(make_schedule):
    totals = calculate_segments([_p("19:30"), _p("21:00", False)], resolve_schedule(make_schedule()))

    assert totals.worked_minutes == 0
    assert totals.segment_count == 0


def test_overtime_counted_only_when_enabled(make_schedule):
    punches = [_p("08:00"), _p("20:00", False)]

    capped = calculate_segments(punches, resolve_schedule(make_schedule()))
    paid = calculate_segments(punches, resolve_schedule(make_schedule(consider_overtime=True)))

    assert capped.worked_minutes == 540
    assert paid.worked_minutes == 540 + 120
    assert paid.overtime_minutes == 120
