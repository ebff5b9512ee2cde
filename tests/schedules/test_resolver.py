from datetime import time

import pytest

from src.workforce_payroll.workforce_payroll.core.exceptions import InvalidScheduleError
from src.workforce_payroll.workforce_payroll.schedules.resolver import resolve_schedule
from src.workforce_payroll.workforce_payroll.shifts.model import Batch, BreakInterval


def test_resolves_selected_batch_and_unpaid_lunch(make_schedule):
    resolved = resolve_schedule(make_schedule())

    assert resolved.batch_name == "General"
    assert resolved.work_start == 9 * 60
    assert resolved.work_end == 19 * 60
    assert resolved.standard_working_minutes == 540
    assert resolved.issues == ()


def test_paid_lunch_is_not_subtracted(make_schedule):
    resolved = resolve_schedule(make_schedule(is_lunch_paid=True))

    assert resolved.standard_working_minutes == 600
    assert resolved.unpaid_intervals == ()


def test_explicit_batch_name_overrides_config(make_schedule):
    schedule = make_schedule(
        batches=(
            Batch(name="General", start_time="09:00", end_time="19:00"),
            Batch(name="Morning", start_time=time(6, 0), end_time=time(14, 0)),
        ),
        lunch_from=None,
        lunch_to=None,
    )

    resolved = resolve_schedule(schedule, "Morning")

    assert resolved.batch_name == "Morning"
    assert (resolved.work_start, resolved.work_end) == (360, 840)
    assert resolved.standard_working_minutes == 480


def test_unknown_batch_falls_back_to_default_window(make_schedule):
    resolved = resolve_schedule(make_schedule(selected_batch_name="Night"))

    assert (resolved.work_start, resolved.work_end) == (540, 1140)
    assert any("Night" in issue for issue in resolved.issues)


def test_inverted_batch_is_ignored_with_issue(make_schedule):
    schedule = make_schedule(
        batches=(Batch(name="General", start_time="19:00", end_time="09:00"),),
    )

    resolved = resolve_schedule(schedule)

    assert resolved.batch_name == "Default"
    assert any("ignored" in issue for issue in resolved.issues)
    assert resolved.standard_working_minutes == 540


def test_breaks_paid_and_unpaid(make_schedule, unpaid_break):
    paid = BreakInterval(from_time="11:00", to_time="11:15", is_paid=True)
    inverted = BreakInterval(from_time="17:00", to_time="16:50")

    resolved = resolve_schedule(make_schedule(break_intervals=(paid, unpaid_break, inverted)))

    assert resolved.standard_working_minutes == 540 - 15
    assert any("Break #3" in issue for issue in resolved.issues)


def test_twelve_hour_clock_values_accepted(make_schedule):
    schedule = make_schedule(
        batches=(Batch(name="General", start_time="9:00 AM", end_time="7:00 PM"),),
        lunch_from="1:00 PM",
        lunch_to="2:00 PM",
    )

    assert resolve_schedule(schedule).standard_working_minutes == 540


@pytest.mark.parametrize("bad", ["24:00", "abc", "9:75", "-1:00"])
def test_out_of_range_or_garbage_time_fails(make_schedule, bad):
    schedule = make_schedule(batches=(Batch(name="General", start_time=bad, end_time="19:00"),))

    with pytest.raises(InvalidScheduleError):
        resolve_schedule(schedule)


def test_zero_paid_minutes_fails(make_schedule):
    schedule = make_schedule(
        batches=(Batch(name="General", start_time="13:00", end_time="14:00"),),
    )

    with pytest.raises(InvalidScheduleError):
        resolve_schedule(schedule)


def test_negative_grace_fails(make_schedule):
    with pytest.raises(InvalidScheduleError):
        resolve_schedule(make_schedule(permission_grace_minutes=-5))


@pytest.mark.parametrize(
    "field", ["permission_grace_minutes", "salary_deduction_per_excess_block"]
)
@pytest.mark.parametrize("value", [float("nan"), float("inf"), "NaN"])
def test_non_finite_amounts_fail(make_schedule, field, value):
    with pytest.raises(InvalidScheduleError, match="finite"):
        resolve_schedule(make_schedule(**{field: value}))
