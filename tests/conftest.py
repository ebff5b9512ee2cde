from __future__ import annotations

from datetime import date

import pytest

from src.workforce_payroll.workforce_payroll.attendance.model import PunchEvent
from src.workforce_payroll.workforce_payroll.schedules.model import ScheduleConfig
from src.workforce_payroll.workforce_payroll.shifts.model import Batch, BreakInterval
from src.workforce_payroll.workforce_payroll.users.model import Worker


@pytest.fixture
def make_schedule():
    def _make(**overrides) -> ScheduleConfig:
        values = dict(
            batches=(Batch(name="General", start_time="09:00", end_time="19:00"),),
            selected_batch_name="General",
            lunch_from="13:00",
            lunch_to="14:00",
            is_lunch_paid=False,
            break_intervals=(),
            permission_grace_minutes=15,
            salary_deduction_per_excess_block=0,
            consider_overtime=False,
            deduct_salary=True,
        )
        values.update(overrides)
        return ScheduleConfig(**values)

    return _make


@pytest.fixture
def punch():
    def _punch(work_date: date, time_text: str, is_in=True) -> PunchEvent:
        return PunchEvent(time_text=time_text, is_presence_in=is_in, calendar_date=work_date, worker_id="w1")

    return _punch


@pytest.fixture
def full_day(punch):
    def _full_day(work_date: date, start: str = "09:00:00 AM", end: str = "07:00:00 PM") -> list[PunchEvent]:
        return [punch(work_date, start, True), punch(work_date, end, False)]

    return _full_day


@pytest.fixture
def worker():
    return Worker(salary=26000, name="Ravi", rfid="RF-001", department="Assembly", email="ravi@example.com")


@pytest.fixture
def unpaid_break():
    return BreakInterval(from_time="16:00", to_time="16:15", is_paid=False)
