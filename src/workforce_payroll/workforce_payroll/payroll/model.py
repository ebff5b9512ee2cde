from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.model import DayOutcome
from ..schedules.model import ResolvedSchedule
from ..users.model import Worker


@dataclass(frozen=True)
class PeriodSummary:
    total_calendar_days: int
    weekly_off_days: int
    working_days_in_period: int
    absent_days: int
    present_days: int
    total_worked_minutes: float
    total_permission_minutes: float
    per_day_salary: float
    per_minute_rate: float
    absent_deduction: float
    permission_deduction: float
    final_salary: float
    original_salary: float = 0.0
    standard_working_minutes: float = 0.0
    total_possible_working_minutes: float = 0.0
    total_overtime_minutes: float = 0.0
    punctuality_violations: int = 0
    punctuality_score: float = 100.0
    productivity_percentage: int = 0
    average_daily_working_minutes: float = 0.0
    average_daily_permission_minutes: float = 0.0
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductivityReport:
    """Kết quả tính công/lương cho một nhân viên trong một kỳ. Created fresh per call."""

    worker: Worker
    from_date: date
    to_date: date
    schedule: ResolvedSchedule
    days: tuple[DayOutcome, ...]
    summary: PeriodSummary
