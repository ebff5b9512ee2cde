from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import TimeLike
from ..shifts.model import Batch, BreakInterval


@dataclass(frozen=True)
class ScheduleConfig:
    """Work schedule supplied with every engine call (settings store read-model)."""

    batches: tuple[Batch, ...] = ()
    selected_batch_name: Optional[str] = None
    lunch_from: Optional[TimeLike] = None
    lunch_to: Optional[TimeLike] = None
    is_lunch_paid: bool = False
    break_intervals: tuple[BreakInterval, ...] = ()
    permission_grace_minutes: float = 0
    salary_deduction_per_excess_block: float = 0
    consider_overtime: bool = False
    deduct_salary: bool = True


@dataclass(frozen=True)
class Interval:
    start: float
    end: float

    def overlap(self, start: float, end: float) -> float:
        return max(min(self.end, end) - max(self.start, start), 0.0)


@dataclass(frozen=True)
class ResolvedSchedule:
    """Schedule boundaries in minutes since midnight, resolved once per call."""

    batch_name: str
    work_start: float
    work_end: float
    lunch: Optional[Interval]
    is_lunch_paid: bool
    unpaid_intervals: tuple[Interval, ...]
    standard_working_minutes: float
    grace_minutes: float
    deduction_per_excess_block: float
    consider_overtime: bool
    deduct_salary: bool
    issues: tuple[str, ...] = field(default=())

    @property
    def window_minutes(self) -> float:
        return self.work_end - self.work_start

    def unpaid_overlap(self, start: float, end: float) -> float:
        return sum(i.overlap(start, end) for i in self.unpaid_intervals)
