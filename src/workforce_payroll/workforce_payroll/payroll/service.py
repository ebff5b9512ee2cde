from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.calendar import expand_calendar, group_by_day
from ..attendance.factory import PermissionStrategyFactory
from ..attendance.model import CalendarDay, DayOutcome, NormalizedPunch, PunchEvent
from ..attendance.normalizer import normalize_punches
from ..attendance.segments import calculate_segments
from ..common.validators import optional_amount
from ..core.enums import DayStatus, PermissionKind
from ..schedules.model import ResolvedSchedule, ScheduleConfig
from ..schedules.resolver import resolve_schedule
from ..users.model import Worker
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PeriodSummary, ProductivityReport

logger = logging.getLogger(__name__)


def _money(value: float) -> float:
    return round(value, 2)


class ProductivityService:
    """Attendance-to-payroll engine for one worker over one date range.

    Stateless: every call resolves the schedule, classifies the calendar and
    prorates the salary from its own arguments, and never mutates them.
    """

    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        strategy_factory: Optional[PermissionStrategyFactory] = None,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._factory = strategy_factory or PermissionStrategyFactory()

    def compute_productivity(
        self,
        punches: Sequence[PunchEvent],
        from_date: date,
        to_date: date,
        schedule: ScheduleConfig,
        worker: Worker,
        *,
        selected_batch_name: Optional[str] = None,
    ) -> ProductivityReport:
        calendar = expand_calendar(from_date, to_date)
        resolved = resolve_schedule(schedule, selected_batch_name)

        issues = list(resolved.issues)
        salary = optional_amount(worker.salary)
        if salary is None:
            logger.warning("worker %r has no usable salary (%r); payroll computed as zero", worker.name, worker.salary)
            issues.append("Worker salary missing; payroll computed as zero")
            salary = 0.0

        normalized = normalize_punches(punches)
        by_day = group_by_day(normalized, from_date, to_date)
        outside = len(normalized) - sum(len(v) for v in by_day.values())
        if outside:
            issues.append(f"{outside} punch(es) outside {from_date.isoformat()}..{to_date.isoformat()} ignored")

        working_days = sum(1 for d in calendar if not d.is_weekly_off)
        per_day = self._calculator.per_day_salary(salary, working_days)
        per_minute = self._calculator.per_minute_rate(per_day, resolved.standard_working_minutes)

        days = tuple(
            self._evaluate_day(d, by_day.get(d.work_date, []), resolved, per_day=per_day, per_minute=per_minute)
            for d in calendar
        )
        summary = self._summarize(
            days,
            resolved,
            salary=salary,
            per_day=per_day,
            per_minute=per_minute,
            issues=issues,
        )
        logger.debug(
            "productivity %s..%s for %r: present=%d absent=%d final=%.2f",
            from_date.isoformat(),
            to_date.isoformat(),
            worker.name,
            summary.present_days,
            summary.absent_days,
            summary.final_salary,
        )
        return ProductivityReport(
            worker=worker,
            from_date=from_date,
            to_date=to_date,
            schedule=resolved,
            days=days,
            summary=summary,
        )

    def _evaluate_day(
        self,
        day: CalendarDay,
        punches: list[NormalizedPunch],
        schedule: ResolvedSchedule,
        *,
        per_day: float,
        per_minute: float,
    ) -> DayOutcome:
        parse_issues = tuple(p.issue for p in punches if p.issue)
        first_in = punches[0].minutes if punches else None
        last_out = punches[-1].minutes if len(punches) > 1 else None

        if day.is_weekly_off:
            issues = parse_issues
            if punches:
                issues += ("Punches on weekly off shown for reference only",)
            return DayOutcome(
                work_date=day.work_date,
                status=DayStatus.WEEKLY_OFF,
                first_in=first_in,
                last_out=last_out,
                punch_count=len(punches),
                issues=issues,
            )

        if not punches:
            return DayOutcome(
                work_date=day.work_date,
                status=DayStatus.ABSENT,
                deduction=_money(per_day) if schedule.deduct_salary else 0.0,
            )

        totals = calculate_segments(punches, schedule)
        decisions = [
            s.evaluate(first_in=first_in, last_out=punches[-1].minutes, schedule=schedule)
            for s in self._factory.for_day(punch_count=len(punches))
        ]
        by_kind = {d.kind: d for d in decisions}
        late = by_kind.get(PermissionKind.LATE_ARRIVAL)
        early = by_kind.get(PermissionKind.EARLY_DEPARTURE)
        permission = sum(d.chargeable_minutes for d in decisions)
        violations = sum(1 for d in decisions if d.is_violation)

        deduction = 0.0
        if schedule.deduct_salary:
            deduction = permission * per_minute + violations * schedule.deduction_per_excess_block

        return DayOutcome(
            work_date=day.work_date,
            status=DayStatus.PRESENT,
            first_in=first_in,
            last_out=last_out,
            punch_count=len(punches),
            worked_minutes=totals.worked_minutes,
            overtime_minutes=totals.overtime_minutes,
            late_minutes=late.minutes if late else 0.0,
            early_minutes=early.minutes if early else 0.0,
            permission_minutes=permission,
            violations=violations,
            early_checked=early is not None,
            deduction=_money(deduction),
            productivity_percentage=round(totals.worked_minutes / schedule.standard_working_minutes * 100),
            issues=parse_issues + totals.issues + tuple(d.note for d in decisions if d.note),
        )

    def _summarize(
        self,
        days: tuple[DayOutcome, ...],
        schedule: ResolvedSchedule,
        *,
        salary: float,
        per_day: float,
        per_minute: float,
        issues: list[str],
    ) -> PeriodSummary:
        present = [d for d in days if d.status == DayStatus.PRESENT]
        absent_days = sum(1 for d in days if d.status == DayStatus.ABSENT)
        weekly_off_days = sum(1 for d in days if d.status == DayStatus.WEEKLY_OFF)
        working_days = len(days) - weekly_off_days

        total_worked = sum(d.worked_minutes for d in present)
        total_permission = sum(d.permission_minutes for d in present)
        violations = sum(d.violations for d in present)

        absent_deduction = 0.0
        permission_deduction = 0.0
        if schedule.deduct_salary:
            absent_deduction = absent_days * per_day
            permission_deduction = total_permission * per_minute + violations * schedule.deduction_per_excess_block
        final_salary = max(0.0, salary - absent_deduction - permission_deduction)

        opportunities = len(present) + sum(1 for d in present if d.early_checked)
        score = 100.0 if not opportunities else round(100 * (1 - violations / opportunities), 2)
        possible = working_days * schedule.standard_working_minutes

        return PeriodSummary(
            total_calendar_days=len(days),
            weekly_off_days=weekly_off_days,
            working_days_in_period=working_days,
            absent_days=absent_days,
            present_days=len(present),
            total_worked_minutes=total_worked,
            total_permission_minutes=total_permission,
            per_day_salary=_money(per_day),
            per_minute_rate=round(per_minute, 4),
            absent_deduction=_money(absent_deduction),
            permission_deduction=_money(permission_deduction),
            final_salary=_money(final_salary),
            original_salary=_money(salary),
            standard_working_minutes=schedule.standard_working_minutes,
            total_possible_working_minutes=possible,
            total_overtime_minutes=sum(d.overtime_minutes for d in present),
            punctuality_violations=violations,
            punctuality_score=score,
            productivity_percentage=round(total_worked / possible * 100) if possible else 0,
            average_daily_working_minutes=round(total_worked / len(present), 2) if present else 0.0,
            average_daily_permission_minutes=round(total_permission / len(present), 2) if present else 0.0,
            issues=tuple(issues),
        )


def compute_productivity(
    punches: Sequence[PunchEvent],
    from_date: date,
    to_date: date,
    schedule: ScheduleConfig,
    worker: Worker,
    *,
    selected_batch_name: Optional[str] = None,
) -> ProductivityReport:
    """One-shot engine call with the standard calculator and permission rules."""
    return ProductivityService().compute_productivity(
        punches, from_date, to_date, schedule, worker, selected_batch_name=selected_batch_name
    )
