from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import DayOutcome
from ..common.datetime_utils import format_clock, format_hours
from ..core.constants import DEFAULT_CURRENCY_SYMBOL, EMPTY_CELL
from ..core.enums import DayStatus
from .model import ProductivityReport

STATUS_LABELS = {
    DayStatus.PRESENT: "Present",
    DayStatus.ABSENT: "Absent",
    DayStatus.WEEKLY_OFF: "Sunday",
}


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def _row(day: DayOutcome, symbol: str) -> dict:
    timed = day.status != DayStatus.ABSENT
    present = day.status == DayStatus.PRESENT
    return {
        "date": day.work_date.isoformat(),
        "weekday": day.work_date.strftime("%a"),
        "status": STATUS_LABELS[day.status],
        "first_in": format_clock(day.first_in) if timed else EMPTY_CELL,
        "last_out": format_clock(day.last_out) if timed else EMPTY_CELL,
        "punches": day.punch_count,
        "worked_hours": format_hours(day.worked_minutes) if present else EMPTY_CELL,
        "worked_minutes": round(day.worked_minutes, 2),
        "overtime_minutes": round(day.overtime_minutes, 2),
        "late_minutes": round(day.late_minutes, 2),
        "early_minutes": round(day.early_minutes, 2),
        "permission_minutes": round(day.permission_minutes, 2),
        "productivity_percentage": day.productivity_percentage,
        "deduction": format_currency(day.deduction, symbol),
        "deduction_amount": day.deduction,
        "issues": "; ".join(day.issues),
    }


def build_report_data(report: ProductivityReport, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> ReportData:
    """Rows for tables/exports (chronological, keyed by ISO date) plus the final summary map."""
    s = report.summary
    rows = [_row(d, currency_symbol) for d in report.days]
    rows.sort(key=lambda r: r["date"])

    summary = {
        "worker": report.worker.name,
        "rfid": report.worker.rfid,
        "department": report.worker.department,
        "email": report.worker.email,
        "from_date": report.from_date.isoformat(),
        "to_date": report.to_date.isoformat(),
        "batch": report.schedule.batch_name,
        "total_calendar_days": s.total_calendar_days,
        "weekly_off_days": s.weekly_off_days,
        "working_days_in_period": s.working_days_in_period,
        "present_days": s.present_days,
        "absent_days": s.absent_days,
        "total_worked_minutes": round(s.total_worked_minutes, 2),
        "total_worked_hours": format_hours(s.total_worked_minutes),
        "total_permission_minutes": round(s.total_permission_minutes, 2),
        "total_permission_hours": format_hours(s.total_permission_minutes),
        "total_overtime_minutes": round(s.total_overtime_minutes, 2),
        "standard_working_minutes": s.standard_working_minutes,
        "total_possible_working_hours": format_hours(s.total_possible_working_minutes),
        "productivity_percentage": s.productivity_percentage,
        "punctuality_violations": s.punctuality_violations,
        "punctuality_score": s.punctuality_score,
        "average_daily_working_minutes": s.average_daily_working_minutes,
        "average_daily_permission_minutes": s.average_daily_permission_minutes,
        "original_salary": format_currency(s.original_salary, currency_symbol),
        "per_day_salary": format_currency(s.per_day_salary, currency_symbol),
        "per_minute_rate": s.per_minute_rate,
        "absent_deduction": format_currency(s.absent_deduction, currency_symbol),
        "permission_deduction": format_currency(s.permission_deduction, currency_symbol),
        "final_salary": format_currency(s.final_salary, currency_symbol),
        "final_salary_amount": s.final_salary,
        "issues": list(s.issues),
    }
    return ReportData(rows=rows, summary=summary)


def report_payload(report: ProductivityReport, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> dict:
    """JSON shape read by the export component and the UI breakdown table."""
    data = build_report_data(report, currency_symbol=currency_symbol)
    return {
        "report": data.rows,
        "finalSummary": data.summary,
        "dailyBreakdown": data.rows,
    }
