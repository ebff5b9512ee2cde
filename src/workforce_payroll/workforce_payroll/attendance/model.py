from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus


@dataclass(frozen=True)
class PunchEvent:
    """Thực thể miền (domain): Một lần quẹt thẻ RFID/QR.

    ``is_presence_in`` is None when the store record had no usable IN/OUT tag.
    """

    time_text: str
    is_presence_in: Optional[bool]
    calendar_date: date
    worker_id: Optional[str] = None


@dataclass(frozen=True)
class NormalizedPunch:
    calendar_date: date
    minutes: float
    is_presence_in: Optional[bool]
    time_text: str
    issue: Optional[str] = None


@dataclass(frozen=True)
class CalendarDay:
    work_date: date
    is_weekly_off: bool


@dataclass(frozen=True)
class SegmentTotals:
    """Worked-time accounting for one day."""

    worked_minutes: float
    overtime_minutes: float
    segment_count: int
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class DayOutcome:
    """Read-model của một ngày trong báo cáo (Present / Absent / WeeklyOff).

    Absent days carry no time fields; WeeklyOff days only show punches read-only.
    """

    work_date: date
    status: DayStatus
    first_in: Optional[float] = None
    last_out: Optional[float] = None
    punch_count: int = 0
    worked_minutes: float = 0.0
    overtime_minutes: float = 0.0
    late_minutes: float = 0.0
    early_minutes: float = 0.0
    permission_minutes: float = 0.0
    violations: int = 0
    early_checked: bool = False
    deduction: float = 0.0
    productivity_percentage: int = 0
    issues: tuple[str, ...] = ()
