"""Build a ScheduleConfig from a settings-store document.

Accepts both the store's camelCase keys and snake_case keys.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from ..shifts.model import Batch, BreakInterval
from .model import ScheduleConfig


def _get(doc: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in doc and doc[key] is not None:
            return doc[key]
    return default


def _flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _batch(doc: Mapping[str, Any]) -> Batch:
    name = _get(doc, "name", "batchName", "batch_name")
    start = _get(doc, "startTime", "start_time", "from")
    end = _get(doc, "endTime", "end_time", "to")
    if not name or start is None or end is None:
        raise ValidationError(f"Batch {doc!r} needs name, start and end")
    return Batch(name=str(name), start_time=start, end_time=end)


def _break(doc: Mapping[str, Any]) -> BreakInterval:
    start = _get(doc, "from", "from_time", "start")
    end = _get(doc, "to", "to_time", "end")
    if start is None or end is None:
        raise ValidationError(f"Break {doc!r} needs from and to")
    return BreakInterval(from_time=start, to_time=end, is_paid=_flag(_get(doc, "isPaid", "is_paid"), False))


def schedule_from_settings(doc: Mapping[str, Any], *, selected_batch_name: Optional[str] = None) -> ScheduleConfig:
    return ScheduleConfig(
        batches=tuple(_batch(b) for b in _get(doc, "batches", default=())),
        selected_batch_name=selected_batch_name or _get(doc, "selectedBatchName", "selected_batch_name"),
        lunch_from=_get(doc, "lunchFrom", "lunch_from"),
        lunch_to=_get(doc, "lunchTo", "lunch_to"),
        is_lunch_paid=_flag(_get(doc, "isLunchPaid", "is_lunch_paid"), False),
        break_intervals=tuple(_break(b) for b in _get(doc, "breakIntervals", "break_intervals", default=())),
        permission_grace_minutes=_get(doc, "permissionGraceMinutes", "permission_grace_minutes", default=0),
        salary_deduction_per_excess_block=_get(
            doc, "salaryDeductionPerExcessBlock", "salary_deduction_per_excess_block", default=0
        ),
        consider_overtime=_flag(_get(doc, "considerOvertime", "consider_overtime"), False),
        deduct_salary=_flag(_get(doc, "deductSalary", "deduct_salary"), True),
    )
