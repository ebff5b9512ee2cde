from __future__ import annotations

import logging
import math
from typing import Optional

from ..common.datetime_utils import TimeLike, in_day_range, time_of_day_to_minutes
from ..core.constants import DEFAULT_BATCH_NAME, DEFAULT_WORK_END, DEFAULT_WORK_START
from ..core.exceptions import InvalidScheduleError
from .model import Interval, ResolvedSchedule, ScheduleConfig

logger = logging.getLogger(__name__)


def _to_minutes(value: TimeLike, field_name: str) -> float:
    minutes = time_of_day_to_minutes(value)
    if minutes is None:
        raise InvalidScheduleError(f"{field_name}: cannot read time of day {value!r}")
    if not in_day_range(minutes):
        raise InvalidScheduleError(f"{field_name}: {value!r} is outside 00:00-23:59")
    return minutes


def _non_negative(value, field_name: str) -> float:
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        raise InvalidScheduleError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise InvalidScheduleError(f"{field_name} must be a finite number")
    if number < 0:
        raise InvalidScheduleError(f"{field_name} must not be negative")
    return number


def resolve_schedule(config: ScheduleConfig, selected_batch_name: Optional[str] = None) -> ResolvedSchedule:
    """Pick the batch and turn the schedule into minute boundaries.

    Inverted batches, breaks and lunch windows are skipped with an issue instead
    of producing negative work time. Unknown batch names fall back to the
    default 09:00-19:00 window.
    """
    issues: list[str] = []
    wanted = selected_batch_name if selected_batch_name is not None else config.selected_batch_name

    valid_batches: dict[str, tuple[float, float]] = {}
    for batch in config.batches:
        start = _to_minutes(batch.start_time, f"batch {batch.name} start")
        end = _to_minutes(batch.end_time, f"batch {batch.name} end")
        if start >= end:
            issues.append(f"Batch '{batch.name}' ignored: start must be before end")
            continue
        valid_batches.setdefault(batch.name, (start, end))

    if wanted in valid_batches:
        batch_name = str(wanted)
        work_start, work_end = valid_batches[batch_name]
    else:
        if wanted:
            issues.append(f"Batch '{wanted}' not found; using default {DEFAULT_WORK_START}-{DEFAULT_WORK_END}")
        batch_name = DEFAULT_BATCH_NAME
        work_start = _to_minutes(DEFAULT_WORK_START, "default start")
        work_end = _to_minutes(DEFAULT_WORK_END, "default end")

    lunch: Optional[Interval] = None
    if config.lunch_from is not None and config.lunch_to is not None:
        lunch_start = _to_minutes(config.lunch_from, "lunch from")
        lunch_end = _to_minutes(config.lunch_to, "lunch to")
        if lunch_start >= lunch_end:
            issues.append("Lunch window ignored: start must be before end")
        else:
            lunch = Interval(lunch_start, lunch_end)

    unpaid: list[Interval] = []
    if lunch is not None and not config.is_lunch_paid:
        unpaid.append(lunch)

    for n, brk in enumerate(config.break_intervals, start=1):
        start = _to_minutes(brk.from_time, f"break #{n} from")
        end = _to_minutes(brk.to_time, f"break #{n} to")
        if start >= end:
            issues.append(f"Break #{n} ignored: start must be before end")
            continue
        if not brk.is_paid:
            unpaid.append(Interval(start, end))

    standard = (work_end - work_start) - sum(i.overlap(work_start, work_end) for i in unpaid)
    if standard <= 0:
        raise InvalidScheduleError(f"Batch '{batch_name}' leaves no paid working minutes")

    for issue in issues:
        logger.warning("schedule: %s", issue)

    return ResolvedSchedule(
        batch_name=batch_name,
        work_start=work_start,
        work_end=work_end,
        lunch=lunch,
        is_lunch_paid=bool(config.is_lunch_paid),
        unpaid_intervals=tuple(unpaid),
        standard_working_minutes=standard,
        grace_minutes=_non_negative(config.permission_grace_minutes, "permission grace minutes"),
        deduction_per_excess_block=_non_negative(
            config.salary_deduction_per_excess_block, "salary deduction per excess block"
        ),
        consider_overtime=bool(config.consider_overtime),
        deduct_salary=bool(config.deduct_salary),
        issues=tuple(issues),
    )
