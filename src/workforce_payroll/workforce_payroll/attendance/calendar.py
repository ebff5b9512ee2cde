from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable

from ..core.constants import WEEKLY_OFF_WEEKDAY
from ..core.exceptions import InvalidRangeError
from .model import CalendarDay, NormalizedPunch


def expand_calendar(from_date: date, to_date: date) -> list[CalendarDay]:
    """Every date in ``[from_date, to_date]``; Sunday is the weekly off."""
    if from_date > to_date:
        raise InvalidRangeError(f"from date {from_date.isoformat()} is after to date {to_date.isoformat()}")

    days = []
    current = from_date
    while current <= to_date:
        days.append(CalendarDay(work_date=current, is_weekly_off=current.weekday() == WEEKLY_OFF_WEEKDAY))
        current += timedelta(days=1)
    return days


def group_by_day(punches: Iterable[NormalizedPunch], from_date: date, to_date: date) -> dict[date, list[NormalizedPunch]]:
    """Bucket punches by their own date, each bucket sorted by time.

    Punches outside the range are dropped. ``sorted`` is stable, so equal
    times keep their input order.
    """
    grouped: dict[date, list[NormalizedPunch]] = defaultdict(list)
    for p in punches:
        if from_date <= p.calendar_date <= to_date:
            grouped[p.calendar_date].append(p)
    return {d: sorted(items, key=lambda p: p.minutes) for d, items in grouped.items()}
