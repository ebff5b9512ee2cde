from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional, Union

from ..core.constants import MINUTES_PER_DAY

_CLOCK_12H = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])$")
_CLOCK_24H = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

TimeLike = Union[str, time]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Longer ISO timestamps (``2025-06-01T00:00:00.000Z``) keep only the date part.
    """
    return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()


def parse_clock_12h(value: str) -> Optional[float]:
    """Parse ``H:MM[:SS] AM/PM`` into fractional minutes since midnight.

    Returns None when the text is not a valid 12-hour clock value.
    """
    if not isinstance(value, str):
        return None
    m = _CLOCK_12H.match(value.strip())
    if not m:
        return None

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if not 1 <= hours <= 12 or minutes > 59 or seconds > 59:
        return None

    hours = hours % 12
    if m.group(4).upper() == "PM":
        hours += 12
    return hours * 60 + minutes + seconds / 60


def time_of_day_to_minutes(value: TimeLike) -> Optional[float]:
    """Convert a configured time of day into minutes since midnight.

    Accepts ``datetime.time``, ``HH:MM[:SS]`` (24h) or a 12-hour clock string.
    The result is not range-checked; callers validate ``0 <= m < 1440``.
    """
    if isinstance(value, time):
        return value.hour * 60 + value.minute + value.second / 60
    if not isinstance(value, str):
        return None

    text = value.strip()
    m = _CLOCK_24H.match(text)
    if m:
        minutes, seconds = int(m.group(2)), int(m.group(3) or 0)
        if minutes > 59 or seconds > 59:
            return None
        return int(m.group(1)) * 60 + minutes + seconds / 60
    return parse_clock_12h(text)


def in_day_range(minutes: float) -> bool:
    return 0 <= minutes < MINUTES_PER_DAY


def format_clock(minutes: Optional[float], *, empty: str = "-") -> str:
    """Minutes since midnight -> ``h:mm AM/PM`` (seconds are dropped)."""
    if minutes is None:
        return empty
    whole = int(minutes) % MINUTES_PER_DAY
    hours, mins = divmod(whole, 60)
    period = "AM" if hours < 12 else "PM"
    hours = hours % 12 or 12
    return f"{hours}:{mins:02d} {period}"


def format_hours(minutes: float) -> str:
    """Duration in minutes -> ``HH:MM``."""
    whole = int(round(minutes))
    return f"{whole // 60:02d}:{whole % 60:02d}"
