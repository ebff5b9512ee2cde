from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Phân loại ngày trong kỳ tính lương."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    WEEKLY_OFF = "WEEKLY_OFF"


class PermissionKind(str, Enum):
    LATE_ARRIVAL = "LATE_ARRIVAL"
    EARLY_DEPARTURE = "EARLY_DEPARTURE"
