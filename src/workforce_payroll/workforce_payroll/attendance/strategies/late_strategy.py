from __future__ import annotations

from ...core.enums import PermissionKind
from ...schedules.model import ResolvedSchedule
from .base import PermissionStrategy


class LateArrivalStrategy(PermissionStrategy):
    """Paid minutes between work start and the first punch."""

    kind = PermissionKind.LATE_ARRIVAL
    label = "Late arrival"

    def raw_minutes(self, *, first_in: float, last_out: float, schedule: ResolvedSchedule) -> float:
        return self.paid_minutes(schedule.work_start, min(first_in, schedule.work_end), schedule)
