from __future__ import annotations

from ...core.enums import PermissionKind
from ...schedules.model import ResolvedSchedule
from .base import PermissionStrategy


class EarlyDepartureStrategy(PermissionStrategy):
    """Paid minutes between the last punch and work end."""

    kind = PermissionKind.EARLY_DEPARTURE
    label = "Early departure"

    def raw_minutes(self, *, first_in: float, last_out: float, schedule: ResolvedSchedule) -> float:
        return self.paid_minutes(max(last_out, schedule.work_start), schedule.work_end, schedule)
