from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import PermissionKind
from ...schedules.model import ResolvedSchedule


@dataclass(frozen=True)
class PermissionDecision:
    kind: PermissionKind
    minutes: float
    chargeable_minutes: float
    note: Optional[str] = None

    @property
    def is_violation(self) -> bool:
        return self.chargeable_minutes > 0


class PermissionStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of permission time is measured."""

    kind: PermissionKind
    label: str

    @abstractmethod
    def raw_minutes(self, *, first_in: float, last_out: float, schedule: ResolvedSchedule) -> float:
        raise NotImplementedError

    @staticmethod
    def paid_minutes(start: float, end: float, schedule: ResolvedSchedule) -> float:
        """``end - start`` minus unpaid lunch/break overlap; 0 for an empty span.

        Unpaid time is already outside ``standard_working_minutes``, so it is
        never charged again as permission.
        """
        if end <= start:
            return 0.0
        return max(end - start - schedule.unpaid_overlap(start, end), 0.0)

    def evaluate(self, *, first_in: float, last_out: float, schedule: ResolvedSchedule) -> PermissionDecision:
        minutes = max(self.raw_minutes(first_in=first_in, last_out=last_out, schedule=schedule), 0.0)
        if minutes <= 0:
            return PermissionDecision(kind=self.kind, minutes=0.0, chargeable_minutes=0.0)

        grace = schedule.grace_minutes
        if minutes <= grace:
            note = f"{self.label} {round(minutes, 2):g} min (within {grace:g} min grace)"
            return PermissionDecision(kind=self.kind, minutes=minutes, chargeable_minutes=0.0, note=note)

        chargeable = minutes - grace
        note = f"{self.label} {round(minutes, 2):g} min ({round(chargeable, 2):g} chargeable)"
        return PermissionDecision(kind=self.kind, minutes=minutes, chargeable_minutes=chargeable, note=note)
