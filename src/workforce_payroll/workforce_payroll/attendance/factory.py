from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import PermissionStrategy
from .strategies.early_strategy import EarlyDepartureStrategy
from .strategies.late_strategy import LateArrivalStrategy


@dataclass
class PermissionStrategyFactory:
    """Factory Pattern: choose which permission rules apply to a day."""

    def for_day(self, *, punch_count: int) -> list[PermissionStrategy]:
        if punch_count <= 0:
            return []
        strategies: list[PermissionStrategy] = [LateArrivalStrategy()]
        # A single punch cannot evidence a departure.
        if punch_count > 1:
            strategies.append(EarlyDepartureStrategy())
        return strategies
