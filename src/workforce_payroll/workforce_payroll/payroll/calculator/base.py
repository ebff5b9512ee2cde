from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll proration)."""

    @abstractmethod
    def per_day_salary(self, salary: float, working_days: int) -> float:
        raise NotImplementedError

    def per_minute_rate(self, per_day_salary: float, standard_working_minutes: float) -> float:
        if standard_working_minutes <= 0:
            return 0.0
        return per_day_salary / standard_working_minutes
