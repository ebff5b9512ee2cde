from __future__ import annotations

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: period salary / working days in the period (Sundays excluded), 0 when none."""

    def per_day_salary(self, salary: float, working_days: int) -> float:
        if working_days <= 0:
            return 0.0
        return salary / working_days
