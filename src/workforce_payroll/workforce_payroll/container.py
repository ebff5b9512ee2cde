from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import PermissionStrategyFactory
from .core.constants import DEFAULT_CURRENCY_SYMBOL
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import ProductivityService


@dataclass(frozen=True)
class Container:
    productivity_service: ProductivityService
    currency_symbol: str


def build_container(*, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> Container:
    productivity_service = ProductivityService(
        calculator=StandardPayrollCalculator(),
        strategy_factory=PermissionStrategyFactory(),
    )
    return Container(
        productivity_service=productivity_service,
        currency_symbol=currency_symbol,
    )
