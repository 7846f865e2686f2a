from __future__ import annotations

from typing import Optional

from ...common.numbers import to_number
from ...core.exceptions import ConfigurationError
from ...settings.model import PayrollSettings
from ..factory import DailyPayStrategyFactory
from ..strategies.base import DailyPay
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hourly pay from the daily salary, with slab and Sunday bands."""

    def __init__(self, factory: Optional[DailyPayStrategyFactory] = None):
        self._factory = factory or DailyPayStrategyFactory()

    def daily_pay(
        self,
        *,
        worked_hours: float,
        salary: float,
        slab_mode: bool,
        sunday_mode: bool,
        settings: PayrollSettings,
    ) -> DailyPay:
        standard_hours = to_number(settings.standard_hours)
        slab_hours = to_number(settings.slab_hours)
        if standard_hours <= 0 or slab_hours <= 0:
            raise ConfigurationError(
                f"standard_hours and slab_hours must be positive (got {settings.standard_hours!r}, {settings.slab_hours!r})"
            )

        strategy = self._factory.for_day(
            worked_hours=worked_hours,
            slab_mode=bool(slab_mode),
            sunday_mode=bool(sunday_mode),
            standard_hours=standard_hours,
        )
        return strategy.pay(
            worked_hours=worked_hours,
            salary=salary,
            standard_hours=standard_hours,
            slab_hours=slab_hours,
        )


def compute_daily_pay(
    worked_hours: float,
    salary: float,
    slab_mode: bool,
    sunday_mode: bool,
    standard_hours: float,
    slab_hours: float,
) -> DailyPay:
    """Pay for one day (fare excluded). Raises ConfigurationError for non-positive hour settings."""

    return StandardPayrollCalculator().daily_pay(
        worked_hours=worked_hours,
        salary=salary,
        slab_mode=slab_mode,
        sunday_mode=sunday_mode,
        settings=PayrollSettings(standard_hours=standard_hours, slab_hours=slab_hours),
    )
