from __future__ import annotations

from abc import ABC, abstractmethod

from ...settings.model import PayrollSettings
from ..strategies.base import DailyPay


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_pay(
        self,
        *,
        worked_hours: float,
        salary: float,
        slab_mode: bool,
        sunday_mode: bool,
        settings: PayrollSettings,
    ) -> DailyPay:
        raise NotImplementedError
