from __future__ import annotations

from .base import DailyPay, DayPayStrategy


class SundayDayStrategy(DayPayStrategy):
    """Flat full-day salary, hours are ignored."""

    def pay(self, *, worked_hours: float, salary: float, standard_hours: float, slab_hours: float) -> DailyPay:
        return DailyPay(base_pay=salary)
