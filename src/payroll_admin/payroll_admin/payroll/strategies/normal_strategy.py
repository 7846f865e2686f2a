from __future__ import annotations

from .base import DailyPay, DayPayStrategy


class NormalDayStrategy(DayPayStrategy):
    """Every hour at the normal rate (salary / standard_hours)."""

    def pay(self, *, worked_hours: float, salary: float, standard_hours: float, slab_hours: float) -> DailyPay:
        normal_rate = salary / standard_hours
        return DailyPay(base_pay=normal_rate * worked_hours)
