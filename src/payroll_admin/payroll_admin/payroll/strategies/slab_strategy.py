from __future__ import annotations

from .base import DailyPay, DayPayStrategy


class SlabDayStrategy(DayPayStrategy):
    """Standard hours at the normal rate, the excess at salary / slab_hours."""

    def pay(self, *, worked_hours: float, salary: float, standard_hours: float, slab_hours: float) -> DailyPay:
        normal_rate = salary / standard_hours
        slab_rate = salary / slab_hours
        extra_hours = max(worked_hours - standard_hours, 0.0)
        return DailyPay(base_pay=normal_rate * standard_hours, ot_pay=slab_rate * extra_hours)
