from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayMode
from .strategies.base import DayPayStrategy
from .strategies.normal_strategy import NormalDayStrategy
from .strategies.slab_strategy import SlabDayStrategy
from .strategies.sunday_strategy import SundayDayStrategy


@dataclass
class DailyPayStrategyFactory:
    """Factory Pattern: choose the pay strategy for one attendance day.

    Sunday mode wins over slab mode. Slab mode only changes the pay once the
    day goes past standard hours.
    """

    def for_day(
        self,
        *,
        worked_hours: float,
        slab_mode: bool,
        sunday_mode: bool,
        standard_hours: float,
    ) -> DayPayStrategy:
        if sunday_mode:
            return SundayDayStrategy()
        if slab_mode and worked_hours > standard_hours:
            return SlabDayStrategy()
        return NormalDayStrategy()

    @staticmethod
    def mode_label(*, slab_mode: bool, sunday_mode: bool) -> DayMode:
        if sunday_mode:
            return DayMode.SUNDAY
        if slab_mode:
            return DayMode.SLAB
        return DayMode.NORMAL
