from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DailyPay:
    base_pay: float
    ot_pay: float = 0.0

    @property
    def total(self) -> float:
        return self.base_pay + self.ot_pay


class DayPayStrategy(ABC):
    """Strategy Pattern: encapsulate how one worked day turns into pay."""

    @abstractmethod
    def pay(self, *, worked_hours: float, salary: float, standard_hours: float, slab_hours: float) -> DailyPay:
        raise NotImplementedError
