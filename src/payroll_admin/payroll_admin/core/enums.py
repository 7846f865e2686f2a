from __future__ import annotations

from enum import Enum


class PayrollStatus(str, Enum):
    """Settlement state of one employee's payroll for a month."""

    UNPAID = "Unpaid"
    PARTIAL = "Partial"
    SETTLED = "Settled"


class DayMode(str, Enum):
    """Pay band applied to one attendance day."""

    NORMAL = "Norm"
    SLAB = "Slab"
    SUNDAY = "Sunday"
