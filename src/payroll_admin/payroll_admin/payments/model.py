from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import as_date


@dataclass(frozen=True)
class Payment:
    """Domain entity: a salary disbursement applied to ``salary_month``."""

    payment_id: int
    employee_id: int
    salary_month: str
    amount: float
    date: Optional[date] = None
    mode: str = ""
    notes: str = ""
    proof: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "payment_id": self.payment_id,
            "employee_id": self.employee_id,
            "salary_month": self.salary_month,
            "amount": self.amount,
            "date": _iso(self.date),
            "mode": self.mode,
            "notes": self.notes,
            "proof": self.proof,
        }


def _iso(value) -> Optional[str]:
    paid_on = as_date(value)
    return paid_on.strftime("%Y-%m-%d") if paid_on else None
