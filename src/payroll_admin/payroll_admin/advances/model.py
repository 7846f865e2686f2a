from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import as_date, is_valid_month, month_of


@dataclass(frozen=True)
class Advance:
    """Domain entity: cash handed to an employee ahead of payroll.

    The advance reduces the payroll of its *effective month*: the explicit
    ``deduction_month`` when set, otherwise the month of ``date``.
    """

    advance_id: int
    employee_id: int
    amount: float
    date: Optional[date] = None
    deduction_month: Optional[str] = None
    mode: str = ""
    notes: str = ""
    proof: Optional[str] = None

    @property
    def effective_month(self) -> str:
        # "" sorts before every YYYY-MM, so an undated advance always counts as past.
        # Stored values may be strings or malformed; they fall through to the next rule.
        if is_valid_month(self.deduction_month):
            return self.deduction_month
        given_on = as_date(self.date)
        if given_on:
            return month_of(given_on)
        return ""

    def to_dict(self) -> dict:
        return {
            "advance_id": self.advance_id,
            "employee_id": self.employee_id,
            "amount": self.amount,
            "date": _iso(self.date),
            "deduction_month": self.deduction_month,
            "effective_month": self.effective_month,
            "mode": self.mode,
            "notes": self.notes,
            "proof": self.proof,
        }


def _iso(value) -> Optional[str]:
    given_on = as_date(value)
    return given_on.strftime("%Y-%m-%d") if given_on else None
