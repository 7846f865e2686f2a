from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..advances.model import Advance
from ..core.enums import DayMode, PayrollStatus
from ..employees.model import Employee
from ..payments.model import Payment


def _iso(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


@dataclass(frozen=True)
class PayrollStatement:
    """Computed payroll of one employee for one month (never persisted).

    Sign convention: a positive ``previous_balance`` means the employee was
    underpaid before this month, a negative one means overpaid.
    """

    employee: Employee
    month: str
    days_worked: int
    salary_earned: int
    fare_total: float
    advance_paid: float
    previous_balance: int
    current_month_net: int
    final_payable: int
    paid_total: float
    remaining_due: float
    status: PayrollStatus
    last_payment_date: Optional[date] = None
    payment_proofs: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "month": self.month,
            "days_worked": self.days_worked,
            "salary_earned": self.salary_earned,
            "fare_total": self.fare_total,
            "advance_paid": self.advance_paid,
            "previous_balance": self.previous_balance,
            "current_month_net": self.current_month_net,
            "final_payable": self.final_payable,
            "paid_total": self.paid_total,
            "remaining_due": self.remaining_due,
            "status": self.status.value,
            "last_payment_date": _iso(self.last_payment_date),
            "payment_proofs": list(self.payment_proofs),
            "flags": list(self.flags),
        }


@dataclass(frozen=True)
class DayBreakdown:
    """Read-model of one attendance day for payslips and exports."""

    attendance_id: int
    work_date: date
    time_in: Optional[str]
    time_out: Optional[str]
    worked_hours: float
    mode: DayMode
    base_pay: float
    ot_pay: float
    fare: float

    @property
    def total(self) -> float:
        return self.base_pay + self.ot_pay + self.fare

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "work_date": _iso(self.work_date),
            "weekday": self.work_date.strftime("%a"),
            "time_in": self.time_in,
            "time_out": self.time_out,
            "worked_hours": self.worked_hours,
            "mode": self.mode.value,
            "base_pay": self.base_pay,
            "ot_pay": self.ot_pay,
            "fare": self.fare,
            "total": self.total,
        }


@dataclass(frozen=True)
class Payslip:
    statement: PayrollStatement
    days: list[DayBreakdown] = field(default_factory=list)
    advances: list[Advance] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)

    @property
    def basic_pay(self) -> float:
        return sum(d.base_pay for d in self.days)

    @property
    def ot_pay(self) -> float:
        return sum(d.ot_pay for d in self.days)

    def to_dict(self) -> dict:
        return {
            "statement": self.statement.to_dict(),
            "basic_pay": self.basic_pay,
            "ot_pay": self.ot_pay,
            "days": [d.to_dict() for d in self.days],
            "advances": [a.to_dict() for a in self.advances],
            "payments": [p.to_dict() for p in self.payments],
        }
