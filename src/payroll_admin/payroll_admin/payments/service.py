from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_date, require_month, require_positive
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Payment
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Use cases: record salary payments applied to a salary month."""

    def __init__(self, payments: PaymentRepository, employees: EmployeeRepository):
        self._payments = payments
        self._employees = employees

    def list_all(self, *, employee_id: Optional[int] = None, salary_month: Optional[str] = None) -> Sequence[Payment]:
        items = list(self._payments.list_all())
        if employee_id is not None:
            items = [p for p in items if p.employee_id == int(employee_id)]
        if salary_month:
            salary_month = require_month(salary_month, "salary_month")
            items = [p for p in items if p.salary_month == salary_month]
        return items

    def get(self, payment_id: int) -> Payment:
        payment = self._payments.get_by_id(int(payment_id))
        if not payment:
            raise NotFoundError(f"Payment {payment_id} not found")
        return payment

    def pay(
        self,
        *,
        employee_id: int,
        salary_month: str,
        amount: object,
        paid_on: date | str | None = None,
        mode: str = "",
        notes: str = "",
        proof: Optional[str] = None,
    ) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee does not exist")

        payment_id = self._payments.create(
            employee_id=int(employee_id),
            salary_month=require_month(salary_month, "salary_month"),
            amount=require_positive(amount, "amount"),
            date=optional_date(paid_on),
            mode=mode or "",
            notes=notes or "",
            proof=proof or None,
        )
        logger.info("Payment recorded: id=%s employee=%s month=%s amount=%s", payment_id, employee_id, salary_month, amount)
        return payment_id

    def update(self, payment_id: int, changes: dict) -> Payment:
        current = self.get(payment_id)
        fields: dict = {}
        if "employee_id" in changes:
            if not self._employees.get_by_id(int(changes["employee_id"])):
                raise ValidationError("Employee does not exist")
            fields["employee_id"] = int(changes["employee_id"])
        if "salary_month" in changes:
            fields["salary_month"] = require_month(changes["salary_month"], "salary_month")
        if "amount" in changes:
            fields["amount"] = require_positive(changes["amount"], "amount")
        if "date" in changes:
            fields["date"] = optional_date(changes["date"])
        for key in ("mode", "notes"):
            if key in changes:
                fields[key] = changes[key] or ""
        if "proof" in changes:
            fields["proof"] = changes["proof"] or None

        updated = replace(current, **fields)
        self._payments.update(updated)
        logger.info("Payment updated: id=%s fields=%s", payment_id, sorted(fields))
        return updated

    def delete(self, payment_id: int) -> None:
        if not self._payments.delete_by_id(int(payment_id)):
            raise NotFoundError(f"Payment {payment_id} not found")
        logger.info("Payment deleted: id=%s", payment_id)

