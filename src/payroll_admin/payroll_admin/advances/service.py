from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_date, optional_month, require_positive
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Advance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


class AdvanceService:
    """Use cases: record cash advances against a payroll month."""

    def __init__(self, advances: AdvanceRepository, employees: EmployeeRepository):
        self._advances = advances
        self._employees = employees

    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[Advance]:
        items = self._advances.list_all()
        if employee_id is not None:
            items = [a for a in items if a.employee_id == int(employee_id)]
        return items

    def get(self, advance_id: int) -> Advance:
        advance = self._advances.get_by_id(int(advance_id))
        if not advance:
            raise NotFoundError(f"Advance {advance_id} not found")
        return advance

    def give(
        self,
        *,
        employee_id: int,
        amount: object,
        given_on: date | str | None = None,
        deduction_month: Optional[str] = None,
        mode: str = "",
        notes: str = "",
        proof: Optional[str] = None,
    ) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee does not exist")
        given_on = optional_date(given_on)
        deduction_month = optional_month(deduction_month, "deduction_month")
        if given_on is None and deduction_month is None:
            raise ValidationError("Either date or deduction_month is required")

        advance_id = self._advances.create(
            employee_id=int(employee_id),
            amount=require_positive(amount, "amount"),
            date=given_on,
            deduction_month=deduction_month,
            mode=mode or "",
            notes=notes or "",
            proof=proof or None,
        )
        logger.info(
            "Advance recorded: id=%s employee=%s amount=%s deduction_month=%s",
            advance_id,
            employee_id,
            amount,
            deduction_month,
        )
        return advance_id

    def update(self, advance_id: int, changes: dict) -> Advance:
        current = self.get(advance_id)
        fields: dict = {}
        if "employee_id" in changes:
            if not self._employees.get_by_id(int(changes["employee_id"])):
                raise ValidationError("Employee does not exist")
            fields["employee_id"] = int(changes["employee_id"])
        if "amount" in changes:
            fields["amount"] = require_positive(changes["amount"], "amount")
        if "date" in changes:
            fields["date"] = optional_date(changes["date"])
        if "deduction_month" in changes:
            fields["deduction_month"] = optional_month(changes["deduction_month"], "deduction_month")
        for key in ("mode", "notes"):
            if key in changes:
                fields[key] = changes[key] or ""
        if "proof" in changes:
            fields["proof"] = changes["proof"] or None

        updated = replace(current, **fields)
        if updated.date is None and updated.deduction_month is None:
            raise ValidationError("Either date or deduction_month is required")
        self._advances.update(updated)
        logger.info("Advance updated: id=%s fields=%s", advance_id, sorted(fields))
        return updated

    def delete(self, advance_id: int) -> None:
        if not self._advances.delete_by_id(int(advance_id)):
            raise NotFoundError(f"Advance {advance_id} not found")
        logger.info("Advance deleted: id=%s", advance_id)

