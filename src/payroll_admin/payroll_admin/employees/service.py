from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.numbers import to_number
from ..common.validators import require_non_empty, require_positive
from ..core.exceptions import NotFoundError
from ..payments.repository import PaymentRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: maintain employees. Deleting an employee removes everything it owns."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        payments: PaymentRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._payments = payments

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create(
        self,
        *,
        name: str,
        salary: object,
        designation: str = "",
        custom_id: Optional[str] = None,
        contact: Optional[str] = None,
        normal_hours: object = None,
        slab_base_hours: object = None,
    ) -> int:
        employee_id = self._employees.create(
            name=require_non_empty(name, "name"),
            salary=require_positive(salary, "salary"),
            designation=(designation or "").strip(),
            custom_id=(custom_id or "").strip() or None,
            contact=(contact or "").strip() or None,
            normal_hours=to_number(normal_hours, default=None),
            slab_base_hours=to_number(slab_base_hours, default=None),
        )
        logger.info("Employee created: id=%s name=%s", employee_id, name)
        return employee_id

    def update(self, employee_id: int, changes: dict) -> Employee:
        current = self.get(employee_id)
        fields: dict = {}
        if "name" in changes:
            fields["name"] = require_non_empty(changes["name"], "name")
        if "salary" in changes:
            fields["salary"] = require_positive(changes["salary"], "salary")
        for key in ("designation", "custom_id", "contact"):
            if key in changes:
                fields[key] = (changes[key] or "").strip() or (None if key != "designation" else "")
        for key in ("normal_hours", "slab_base_hours"):
            if key in changes:
                fields[key] = to_number(changes[key], default=None)

        updated = replace(current, **fields)
        self._employees.update(updated)
        logger.info("Employee updated: id=%s fields=%s", employee_id, sorted(fields))
        return updated

    def delete(self, employee_id: int) -> None:
        employee = self.get(employee_id)
        removed_attendance = self._attendance.delete_for_employee(employee.employee_id)
        removed_advances = self._advances.delete_for_employee(employee.employee_id)
        removed_payments = self._payments.delete_for_employee(employee.employee_id)
        self._employees.delete_by_id(employee.employee_id)
        logger.info(
            "Employee deleted: id=%s (attendance=%s advances=%s payments=%s)",
            employee.employee_id,
            removed_attendance,
            removed_advances,
            removed_payments,
        )
