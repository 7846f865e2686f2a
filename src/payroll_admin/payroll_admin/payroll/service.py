from __future__ import annotations

import logging
from typing import Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..payments.repository import PaymentRepository
from ..settings.repository import SettingsRepository
from .engine import PayrollEngine, find_orphans
from .model import PayrollStatement, Payslip

logger = logging.getLogger(__name__)


class PayrollService:
    """Fetches the record collections and runs the payroll engine over them.

    Nothing is cached: every query recomputes from the current records.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        payments: PaymentRepository,
        settings: SettingsRepository,
        *,
        engine: Optional[PayrollEngine] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._payments = payments
        self._settings = settings
        self._engine = engine or PayrollEngine()

    def monthly_payroll(self, month: str) -> list[PayrollStatement]:
        employees = list(self._employees.list_all())
        attendance = list(self._attendance.list_all())
        advances = list(self._advances.list_all())
        payments = list(self._payments.list_all())

        self._warn_orphans(employees, attendance, advances, payments)
        statements = self._engine.compute(employees, attendance, advances, payments, self._settings.get(), month)

        flagged = [s.employee.employee_id for s in statements if s.flags]
        if flagged:
            logger.warning("Payroll %s: statements flagged for employees %s", month, flagged)
        return statements

    def payslip(self, employee_id: int, month: str) -> Payslip:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return self._engine.payslip(
            employee,
            self._attendance.list_all(),
            self._advances.list_all(),
            self._payments.list_all(),
            self._settings.get(),
            month,
        )

    def _warn_orphans(self, employees, attendance, advances, payments) -> None:
        orphans = find_orphans(employees, attendance, advances, payments)
        if orphans.count:
            logger.warning(
                "Records referencing unknown employees ignored: attendance=%s advances=%s payments=%s",
                list(orphans.attendance_ids),
                list(orphans.advance_ids),
                list(orphans.payment_ids),
            )
