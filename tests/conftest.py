from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.payroll_admin.payroll_admin.advances.model import Advance
from src.payroll_admin.payroll_admin.attendance.model import AttendanceRecord
from src.payroll_admin.payroll_admin.container import wire_services
from src.payroll_admin.payroll_admin.core.exceptions import DuplicateError
from src.payroll_admin.payroll_admin.employees.model import Employee
from src.payroll_admin.payroll_admin.main import create_app
from src.payroll_admin.payroll_admin.payments.model import Payment
from src.payroll_admin.payroll_admin.settings.model import PayrollSettings


class _InMemoryTable:
    def __init__(self):
        self.rows: dict[int, object] = {}
        self._next_id = 0

    def next_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def get_by_id(self, row_id):
        return self.rows.get(int(row_id))

    def list_all(self):
        return list(self.rows.values())

    def delete_by_id(self, row_id) -> bool:
        return self.rows.pop(int(row_id), None) is not None

    def delete_for_employee(self, employee_id) -> int:
        doomed = [k for k, v in self.rows.items() if v.employee_id == int(employee_id)]
        for k in doomed:
            del self.rows[k]
        return len(doomed)


class InMemoryEmployees(_InMemoryTable):
    def create(self, *, name, salary, designation="", custom_id=None, contact=None, normal_hours=None, slab_base_hours=None) -> int:
        eid = self.next_id()
        self.rows[eid] = Employee(
            employee_id=eid,
            name=name,
            salary=salary,
            designation=designation,
            custom_id=custom_id,
            contact=contact,
            normal_hours=normal_hours,
            slab_base_hours=slab_base_hours,
        )
        return eid

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self.rows:
            return False
        self.rows[employee.employee_id] = employee
        return True


class InMemoryAttendance(_InMemoryTable):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self.rows.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def list_range(self, *, start: date, end: date, employee_id=None):
        return sorted(
            (
                r
                for r in self.rows.values()
                if start <= r.work_date <= end and (employee_id is None or r.employee_id == employee_id)
            ),
            key=lambda r: r.work_date,
        )

    def create(self, *, employee_id, work_date, time_in, time_out, worked_hours, slab_mode, sunday_mode, fare) -> int:
        if self.get_for_employee_and_date(employee_id, work_date):
            raise DuplicateError("duplicate attendance")
        aid = self.next_id()
        self.rows[aid] = AttendanceRecord(
            attendance_id=aid,
            employee_id=employee_id,
            work_date=work_date,
            time_in=time_in,
            time_out=time_out,
            worked_hours=worked_hours,
            slab_mode=slab_mode,
            sunday_mode=sunday_mode,
            fare=fare,
        )
        return aid

    def update(self, record: AttendanceRecord) -> bool:
        if record.attendance_id not in self.rows:
            return False
        self.rows[record.attendance_id] = record
        return True


class InMemoryAdvances(_InMemoryTable):
    def create(self, *, employee_id, amount, date, deduction_month, mode="", notes="", proof=None) -> int:
        aid = self.next_id()
        self.rows[aid] = Advance(
            advance_id=aid,
            employee_id=employee_id,
            amount=amount,
            date=date,
            deduction_month=deduction_month,
            mode=mode,
            notes=notes,
            proof=proof,
        )
        return aid

    def update(self, advance: Advance) -> bool:
        if advance.advance_id not in self.rows:
            return False
        self.rows[advance.advance_id] = advance
        return True


class InMemoryPayments(_InMemoryTable):
    def create(self, *, employee_id, salary_month, amount, date, mode="", notes="", proof=None) -> int:
        pid = self.next_id()
        self.rows[pid] = Payment(
            payment_id=pid,
            employee_id=employee_id,
            salary_month=salary_month,
            amount=amount,
            date=date,
            mode=mode,
            notes=notes,
            proof=proof,
        )
        return pid

    def update(self, payment: Payment) -> bool:
        if payment.payment_id not in self.rows:
            return False
        self.rows[payment.payment_id] = payment
        return True


class InMemorySettings:
    def __init__(self, settings: Optional[PayrollSettings] = None):
        self.settings = settings

    def get(self) -> Optional[PayrollSettings]:
        return self.settings

    def save(self, settings: PayrollSettings) -> None:
        self.settings = replace(settings)


@pytest.fixture
def container():
    return wire_services(
        employees_repo=InMemoryEmployees(),
        attendance_repo=InMemoryAttendance(),
        advances_repo=InMemoryAdvances(),
        payments_repo=InMemoryPayments(),
        settings_repo=InMemorySettings(),
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


@pytest.fixture
def employee_id(container):
    return container.employee_service.create(name="A", salary=850)
