from __future__ import annotations

from dataclasses import dataclass

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.engine import PayrollEngine
from .payroll.service import PayrollService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository
    payments_repo: PaymentRepository
    settings_repo: SettingsRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payment_service: PaymentService
    settings_service: SettingsService
    payroll_service: PayrollService


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: AdvanceRepository,
    payments_repo: PaymentRepository,
    settings_repo: SettingsRepository,
) -> Container:
    """Build every service over the given repositories (MySQL in the app, fakes in tests)."""

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        payments_repo=payments_repo,
        settings_repo=settings_repo,
        employee_service=EmployeeService(employees_repo, attendance_repo, advances_repo, payments_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        advance_service=AdvanceService(advances_repo, employees_repo),
        payment_service=PaymentService(payments_repo, employees_repo),
        settings_service=SettingsService(settings_repo),
        payroll_service=PayrollService(
            employees_repo,
            attendance_repo,
            advances_repo,
            payments_repo,
            settings_repo,
            engine=PayrollEngine(),
        ),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
    )
