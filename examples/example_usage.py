"""Example: run the payroll engine directly on in-memory records (no Flask, no database)."""

from datetime import date, timedelta

from src.payroll_admin.payroll_admin.advances.model import Advance
from src.payroll_admin.payroll_admin.attendance.model import AttendanceRecord
from src.payroll_admin.payroll_admin.employees.model import Employee
from src.payroll_admin.payroll_admin.payroll.engine import compute_payroll
from src.payroll_admin.payroll_admin.settings.model import PayrollSettings


def main():
    employee = Employee(employee_id=1, name="Ravi", salary=900)
    attendance = [
        AttendanceRecord(attendance_id=i + 1, employee_id=1, work_date=date(2025, 1, 1) + timedelta(days=i), worked_hours=9)
        for i in range(20)
    ]
    advances = [Advance(advance_id=1, employee_id=1, amount=2000, date=date(2025, 1, 15))]

    for statement in compute_payroll([employee], attendance, advances, [], PayrollSettings(standard_hours=9), "2025-01"):
        print(statement.to_dict())


if __name__ == "__main__":
    main()
