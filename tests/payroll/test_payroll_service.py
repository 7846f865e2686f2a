from __future__ import annotations

import logging
from datetime import date

import pytest

from src.payroll_admin.payroll_admin.core.enums import PayrollStatus
from src.payroll_admin.payroll_admin.core.exceptions import NotFoundError, ValidationError


def _seed(container):
    emp = container.employee_service.create(name="Ravi", salary=900)
    for day in range(1, 21):
        container.attendance_service.mark(employee_id=emp, work_date=f"2025-01-{day:02d}", worked_hours=9)
    container.advance_service.give(employee_id=emp, amount=2000, given_on="2025-01-15")
    container.settings_service.update(standard_hours=9, slab_hours=6)
    return emp


def test_monthly_payroll_runs_engine_over_repositories(container):
    emp = _seed(container)

    statements = container.payroll_service.monthly_payroll("2025-01")

    assert len(statements) == 1
    st = statements[0]
    assert st.employee.employee_id == emp
    assert st.salary_earned == 18000
    assert st.final_payable == 16000
    assert st.status is PayrollStatus.UNPAID


def test_payments_move_status_to_settled(container):
    emp = _seed(container)
    container.payment_service.pay(employee_id=emp, salary_month="2025-01", amount=10000, paid_on="2025-01-31")
    partial = container.payroll_service.monthly_payroll("2025-01")[0]
    container.payment_service.pay(employee_id=emp, salary_month="2025-01", amount=6000, paid_on="2025-02-02")
    settled = container.payroll_service.monthly_payroll("2025-01")[0]

    assert partial.status is PayrollStatus.PARTIAL
    assert partial.remaining_due == 6000
    assert settled.status is PayrollStatus.SETTLED
    assert settled.remaining_due == 0


def test_settings_change_applies_to_past_months(container):
    emp = _seed(container)
    container.settings_service.update(standard_hours=10)

    st = container.payroll_service.monthly_payroll("2025-01")[0]

    assert st.employee.employee_id == emp
    assert st.salary_earned == 16200


def test_orphaned_records_are_logged(container, caplog):
    emp = _seed(container)
    container.attendance_repo.create(
        employee_id=99,
        work_date=date(2025, 1, 3),
        time_in=None,
        time_out=None,
        worked_hours=8,
        slab_mode=False,
        sunday_mode=False,
        fare=0,
    )

    with caplog.at_level(logging.WARNING):
        statements = container.payroll_service.monthly_payroll("2025-01")

    assert [s.employee.employee_id for s in statements] == [emp]
    assert "unknown employees" in caplog.text


def test_invalid_month_raises_validation_error(container):
    _seed(container)

    with pytest.raises(ValidationError):
        container.payroll_service.monthly_payroll("2025/01")


def test_payslip_for_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.payroll_service.payslip(42, "2025-01")


def test_payslip_contains_days_of_month(container):
    emp = _seed(container)

    slip = container.payroll_service.payslip(emp, "2025-01")

    assert len(slip.days) == 20
    assert slip.basic_pay == pytest.approx(18000)
    assert slip.statement.final_payable == 16000
