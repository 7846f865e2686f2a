from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..advances.model import Advance
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import as_date, first_day_of_month, is_valid_month, month_of
from ..common.numbers import round_half_up, to_number
from ..common.validators import require_month
from ..core.constants import DEFAULT_SLAB_HOURS, DEFAULT_STANDARD_HOURS, FLAG_INVALID_SETTINGS
from ..core.enums import PayrollStatus
from ..core.exceptions import ConfigurationError, ValidationError
from ..employees.model import Employee
from ..payments.model import Payment
from ..settings.model import PayrollSettings
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .factory import DailyPayStrategyFactory
from .model import DayBreakdown, PayrollStatement, Payslip
from .strategies.base import DailyPay


@dataclass(frozen=True)
class Orphans:
    """Ids of records that reference an employee that does not exist."""

    attendance_ids: tuple[int, ...] = ()
    advance_ids: tuple[int, ...] = ()
    payment_ids: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.attendance_ids) + len(self.advance_ids) + len(self.payment_ids)


@dataclass
class _EmployeeRecords:
    attendance: list[AttendanceRecord]
    advances: list[Advance]
    payments: list[Payment]


class PayrollEngine:
    """Pure monthly payroll computation over already-fetched collections.

    The engine never mutates its inputs and keeps no state between calls, so
    several months can be computed concurrently over the same data. Current
    settings and each employee's current salary are applied to every month,
    past months included.
    """

    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        strategy_factory: Optional[DailyPayStrategyFactory] = None,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._factory = strategy_factory or DailyPayStrategyFactory()

    def compute(
        self,
        employees: Iterable[Employee],
        attendance: Iterable[AttendanceRecord],
        advances: Iterable[Advance],
        payments: Iterable[Payment],
        settings: Optional[PayrollSettings],
        month: str,
    ) -> list[PayrollStatement]:
        month = require_month(month)
        employees = _require_collection(employees, "employees")
        by_employee = _group_by_employee(
            _require_collection(attendance, "attendance"),
            _require_collection(advances, "advances"),
            _require_collection(payments, "payments"),
        )
        settings = resolve_settings(settings)

        statements = []
        for employee in employees:
            records = by_employee.get(employee.employee_id) or _EmployeeRecords([], [], [])
            statements.append(self._statement(employee, records, settings, month))
        return statements

    def payslip(
        self,
        employee: Employee,
        attendance: Iterable[AttendanceRecord],
        advances: Iterable[Advance],
        payments: Iterable[Payment],
        settings: Optional[PayrollSettings],
        month: str,
    ) -> Payslip:
        """Statement of one employee plus the day-by-day breakdown of the month."""

        attendance = _require_collection(attendance, "attendance")
        advances = _require_collection(advances, "advances")
        payments = _require_collection(payments, "payments")
        statement = self.compute([employee], attendance, advances, payments, settings, month)[0]
        settings = resolve_settings(settings)
        salary = to_number(employee.salary)

        days: list[DayBreakdown] = []
        for rec in attendance:
            work_date = as_date(rec.work_date)
            if rec.employee_id != employee.employee_id or work_date is None or month_of(work_date) != month:
                continue
            pay, _ = self._day_pay(rec, salary, settings)
            days.append(
                DayBreakdown(
                    attendance_id=rec.attendance_id,
                    work_date=work_date,
                    time_in=rec.time_in,
                    time_out=rec.time_out,
                    worked_hours=to_number(rec.worked_hours),
                    mode=self._factory.mode_label(slab_mode=bool(rec.slab_mode), sunday_mode=bool(rec.sunday_mode)),
                    base_pay=pay.base_pay,
                    ot_pay=pay.ot_pay,
                    fare=to_number(rec.fare),
                )
            )
        days.sort(key=lambda d: d.work_date)

        month_advances = [a for a in advances if a.employee_id == employee.employee_id and a.effective_month == month]
        month_payments = [p for p in payments if p.employee_id == employee.employee_id and p.salary_month == month]
        return Payslip(statement=statement, days=days, advances=month_advances, payments=month_payments)

    def _day_pay(self, rec: AttendanceRecord, salary: float, settings: PayrollSettings) -> tuple[DailyPay, bool]:
        """Returns (pay, settings_ok). Unusable settings degrade the day to zero pay."""

        try:
            pay = self._calculator.daily_pay(
                worked_hours=to_number(rec.worked_hours),
                salary=salary,
                slab_mode=bool(rec.slab_mode),
                sunday_mode=bool(rec.sunday_mode),
                settings=settings,
            )
        except ConfigurationError:
            return DailyPay(base_pay=0.0), False
        return pay, True

    def _statement(
        self,
        employee: Employee,
        records: _EmployeeRecords,
        settings: PayrollSettings,
        month: str,
    ) -> PayrollStatement:
        month_start = first_day_of_month(month)
        salary = to_number(employee.salary)
        flags: list[str] = []
        counted = 0

        days_worked = 0
        salary_total = 0.0
        fare_total = 0.0
        past_earnings = 0.0
        for rec in records.attendance:
            work_date = as_date(rec.work_date)
            if work_date is None:
                continue
            in_month = month_of(work_date) == month
            if not in_month and work_date >= month_start:
                continue

            counted += 1
            pay, settings_ok = self._day_pay(rec, salary, settings)
            if not settings_ok and FLAG_INVALID_SETTINGS not in flags:
                flags.append(FLAG_INVALID_SETTINGS)
            fare = to_number(rec.fare)

            if in_month:
                days_worked += 1
                salary_total += pay.total
                fare_total += fare
            else:
                past_earnings += pay.total + fare

        advance_total = 0.0
        past_deductions = 0.0
        for adv in records.advances:
            effective = adv.effective_month
            if effective == month:
                advance_total += to_number(adv.amount)
            elif effective < month:
                past_deductions += to_number(adv.amount)
            else:
                continue
            counted += 1

        paid_total = 0.0
        past_payments = 0.0
        month_payments: list[Payment] = []
        for pay_rec in records.payments:
            if not is_valid_month(pay_rec.salary_month):
                continue
            if pay_rec.salary_month == month:
                paid_total += to_number(pay_rec.amount)
                month_payments.append(pay_rec)
            elif pay_rec.salary_month < month:
                past_payments += to_number(pay_rec.amount)
            else:
                continue
            counted += 1

        previous_balance = round_half_up(past_earnings - past_deductions - past_payments)
        current_month_net = salary_total + fare_total - advance_total
        final_payable = round_half_up(current_month_net + previous_balance)
        remaining_due = final_payable - paid_total

        if not counted:
            # Nothing recorded up to this month: nothing owed, nothing paid.
            status = PayrollStatus.UNPAID
        elif remaining_due <= 0:
            status = PayrollStatus.SETTLED
        elif paid_total > 0:
            status = PayrollStatus.PARTIAL
        else:
            status = PayrollStatus.UNPAID

        # Newest payment first; undated ones last.
        month_payments.sort(key=lambda p: as_date(p.date) or date.min, reverse=True)
        payment_dates = [d for d in (as_date(p.date) for p in month_payments) if d is not None]

        return PayrollStatement(
            employee=employee,
            month=month,
            days_worked=days_worked,
            salary_earned=round_half_up(salary_total),
            fare_total=fare_total,
            advance_paid=advance_total,
            previous_balance=previous_balance,
            current_month_net=round_half_up(current_month_net),
            final_payable=final_payable,
            paid_total=paid_total,
            remaining_due=remaining_due,
            status=status,
            last_payment_date=max(payment_dates) if payment_dates else None,
            payment_proofs=tuple(p.proof for p in month_payments if p.proof),
            flags=tuple(flags),
        )


def resolve_settings(settings: Optional[PayrollSettings]) -> PayrollSettings:
    """Missing settings (or missing fields) fall back to the defaults."""

    if settings is None:
        return PayrollSettings()
    standard_hours = settings.standard_hours
    slab_hours = settings.slab_hours
    return PayrollSettings(
        standard_hours=DEFAULT_STANDARD_HOURS if standard_hours is None else standard_hours,
        slab_hours=DEFAULT_SLAB_HOURS if slab_hours is None else slab_hours,
    )


def find_orphans(
    employees: Iterable[Employee],
    attendance: Iterable[AttendanceRecord],
    advances: Iterable[Advance],
    payments: Iterable[Payment],
) -> Orphans:
    known = {e.employee_id for e in employees}
    return Orphans(
        attendance_ids=tuple(r.attendance_id for r in attendance if r.employee_id not in known),
        advance_ids=tuple(a.advance_id for a in advances if a.employee_id not in known),
        payment_ids=tuple(p.payment_id for p in payments if p.employee_id not in known),
    )


_default_engine = PayrollEngine()


def compute_payroll(
    employees: Iterable[Employee],
    attendance: Iterable[AttendanceRecord],
    advances: Iterable[Advance],
    payments: Iterable[Payment],
    settings: Optional[PayrollSettings],
    month: str,
) -> list[PayrollStatement]:
    """One PayrollStatement per employee for ``month`` (YYYY-MM), in employee order."""

    return _default_engine.compute(employees, attendance, advances, payments, settings, month)


def build_payslip(
    employee: Employee,
    attendance: Iterable[AttendanceRecord],
    advances: Iterable[Advance],
    payments: Iterable[Payment],
    settings: Optional[PayrollSettings],
    month: str,
) -> Payslip:
    return _default_engine.payslip(employee, attendance, advances, payments, settings, month)


def _require_collection(value: Any, name: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ValidationError(f"{name} must be a collection of records")
    return list(value)


def _group_by_employee(
    attendance: Sequence[AttendanceRecord],
    advances: Sequence[Advance],
    payments: Sequence[Payment],
) -> dict[Any, _EmployeeRecords]:
    grouped: dict[Any, _EmployeeRecords] = defaultdict(lambda: _EmployeeRecords([], [], []))
    for rec in attendance:
        grouped[rec.employee_id].attendance.append(rec)
    for adv in advances:
        grouped[adv.employee_id].advances.append(adv)
    for pay in payments:
        grouped[pay.employee_id].payments.append(pay)
    return dict(grouped)

