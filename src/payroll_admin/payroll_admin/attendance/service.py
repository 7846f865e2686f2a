from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import first_day_of_month, next_month, worked_hours_between
from ..common.numbers import to_number
from ..common.validators import require_date, require_month, require_non_negative
from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_for_month(self, month: str, *, employee_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        month = require_month(month)
        start = first_day_of_month(month)
        end = first_day_of_month(next_month(month)) - timedelta(days=1)
        return self._attendance.list_range(start=start, end=end, employee_id=employee_id)

    def get(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise NotFoundError(f"Attendance {attendance_id} not found")
        return record

    def mark(
        self,
        *,
        employee_id: int,
        work_date: date | str,
        time_in: Optional[str] = None,
        time_out: Optional[str] = None,
        worked_hours: object = None,
        slab_mode: bool = False,
        sunday_mode: bool = False,
        fare: object = 0,
    ) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee does not exist")
        work_date = require_date(work_date)

        if self._attendance.get_for_employee_and_date(int(employee_id), work_date):
            raise DuplicateError("Attendance already marked for this employee on this date")

        hours = _resolve_hours(worked_hours, time_in, time_out)
        # The repository enforces (employee_id, work_date) uniqueness as well, for concurrent writers.
        attendance_id = self._attendance.create(
            employee_id=int(employee_id),
            work_date=work_date,
            time_in=time_in or None,
            time_out=time_out or None,
            worked_hours=hours,
            slab_mode=bool(slab_mode),
            sunday_mode=bool(sunday_mode),
            fare=require_non_negative(fare or 0, "fare"),
        )
        logger.info("Attendance marked: id=%s employee=%s date=%s", attendance_id, employee_id, work_date)
        return attendance_id

    def edit(self, attendance_id: int, changes: dict) -> AttendanceRecord:
        current = self.get(attendance_id)
        fields: dict = {}

        if "work_date" in changes:
            new_date = require_date(changes["work_date"])
            if new_date != current.work_date:
                clash = self._attendance.get_for_employee_and_date(current.employee_id, new_date)
                if clash and clash.attendance_id != current.attendance_id:
                    raise DuplicateError("Attendance already marked for this employee on this date")
            fields["work_date"] = new_date
        for key in ("time_in", "time_out"):
            if key in changes:
                fields[key] = changes[key] or None
        for key in ("slab_mode", "sunday_mode"):
            if key in changes:
                fields[key] = bool(changes[key])
        if "fare" in changes:
            fields["fare"] = require_non_negative(changes["fare"] or 0, "fare")

        if "worked_hours" in changes:
            fields["worked_hours"] = _resolve_hours(changes["worked_hours"], None, None)
        elif "time_in" in fields or "time_out" in fields:
            fields["worked_hours"] = _resolve_hours(
                None,
                fields.get("time_in", current.time_in),
                fields.get("time_out", current.time_out),
            )

        updated = replace(current, **fields)
        self._attendance.update(updated)
        logger.info("Attendance updated: id=%s fields=%s", attendance_id, sorted(fields))
        return updated

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete_by_id(int(attendance_id)):
            raise NotFoundError(f"Attendance {attendance_id} not found")
        logger.info("Attendance deleted: id=%s", attendance_id)


def _resolve_hours(worked_hours: object, time_in: Optional[str], time_out: Optional[str]) -> Optional[float]:
    """Explicit hours win; otherwise derive them from the clock times when both are present."""

    if worked_hours is not None and worked_hours != "":
        hours = to_number(worked_hours, default=None)
        if hours is None or hours < 0:
            raise ValidationError("worked_hours must be a non-negative number")
        return hours
    if time_in and time_out:
        try:
            return worked_hours_between(time_in, time_out)
        except ValueError:
            raise ValidationError("time_in/time_out must be in HH:MM format") from None
    return None
