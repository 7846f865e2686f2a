from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        """Rows with start <= work_date <= end, oldest first."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        time_in: Optional[str],
        time_out: Optional[str],
        worked_hours: Optional[float],
        slab_mode: bool,
        sunday_mode: bool,
        fare: float,
    ) -> int:
        """Insert a row. Must raise DuplicateError when (employee_id, work_date) exists."""

        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
