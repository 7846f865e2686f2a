from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worked day of one employee.

    ``worked_hours`` is derived from time_in/time_out when the row is created
    but stored on its own and may be edited directly.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    worked_hours: Optional[float] = None
    slab_mode: bool = False
    sunday_mode: bool = False
    fare: float = 0.0

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "time_in": self.time_in,
            "time_out": self.time_out,
            "worked_hours": self.worked_hours,
            "slab_mode": self.slab_mode,
            "sunday_mode": self.sunday_mode,
            "fare": self.fare,
        }
