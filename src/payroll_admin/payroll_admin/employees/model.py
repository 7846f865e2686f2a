from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee paid by the day.

    ``salary`` is the daily wage. ``normal_hours``/``slab_base_hours`` are
    per-employee overrides kept for the record; payroll always uses the global
    settings.
    """

    employee_id: int
    name: str
    salary: float
    designation: str = ""
    custom_id: Optional[str] = None
    contact: Optional[str] = None
    normal_hours: Optional[float] = None
    slab_base_hours: Optional[float] = None

    @property
    def display_id(self) -> str:
        return self.custom_id or str(self.employee_id)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "custom_id": self.custom_id,
            "name": self.name,
            "salary": self.salary,
            "designation": self.designation,
            "contact": self.contact,
            "normal_hours": self.normal_hours,
            "slab_base_hours": self.slab_base_hours,
        }
