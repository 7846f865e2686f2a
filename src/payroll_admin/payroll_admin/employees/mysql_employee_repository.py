from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, custom_id, name, salary, designation, contact, normal_hours, slab_base_hours"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        custom_id=r.get("custom_id"),
        name=r["name"],
        salary=as_float(r["salary"]),
        designation=r.get("designation") or "",
        contact=r.get("contact"),
        normal_hours=as_float(r.get("normal_hours")),
        slab_base_hours=as_float(r.get("slab_base_hours")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        salary: float,
        designation: str = "",
        custom_id: Optional[str] = None,
        contact: Optional[str] = None,
        normal_hours: Optional[float] = None,
        slab_base_hours: Optional[float] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(custom_id, name, salary, designation, contact, normal_hours, slab_base_hours)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (custom_id, name, salary, designation, contact, normal_hours, slab_base_hours),
            )
            return int(cur.lastrowid)

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET custom_id=%s, name=%s, salary=%s, designation=%s, contact=%s,
                    normal_hours=%s, slab_base_hours=%s
                WHERE employee_id=%s
                """,
                (
                    employee.custom_id,
                    employee.name,
                    employee.salary,
                    employee.designation,
                    employee.contact,
                    employee.normal_hours,
                    employee.slab_base_hours,
                    int(employee.employee_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
