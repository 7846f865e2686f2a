from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, time_in, time_out, worked_hours, slab_mode, sunday_mode, fare"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        time_in=r.get("time_in"),
        time_out=r.get("time_out"),
        worked_hours=as_float(r.get("worked_hours")),
        slab_mode=bool(r.get("slab_mode")),
        sunday_mode=bool(r.get("sunday_mode")),
        fare=as_float(r.get("fare")) or 0.0,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records ORDER BY work_date ASC, attendance_id ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def list_range(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE {where} ORDER BY work_date ASC, attendance_id ASC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

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
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        employee_id, work_date, time_in, time_out, worked_hours, slab_mode, sunday_mode, fare
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, time_in, time_out, worked_hours, int(slab_mode), int(sunday_mode), fare),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateError("Attendance already marked for this employee on this date") from e
            raise

    def update(self, record: AttendanceRecord) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE attendance_records
                    SET work_date=%s, time_in=%s, time_out=%s, worked_hours=%s,
                        slab_mode=%s, sunday_mode=%s, fare=%s
                    WHERE attendance_id=%s
                    """,
                    (
                        record.work_date,
                        record.time_in,
                        record.time_out,
                        record.worked_hours,
                        int(record.slab_mode),
                        int(record.sunday_mode),
                        record.fare,
                        int(record.attendance_id),
                    ),
                )
                return cur.rowcount > 0
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateError("Attendance already marked for this employee on this date") from e
            raise

    def delete_by_id(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (int(employee_id),))
            return int(cur.rowcount)
