from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Advance
from .repository import AdvanceRepository

_COLUMNS = "advance_id, employee_id, amount, given_on, deduction_month, mode, notes, proof"


def _to_advance(r: dict) -> Advance:
    return Advance(
        advance_id=int(r["advance_id"]),
        employee_id=int(r["employee_id"]),
        amount=as_float(r["amount"]),
        date=r.get("given_on"),
        deduction_month=r.get("deduction_month"),
        mode=r.get("mode") or "",
        notes=r.get("notes") or "",
        proof=r.get("proof"),
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, advance_id: int) -> Optional[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances WHERE advance_id=%s", (int(advance_id),))
            r = fetchone(cur)
            return _to_advance(r) if r else None

    def list_all(self) -> Sequence[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances ORDER BY given_on ASC, advance_id ASC")
            return [_to_advance(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        amount: float,
        date: Optional[date],
        deduction_month: Optional[str],
        mode: str = "",
        notes: str = "",
        proof: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(employee_id, amount, given_on, deduction_month, mode, notes, proof)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, amount, date, deduction_month, mode, notes, proof),
            )
            return int(cur.lastrowid)

    def update(self, advance: Advance) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE advances
                SET employee_id=%s, amount=%s, given_on=%s, deduction_month=%s, mode=%s, notes=%s, proof=%s
                WHERE advance_id=%s
                """,
                (
                    advance.employee_id,
                    advance.amount,
                    advance.date,
                    advance.deduction_month,
                    advance.mode,
                    advance.notes,
                    advance.proof,
                    int(advance.advance_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, advance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE advance_id=%s", (int(advance_id),))
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE employee_id=%s", (int(employee_id),))
            return int(cur.rowcount)
