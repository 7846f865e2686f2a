from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Payment
from .repository import PaymentRepository

_COLUMNS = "payment_id, employee_id, salary_month, amount, paid_on, mode, notes, proof"


def _to_payment(r: dict) -> Payment:
    return Payment(
        payment_id=int(r["payment_id"]),
        employee_id=int(r["employee_id"]),
        salary_month=r["salary_month"],
        amount=as_float(r["amount"]),
        date=r.get("paid_on"),
        mode=r.get("mode") or "",
        notes=r.get("notes") or "",
        proof=r.get("proof"),
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments WHERE payment_id=%s", (int(payment_id),))
            r = fetchone(cur)
            return _to_payment(r) if r else None

    def list_all(self) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments ORDER BY salary_month ASC, payment_id ASC")
            return [_to_payment(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        salary_month: str,
        amount: float,
        date: Optional[date],
        mode: str = "",
        notes: str = "",
        proof: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(employee_id, salary_month, amount, paid_on, mode, notes, proof)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, salary_month, amount, date, mode, notes, proof),
            )
            return int(cur.lastrowid)

    def update(self, payment: Payment) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payments
                SET employee_id=%s, salary_month=%s, amount=%s, paid_on=%s, mode=%s, notes=%s, proof=%s
                WHERE payment_id=%s
                """,
                (
                    payment.employee_id,
                    payment.salary_month,
                    payment.amount,
                    payment.date,
                    payment.mode,
                    payment.notes,
                    payment.proof,
                    int(payment.payment_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, payment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payments WHERE payment_id=%s", (int(payment_id),))
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payments WHERE employee_id=%s", (int(employee_id),))
            return int(cur.rowcount)
