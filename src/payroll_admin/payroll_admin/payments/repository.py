from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, payment: Payment) -> bool:
        raise NotImplementedError

    def delete_by_id(self, payment_id: int) -> bool:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
