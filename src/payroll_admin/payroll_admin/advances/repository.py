from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Advance


class AdvanceRepository(Protocol):
    def get_by_id(self, advance_id: int) -> Optional[Advance]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Advance]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, advance: Advance) -> bool:
        raise NotImplementedError

    def delete_by_id(self, advance_id: int) -> bool:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
