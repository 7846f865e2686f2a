from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import DATE_FORMAT, MONTH_FORMAT

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def is_valid_month(value: object) -> bool:
    return isinstance(value, str) and bool(_MONTH_RE.match(value))


def month_of(value: date) -> str:
    return value.strftime(MONTH_FORMAT)


def first_day_of_month(month: str) -> date:
    """'2025-01' -> date(2025, 1, 1). Caller validates the month first."""
    return datetime.strptime(month, MONTH_FORMAT).date()


def next_month(month: str) -> str:
    start = first_day_of_month(month)
    if start.month == 12:
        return f"{start.year + 1}-01"
    return f"{start.year}-{start.month + 1:02d}"


def worked_hours_between(time_in: str, time_out: str) -> float:
    """Hours between two wall-clock strings ("HH:MM" or "HH:MM:SS").

    A time_out earlier than time_in is treated as a shift crossing midnight.
    Result is rounded to 2 decimals, the precision attendance rows are stored with.
    """

    start = _seconds_of_day(time_in)
    end = _seconds_of_day(time_out)
    diff = end - start
    if diff < 0:
        diff += 24 * 3600
    return round(diff / 3600, 2)


def _seconds_of_day(value: str) -> int:
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return hours * 3600 + minutes * 60 + seconds


def as_date(value: object) -> Optional[date]:
    """Lenient date coercion for stored values: date, datetime or a 'YYYY-MM-DD...' string, else None."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value[:10], DATE_FORMAT).date()
        except ValueError:
            return None
    return None
