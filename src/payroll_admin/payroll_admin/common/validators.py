from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import is_valid_month, parse_iso_date
from .numbers import to_number


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive(value: object, field_name: str) -> float:
    number = to_number(value, default=None)
    if number is None or number <= 0:
        raise ValidationError(f"{field_name} must be a number greater than 0")
    return number


def require_non_negative(value: object, field_name: str) -> float:
    number = to_number(value, default=None)
    if number is None or number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_month(value: object, field_name: str = "month") -> str:
    if not is_valid_month(value):
        raise ValidationError(f"{field_name} must be in YYYY-MM format")
    return str(value)


def optional_month(value: object, field_name: str) -> Optional[str]:
    if value is None or value == "":
        return None
    return require_month(value, field_name)


def require_date(value: object, field_name: str = "date") -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or ""))
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format") from None


def optional_date(value: object, field_name: str = "date") -> Optional[date]:
    if value is None or value == "":
        return None
    return require_date(value, field_name)
