from __future__ import annotations

import math
from typing import Optional


def to_number(value: object, *, default: Optional[float] = 0.0) -> Optional[float]:
    """Lenient numeric coercion for values coming out of the record store.

    Accepts ints, floats, Decimals and numeric strings. Anything else (None,
    empty or non-numeric text, NaN, infinities, booleans) yields ``default``.
    """

    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer currency unit, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
