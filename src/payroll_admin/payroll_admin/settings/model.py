from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SLAB_HOURS, DEFAULT_STANDARD_HOURS


@dataclass(frozen=True)
class PayrollSettings:
    """Global pay settings.

    standard_hours: hours in a full day, denominator of the normal hourly rate.
    slab_hours: denominator of the overtime (slab) hourly rate.
    """

    standard_hours: float = DEFAULT_STANDARD_HOURS
    slab_hours: float = DEFAULT_SLAB_HOURS

    def to_dict(self) -> dict:
        return {"standard_hours": self.standard_hours, "slab_hours": self.slab_hours}
