from __future__ import annotations

import logging

from ..common.validators import require_positive
from .model import PayrollSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use cases: read and change the global pay settings.

    Zero or negative hour values are rejected here so the payroll engine never
    has to divide by them. Changes apply to every later payroll query,
    including past months.
    """

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> PayrollSettings:
        return self._settings.get() or PayrollSettings()

    def update(self, *, standard_hours: object = None, slab_hours: object = None) -> PayrollSettings:
        current = self.get()
        updated = PayrollSettings(
            standard_hours=current.standard_hours if standard_hours in (None, "") else require_positive(standard_hours, "standard_hours"),
            slab_hours=current.slab_hours if slab_hours in (None, "") else require_positive(slab_hours, "slab_hours"),
        )
        self._settings.save(updated)
        logger.info("Settings updated: standard_hours=%s slab_hours=%s", updated.standard_hours, updated.slab_hours)
        return updated
