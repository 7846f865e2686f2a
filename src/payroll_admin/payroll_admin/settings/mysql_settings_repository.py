from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .model import PayrollSettings
from .repository import SettingsRepository

_SINGLETON_ID = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[PayrollSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT standard_hours, slab_hours FROM payroll_settings WHERE settings_id=%s",
                (_SINGLETON_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayrollSettings(
                standard_hours=as_float(r["standard_hours"]),
                slab_hours=as_float(r["slab_hours"]),
            )

    def save(self, settings: PayrollSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_settings(settings_id, standard_hours, slab_hours)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE standard_hours=VALUES(standard_hours), slab_hours=VALUES(slab_hours)
                """,
                (_SINGLETON_ID, settings.standard_hours, settings.slab_hours),
            )
