from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "payroll_db"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Settings DB_CONFIG -> DBConfig. Values from the environment arrive as strings."""

        defaults = cls()
        return cls(
            host=str(db_config.get("host") or defaults.host),
            port=int(db_config.get("port") or defaults.port),
            user=str(db_config.get("user") or defaults.user),
            password=str(db_config.get("password") or ""),
            database=str(db_config.get("database") or defaults.database),
        )

    def connect_params(self, *, with_database: bool = True) -> dict:
        # Server-level connections (CREATE DATABASE) must not name the database yet.
        params = {"host": self.host, "port": self.port, "user": self.user, "password": self.password}
        if with_database:
            params["database"] = self.database
        return params


class DatabaseConnection:
    """Connection factory shared by the MySQL repositories.

    One short-lived connection per operation; ``db_cursor`` opens and closes it.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        return mysql.connector.connect(use_pure=True, **self._config.connect_params(with_database=with_database))
