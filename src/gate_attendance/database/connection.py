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
    database: str = "gate_attendance"

    @classmethod
    def from_dict(cls, raw: dict) -> "DBConfig":
        """Build from the DB_CONFIG setting; missing keys keep their defaults."""
        defaults = cls()
        return cls(
            host=str(raw.get("host") or defaults.host),
            port=int(raw.get("port") or defaults.port),
            user=str(raw.get("user") or defaults.user),
            password=str(raw.get("password", defaults.password)),
            database=str(raw.get("database") or defaults.database),
        )


class DatabaseConnection:
    """Process-wide factory for short-lived MySQL connections.

    One connection per storage call; the state blobs are small and calls are rare.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = cls(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self, *, with_database: bool = True):
        params = {
            "host": self._config.host,
            "port": self._config.port,
            "user": self._config.user,
            "password": self._config.password,
            # guest and employee names are stored as-is inside JSON blobs
            "charset": "utf8mb4",
        }
        if with_database:
            params["database"] = self._config.database
        return mysql.connector.connect(**params)
