from __future__ import annotations

import copy
import json
import logging
from typing import Any, Iterable

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_column, fetch_value
from .base import StateStorage

logger = logging.getLogger(__name__)


class MySQLStorage(StateStorage):
    """Key-value blobs in the ``app_state`` table (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str, default: Any = None) -> Any:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT state_value FROM app_state WHERE state_key=%s", (key,))
            raw = fetch_value(cur, "state_value")
        if raw is None:
            return copy.deepcopy(default)
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Unreadable state row %r, using default", key, exc_info=True)
            return copy.deepcopy(default)

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_state(state_key, state_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE state_value=VALUES(state_value)
                """,
                (key, payload),
            )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM app_state WHERE state_key=%s", (key,))

    def keys(self) -> Iterable[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT state_key FROM app_state ORDER BY state_key")
            return fetch_column(cur, "state_key")
