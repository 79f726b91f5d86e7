from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Tuple[Any, Any]]:
    """Short-lived connection + dict cursor; commits on success, rolls back on error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_value(cur, column: str) -> Optional[Any]:
    """Single column of the first row, or None when the query matched nothing."""
    row = cur.fetchone()
    return row[column] if row else None


def fetch_column(cur, column: str) -> List[Any]:
    return [row[column] for row in (cur.fetchall() or [])]
