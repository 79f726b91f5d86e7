"""Create the MySQL database and the app_state table.

Only needed when STORAGE_BACKEND=mysql.
"""
from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module
from gate_attendance.database.bootstrap import apply_schema, list_tables
from gate_attendance.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection.get_instance(config)

    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
