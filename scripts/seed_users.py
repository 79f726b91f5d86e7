"""Create the demo accounts (admin, security, hr, dean) if no user list exists yet."""
from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module
from gate_attendance.container import build_container, build_storage


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        backend=settings.STORAGE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
    )
    container = build_container(storage=storage, total_spaces=settings.TOTAL_PARKING_SPACES)

    if container.user_service.ensure_seed_users():
        print("OK: Seeded demo users")
    else:
        print("Users already exist, nothing to do")


if __name__ == "__main__":
    main()
