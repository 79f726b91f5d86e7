from __future__ import annotations

import importlib
from datetime import timedelta
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container, build_storage
from .core.constants import DEFAULT_SESSION_DAYS, DEFAULT_TOTAL_SPACES
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .users.controller import register as register_users

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "STORAGE_BACKEND",
    "DATA_DIR",
    "DB_CONFIG",
    "TOTAL_PARKING_SPACES",
    "ALLOW_REENTRY",
    "SESSION_DAYS",
    "AUTO_INIT_DB",
    "AUTO_SEED_USERS",
)


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]
    app.permanent_session_lifetime = timedelta(days=int(app.config.get("SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    storage = app.config.get("STORAGE") or build_storage(
        backend=app.config.get("STORAGE_BACKEND", "file"),
        data_dir=app.config.get("DATA_DIR"),
        db_config=app.config.get("DB_CONFIG"),
        init_db=bool(app.config.get("AUTO_INIT_DB", False)),
    )
    container = build_container(
        storage=storage,
        total_spaces=int(app.config.get("TOTAL_PARKING_SPACES", DEFAULT_TOTAL_SPACES)),
        allow_reentry=bool(app.config.get("ALLOW_REENTRY", True)),
    )
    app.extensions["gate_attendance"] = container

    if app.config.get("AUTO_SEED_USERS") and container.user_service.ensure_seed_users():
        app.logger.info("Seeded demo accounts: %s", ", ".join(u.username for u in container.user_service.list_users()))

    app.logger.info(
        "gate-attendance started settings=%s storage=%s reentry=%s",
        settings_module,
        app.config.get("STORAGE_BACKEND"),
        app.config.get("ALLOW_REENTRY"),
    )

    register_users(app, container)
    register_attendance(app, container)
    register_employees(app, container)
    register_reports(app, container)

    return app
