from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceService
from .audit.kv_audit_repository import KeyValueAuditRepository
from .audit.service import AuditService
from .core.constants import DEFAULT_TOTAL_SPACES
from .employees.kv_employee_repository import KeyValueEmployeeRepository
from .employees.service import EmployeeService
from .ledger.factory import ReentryStrategyFactory
from .ledger.store import LedgerStore
from .reports.service import AttendanceReportService
from .storage.base import StateStorage
from .storage.json_file_storage import JSONFileStorage
from .storage.memory_storage import MemoryStorage
from .users.kv_user_repository import KeyValueUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    storage: StateStorage

    users_repo: KeyValueUserRepository
    employees_repo: KeyValueEmployeeRepository
    audit_repo: KeyValueAuditRepository
    ledger: LedgerStore

    audit_service: AuditService
    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_storage(*, backend: str, data_dir: Optional[str] = None, db_config: Optional[dict] = None, init_db: bool = False) -> StateStorage:
    backend = (backend or "file").lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return JSONFileStorage(Path(data_dir or "data"))
    if backend == "mysql":
        # Imported lazily so file/memory deployments do not need a MySQL server.
        from .database.bootstrap import apply_schema
        from .database.connection import DatabaseConnection, DBConfig
        from .storage.mysql_storage import MySQLStorage

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if init_db:
            apply_schema(conn)
        return MySQLStorage(conn)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    storage: StateStorage,
    total_spaces: int = DEFAULT_TOTAL_SPACES,
    allow_reentry: bool = True,
) -> Container:
    users_repo = KeyValueUserRepository(storage)
    employees_repo = KeyValueEmployeeRepository(storage)
    audit_repo = KeyValueAuditRepository(storage)
    ledger = LedgerStore(storage, default_total_spaces=total_spaces)

    audit_service = AuditService(audit_repo)
    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, audit_service)
    employee_service = EmployeeService(employees_repo, audit_service)
    attendance_service = AttendanceService(
        ledger,
        employees_repo,
        audit_service,
        reentry_factory=ReentryStrategyFactory(allow_reentry=allow_reentry),
    )
    report_service = AttendanceReportService(attendance_service)

    return Container(
        storage=storage,
        users_repo=users_repo,
        employees_repo=employees_repo,
        audit_repo=audit_repo,
        ledger=ledger,
        audit_service=audit_service,
        auth_service=auth_service,
        user_service=user_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
