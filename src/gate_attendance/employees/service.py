from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..audit.service import AuditService
from ..common.datetime_utils import now_local
from ..common.validators import normalize_plate, require_non_empty
from ..core.constants import EMPLOYEE_ID_PREFIX
from ..core.enums import AuditAction
from ..core.exceptions import ValidationError
from .csv_import import ImportResult, ImportRow, iter_import_rows
from .model import Employee
from .repository import EmployeeRepository


def _new_id() -> str:
    return f"{EMPLOYEE_ID_PREFIX}{uuid.uuid4().hex[:12]}"


class EmployeeService:
    """Use case: maintain the roster (HR)."""

    def __init__(self, employees: EmployeeRepository, audit: Optional[AuditService] = None):
        self._employees = employees
        self._audit = audit

    def list_all(self) -> Sequence[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.name.lower())

    def get(self, id: str) -> Optional[Employee]:
        return self._employees.get_by_id(id)

    def search(self, term: str) -> Sequence[Employee]:
        term = (term or "").strip().lower()
        employees = self.list_all()
        if not term:
            return employees
        return [e for e in employees if term in e.name.lower() or term in e.employee_id.lower()]

    def add_employee(
        self,
        *,
        actor: str,
        name: str,
        employee_id: str,
        email: str = "",
        default_plate_number: str = "",
        now: Optional[datetime] = None,
    ) -> Employee:
        name = require_non_empty(name, "the employee name")
        employee_id = require_non_empty(employee_id, "the employee ID")

        if self._employees.get_by_employee_id(employee_id):
            raise ValidationError("Employee ID already exists")

        employee = Employee(
            id=_new_id(),
            employee_id=employee_id,
            name=name,
            email=(email or "").strip() or None,
            default_plate_number=normalize_plate(default_plate_number),
            created_at=now or now_local(),
        )
        self._employees.add_many([employee])
        if self._audit:
            self._audit.record(actor, AuditAction.EMPLOYEE_ADD, f"{employee.employee_id} {employee.name}")
        return employee

    def import_csv(self, *, actor: str, text: str, now: Optional[datetime] = None) -> ImportResult:
        """Bulk add from CSV text; duplicate identifiers are skipped and counted."""

        now = now or now_local()
        seen = {e.employee_id for e in self._employees.list_all()}
        new: list[Employee] = []
        skipped = 0
        errors: list[str] = []

        for row in iter_import_rows(text):
            if not isinstance(row, ImportRow):
                errors.append(row)
                continue
            if row.employee_id in seen:
                skipped += 1
                continue

            seen.add(row.employee_id)
            new.append(
                Employee(
                    id=_new_id(),
                    employee_id=row.employee_id,
                    name=row.name,
                    email=row.email,
                    default_plate_number=row.plate_number,
                    created_at=now,
                )
            )

        added = self._employees.add_many(new)
        if self._audit and (added or skipped):
            self._audit.record(actor, AuditAction.EMPLOYEE_IMPORT, f"added={added} skipped={skipped}")
        return ImportResult(added=added, skipped=skipped, errors=errors)
