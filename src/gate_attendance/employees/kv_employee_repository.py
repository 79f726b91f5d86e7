from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import KEY_EMPLOYEES
from ..storage.base import StateStorage
from ..storage.codec import employee_from_dict, employee_to_dict
from .model import Employee
from .repository import EmployeeRepository


class KeyValueEmployeeRepository(EmployeeRepository):
    def __init__(self, storage: StateStorage):
        self._storage = storage

    def _raw(self) -> list[dict]:
        return self._storage.get(KEY_EMPLOYEES, []) or []

    def list_all(self) -> Sequence[Employee]:
        return [employee_from_dict(d) for d in self._raw()]

    def get_by_id(self, id: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.id == id), None)

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.employee_id == employee_id), None)

    def add_many(self, employees: Iterable[Employee]) -> int:
        new = [employee_to_dict(e) for e in employees]
        if new:
            self._storage.set(KEY_EMPLOYEES, self._raw() + new)
        return len(new)
