from __future__ import annotations

from typing import Sequence

from ..core.constants import KEY_AUDIT
from ..storage.base import StateStorage
from ..storage.codec import audit_from_dict, audit_to_dict
from .model import AuditEntry
from .repository import AuditRepository


class KeyValueAuditRepository(AuditRepository):
    def __init__(self, storage: StateStorage):
        self._storage = storage

    def append(self, entry: AuditEntry, *, keep: int) -> None:
        raw = self._storage.get(KEY_AUDIT, []) or []
        raw.append(audit_to_dict(entry))
        self._storage.set(KEY_AUDIT, raw[-keep:] if keep > 0 else raw)

    def list_recent(self, limit: int) -> Sequence[AuditEntry]:
        if limit <= 0:
            return []
        raw = self._storage.get(KEY_AUDIT, []) or []
        return [audit_from_dict(d) for d in reversed(raw[-limit:])]
