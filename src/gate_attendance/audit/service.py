from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import AUDIT_LOG_LIMIT
from ..core.enums import AuditAction
from .model import AuditEntry
from .repository import AuditRepository


class AuditService:
    """Use case: keep a bounded trail of who changed what."""

    def __init__(self, audit: AuditRepository, *, keep: int = AUDIT_LOG_LIMIT):
        self._audit = audit
        self._keep = int(keep)

    def record(self, actor: str, action: AuditAction, details: str = "", *, now: Optional[datetime] = None) -> AuditEntry:
        entry = AuditEntry(
            entry_id=uuid.uuid4().hex,
            timestamp=now or now_local(),
            actor=actor or "system",
            action=action,
            details=details,
        )
        self._audit.append(entry, keep=self._keep)
        return entry

    def recent(self, limit: int = 100) -> Sequence[AuditEntry]:
        return self._audit.list_recent(int(limit))
