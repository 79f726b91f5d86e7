from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AuditAction


@dataclass(frozen=True)
class AuditEntry:
    entry_id: str
    timestamp: datetime
    actor: str
    action: AuditAction
    details: str = ""
