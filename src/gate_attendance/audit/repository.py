from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditEntry


class AuditRepository(Protocol):
    def append(self, entry: AuditEntry, *, keep: int) -> None:
        """Append an entry, dropping the oldest beyond ``keep``."""

        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AuditEntry]:
        raise NotImplementedError
