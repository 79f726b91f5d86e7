from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..model import AttendanceRecord


class ReentryStrategy(ABC):
    """Strategy Pattern: decide what an entry does when today's visit is already closed."""

    @abstractmethod
    def reenter(self, record: AttendanceRecord, *, plate_number: Optional[str], now: datetime) -> AttendanceRecord:
        """Return the record to store, or raise ValidationError to reject."""

        raise NotImplementedError
