from __future__ import annotations

from abc import ABC, abstractmethod

from ...ledger.model import AttendanceRecord


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for time on site)."""

    @abstractmethod
    def worked_minutes(self, record: AttendanceRecord) -> int:
        raise NotImplementedError
