from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.exceptions import ValidationError
from ..model import AttendanceRecord
from .base import ReentryStrategy


class SingleVisitStrategy(ReentryStrategy):
    """One visit per person per day."""

    def reenter(self, record: AttendanceRecord, *, plate_number: Optional[str], now: datetime) -> AttendanceRecord:
        raise ValidationError("Employee already completed attendance for today")
