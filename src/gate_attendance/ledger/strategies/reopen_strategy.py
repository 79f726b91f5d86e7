from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ...common.datetime_utils import minutes_between
from ..model import AttendanceRecord
from .base import ReentryStrategy


class ReopenStrategy(ReentryStrategy):
    """Re-entry reopens the same record: time_out cleared, plate taken from this arrival.

    The first time_in of the day is kept; the gap since the last exit is added
    to ``away_minutes`` so worked time only counts time on site.
    """

    def reenter(self, record: AttendanceRecord, *, plate_number: Optional[str], now: datetime) -> AttendanceRecord:
        away = record.away_minutes
        if record.time_out is not None:
            away += minutes_between(record.time_out, now.time())
        return replace(record, time_out=None, plate_number=plate_number, away_minutes=away)
