from __future__ import annotations

from ...common.datetime_utils import minutes_between
from ...ledger.model import AttendanceRecord
from .base import WorkedTimeCalculator


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: time_out - time_in minus time away after a re-entry; open visits count 0."""

    def worked_minutes(self, record: AttendanceRecord) -> int:
        if record.time_out is None:
            return 0
        return max(minutes_between(record.time_in, record.time_out) - record.away_minutes, 0)
