from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional, Tuple


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one visit of a person on one calendar day.

    ``time_out`` stays None while the person is on site (an "open" record).
    A plated open record holds one parking space.
    """

    record_id: str
    person_id: str
    person_name: str
    work_date: date
    time_in: time
    time_out: Optional[time] = None
    plate_number: Optional[str] = None
    is_guest: bool = False
    # minutes spent off site between an exit and a same-day re-entry
    away_minutes: int = 0

    @property
    def is_open(self) -> bool:
        return self.time_out is None

    @property
    def is_plated(self) -> bool:
        return bool(self.plate_number)

    @property
    def occupies_space(self) -> bool:
        return self.is_open and self.is_plated


@dataclass(frozen=True)
class ParkingConfig:
    total_spaces: int
    occupied_spaces: int

    @property
    def available_spaces(self) -> int:
        return max(self.total_spaces - self.occupied_spaces, 0)

    @property
    def occupancy_percent(self) -> int:
        if self.total_spaces <= 0:
            return 100 if self.occupied_spaces else 0
        return round(self.occupied_spaces * 100 / self.total_spaces)


@dataclass(frozen=True)
class LedgerState:
    """Immutable snapshot of all attendance records plus lot capacity.

    Occupied spaces are always derived from the records, never stored.
    """

    records: Tuple[AttendanceRecord, ...] = field(default_factory=tuple)
    total_spaces: int = 0

    @property
    def occupied_spaces(self) -> int:
        return sum(1 for r in self.records if r.occupies_space)

    @property
    def available_spaces(self) -> int:
        return max(self.total_spaces - self.occupied_spaces, 0)

    @property
    def is_full(self) -> bool:
        return self.occupied_spaces >= self.total_spaces

    @property
    def parking(self) -> ParkingConfig:
        return ParkingConfig(total_spaces=self.total_spaces, occupied_spaces=self.occupied_spaces)

    def get(self, record_id: str) -> Optional[AttendanceRecord]:
        for r in self.records:
            if r.record_id == record_id:
                return r
        return None

    def for_date(self, work_date: date) -> Tuple[AttendanceRecord, ...]:
        return tuple(r for r in self.records if r.work_date == work_date)

    def open_records_for(self, work_date: date) -> Tuple[AttendanceRecord, ...]:
        return tuple(r for r in self.records if r.work_date == work_date and r.is_open)

    def find_employee_record(self, person_id: str, work_date: date) -> Optional[AttendanceRecord]:
        """Today's non-guest record for a person, preferring the open one."""

        found = None
        for r in self.records:
            if r.is_guest or r.person_id != person_id or r.work_date != work_date:
                continue
            if r.is_open:
                return r
            found = found or r
        return found
