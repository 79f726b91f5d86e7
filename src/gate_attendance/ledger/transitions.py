"""Pure state transitions of the attendance/parking ledger.

Every function takes the current ``LedgerState`` plus input and returns a
``LedgerResult`` holding the next state and the affected record. Rejections
raise ``ValidationError``; the input state is never modified.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, time
from typing import Callable, Optional

from ..common.validators import normalize_plate, require_non_empty
from ..core.constants import GUEST_ID_PREFIX
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, LedgerState
from .strategies.base import ReentryStrategy
from .strategies.reopen_strategy import ReopenStrategy

NO_PARKING = "No parking spaces available"


@dataclass(frozen=True)
class LedgerResult:
    state: LedgerState
    record: AttendanceRecord


def _new_suffix() -> str:
    return uuid.uuid4().hex[:12]


def _replace_record(state: LedgerState, record: AttendanceRecord) -> LedgerState:
    records = tuple(record if r.record_id == record.record_id else r for r in state.records)
    return replace(state, records=records)


def _append_record(state: LedgerState, record: AttendanceRecord) -> LedgerState:
    return replace(state, records=state.records + (record,))


def _require_space(state: LedgerState) -> None:
    if state.is_full:
        raise ValidationError(NO_PARKING)


def record_entry(
    state: LedgerState,
    *,
    person_id: str,
    person_name: str,
    plate_number: Optional[str],
    now: datetime,
    reentry: Optional[ReentryStrategy] = None,
    new_suffix: Callable[[], str] = _new_suffix,
) -> LedgerResult:
    plate = normalize_plate(plate_number)
    today = now.date()

    existing = state.find_employee_record(person_id, today)
    if existing and existing.is_open:
        raise ValidationError("Employee already checked in today")

    if existing:
        record = (reentry or ReopenStrategy()).reenter(existing, plate_number=plate, now=now)
        if plate:
            _require_space(state)
        return LedgerResult(state=_replace_record(state, record), record=record)

    if plate:
        _require_space(state)

    record = AttendanceRecord(
        record_id=f"{person_id}-{new_suffix()}",
        person_id=person_id,
        person_name=person_name,
        work_date=today,
        time_in=now.time(),
        time_out=None,
        plate_number=plate,
        is_guest=False,
    )
    return LedgerResult(state=_append_record(state, record), record=record)


def record_exit(state: LedgerState, *, person_id: str, now: datetime) -> LedgerResult:
    existing = state.find_employee_record(person_id, now.date())
    if not existing or not existing.is_open:
        raise ValidationError("No active entry found for this employee")

    record = replace(existing, time_out=now.time())
    return LedgerResult(state=_replace_record(state, record), record=record)


def guest_entry(
    state: LedgerState,
    *,
    guest_name: str,
    plate_number: Optional[str],
    now: datetime,
    new_suffix: Callable[[], str] = _new_suffix,
) -> LedgerResult:
    name = require_non_empty(guest_name, "guest name")
    plate = normalize_plate(plate_number)
    if plate:
        _require_space(state)

    guest_id = f"{GUEST_ID_PREFIX}{new_suffix()}"
    record = AttendanceRecord(
        record_id=guest_id,
        person_id=guest_id,
        person_name=name,
        work_date=now.date(),
        time_in=now.time(),
        time_out=None,
        plate_number=plate,
        is_guest=True,
    )
    return LedgerResult(state=_append_record(state, record), record=record)


def guest_exit(state: LedgerState, *, record_id: str, now: datetime) -> LedgerResult:
    if not record_id:
        raise ValidationError("Please select a guest")

    existing = state.get(record_id)
    if not existing:
        raise ValidationError("Guest record not found")
    if not existing.is_guest:
        raise ValidationError("Selected record is not a guest visit")
    if not existing.is_open:
        raise ValidationError("Guest has already checked out")

    record = replace(existing, time_out=now.time())
    return LedgerResult(state=_replace_record(state, record), record=record)


def delete_record(state: LedgerState, *, record_id: str) -> LedgerResult:
    existing = state.get(record_id)
    if not existing:
        raise ValidationError("Attendance record not found")

    records = tuple(r for r in state.records if r.record_id != record_id)
    return LedgerResult(state=replace(state, records=records), record=existing)


def edit_record(
    state: LedgerState,
    *,
    record_id: str,
    time_out: Optional[time],
    plate_number: Optional[str],
) -> LedgerResult:
    """Manual correction of time_out and plate.

    Occupancy is derived, so only the capacity and single-open-visit rules
    need checking when the edit turns the record back into an open one.
    """

    existing = state.get(record_id)
    if not existing:
        raise ValidationError("Attendance record not found")

    if time_out is not None and time_out < existing.time_in:
        raise ValidationError("Time out cannot be earlier than time in")

    record = replace(existing, time_out=time_out, plate_number=normalize_plate(plate_number))

    if record.is_open and not existing.is_open and not record.is_guest:
        other = state.find_employee_record(record.person_id, record.work_date)
        if other and other.is_open and other.record_id != record.record_id:
            raise ValidationError("Employee already checked in today")

    if record.occupies_space and not existing.occupies_space:
        _require_space(state)

    return LedgerResult(state=_replace_record(state, record), record=record)


def set_capacity(state: LedgerState, *, total_spaces: int) -> LedgerState:
    if total_spaces < 0:
        raise ValidationError("Total parking spaces cannot be negative")
    if total_spaces < state.occupied_spaces:
        raise ValidationError(
            f"Total parking spaces cannot be lower than the {state.occupied_spaces} spaces currently occupied"
        )
    return replace(state, total_spaces=int(total_spaces))
