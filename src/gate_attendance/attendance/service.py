from __future__ import annotations

from datetime import date, datetime, time
from functools import partial
from typing import Optional, Sequence

from ..audit.service import AuditService
from ..common.datetime_utils import format_clock, now_local
from ..common.validators import normalize_plate
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AuditAction
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..ledger import transitions
from ..ledger.factory import ReentryStrategyFactory
from ..ledger.model import AttendanceRecord, LedgerState, ParkingConfig
from ..ledger.store import LedgerStore


class AttendanceService:
    """Use cases at the gate: entries, exits, guests, corrections.

    Roster lookups and plate defaults happen here; the state change itself is
    a pure ledger transition applied through ``LedgerStore``.
    """

    def __init__(
        self,
        ledger: LedgerStore,
        employees: EmployeeRepository,
        audit: Optional[AuditService] = None,
        *,
        reentry_factory: Optional[ReentryStrategyFactory] = None,
    ):
        self._ledger = ledger
        self._employees = employees
        self._audit = audit
        self._reentry = (reentry_factory or ReentryStrategyFactory()).create()

    def _log(self, actor: str, action: AuditAction, details: str) -> None:
        if self._audit:
            self._audit.record(actor, action, details)

    @staticmethod
    def resolve_plate(*, has_car: bool, plate_number: str, default_plate: Optional[str], override_plate: bool) -> Optional[str]:
        """Plate for an arrival: the roster default unless the guard overrides it."""

        if not has_car:
            return None
        if default_plate and not override_plate:
            return default_plate
        return normalize_plate(plate_number)

    def mark_entry(
        self,
        *,
        actor: str,
        employee_key: str,
        has_car: bool = False,
        plate_number: str = "",
        override_plate: bool = False,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        if not employee_key:
            raise ValidationError("Please select an employee")
        employee = self._employees.get_by_id(employee_key)
        if not employee:
            raise ValidationError("Employee not found")

        plate = self.resolve_plate(
            has_car=has_car,
            plate_number=plate_number,
            default_plate=employee.default_plate_number,
            override_plate=override_plate,
        )
        if has_car and not plate:
            raise ValidationError("Please enter the plate number")

        record = self._ledger.apply(
            partial(
                transitions.record_entry,
                person_id=employee.id,
                person_name=employee.name,
                plate_number=plate,
                now=now or now_local(),
                reentry=self._reentry,
            )
        )
        self._log(actor, AuditAction.ENTRY, f"{employee.name} plate={record.plate_number or '-'}")
        return record

    def mark_exit(self, *, actor: str, employee_key: str, now: Optional[datetime] = None) -> AttendanceRecord:
        if not employee_key:
            raise ValidationError("Please select an employee")
        employee = self._employees.get_by_id(employee_key)
        if not employee:
            raise ValidationError("Employee not found")

        record = self._ledger.apply(partial(transitions.record_exit, person_id=employee.id, now=now or now_local()))
        self._log(actor, AuditAction.EXIT, employee.name)
        return record

    def register_guest(
        self,
        *,
        actor: str,
        guest_name: str,
        has_car: bool = False,
        plate_number: str = "",
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        plate = normalize_plate(plate_number) if has_car else None
        if has_car and not plate:
            raise ValidationError("Please enter the plate number")

        record = self._ledger.apply(
            partial(transitions.guest_entry, guest_name=guest_name, plate_number=plate, now=now or now_local())
        )
        self._log(actor, AuditAction.GUEST_ENTRY, f"{record.person_name} plate={record.plate_number or '-'}")
        return record

    def mark_guest_exit(self, *, actor: str, record_id: str, now: Optional[datetime] = None) -> AttendanceRecord:
        record = self._ledger.apply(partial(transitions.guest_exit, record_id=record_id, now=now or now_local()))
        self._log(actor, AuditAction.GUEST_EXIT, record.person_name)
        return record

    def delete_record(self, *, actor: str, record_id: str) -> AttendanceRecord:
        record = self._ledger.apply(partial(transitions.delete_record, record_id=record_id))
        self._log(actor, AuditAction.RECORD_DELETE, f"{record.person_name} {record.work_date:%Y-%m-%d}")
        return record

    def edit_record(
        self,
        *,
        actor: str,
        record_id: str,
        time_out: Optional[time],
        plate_number: Optional[str],
    ) -> AttendanceRecord:
        record = self._ledger.apply(
            partial(transitions.edit_record, record_id=record_id, time_out=time_out, plate_number=plate_number)
        )
        self._log(
            actor,
            AuditAction.RECORD_EDIT,
            f"{record.person_name} out={format_clock(record.time_out)} plate={record.plate_number or '-'}",
        )
        return record

    def set_capacity(self, *, actor: str, total_spaces: int) -> ParkingConfig:
        state = self._ledger.set_capacity(int(total_spaces))
        self._log(actor, AuditAction.PARKING_CAPACITY, f"total={state.total_spaces}")
        return state.parking

    # ----- read side -----

    def snapshot(self) -> LedgerState:
        return self._ledger.load()

    def parking(self) -> ParkingConfig:
        return self._ledger.load().parking

    def get_record(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._ledger.load().get(record_id)

    def today_records(self, today: date) -> Sequence[AttendanceRecord]:
        records = self._ledger.load().for_date(today)
        return sorted(records, key=lambda r: r.time_in, reverse=True)

    def active_guests(self, today: date) -> Sequence[AttendanceRecord]:
        return [r for r in self.today_records(today) if r.is_guest and r.is_open]

    def records_between(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        records = [r for r in self._ledger.load().records if start <= r.work_date <= end]
        return sorted(records, key=lambda r: (r.work_date, r.time_in), reverse=True)

    def on_site_count(self, today: date) -> int:
        return len(self._ledger.load().open_records_for(today))

    def history(self, person_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        records = [r for r in self._ledger.load().records if r.person_id == person_id]
        records.sort(key=lambda r: (r.work_date, r.time_in), reverse=True)
        return records[:limit]
