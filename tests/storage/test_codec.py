from __future__ import annotations

from datetime import date, time

from gate_attendance.ledger.model import AttendanceRecord
from gate_attendance.storage.codec import (
    employee_from_dict,
    parking_from_dict,
    record_from_dict,
    record_to_dict,
    user_from_dict,
)


def test_record_uses_camel_case_layout():
    record = AttendanceRecord(
        record_id="guest-1",
        person_id="guest-1",
        person_name="Visitor",
        work_date=date(2026, 2, 2),
        time_in=time(9, 5, 0),
        plate_number="GST-1",
        is_guest=True,
    )

    assert record_to_dict(record) == {
        "id": "guest-1",
        "employeeId": "guest-1",
        "employeeName": "Visitor",
        "date": "2026-02-02",
        "timeIn": "09:05:00",
        "timeOut": None,
        "plateNumber": "GST-1",
        "isGuest": True,
        "awayMinutes": 0,
    }


def test_record_reader_is_lenient_about_optional_keys():
    record = record_from_dict(
        {"id": "r1", "employeeId": "emp-1", "employeeName": "Alice", "date": "2026-02-02", "timeIn": "08:00"}
    )

    assert record.time_in == time(8, 0)
    assert record.time_out is None
    assert record.plate_number is None
    assert record.is_guest is False


def test_empty_plate_reads_as_no_car():
    record = record_from_dict(
        {"id": "r1", "employeeId": "e", "date": "2026-02-02", "timeIn": "08:00:00", "timeOut": "", "plateNumber": ""}
    )

    assert not record.is_plated
    assert record.is_open


def test_parking_defaults_when_blob_missing():
    parking = parking_from_dict({}, default_total=50)

    assert parking.total_spaces == 50
    assert parking.occupied_spaces == 0


def test_user_and_employee_readers():
    user = user_from_dict({"id": "u1", "username": "hr", "passwordHash": "x", "role": "hr"})
    employee = employee_from_dict({"id": "emp-1", "employeeId": "E001", "name": "Alice"})

    assert user.role.value == "hr"
    assert user.is_active
    assert employee.default_plate_number is None
    assert employee.created_at is None
