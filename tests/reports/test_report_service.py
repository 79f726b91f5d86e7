from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta

import pytest

from gate_attendance.core.exceptions import ValidationError
from gate_attendance.ledger.model import AttendanceRecord
from gate_attendance.reports.calculator.standard_calculator import StandardWorkedTimeCalculator


@pytest.fixture
def day(container, fixed_now):
    emp = container.employee_service
    att = container.attendance_service
    alice = emp.add_employee(actor="hr", name="Alice", employee_id="E001", default_plate_number="A-1")
    bob = emp.add_employee(actor="hr", name="Bob", employee_id="E002")

    start = fixed_now.replace(hour=8, minute=0)
    att.mark_entry(actor="guard", employee_key=alice.id, has_car=True, now=start)
    att.mark_exit(actor="guard", employee_key=alice.id, now=start + timedelta(hours=8, minutes=30))
    att.mark_entry(actor="guard", employee_key=bob.id, now=start + timedelta(hours=1))
    att.register_guest(actor="guard", guest_name="Visitor", has_car=True, plate_number="G-1", now=start)
    return fixed_now.date()


def test_report_rows_and_summary(container, day):
    data = container.report_service.build_report(start=day, end=day)

    by_name = {r["name"]: r for r in data.rows}
    assert set(by_name) == {"Alice", "Bob", "Visitor"}
    assert by_name["Alice"]["worked_hours"] == "08:30"
    assert by_name["Alice"]["plate_number"] == "A-1"
    assert by_name["Bob"]["time_out"] == "-"
    assert by_name["Bob"]["worked_hours"] == "00:00"
    assert by_name["Visitor"]["type"] == "Guest"

    assert [s["name"] for s in data.summary] == ["Alice", "Bob"]
    assert data.summary[0]["total_hours"] == "08:30"
    assert data.summary[0]["days_present"] == 1


def test_report_can_exclude_guests(container, day):
    data = container.report_service.build_report(start=day, end=day, include_guests=False)

    assert all(r["type"] == "Employee" for r in data.rows)
    assert len(data.rows) == 2


def test_report_rejects_inverted_range(container):
    with pytest.raises(ValidationError, match="End date"):
        container.report_service.build_report(start=date(2026, 2, 3), end=date(2026, 2, 2))


def test_dashboard_stats(container, day):
    stats = container.report_service.dashboard_stats(day)

    assert stats["present_today"] == 2
    assert stats["on_site"] == 2
    assert stats["guests_today"] == 1
    assert stats["guests_on_site"] == 1
    assert stats["vehicles_today"] == 2
    assert (stats["total_spaces"], stats["occupied_spaces"], stats["available_spaces"]) == (2, 1, 1)
    assert stats["occupancy_percent"] == 50


def test_standard_calculator_handles_open_and_closed_records():
    calc = StandardWorkedTimeCalculator()
    base = datetime(2026, 2, 2, 8, 0)
    rec = AttendanceRecord(
        record_id="r", person_id="p", person_name="P", work_date=base.date(), time_in=base.time()
    )

    assert calc.worked_minutes(rec) == 0
    closed = replace(rec, time_out=(base + timedelta(minutes=95)).time())
    assert calc.worked_minutes(closed) == 95


def test_worked_hours_exclude_time_away_after_reentry(container, fixed_now):
    att = container.attendance_service
    dana = container.employee_service.add_employee(actor="hr", name="Dana", employee_id="E009")
    start = fixed_now.replace(hour=8, minute=0)

    att.mark_entry(actor="guard", employee_key=dana.id, now=start)
    att.mark_exit(actor="guard", employee_key=dana.id, now=start.replace(hour=12))
    att.mark_entry(actor="guard", employee_key=dana.id, now=start.replace(hour=13))
    att.mark_exit(actor="guard", employee_key=dana.id, now=start.replace(hour=17))

    data = container.report_service.build_report(start=start.date(), end=start.date())

    assert [r["worked_hours"] for r in data.rows] == ["08:00"]
    assert data.summary[0]["total_minutes"] == 480
    assert container.storage.get("attendanceRecords")[0]["awayMinutes"] == 60
