from __future__ import annotations

import pytest

from gate_attendance.core.enums import AuditAction
from gate_attendance.core.exceptions import ValidationError
from gate_attendance.employees.csv_import import ImportRow, iter_import_rows


def test_add_employee_normalizes_fields(container, fixed_now):
    emp = container.employee_service.add_employee(
        actor="hr",
        name="  Alice ",
        employee_id=" E001 ",
        email="  ",
        default_plate_number=" abc-1 ",
        now=fixed_now,
    )

    assert (emp.name, emp.employee_id, emp.email, emp.default_plate_number) == ("Alice", "E001", None, "ABC-1")
    assert emp.id.startswith("emp-")
    assert container.employee_service.get(emp.id) == emp
    assert container.storage.get("employees")[0]["employeeId"] == "E001"


def test_add_employee_rejects_duplicates_and_blanks(container):
    svc = container.employee_service
    svc.add_employee(actor="hr", name="Alice", employee_id="E001")

    with pytest.raises(ValidationError, match="already exists"):
        svc.add_employee(actor="hr", name="Other", employee_id="E001")
    with pytest.raises(ValidationError, match="employee name"):
        svc.add_employee(actor="hr", name=" ", employee_id="E009")
    with pytest.raises(ValidationError, match="employee ID"):
        svc.add_employee(actor="hr", name="Zed", employee_id="")


def test_search_matches_name_or_identifier(container):
    svc = container.employee_service
    svc.add_employee(actor="hr", name="Charlie", employee_id="E003")
    svc.add_employee(actor="hr", name="alice", employee_id="E001")
    svc.add_employee(actor="hr", name="Bob", employee_id="X-77")

    assert [e.name for e in svc.list_all()] == ["alice", "Bob", "Charlie"]
    assert [e.name for e in svc.search("ALI")] == ["alice"]
    assert [e.name for e in svc.search("x-7")] == ["Bob"]
    assert len(svc.search("")) == 3


def test_import_csv_adds_skips_and_reports(container, fixed_now):
    svc = container.employee_service
    svc.add_employee(actor="hr", name="Existing", employee_id="E001")

    text = (
        "employeeId,name,email,plateNumber\n"
        "E001,Dup,,\n"
        "E002,Bob,bob@example.com,xyz-9\n"
        "E002,Bob Again,,\n"
        ",Nameless,,\n"
        "\n"
        "E003,Carol\n"
    )
    result = svc.import_csv(actor="hr", text=text, now=fixed_now)

    assert (result.added, result.skipped) == (2, 2)
    assert result.errors == ["Line 5: employee ID and name are required"]

    by_id = {e.employee_id: e for e in svc.list_all()}
    assert by_id["E002"].default_plate_number == "XYZ-9"
    assert by_id["E002"].email == "bob@example.com"
    assert by_id["E003"].email is None
    assert container.audit_service.recent(1)[0].action == AuditAction.EMPLOYEE_IMPORT


def test_import_rows_skip_bom_header():
    rows = list(iter_import_rows("\ufeffid,name\nE1,Ann\n"))

    assert rows == [ImportRow(line_no=2, employee_id="E1", name="Ann", email=None, plate_number=None)]


def test_import_empty_text_adds_nothing(container):
    result = container.employee_service.import_csv(actor="hr", text="")

    assert (result.added, result.skipped, result.errors) == (0, 0, [])
    assert container.audit_service.recent(5) == []
