from __future__ import annotations

from dataclasses import replace

import pytest

from gate_attendance.core.enums import Role


@pytest.fixture
def container(app):
    return app.extensions["gate_attendance"]


def test_login_page_renders(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"password" in resp.data.lower()


@pytest.mark.parametrize(
    "username, password, path",
    [
        ("security", "security123", "/security"),
        ("hr", "hr123", "/hr"),
        ("dean", "dean123", "/dean"),
        ("admin", "admin123", "/admin"),
    ],
)
def test_each_role_lands_on_its_dashboard(client, login, username, password, path):
    login(username, password)

    resp = client.get("/dashboard", follow_redirects=True)

    assert resp.status_code == 200
    assert resp.request.path == path


def test_bad_login_stays_on_login_page(client, login):
    resp = client.post("/", data={"username": "admin", "password": "nope"})

    assert resp.status_code == 200
    assert b"Invalid credentials" in resp.data


def test_anonymous_user_is_sent_to_login(client):
    resp = client.get("/security")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_wrong_role_gets_forbidden(client, login):
    login("hr", "hr123")

    assert client.get("/security").status_code == 403
    assert client.get("/admin/users").status_code == 403
    assert client.get("/reports").status_code == 200


def test_security_gate_flow_updates_parking(client, login, container):
    alice = container.employee_service.add_employee(actor="hr", name="Alice", employee_id="E001")
    login("security", "security123")

    resp = client.post(
        "/security/entry",
        data={"employee": alice.id, "has_car": "1", "plate_number": "abc-123"},
        follow_redirects=True,
    )
    assert b"Entry marked for Alice" in resp.data
    assert client.get("/api/parking").get_json() == {
        "totalSpaces": 2,
        "occupiedSpaces": 1,
        "availableSpaces": 1,
        "occupancyPercent": 50,
    }

    today = client.get("/api/attendance/today").get_json()
    assert [r["plateNumber"] for r in today] == ["ABC-123"]

    resp = client.post("/security/entry", data={"employee": alice.id}, follow_redirects=True)
    assert b"already checked in" in resp.data

    client.post("/security/exit", data={"employee": alice.id})
    assert client.get("/api/parking").get_json()["occupiedSpaces"] == 0


def test_guest_flow_and_capacity_form(client, login, container):
    login("security", "security123")

    client.post("/security/guest", data={"guest_name": "Visitor", "has_car": "1", "plate_number": "G-1"})
    guest = container.attendance_service.snapshot().records[0]
    assert guest.is_guest

    resp = client.post("/security/parking", data={"total_spaces": "0"}, follow_redirects=True)
    assert b"currently occupied" in resp.data

    resp = client.post("/security/parking", data={"total_spaces": "abc"}, follow_redirects=True)
    assert b"must be a number" in resp.data

    client.post("/security/guest-exit", data={"record_id": guest.record_id})
    client.post("/security/parking", data={"total_spaces": "5"})
    assert client.get("/api/parking").get_json() == {
        "totalSpaces": 5,
        "occupiedSpaces": 0,
        "availableSpaces": 5,
        "occupancyPercent": 0,
    }


def test_hr_imports_and_corrects_records(client, login, container):
    login("hr", "hr123")

    resp = client.post(
        "/hr/employees/import",
        data={"csv_text": "employeeId,name,email,plateNumber\nE010,Dana,,dn-1\nE011,Eli,,\n"},
        follow_redirects=True,
    )
    assert b"Imported 2 employees" in resp.data
    assert b"Dana" in client.get("/hr/employees?q=dan").data

    dana = container.employee_service.search("Dana")[0]
    record = container.attendance_service.mark_entry(actor="guard", employee_key=dana.id, has_car=True)

    resp = client.post(
        f"/hr/attendance/{record.record_id}/edit",
        data={"time_out": "23:59", "plate_number": "DN-1"},
        follow_redirects=True,
    )
    assert b"Record updated for Dana" in resp.data
    assert container.attendance_service.parking().occupied_spaces == 0

    client.post(f"/hr/attendance/{record.record_id}/delete")
    assert container.attendance_service.get_record(record.record_id) is None


def test_report_csv_export(client, login, container):
    alice = container.employee_service.add_employee(actor="hr", name="Alice", employee_id="E001")
    container.attendance_service.mark_entry(actor="guard", employee_key=alice.id)
    login("dean", "dean123")

    resp = client.get("/reports.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    text = resp.data.decode("utf-8-sig")
    lines = text.strip().splitlines()
    assert lines[0] == "date,name,type,time_in,time_out,plate_number,worked_hours"
    assert "Alice" in lines[1]


def test_admin_creates_user_and_sees_audit(client, login):
    login("admin", "admin123")

    resp = client.post(
        "/admin/users",
        data={"username": "guard2", "password": "secret1", "role": "security"},
        follow_redirects=True,
    )
    assert b"User created" in resp.data

    resp = client.get("/admin/audit")
    assert resp.status_code == 200
    assert b"USER_CREATE" in resp.data

    client.get("/logout")
    login("guard2", "secret1")
    assert client.get("/dashboard", follow_redirects=True).request.path == "/security"


def test_logout_clears_session(client, login):
    login("dean", "dean123")
    client.get("/logout")

    assert client.get("/dean").status_code == 302


def test_hr_sees_employee_history(client, login, container):
    alice = container.employee_service.add_employee(actor="hr", name="Alice", employee_id="E001", default_plate_number="A-1")
    container.attendance_service.mark_entry(actor="guard", employee_key=alice.id, has_car=True)
    login("hr", "hr123")

    resp = client.get(f"/hr/employees/{alice.id}")
    assert resp.status_code == 200
    assert b"A-1" in resp.data

    resp = client.get("/hr/employees/emp-missing", follow_redirects=True)
    assert b"Employee not found" in resp.data


def test_deleted_account_loses_access_on_next_request(client, login, container):
    login("hr", "hr123")
    hr = container.users_repo.get_by_username("hr")
    assert client.get("/hr").status_code == 200

    container.users_repo.delete_by_id(hr.user_id)

    resp = client.get("/hr")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    assert client.get("/api/parking").status_code == 302


def test_deactivated_or_reassigned_account_is_signed_out(client, login, container):
    login("dean", "dean123")
    dean = container.users_repo.get_by_username("dean")
    container.users_repo.update(replace(dean, role=Role.HR))

    assert client.get("/dean").status_code == 302
    assert client.get("/hr").status_code == 302

    container.users_repo.update(replace(dean, role=Role.DEAN, is_active=False))
    resp = client.post("/", data={"username": "dean", "password": "dean123"}, follow_redirects=True)
    assert b"Invalid credentials" in resp.data


def test_audit_page_bounds_the_limit(client, login):
    login("admin", "admin123")

    for limit in ("-5", "0", "999999"):
        resp = client.get(f"/admin/audit?limit={limit}")
        assert resp.status_code == 200
        assert b"LOGIN" in resp.data
