"""Conversion between domain objects and the persisted JSON layout.

Persisted blobs use camelCase keys (``employeeId``, ``timeIn``, ``plateNumber``
...). Readers are lenient: missing optional keys fall back to defaults.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..audit.model import AuditEntry
from ..common.datetime_utils import parse_clock, parse_iso_date
from ..core.enums import AuditAction, Role
from ..employees.model import Employee
from ..ledger.model import AttendanceRecord, ParkingConfig
from ..users.model import User


def _dt_to_str(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat(timespec="seconds") if value else None


def _str_to_dt(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def record_to_dict(r: AttendanceRecord) -> dict[str, Any]:
    return {
        "id": r.record_id,
        "employeeId": r.person_id,
        "employeeName": r.person_name,
        "date": r.work_date.strftime("%Y-%m-%d"),
        "timeIn": r.time_in.strftime("%H:%M:%S"),
        "timeOut": r.time_out.strftime("%H:%M:%S") if r.time_out else None,
        "plateNumber": r.plate_number,
        "isGuest": r.is_guest,
        "awayMinutes": r.away_minutes,
    }


def record_from_dict(d: dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(d["id"]),
        person_id=str(d["employeeId"]),
        person_name=str(d.get("employeeName") or ""),
        work_date=parse_iso_date(d["date"]),
        time_in=parse_clock(d["timeIn"]),
        time_out=parse_clock(d["timeOut"]) if d.get("timeOut") else None,
        plate_number=d.get("plateNumber") or None,
        is_guest=bool(d.get("isGuest", False)),
        away_minutes=int(d.get("awayMinutes") or 0),
    )


def parking_to_dict(p: ParkingConfig) -> dict[str, int]:
    return {"totalSpaces": p.total_spaces, "occupiedSpaces": p.occupied_spaces}


def parking_from_dict(d: dict[str, Any], *, default_total: int) -> ParkingConfig:
    return ParkingConfig(
        total_spaces=int(d.get("totalSpaces", default_total)),
        occupied_spaces=int(d.get("occupiedSpaces", 0)),
    )


def user_to_dict(u: User) -> dict[str, Any]:
    return {
        "id": u.user_id,
        "username": u.username,
        "passwordHash": u.password_hash,
        "role": u.role.value,
        "isActive": u.is_active,
    }


def user_from_dict(d: dict[str, Any]) -> User:
    return User(
        user_id=str(d["id"]),
        username=str(d["username"]),
        password_hash=str(d.get("passwordHash") or ""),
        role=Role(d["role"]),
        is_active=bool(d.get("isActive", True)),
    )


def employee_to_dict(e: Employee) -> dict[str, Any]:
    return {
        "id": e.id,
        "employeeId": e.employee_id,
        "name": e.name,
        "email": e.email,
        "defaultPlateNumber": e.default_plate_number,
        "createdAt": _dt_to_str(e.created_at),
    }


def employee_from_dict(d: dict[str, Any]) -> Employee:
    return Employee(
        id=str(d["id"]),
        employee_id=str(d["employeeId"]),
        name=str(d["name"]),
        email=d.get("email") or None,
        default_plate_number=d.get("defaultPlateNumber") or None,
        created_at=_str_to_dt(d.get("createdAt")),
    )


def audit_to_dict(a: AuditEntry) -> dict[str, Any]:
    return {
        "id": a.entry_id,
        "timestamp": _dt_to_str(a.timestamp),
        "actor": a.actor,
        "action": a.action.value,
        "details": a.details,
    }


def audit_from_dict(d: dict[str, Any]) -> AuditEntry:
    return AuditEntry(
        entry_id=str(d["id"]),
        timestamp=_str_to_dt(d["timestamp"]),
        actor=str(d.get("actor") or ""),
        action=AuditAction(d["action"]),
        details=str(d.get("details") or ""),
    )
