from __future__ import annotations

from datetime import datetime, timedelta

from gate_attendance.audit.kv_audit_repository import KeyValueAuditRepository
from gate_attendance.audit.service import AuditService
from gate_attendance.core.enums import AuditAction
from gate_attendance.storage.memory_storage import MemoryStorage


def test_recent_is_newest_first_and_bounded():
    storage = MemoryStorage()
    svc = AuditService(KeyValueAuditRepository(storage), keep=3)
    base = datetime(2026, 2, 2, 8, 0)

    for i in range(5):
        svc.record("guard", AuditAction.ENTRY, f"visit {i}", now=base + timedelta(minutes=i))

    assert [e.details for e in svc.recent(10)] == ["visit 4", "visit 3", "visit 2"]
    assert [e.details for e in svc.recent(1)] == ["visit 4"]
    assert len(storage.get("auditLogs")) == 3


def test_blank_actor_is_recorded_as_system():
    svc = AuditService(KeyValueAuditRepository(MemoryStorage()))

    entry = svc.record("", AuditAction.PARKING_CAPACITY, "total=10")

    assert entry.actor == "system"
    assert svc.recent(1)[0].action == AuditAction.PARKING_CAPACITY


def test_non_positive_limit_returns_nothing():
    svc = AuditService(KeyValueAuditRepository(MemoryStorage()))
    for i in range(5):
        svc.record("guard", AuditAction.EXIT, f"exit {i}")

    assert svc.recent(0) == []
    assert svc.recent(-2) == []
    assert len(svc.recent(2)) == 2
