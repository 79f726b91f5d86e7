from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles gating which dashboard a user sees."""

    SECURITY = "security"
    HR = "hr"
    DEAN = "dean"
    SUPERADMIN = "superadmin"

    @property
    def label(self) -> str:
        return {
            Role.SECURITY: "Security Guard",
            Role.HR: "HR",
            Role.DEAN: "Dean",
            Role.SUPERADMIN: "Super Admin",
        }[self]


class AuditAction(str, Enum):
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    ENTRY = "ENTRY"
    EXIT = "EXIT"
    GUEST_ENTRY = "GUEST_ENTRY"
    GUEST_EXIT = "GUEST_EXIT"
    RECORD_EDIT = "RECORD_EDIT"
    RECORD_DELETE = "RECORD_DELETE"
    PARKING_CAPACITY = "PARKING_CAPACITY"
    EMPLOYEE_ADD = "EMPLOYEE_ADD"
    EMPLOYEE_IMPORT = "EMPLOYEE_IMPORT"
    USER_CREATE = "USER_CREATE"
    USER_PASSWORD = "USER_PASSWORD"
    USER_DELETE = "USER_DELETE"
