"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOTAL_SPACES = 50
DEFAULT_SESSION_DAYS = 7
DEFAULT_REPORT_DAYS = 7
DEFAULT_HISTORY_LIMIT = 30
AUDIT_LOG_LIMIT = 1000
MIN_PASSWORD_LENGTH = 6

# Persisted state keys (one JSON blob per key).
KEY_USERS = "users"
KEY_EMPLOYEES = "employees"
KEY_ATTENDANCE = "attendanceRecords"
KEY_PARKING = "parkingConfig"
KEY_AUDIT = "auditLogs"

# (username, password, role) seeded on first run.
DEMO_USERS = (
    ("admin", "admin123", "superadmin"),
    ("security", "security123", "security"),
    ("hr", "hr123", "hr"),
    ("dean", "dean123", "dean"),
)

GUEST_ID_PREFIX = "guest-"
EMPLOYEE_ID_PREFIX = "emp-"
