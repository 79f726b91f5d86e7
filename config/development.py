import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | mysql | memory
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gate_attendance"),
}

TOTAL_PARKING_SPACES = int(os.getenv("TOTAL_PARKING_SPACES", "50"))
ALLOW_REENTRY = bool(int(os.getenv("ALLOW_REENTRY", "1")))
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

DEBUG = True

# Create app_state table on startup when STORAGE_BACKEND=mysql
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Seed demo accounts (admin/security/hr/dean) when no user list exists yet
AUTO_SEED_USERS = bool(int(os.getenv("AUTO_SEED_USERS", "1")))
