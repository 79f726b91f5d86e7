SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = None

DB_CONFIG = {}

TOTAL_PARKING_SPACES = 2
ALLOW_REENTRY = True
SESSION_DAYS = 1

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_USERS = True
