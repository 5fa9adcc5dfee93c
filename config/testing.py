SECRET_KEY = "test-secret"

ADMIN_PASSWORD = "test-admin"

RECORD_STORE = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "event_checkin_test",
}

EVENT_DATE = "November 8, 2025"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_FILE = None

MAX_UPLOAD_MB = 1

AUTO_INIT_DB = False
