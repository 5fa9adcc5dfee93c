import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Shared password for admin actions (INTERNAL_PWD kept for old deployments)
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", os.getenv("INTERNAL_PWD", "admin"))

# "mysql" or "memory" (memory loses everything on restart)
RECORD_STORE = os.getenv("RECORD_STORE", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_checkin"),
}

EVENT_DATE = os.getenv("EVENT_DATE", "November 8, 2025")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
