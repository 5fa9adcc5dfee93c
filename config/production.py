import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", os.getenv("INTERNAL_PWD", ""))

RECORD_STORE = os.getenv("RECORD_STORE", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_checkin"),
}

EVENT_DATE = os.getenv("EVENT_DATE", "November 8, 2025")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "app.log")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
