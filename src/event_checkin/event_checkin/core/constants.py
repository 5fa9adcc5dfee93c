"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSIONS_KEY = "sessions_data"
BIOMETRICS_KEY = "biometrics_data"
EMPLOYEES_KEY = "employees_data"
CHECKINS_KEY = "checkins_data"

DEFAULT_EVENT_DATE = "November 8, 2025"
BENEFITS_EVENT_TITLE = "Employee Benefits"
BIOMETRICS_EVENT_TITLE = "Biometric Exams"

DEFAULT_BENEFITS_CAPACITY = 10
SPANISH_ONLY_CAPACITY = 15
DEFAULT_BIOMETRICS_CAPACITY = 6

SEARCH_MIN_QUERY_LENGTH = 2
SEARCH_THRESHOLD = 0.4
SEARCH_MAX_RESULTS = 20
SEARCH_WEIGHTS = {
    "first_name": 0.4,
    "last_name": 0.4,
    "email": 0.2,
}

ADMIN_PASSWORD_HEADER = "x-admin-password"
