from __future__ import annotations

from enum import Enum


class PrimaryLanguage(str, Enum):
    """Language a benefits attendee wants the session held in."""

    ENGLISH = "English"
    SPANISH = "Spanish"


class EmploymentType(str, Enum):
    HOURLY = "Hourly"
    SALARY = "Salary"
    CONTRACT = "Contract"
    PART_TIME = "Part-Time"
    UNSPECIFIED = ""


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class SessionKind(str, Enum):
    """Session families sharing the same capacity/roster rules."""

    BENEFITS = "benefits"
    BIOMETRICS = "biometrics"
