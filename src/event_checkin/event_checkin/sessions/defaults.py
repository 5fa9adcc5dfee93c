"""Initial datasets written the first time a session key is read."""

from __future__ import annotations

from ..common.datetime_utils import format_time_label
from ..core.constants import (
    BENEFITS_EVENT_TITLE,
    BIOMETRICS_EVENT_TITLE,
    DEFAULT_BENEFITS_CAPACITY,
    DEFAULT_BIOMETRICS_CAPACITY,
    DEFAULT_EVENT_DATE,
    SPANISH_ONLY_CAPACITY,
)
from .model import BenefitsSession, BiometricSession, BiometricsData, SessionsData

# (hour, minute, spanish_only)
BENEFITS_SLOTS = [
    (10, 15, False),
    (10, 45, False),
    (11, 15, False),
    (11, 45, False),
    (12, 15, False),
    (12, 45, True),
    (13, 15, True),
]


def _slot_code(hour: int, minute: int) -> str:
    # Benefits ids use the 12h clock ("session-115" is 1:15 PM).
    hour12 = hour - 12 if hour > 12 else hour
    return f"{hour12}{minute:02d}"


def initial_sessions_data(event_date: str = DEFAULT_EVENT_DATE) -> SessionsData:
    sessions = [
        BenefitsSession(
            id=f"session-{_slot_code(hour, minute)}",
            time=format_time_label(hour, minute),
            max_capacity=SPANISH_ONLY_CAPACITY if spanish_only else DEFAULT_BENEFITS_CAPACITY,
            spanish_only=spanish_only,
        )
        for hour, minute, spanish_only in BENEFITS_SLOTS
    ]
    return SessionsData(event_date=event_date, event_title=BENEFITS_EVENT_TITLE, sessions=sessions)


def biometric_slots(start=(10, 0), end=(13, 45), step_minutes: int = 15) -> list[tuple[int, int]]:
    """Every ``step_minutes`` from start to end inclusive."""
    slots: list[tuple[int, int]] = []
    hour, minute = start
    while (hour, minute) <= end:
        slots.append((hour, minute))
        minute += step_minutes
        if minute >= 60:
            minute -= 60
            hour += 1
    return slots


def initial_biometrics_data(event_date: str = DEFAULT_EVENT_DATE) -> BiometricsData:
    sessions = [
        BiometricSession(
            # Biometric ids keep the 24h clock ("biometric-session-1300").
            id=f"biometric-session-{hour}{minute:02d}",
            time=format_time_label(hour, minute),
            max_capacity=DEFAULT_BIOMETRICS_CAPACITY,
        )
        for hour, minute in biometric_slots()
    ]
    return BiometricsData(event_date=event_date, event_title=BIOMETRICS_EVENT_TITLE, sessions=sessions)
