from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a trailing Z."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_time_label(hour: int, minute: int) -> str:
    """24h clock -> '10:15 AM' style display label."""
    hour12 = hour - 12 if hour > 12 else hour
    period = "PM" if hour >= 12 else "AM"
    return f"{hour12}:{minute:02d} {period}"
