"""Heuristic link between a directory employee and session registrations.

There is no foreign key between the two, so a registration is attributed to
an employee when the emails are equal (case-insensitive) or when the
registered name contains both the employee's first and last name. This
accepts "Nadir Urbina Brooks" and "Brooks Nadir" for Nadir Brooks, and can
also give false positives for short names ("Al" is in "Alan"). Keep the rule
as is: tightening or loosening it changes who gets matched at the door.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..sessions.model import Session


def names_match(registered_name: str, first_name: str, last_name: str) -> bool:
    if not registered_name:
        return False

    registered = registered_name.lower().strip()
    return first_name.lower().strip() in registered and last_name.lower().strip() in registered


def emails_match(registered_email: Optional[str], employee_email: Optional[str]) -> bool:
    if not registered_email or not employee_email:
        return False
    return registered_email.strip().lower() == employee_email.strip().lower()


def find_session_time(
    sessions: Iterable[Session],
    *,
    email: Optional[str],
    first_name: str,
    last_name: str,
) -> Optional[str]:
    """Time label of the first session holding a matching registration."""
    for session in sessions:
        for reg in session.roster:
            if emails_match(reg.email, email) or names_match(reg.display_name, first_name, last_name):
                return session.time
    return None
