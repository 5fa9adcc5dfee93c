"""Hide contact details of registered people from non-admin readers."""

from __future__ import annotations

from typing import Any


def mask_email(email: str) -> str:
    if not email:
        return email
    local, sep, domain = email.partition("@")
    masked_local = local[:2] + "*" * max(len(local) - 2, 0)
    return f"{masked_local}{sep}{domain}"


def mask_phone(phone: str) -> str:
    """Star every digit except those in the last four characters."""
    if not phone:
        return phone
    keep_from = len(phone) - 4
    return "".join(ch if i >= keep_from or not ch.isdigit() else "*" for i, ch in enumerate(phone))


def mask_document(document: dict[str, Any]) -> dict[str, Any]:
    """Masked copy of a serialised sessions dataset."""
    sessions = []
    for session in document.get("sessions", []):
        masked = dict(session)
        for roster_key in ("employees", "registrations"):
            if roster_key in masked:
                masked[roster_key] = [
                    {**person, "email": mask_email(person.get("email", "")), "phone": mask_phone(person.get("phone", ""))}
                    for person in masked[roster_key]
                ]
        sessions.append(masked)
    return {**document, "sessions": sessions}
