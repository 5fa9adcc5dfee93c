from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_DATE_OF_BIRTH_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_str(value: Any) -> Optional[str]:
    """Trim a value; blank or missing collapses to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_non_negative_int(value: Any, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a non-negative number")
    try:
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(value)
            number = int(value)
        else:
            number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number


def require_date_of_birth(value: Any) -> str:
    text = require_non_empty(value, "Date of birth")
    if not _DATE_OF_BIRTH_RE.match(text):
        raise ValidationError("Date of birth must use MM/DD/YYYY")
    return text
