from __future__ import annotations

import uuid


def new_id(prefix: str) -> str:
    """Random UUID4 identifier, e.g. ``reg-3f2b...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
