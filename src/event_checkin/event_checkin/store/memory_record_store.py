from __future__ import annotations

import json
from typing import Any, Optional

from .repository import RecordStore


class InMemoryRecordStore(RecordStore):
    """Process-local store for tests and demos.

    Values are kept serialised so every ``get`` hands out a fresh copy, the
    same way a remote store would.
    """

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._blobs: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[Any]:
        blob = self._blobs.get(key)
        if blob is None:
            return None
        return json.loads(blob)

    def set(self, key: str, value: Any) -> None:
        self._blobs[key] = json.dumps(value)
