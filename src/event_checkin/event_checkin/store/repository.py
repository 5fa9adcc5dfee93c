from __future__ import annotations

from typing import Any, Optional, Protocol


class RecordStore(Protocol):
    """Key-value store holding one JSON document per dataset key.

    No transactions and no partial updates: callers always read and write the
    whole document.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError
