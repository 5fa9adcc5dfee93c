from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Protocol, TypeVar

from ..core.exceptions import StoreError
from .repository import RecordStore

logger = logging.getLogger(__name__)


class Document(Protocol):
    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


D = TypeVar("D", bound=Document)


class DatasetRepository(Generic[D]):
    """Loads and saves one whole dataset document under a fixed key.

    A missing key is initialised with ``initial()`` and persisted on first
    load. There is no locking: two writers racing on the same key lose the
    first write (last-write-wins).
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        key: str,
        decode: Callable[[dict[str, Any]], D],
        initial: Callable[[], D],
    ):
        self._store = store
        self._key = key
        self._decode = decode
        self._initial = initial

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> D:
        try:
            blob = self._store.get(self._key)
        except Exception as e:
            logger.exception("Error reading %s", self._key)
            raise StoreError(f"Failed to read {self._key}") from e

        if blob is None:
            data = self._initial()
            self.save(data)
            return data

        return self._decode(blob)

    def save(self, data: D) -> None:
        try:
            self._store.set(self._key, data.to_dict())
        except Exception as e:
            logger.exception("Error writing %s", self._key)
            raise StoreError(f"Failed to write {self._key}") from e
