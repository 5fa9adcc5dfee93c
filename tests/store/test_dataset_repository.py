from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from src.event_checkin.event_checkin.core.exceptions import StoreError
from src.event_checkin.event_checkin.store.dataset import DatasetRepository
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore


@dataclass
class Counter:
    values: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, d):
        return cls(values=list(d.get("values", [])))

    def to_dict(self):
        return {"values": list(self.values)}


class BrokenStore:
    def get(self, key):
        raise ConnectionError("store down")

    def set(self, key, value):
        raise ConnectionError("store down")


def _repo(store):
    return DatasetRepository(store, key="counter", decode=Counter.from_dict, initial=lambda: Counter(values=[0]))


def test_missing_key_is_initialised_and_saved():
    store = InMemoryRecordStore()

    assert _repo(store).load() == Counter(values=[0])
    assert store.get("counter") == {"values": [0]}


def test_existing_document_is_decoded():
    store = InMemoryRecordStore({"counter": {"values": [1, 2]}})

    assert _repo(store).load().values == [1, 2]


def test_loaded_documents_are_copies():
    store = InMemoryRecordStore()
    repo = _repo(store)

    repo.load().values.append(99)

    assert repo.load().values == [0]


def test_store_failures_are_wrapped():
    repo = _repo(BrokenStore())

    with pytest.raises(StoreError, match="Failed to read counter"):
        repo.load()
    with pytest.raises(StoreError, match="Failed to write counter"):
        repo.save(Counter())


def test_store_failure_is_500(store, monkeypatch, client):
    monkeypatch.setattr(store, "get", BrokenStore().get)

    resp = client.get("/api/employees")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch employees"}
