from __future__ import annotations

import os
from datetime import datetime, timezone

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.event_checkin.event_checkin.container import build_container
from src.event_checkin.event_checkin.main import create_app
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore

ADMIN_PASSWORD = "test-admin"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 8, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container(store=store, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"x-admin-password": ADMIN_PASSWORD}
