from __future__ import annotations

import pytest

from scripts import init_db
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore


@pytest.fixture
def offline_db(monkeypatch):
    applied = []
    monkeypatch.setattr(init_db, "apply_schema", lambda db_config, *, schema_path: applied.append(schema_path))
    monkeypatch.setattr(init_db, "list_tables", lambda db_config: ["record_store"])
    store = InMemoryRecordStore({"sessions_data": {"sessions": []}})
    monkeypatch.setattr(init_db, "build_store", lambda kind, *, db_config: store)
    return applied


def test_reports_dataset_state(offline_db, capsys):
    init_db.main()

    out = capsys.readouterr().out
    assert offline_db[0].name == "schema.sql"
    assert "OK: record_store ready" in out
    assert "sessions_data: present" in out
    assert "checkins_data: empty" in out


def test_missing_table_fails(offline_db, monkeypatch):
    monkeypatch.setattr(init_db, "list_tables", lambda db_config: [])

    with pytest.raises(SystemExit):
        init_db.main()
