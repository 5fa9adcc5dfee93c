from __future__ import annotations

import json

from src.event_checkin.event_checkin.store.mysql_record_store import MySQLRecordStore


class FakeCursor:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self._row = None

    def execute(self, sql: str, params=()):
        if sql.strip().startswith("SELECT"):
            value = self._table.get(params[0])
            self._row = {"value": value} if value is not None else None
        else:
            key, value = params
            self._table[key] = value

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self.committed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self._table)

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.table: dict[str, str] = {}

    def connect(self):
        return FakeConnection(self.table)


def test_missing_key_reads_as_none():
    assert MySQLRecordStore(FakeConnectionFactory()).get("employees_data") is None


def test_set_stores_json_and_upserts():
    factory = FakeConnectionFactory()
    store = MySQLRecordStore(factory)

    store.set("checkins_data", {"checkIns": []})
    store.set("checkins_data", {"checkIns": [{"id": "checkin-1", "employeeName": "Peña"}]})

    assert json.loads(factory.table["checkins_data"])["checkIns"][0]["employeeName"] == "Peña"
    assert store.get("checkins_data") == {"checkIns": [{"id": "checkin-1", "employeeName": "Peña"}]}
