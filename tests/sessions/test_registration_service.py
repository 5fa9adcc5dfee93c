from __future__ import annotations

import pytest

from src.event_checkin.event_checkin.container import build_container
from src.event_checkin.event_checkin.core.constants import SESSIONS_KEY
from src.event_checkin.event_checkin.core.exceptions import CapacityExceededError, NotFoundError, ValidationError
from src.event_checkin.event_checkin.sessions.defaults import initial_biometrics_data, initial_sessions_data
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore


def _benefits_payload(**overrides):
    payload = {
        "fullName": "Nadir Urbina Brooks",
        "email": "nadir@example.com",
        "phone": "(555) 123-4567",
        "primaryLanguage": "English",
    }
    payload.update(overrides)
    return payload


def _biometric_payload(**overrides):
    payload = {
        "firstName": "Ana",
        "lastName": "Lopez",
        "phone": "555-987-6543",
        "email": "ana@example.com",
        "dateOfBirth": "04/12/1988",
    }
    payload.update(overrides)
    return payload


def test_default_benefits_sessions():
    data = initial_sessions_data("November 8, 2025")

    assert data.event_date == "November 8, 2025"
    assert [s.id for s in data.sessions] == [
        "session-1015",
        "session-1045",
        "session-1115",
        "session-1145",
        "session-1215",
        "session-1245",
        "session-115",
    ]
    assert data.sessions[0].time == "10:15 AM"
    assert data.sessions[-1].time == "1:15 PM"
    assert [s.max_capacity for s in data.sessions] == [10, 10, 10, 10, 10, 15, 15]
    assert [s.spanish_only for s in data.sessions][-2:] == [True, True]


def test_default_biometric_sessions_every_quarter_hour():
    data = initial_biometrics_data()

    assert len(data.sessions) == 16
    assert data.sessions[0].id == "biometric-session-1000"
    assert data.sessions[-1].id == "biometric-session-1345"
    assert data.sessions[-1].time == "1:45 PM"
    assert all(s.max_capacity == 6 for s in data.sessions)


def test_first_read_persists_initial_document(container, store):
    assert store.get(SESSIONS_KEY) is None

    container.benefits_service.list_sessions()

    assert store.get(SESSIONS_KEY)["sessions"][0]["id"] == "session-1015"


def test_add_registration_assigns_id_and_trims(container):
    reg = container.benefits_service.add_registration("session-1015", _benefits_payload(fullName="  Nadir Brooks "))

    assert reg.id.startswith("reg-")
    assert reg.full_name == "Nadir Brooks"
    session = container.benefits_service.get_session("session-1015")
    assert [r.id for r in session.roster] == [reg.id]


def test_full_session_rejects_and_keeps_roster():
    # Capacity is fixed low so the test does not need ten sign-ups.
    store = InMemoryRecordStore(
        {
            SESSIONS_KEY: {
                "eventDate": "November 8, 2025",
                "eventTitle": "Employee Benefits",
                "sessions": [{"id": "session-1015", "time": "10:15 AM", "employees": [], "maxCapacity": 1}],
            }
        }
    )
    service = build_container(store=store, admin_password="x").benefits_service

    first = service.add_registration("session-1015", _benefits_payload())
    with pytest.raises(CapacityExceededError, match="full capacity"):
        service.add_registration("session-1015", _benefits_payload(fullName="Someone Else"))

    roster = service.get_session("session-1015").roster
    assert [r.id for r in roster] == [first.id]


def test_capacity_checked_before_payload(container):
    service = container.biometrics_service
    for i in range(6):
        service.add_registration("biometric-session-1000", _biometric_payload(firstName=f"Person{i}"))

    with pytest.raises(CapacityExceededError):
        service.add_registration("biometric-session-1000", {})


def test_missing_field_is_rejected(container):
    with pytest.raises(ValidationError, match="Email is required"):
        container.benefits_service.add_registration("session-1015", _benefits_payload(email="  "))


def test_unknown_language_is_rejected(container):
    with pytest.raises(ValidationError):
        container.benefits_service.add_registration("session-1015", _benefits_payload(primaryLanguage="French"))


def test_bad_date_of_birth_is_rejected(container):
    with pytest.raises(ValidationError, match="MM/DD/YYYY"):
        container.biometrics_service.add_registration("biometric-session-1000", _biometric_payload(dateOfBirth="1988-04-12"))


def test_unknown_session(container):
    with pytest.raises(NotFoundError, match="Session not found"):
        container.benefits_service.add_registration("session-999", _benefits_payload())


def test_update_keeps_id_and_position(container):
    service = container.benefits_service
    a = service.add_registration("session-1045", _benefits_payload(fullName="A Person"))
    b = service.add_registration("session-1045", _benefits_payload(fullName="B Person"))

    updated = service.update_registration("session-1045", a.id, _benefits_payload(fullName="A Renamed", primaryLanguage="Spanish"))

    assert updated.id == a.id
    roster = service.get_session("session-1045").roster
    assert [r.id for r in roster] == [a.id, b.id]
    assert roster[0].full_name == "A Renamed"
    assert service.get_session("session-1045").has_spanish_speakers


def test_update_ignores_capacity(container):
    service = container.biometrics_service
    regs = [service.add_registration("biometric-session-1015", _biometric_payload(firstName=f"P{i}")) for i in range(6)]

    updated = service.update_registration("biometric-session-1015", regs[0].id, _biometric_payload(firstName="Changed"))

    assert updated.first_name == "Changed"


def test_remove_registration(container):
    service = container.benefits_service
    reg = service.add_registration("session-1115", _benefits_payload())

    service.remove_registration("session-1115", reg.id)

    assert service.get_session("session-1115").roster == []
    with pytest.raises(NotFoundError, match="Registration not found"):
        service.remove_registration("session-1115", reg.id)


def test_capacity_migration_is_idempotent(container):
    data = container.sessions_repo.load()
    for session in data.sessions:
        if session.spanish_only:
            session.max_capacity = 10
    container.sessions_repo.save(data)

    first = container.capacity_migration.migrate()
    second = container.capacity_migration.migrate()

    assert first == second
    assert [s["id"] for s in first] == ["session-1245", "session-115"]
    assert all(s["maxCapacity"] == 15 for s in first)
    non_spanish = [s for s in container.sessions_repo.load().sessions if not s.spanish_only]
    assert all(s.max_capacity == 10 for s in non_spanish)
