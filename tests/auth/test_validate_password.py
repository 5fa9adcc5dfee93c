from __future__ import annotations

import pytest

from src.event_checkin.event_checkin.auth.service import AdminSecretVerifier
from src.event_checkin.event_checkin.container import build_container
from src.event_checkin.event_checkin.core.exceptions import AuthorizationError
from src.event_checkin.event_checkin.main import create_app
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore


def test_verifier():
    verifier = AdminSecretVerifier("s3cret")

    assert verifier.verify("s3cret")
    assert not verifier.verify("S3CRET")
    assert not verifier.verify(None)
    with pytest.raises(AuthorizationError):
        verifier.require("")


def test_unset_secret_rejects_everything():
    assert not AdminSecretVerifier(None).verify("")
    assert not AdminSecretVerifier("").verify("anything")


def test_validate_password_endpoint(client):
    assert client.post("/api/validate-password", json={"password": "test-admin"}).get_json() == {"valid": True}
    assert client.post("/api/validate-password", json={"password": "wrong"}).get_json() == {"valid": False}

    missing = client.post("/api/validate-password", json={})
    assert missing.status_code == 400
    assert missing.get_json() == {"error": "Password is required", "valid": False}


def test_admin_routes_closed_without_configured_secret():
    client = create_app(build_container(store=InMemoryRecordStore(), admin_password=None)).test_client()

    resp = client.post("/api/employees", json={"firstName": "A", "lastName": "B", "password": ""})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid or missing password"}
