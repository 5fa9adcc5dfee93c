from __future__ import annotations

import io

import pandas as pd

from src.event_checkin.event_checkin.reports.export import roster_workbook


def test_roster_workbook_lists_registrations(container):
    container.benefits_service.add_registration(
        "session-1215",
        {"fullName": "Nadir Brooks", "email": "n@example.com", "phone": "555", "primaryLanguage": "Spanish"},
    )

    content = roster_workbook(container.benefits_service.list_sessions())
    df = pd.read_excel(io.BytesIO(content), dtype=str)

    assert list(df.columns) == ["Session", "Full Name", "Email", "Phone", "Primary Language"]
    assert df.iloc[0].tolist() == ["12:15 PM", "Nadir Brooks", "n@example.com", "555", "Spanish"]


def test_export_requires_admin(client, admin_headers):
    client.post("/api/checkins", json={"employeeId": "emp-1", "employeeName": "A", "foodTickets": 1})

    assert client.get("/api/export/checkins.xlsx").status_code == 401

    resp = client.get("/api/export/checkins.xlsx", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    df = pd.read_excel(io.BytesIO(resp.data))
    assert df["Name"].tolist() == ["A"]
