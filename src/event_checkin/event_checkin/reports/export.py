"""Excel workbooks for the event staff (built in memory, never on disk)."""

from __future__ import annotations

import io
from typing import Iterable, Sequence

import pandas as pd

from ..checkins.model import CheckIn
from ..employees.model import EmployeeRecord
from ..sessions.model import SessionsDocument

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _to_xlsx(rows: list[dict], *, columns: Sequence[str], sheet_name: str) -> bytes:
    df = pd.DataFrame(rows, columns=list(columns))
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def checkins_workbook(check_ins: Iterable[CheckIn]) -> bytes:
    rows = [
        {
            "Name": c.employee_name,
            "Employee Record": c.employee_id,
            "Check-In Time": c.check_in_time,
            "Food Tickets": c.food_tickets,
            "Notes": c.notes or "",
        }
        for c in check_ins
    ]
    return _to_xlsx(
        rows,
        columns=["Name", "Employee Record", "Check-In Time", "Food Tickets", "Notes"],
        sheet_name="Check-Ins",
    )


def employees_workbook(employees: Iterable[EmployeeRecord]) -> bytes:
    rows = [
        {
            "First Name": e.first_name,
            "Middle Name": e.middle_name or "",
            "Last Name": e.last_name,
            "Employee ID": e.employee_id or "",
            "Hire Date": e.hire_date or "",
            "Employment Type": e.employment_type.value if e.employment_type else "",
            "Phone": e.phone,
            "Email": e.email or "",
            "Status": e.status.value,
        }
        for e in employees
    ]
    return _to_xlsx(
        rows,
        columns=[
            "First Name",
            "Middle Name",
            "Last Name",
            "Employee ID",
            "Hire Date",
            "Employment Type",
            "Phone",
            "Email",
            "Status",
        ],
        sheet_name="Employees",
    )


ROSTER_COLUMNS = {
    "employees": [
        ("fullName", "Full Name"),
        ("email", "Email"),
        ("phone", "Phone"),
        ("primaryLanguage", "Primary Language"),
    ],
    "registrations": [
        ("firstName", "First Name"),
        ("lastName", "Last Name"),
        ("email", "Email"),
        ("phone", "Phone"),
        ("dateOfBirth", "Date of Birth"),
    ],
}


def roster_workbook(document: SessionsDocument) -> bytes:
    """One row per registration, tagged with its session time."""
    fields = ROSTER_COLUMNS[document.SESSION_CLASS.ROSTER_KEY]

    rows: list[dict] = []
    for session in document.sessions:
        for reg in session.roster:
            stored = reg.to_dict()
            row = {"Session": session.time}
            row.update({label: stored.get(key, "") for key, label in fields})
            rows.append(row)

    columns = ["Session"] + [label for _, label in fields]
    return _to_xlsx(rows, columns=columns, sheet_name=(document.event_title or "Sessions")[:31])
