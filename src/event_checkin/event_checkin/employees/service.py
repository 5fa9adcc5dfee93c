from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import new_id
from ..common.validators import optional_str
from ..core.enums import EmployeeStatus, EmploymentType
from ..core.exceptions import NotFoundError, ValidationError
from ..store.dataset import DatasetRepository
from .importer import ImportResult, cell, normalize_employment_type, read_table, resolve_columns
from .model import EmployeeRecord
from .search import fuzzy_search

logger = logging.getLogger(__name__)


def _parse_employment_type(value: Any) -> Optional[EmploymentType]:
    text = optional_str(value)
    if text is None:
        return None
    for option in EmploymentType:
        if option.value and option.value.lower() == text.lower():
            return option
    raise ValidationError("Employment type must be Hourly, Salary, Contract or Part-Time")


def _parse_status(value: Any) -> Optional[EmployeeStatus]:
    text = optional_str(value)
    if text is None:
        return None
    try:
        return EmployeeStatus(text.lower())
    except ValueError:
        raise ValidationError("Status must be active or inactive")


def _lower_email(value: Any) -> Optional[str]:
    text = optional_str(value)
    return text.lower() if text else None


class EmployeeDirectoryService:
    """Use case: maintain the employee directory used for check-in lookup."""

    def __init__(self, employees: DatasetRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[EmployeeRecord]:
        return self._employees.load().employees

    def get_employee(self, record_id: str) -> EmployeeRecord:
        for emp in self._employees.load().employees:
            if emp.id == record_id:
                return emp
        raise NotFoundError("Employee not found")

    def create_employee(self, payload: dict[str, Any], *, now: datetime | None = None) -> EmployeeRecord:
        first_name = optional_str(payload.get("firstName"))
        last_name = optional_str(payload.get("lastName"))
        if not first_name or not last_name:
            raise ValidationError("First name and last name are required")

        stamp = to_iso(now or now_utc())
        record = EmployeeRecord(
            id=new_id("emp"),
            first_name=first_name,
            middle_name=optional_str(payload.get("middleName")),
            last_name=last_name,
            employee_id=optional_str(payload.get("employeeId")),
            hire_date=optional_str(payload.get("hireDate")),
            employment_type=_parse_employment_type(payload.get("employmentType")),
            phone=optional_str(payload.get("phone")) or "",
            email=_lower_email(payload.get("email")),
            status=_parse_status(payload.get("status")) or EmployeeStatus.ACTIVE,
            created_at=stamp,
            updated_at=stamp,
        )

        data = self._employees.load()
        data.employees.append(record)
        self._employees.save(data)

        logger.info("Created employee %s (%s)", record.id, record.full_name)
        return record

    def update_employee(self, record_id: str, payload: dict[str, Any], *, now: datetime | None = None) -> EmployeeRecord:
        """Partial update.

        Names and phone keep their old value when sent blank; other optional
        fields sent blank become unset; fields not sent stay as they are.
        """
        data = self._employees.load()
        index = data.index_of(record_id)
        if index is None:
            raise NotFoundError("Employee not found")

        current = data.employees[index]
        changes: dict[str, Any] = {
            "first_name": optional_str(payload.get("firstName")) or current.first_name,
            "last_name": optional_str(payload.get("lastName")) or current.last_name,
            "phone": optional_str(payload.get("phone")) or current.phone,
            "status": _parse_status(payload.get("status")) or current.status,
            "updated_at": to_iso(now or now_utc()),
        }
        if "middleName" in payload:
            changes["middle_name"] = optional_str(payload["middleName"])
        if "employeeId" in payload:
            changes["employee_id"] = optional_str(payload["employeeId"])
        if "hireDate" in payload:
            changes["hire_date"] = optional_str(payload["hireDate"])
        if "employmentType" in payload:
            changes["employment_type"] = _parse_employment_type(payload["employmentType"])
        if "email" in payload:
            changes["email"] = _lower_email(payload["email"])

        updated = replace(current, **changes)
        data.employees[index] = updated
        self._employees.save(data)

        logger.info("Updated employee %s", record_id)
        return updated

    def delete_employee(self, record_id: str) -> None:
        data = self._employees.load()
        index = data.index_of(record_id)
        if index is None:
            raise NotFoundError("Employee not found")

        del data.employees[index]
        self._employees.save(data)
        logger.info("Deleted employee %s", record_id)

    def search(self, query: str) -> Sequence[EmployeeRecord]:
        return fuzzy_search(self._employees.load().employees, query)

    def import_file(self, filename: str, content: bytes, *, now: datetime | None = None) -> ImportResult:
        return self.import_rows(read_table(filename, content), now=now)

    def import_rows(self, rows: Sequence[Sequence[Any]], *, now: datetime | None = None) -> ImportResult:
        """Bulk import; bad rows are reported, good rows are saved in one write."""
        if len(rows) < 2:
            raise ValidationError("File must contain header row and at least one data row")

        columns = resolve_columns(rows[0])
        if columns["first_name"] is None or columns["last_name"] is None:
            raise ValidationError("File must contain columns: First Name and Last Name")

        data = self._employees.load()
        stamp = to_iso(now or now_utc())
        accepted: list[EmployeeRecord] = []
        errors: list[str] = []

        for i, row in enumerate(rows[1:], start=2):
            if not row or not any(str(v).strip() for v in row if v is not None):
                continue

            first_name = cell(row, columns["first_name"])
            last_name = cell(row, columns["last_name"])
            email = cell(row, columns["email"]).lower()

            if not first_name or not last_name:
                errors.append(f"Row {i}: Missing required fields (First Name and Last Name)")
                continue

            if email and (data.has_email(email) or any(r.email == email for r in accepted)):
                errors.append(f"Row {i}: Duplicate email {email}")
                continue

            status = cell(row, columns["status"]).lower()
            accepted.append(
                EmployeeRecord(
                    id=new_id("emp"),
                    first_name=first_name,
                    middle_name=cell(row, columns["middle_name"]) or None,
                    last_name=last_name,
                    employee_id=cell(row, columns["employee_id"]) or None,
                    hire_date=cell(row, columns["hire_date"]) or None,
                    employment_type=normalize_employment_type(cell(row, columns["employment_type"])),
                    phone=cell(row, columns["phone"]),
                    email=email or None,
                    status=EmployeeStatus.INACTIVE if status == "inactive" else EmployeeStatus.ACTIVE,
                    created_at=stamp,
                    updated_at=stamp,
                )
            )

        data.employees.extend(accepted)
        self._employees.save(data)

        logger.info("Imported %s employees (%s rows rejected)", len(accepted), len(errors))
        return ImportResult(imported=len(accepted), errors=errors)
