from __future__ import annotations

from datetime import timedelta

import pytest

from src.event_checkin.event_checkin.core.enums import EmployeeStatus, EmploymentType
from src.event_checkin.event_checkin.core.exceptions import NotFoundError, ValidationError


def test_create_trims_and_stamps(container, fixed_now):
    emp = container.directory_service.create_employee(
        {"firstName": "  Nadir ", "lastName": " Brooks", "email": " Nadir@Example.COM ", "middleName": "  "},
        now=fixed_now,
    )

    assert emp.id.startswith("emp-")
    assert emp.full_name == "Nadir Brooks"
    assert emp.email == "nadir@example.com"
    assert emp.middle_name is None
    assert emp.status == EmployeeStatus.ACTIVE
    assert emp.created_at == emp.updated_at == "2025-11-08T15:00:00.000Z"
    assert "middleName" not in emp.to_dict()


def test_create_requires_both_names(container):
    with pytest.raises(ValidationError):
        container.directory_service.create_employee({"firstName": "Nadir", "lastName": "   "})
    assert container.directory_service.list_employees() == []


def test_create_rejects_unknown_employment_type(container):
    with pytest.raises(ValidationError):
        container.directory_service.create_employee({"firstName": "A", "lastName": "B", "employmentType": "Seasonal"})


def test_update_is_partial(container, fixed_now):
    service = container.directory_service
    emp = service.create_employee(
        {"firstName": "Nadir", "lastName": "Brooks", "middleName": "Q", "employmentType": "Hourly", "phone": "555"},
        now=fixed_now,
    )

    later = fixed_now + timedelta(minutes=5)
    updated = service.update_employee(
        emp.id,
        {"firstName": "  ", "middleName": "", "employmentType": "part-time", "status": "inactive"},
        now=later,
    )

    assert updated.id == emp.id
    assert updated.first_name == "Nadir"
    assert updated.phone == "555"
    assert updated.middle_name is None
    assert updated.employment_type == EmploymentType.PART_TIME
    assert updated.status == EmployeeStatus.INACTIVE
    assert updated.created_at == emp.created_at
    assert updated.updated_at == "2025-11-08T15:05:00.000Z"


def test_blank_employment_type_collapses_to_unset(container):
    service = container.directory_service
    emp = service.create_employee({"firstName": "A", "lastName": "B", "employmentType": "Salary"})

    updated = service.update_employee(emp.id, {"employmentType": ""})

    assert updated.employment_type is None
    assert "employmentType" not in service.get_employee(emp.id).to_dict()


def test_get_and_delete_unknown_employee(container):
    service = container.directory_service
    with pytest.raises(NotFoundError):
        service.get_employee("emp-missing")
    with pytest.raises(NotFoundError):
        service.delete_employee("emp-missing")


def test_delete_removes_only_target(container):
    service = container.directory_service
    a = service.create_employee({"firstName": "A", "lastName": "One"})
    b = service.create_employee({"firstName": "B", "lastName": "Two"})

    service.delete_employee(a.id)

    assert [e.id for e in service.list_employees()] == [b.id]
