from __future__ import annotations

from datetime import timedelta

import pytest

from src.event_checkin.event_checkin.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_check_in_records_arrival(container, fixed_now):
    record = container.checkin_service.check_in(
        employee_id="emp-1", employee_name="Nadir Brooks", food_tickets="2", notes="  ", now=fixed_now
    )

    assert record.id.startswith("checkin-")
    assert record.food_tickets == 2
    assert record.notes is None
    assert record.check_in_time == "2025-11-08T15:00:00.000Z"
    assert "notes" not in record.to_dict()


def test_second_check_in_conflicts_and_keeps_original(container, fixed_now):
    service = container.checkin_service
    first = service.check_in(employee_id="emp-1", employee_name="Nadir Brooks", food_tickets=1, now=fixed_now)

    with pytest.raises(ConflictError) as excinfo:
        service.check_in(employee_id="emp-1", employee_name="Nadir B.", food_tickets=3)

    assert excinfo.value.existing.id == first.id
    assert [c.id for c in service.list_check_ins()] == [first.id]


@pytest.mark.parametrize("tickets", [-1, "abc", None, 1.5, True])
def test_invalid_food_tickets(container, tickets):
    with pytest.raises(ValidationError, match="non-negative"):
        container.checkin_service.check_in(employee_id="emp-1", employee_name="A", food_tickets=tickets)


def test_zero_tickets_allowed(container):
    assert container.checkin_service.check_in(employee_id="emp-1", employee_name="A", food_tickets=0).food_tickets == 0


def test_missing_identity(container):
    with pytest.raises(ValidationError, match="Employee ID and name are required"):
        container.checkin_service.check_in(employee_id=" ", employee_name="A", food_tickets=1)


def test_list_is_newest_first_and_summary_adds_up(container, fixed_now):
    service = container.checkin_service
    early = service.check_in(employee_id="emp-1", employee_name="A", food_tickets=1, now=fixed_now)
    late = service.check_in(employee_id="emp-2", employee_name="B", food_tickets=4, now=fixed_now + timedelta(minutes=1))

    assert [c.id for c in service.list_check_ins()] == [late.id, early.id]
    assert service.summary().to_dict() == {"totalCheckIns": 2, "totalFoodTickets": 5}


def test_delete_allows_new_check_in(container):
    service = container.checkin_service
    first = service.check_in(employee_id="emp-1", employee_name="A", food_tickets=1)

    service.delete_check_in(first.id)
    again = service.check_in(employee_id="emp-1", employee_name="A", food_tickets=2)

    assert again.id != first.id
    with pytest.raises(NotFoundError):
        service.get_check_in(first.id)


def test_find_employee_sessions(container):
    container.benefits_service.add_registration(
        "session-1145",
        {"fullName": "Nadir Urbina Brooks", "email": "x@example.com", "phone": "1", "primaryLanguage": "English"},
    )
    container.biometrics_service.add_registration(
        "biometric-session-1030",
        {
            "firstName": "N",
            "lastName": "B",
            "phone": "1",
            "email": "NADIR@example.com",
            "dateOfBirth": "01/01/1990",
        },
    )

    found = container.checkin_service.find_employee_sessions(
        email="nadir@example.com", first_name="Nadir", last_name="Brooks"
    )

    assert found.to_dict() == {"benefitsSession": "11:45 AM", "biometricsSession": "10:30 AM"}


def test_find_employee_sessions_none(container):
    found = container.checkin_service.find_employee_sessions(email=None, first_name="Ana", last_name="Lopez")

    assert found.to_dict() == {}
