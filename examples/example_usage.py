"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; every rule lives in the services.
"""

from src.event_checkin.event_checkin.container import build_container
from src.event_checkin.event_checkin.store.memory_record_store import InMemoryRecordStore


def main():
    container = build_container(store=InMemoryRecordStore(), admin_password="demo")

    reg = container.benefits_service.add_registration(
        "session-1015",
        {"fullName": "Nadir Urbina Brooks", "email": "nadir@example.com", "phone": "(555) 123-4567", "primaryLanguage": "English"},
    )
    emp = container.directory_service.create_employee({"firstName": "Nadir", "lastName": "Brooks"})
    container.checkin_service.check_in(employee_id=emp.id, employee_name=emp.full_name, food_tickets=2)

    print(reg)
    print(container.checkin_service.find_employee_sessions(email=None, first_name="Nadir", last_name="Brooks"))
    print(container.checkin_service.summary())


if __name__ == "__main__":
    main()
