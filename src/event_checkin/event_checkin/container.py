from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.service import AdminSecretVerifier
from .checkins.repository import CheckInsRepository, checkins_repository
from .checkins.service import CheckInService
from .core.constants import DEFAULT_EVENT_DATE
from .core.enums import SessionKind
from .database.connection import DatabaseConnection, DBConfig
from .employees.repository import EmployeesRepository, employees_repository
from .employees.service import EmployeeDirectoryService
from .sessions.repository import BiometricsRepository, SessionsRepository, biometrics_repository, sessions_repository
from .sessions.service import CapacityMigrationService, RegistrationService
from .store.memory_record_store import InMemoryRecordStore
from .store.mysql_record_store import MySQLRecordStore
from .store.repository import RecordStore


@dataclass(frozen=True)
class Container:
    store: RecordStore

    sessions_repo: SessionsRepository
    biometrics_repo: BiometricsRepository
    employees_repo: EmployeesRepository
    checkins_repo: CheckInsRepository

    admin_auth: AdminSecretVerifier
    benefits_service: RegistrationService
    biometrics_service: RegistrationService
    capacity_migration: CapacityMigrationService
    directory_service: EmployeeDirectoryService
    checkin_service: CheckInService


def build_store(kind: str, *, db_config: Optional[dict] = None) -> RecordStore:
    if kind == "memory":
        return InMemoryRecordStore()
    if kind == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql record store")
        return MySQLRecordStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown record store: {kind!r}")


def build_container(*, store: RecordStore, admin_password: Optional[str], event_date: str = DEFAULT_EVENT_DATE) -> Container:
    sessions_repo = sessions_repository(store, event_date=event_date)
    biometrics_repo = biometrics_repository(store, event_date=event_date)
    employees_repo = employees_repository(store)
    checkins_repo = checkins_repository(store)

    return Container(
        store=store,
        sessions_repo=sessions_repo,
        biometrics_repo=biometrics_repo,
        employees_repo=employees_repo,
        checkins_repo=checkins_repo,
        admin_auth=AdminSecretVerifier(admin_password),
        benefits_service=RegistrationService(sessions_repo, kind=SessionKind.BENEFITS),
        biometrics_service=RegistrationService(biometrics_repo, kind=SessionKind.BIOMETRICS),
        capacity_migration=CapacityMigrationService(sessions_repo),
        directory_service=EmployeeDirectoryService(employees_repo),
        checkin_service=CheckInService(checkins_repo, sessions_repo, biometrics_repo),
    )
