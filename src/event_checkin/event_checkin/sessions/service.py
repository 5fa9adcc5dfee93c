from __future__ import annotations

import logging
from typing import Any

from ..common.ids import new_id
from ..core.constants import SPANISH_ONLY_CAPACITY
from ..core.enums import SessionKind
from ..core.exceptions import CapacityExceededError, NotFoundError
from ..store.dataset import DatasetRepository
from .model import BenefitsSession, Registration, Session, SessionsData, SessionsDocument

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: manage the rosters of one session family.

    Every call loads the whole dataset, mutates the copy and writes it back.
    Capacity is checked only when adding.
    """

    def __init__(self, sessions: DatasetRepository, *, kind: SessionKind):
        self._sessions = sessions
        self._kind = kind

    @property
    def kind(self) -> SessionKind:
        return self._kind

    def list_sessions(self) -> SessionsDocument:
        return self._sessions.load()

    def get_session(self, session_id: str) -> Session:
        return self._require_session(self._sessions.load(), session_id)

    def add_registration(self, session_id: str, payload: dict[str, Any]) -> Registration:
        data = self._sessions.load()
        session = self._require_session(data, session_id)

        if session.is_full:
            raise CapacityExceededError("Session is at full capacity")

        registration = session.REGISTRATION_CLASS.from_payload(new_id("reg"), payload)
        session.roster.append(registration)
        self._sessions.save(data)

        logger.info("Added %s registration %s to %s", self._kind.value, registration.id, session_id)
        return registration

    def update_registration(self, session_id: str, registration_id: str, payload: dict[str, Any]) -> Registration:
        data = self._sessions.load()
        session = self._require_session(data, session_id)
        index = self._require_index(session, registration_id)

        registration = session.REGISTRATION_CLASS.from_payload(registration_id, payload)
        session.roster[index] = registration
        self._sessions.save(data)

        logger.info("Updated %s registration %s in %s", self._kind.value, registration_id, session_id)
        return registration

    def remove_registration(self, session_id: str, registration_id: str) -> None:
        data = self._sessions.load()
        session = self._require_session(data, session_id)
        index = self._require_index(session, registration_id)

        del session.roster[index]
        self._sessions.save(data)

        logger.info("Removed %s registration %s from %s", self._kind.value, registration_id, session_id)

    @staticmethod
    def _require_session(data: SessionsDocument, session_id: str) -> Session:
        session = data.find_session(session_id)
        if not session:
            raise NotFoundError("Session not found")
        return session

    @staticmethod
    def _require_index(session: Session, registration_id: str) -> int:
        index = session.index_of(registration_id)
        if index is None:
            raise NotFoundError("Registration not found")
        return index


class CapacityMigrationService:
    """One-shot admin fix: Spanish-only benefits sessions get a fixed capacity."""

    def __init__(self, sessions: DatasetRepository, *, target_capacity: int = SPANISH_ONLY_CAPACITY):
        self._sessions = sessions
        self._target = int(target_capacity)

    @property
    def target_capacity(self) -> int:
        return self._target

    def migrate(self) -> list[dict]:
        data: SessionsData = self._sessions.load()

        updated: list[BenefitsSession] = []
        for session in data.sessions:
            if session.spanish_only:
                session.max_capacity = self._target
                updated.append(session)

        self._sessions.save(data)
        logger.info("Spanish-only capacity set to %s on %s sessions", self._target, len(updated))

        return [
            {
                "id": s.id,
                "time": s.time,
                "maxCapacity": s.max_capacity,
                "currentRegistrations": len(s.roster),
            }
            for s in updated
        ]
