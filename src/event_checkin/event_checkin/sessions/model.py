from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from ..common.validators import require_date_of_birth, require_non_empty
from ..core.enums import PrimaryLanguage
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class BenefitsRegistration:
    """Sign-up for a benefits session (one roster entry)."""

    id: str
    full_name: str
    email: str
    phone: str
    primary_language: PrimaryLanguage

    @property
    def display_name(self) -> str:
        return self.full_name

    @classmethod
    def from_payload(cls, registration_id: str, payload: dict[str, Any]) -> "BenefitsRegistration":
        language = require_non_empty(payload.get("primaryLanguage"), "Primary language")
        try:
            primary_language = PrimaryLanguage(language)
        except ValueError:
            raise ValidationError("Primary language must be English or Spanish")

        return cls(
            id=registration_id,
            full_name=require_non_empty(payload.get("fullName"), "Full name"),
            email=require_non_empty(payload.get("email"), "Email"),
            phone=require_non_empty(payload.get("phone"), "Phone"),
            primary_language=primary_language,
        )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BenefitsRegistration":
        return cls(
            id=d["id"],
            full_name=d.get("fullName", ""),
            email=d.get("email", ""),
            phone=d.get("phone", ""),
            primary_language=PrimaryLanguage(d.get("primaryLanguage", PrimaryLanguage.ENGLISH.value)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "primaryLanguage": self.primary_language.value,
        }


@dataclass(frozen=True)
class BiometricRegistration:
    """Sign-up for a biometric exam slot."""

    id: str
    first_name: str
    last_name: str
    phone: str
    email: str
    date_of_birth: str  # MM/DD/YYYY, kept as text

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_payload(cls, registration_id: str, payload: dict[str, Any]) -> "BiometricRegistration":
        return cls(
            id=registration_id,
            first_name=require_non_empty(payload.get("firstName"), "First name"),
            last_name=require_non_empty(payload.get("lastName"), "Last name"),
            phone=require_non_empty(payload.get("phone"), "Phone"),
            email=require_non_empty(payload.get("email"), "Email"),
            date_of_birth=require_date_of_birth(payload.get("dateOfBirth")),
        )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BiometricRegistration":
        return cls(
            id=d["id"],
            first_name=d.get("firstName", ""),
            last_name=d.get("lastName", ""),
            phone=d.get("phone", ""),
            email=d.get("email", ""),
            date_of_birth=d.get("dateOfBirth", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "phone": self.phone,
            "email": self.email,
            "dateOfBirth": self.date_of_birth,
        }


Registration = Union[BenefitsRegistration, BiometricRegistration]


@dataclass
class Session:
    """Fixed time slot with a capacity and an ordered roster.

    Capacity is only enforced when a registration is added; a roster is not
    re-validated after the capacity changes.
    """

    ROSTER_KEY: ClassVar[str] = "registrations"
    REGISTRATION_CLASS: ClassVar[type] = BiometricRegistration

    id: str
    time: str
    max_capacity: int
    roster: list = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.roster) >= self.max_capacity

    @property
    def spots_left(self) -> int:
        return max(self.max_capacity - len(self.roster), 0)

    def index_of(self, registration_id: str) -> Optional[int]:
        for i, reg in enumerate(self.roster):
            if reg.id == registration_id:
                return i
        return None

    def occupancy(self) -> dict[str, Any]:
        """Derived counters for API readers; never persisted."""
        return {"spotsLeft": self.spots_left, "isFull": self.is_full}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Session":
        return cls(
            id=d["id"],
            time=d["time"],
            max_capacity=int(d["maxCapacity"]),
            roster=[cls.REGISTRATION_CLASS.from_dict(r) for r in d.get(cls.ROSTER_KEY) or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "time": self.time,
            self.ROSTER_KEY: [r.to_dict() for r in self.roster],
            "maxCapacity": self.max_capacity,
        }


@dataclass
class BenefitsSession(Session):
    ROSTER_KEY: ClassVar[str] = "employees"
    REGISTRATION_CLASS: ClassVar[type] = BenefitsRegistration

    spanish_only: bool = False

    @property
    def has_spanish_speakers(self) -> bool:
        return any(r.primary_language == PrimaryLanguage.SPANISH for r in self.roster)

    def occupancy(self) -> dict[str, Any]:
        return {**super().occupancy(), "hasSpanishSpeakers": self.has_spanish_speakers}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BenefitsSession":
        return cls(
            id=d["id"],
            time=d["time"],
            max_capacity=int(d["maxCapacity"]),
            roster=[BenefitsRegistration.from_dict(r) for r in d.get(cls.ROSTER_KEY) or []],
            spanish_only=bool(d.get("spanishOnly", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        if self.spanish_only:
            out["spanishOnly"] = True
        return out


@dataclass
class BiometricSession(Session):
    ROSTER_KEY: ClassVar[str] = "registrations"
    REGISTRATION_CLASS: ClassVar[type] = BiometricRegistration


@dataclass
class SessionsDocument:
    """Top-level dataset: event header plus every session of one family."""

    SESSION_CLASS: ClassVar[type] = BiometricSession

    event_date: str
    event_title: str
    sessions: list = field(default_factory=list)

    def find_session(self, session_id: str) -> Optional[Session]:
        for s in self.sessions:
            if s.id == session_id:
                return s
        return None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "SessionsDocument":
        return cls(
            event_date=d.get("eventDate", ""),
            event_title=d.get("eventTitle", ""),
            sessions=[cls.SESSION_CLASS.from_dict(s) for s in d.get("sessions") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventDate": self.event_date,
            "eventTitle": self.event_title,
            "sessions": [s.to_dict() for s in self.sessions],
        }


@dataclass
class SessionsData(SessionsDocument):
    SESSION_CLASS: ClassVar[type] = BenefitsSession


@dataclass
class BiometricsData(SessionsDocument):
    SESSION_CLASS: ClassVar[type] = BiometricSession
