from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class CheckIn:
    """Arrival of one employee at the event.

    ``employee_id`` points at a directory record but is not enforced;
    ``employee_name`` is a snapshot taken at check-in time.
    """

    id: str
    employee_id: str
    employee_name: str
    check_in_time: str
    food_tickets: int
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "CheckIn":
        return cls(
            id=d["id"],
            employee_id=d["employeeId"],
            employee_name=d.get("employeeName", ""),
            check_in_time=d.get("checkInTime", ""),
            food_tickets=int(d.get("foodTickets", 0)),
            notes=d.get("notes"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "checkInTime": self.check_in_time,
            "foodTickets": self.food_tickets,
        }
        if self.notes is not None:
            out["notes"] = self.notes
        return out


@dataclass
class CheckInsData:
    check_ins: list[CheckIn] = field(default_factory=list)

    def find_by_employee(self, employee_id: str) -> Optional[CheckIn]:
        for c in self.check_ins:
            if c.employee_id == employee_id:
                return c
        return None

    def index_of(self, checkin_id: str) -> Optional[int]:
        for i, c in enumerate(self.check_ins):
            if c.id == checkin_id:
                return i
        return None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "CheckInsData":
        return cls(check_ins=[CheckIn.from_dict(c) for c in d.get("checkIns") or []])

    def to_dict(self) -> dict[str, Any]:
        return {"checkIns": [c.to_dict() for c in self.check_ins]}


@dataclass(frozen=True)
class CheckInSummary:
    total_check_ins: int
    total_food_tickets: int

    def to_dict(self) -> dict[str, Any]:
        return {"totalCheckIns": self.total_check_ins, "totalFoodTickets": self.total_food_tickets}


@dataclass(frozen=True)
class EmployeeSessions:
    """Session time labels an employee appears to be registered for."""

    benefits_session: Optional[str] = None
    biometrics_session: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.benefits_session:
            out["benefitsSession"] = self.benefits_session
        if self.biometrics_session:
            out["biometricsSession"] = self.biometrics_session
        return out
