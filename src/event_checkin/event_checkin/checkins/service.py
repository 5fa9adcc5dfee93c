from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import new_id
from ..common.validators import optional_str, require_non_empty, require_non_negative_int
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..store.dataset import DatasetRepository
from .matching import find_session_time
from .model import CheckIn, CheckInSummary, EmployeeSessions

logger = logging.getLogger(__name__)


class CheckInService:
    """Use case: record arrivals at the door (one check-in per employee)."""

    def __init__(
        self,
        checkins: DatasetRepository,
        sessions: Optional[DatasetRepository] = None,
        biometrics: Optional[DatasetRepository] = None,
    ):
        self._checkins = checkins
        self._sessions = sessions
        self._biometrics = biometrics

    def list_check_ins(self) -> Sequence[CheckIn]:
        """Most recent first."""
        items = list(self._checkins.load().check_ins)
        items.sort(key=lambda c: c.check_in_time, reverse=True)
        return items

    def get_check_in(self, checkin_id: str) -> CheckIn:
        for c in self._checkins.load().check_ins:
            if c.id == checkin_id:
                return c
        raise NotFoundError("Check-in not found")

    def check_in(
        self,
        *,
        employee_id: str,
        employee_name: str,
        food_tickets,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> CheckIn:
        try:
            employee_id = require_non_empty(employee_id, "Employee ID")
            employee_name = require_non_empty(employee_name, "Employee name")
        except ValidationError:
            raise ValidationError("Employee ID and name are required")
        tickets = require_non_negative_int(food_tickets, "Food tickets")

        data = self._checkins.load()
        existing = data.find_by_employee(employee_id)
        if existing:
            raise ConflictError("Employee has already checked in", existing=existing)

        record = CheckIn(
            id=new_id("checkin"),
            employee_id=employee_id,
            employee_name=employee_name,
            check_in_time=to_iso(now or now_utc()),
            food_tickets=tickets,
            notes=optional_str(notes),
        )
        data.check_ins.append(record)
        self._checkins.save(data)

        logger.info("Checked in %s (%s) with %s food tickets", employee_name, employee_id, tickets)
        return record

    def delete_check_in(self, checkin_id: str) -> None:
        data = self._checkins.load()
        index = data.index_of(checkin_id)
        if index is None:
            raise NotFoundError("Check-in not found")

        removed = data.check_ins.pop(index)
        self._checkins.save(data)
        logger.info("Deleted check-in %s for %s", checkin_id, removed.employee_id)

    def summary(self) -> CheckInSummary:
        items = self._checkins.load().check_ins
        return CheckInSummary(
            total_check_ins=len(items),
            total_food_tickets=sum(c.food_tickets for c in items),
        )

    def find_employee_sessions(self, *, email: Optional[str], first_name: str, last_name: str) -> EmployeeSessions:
        """Benefits and biometric sessions the employee seems registered for."""
        benefits_time = None
        biometrics_time = None
        if self._sessions is not None:
            benefits_time = find_session_time(
                self._sessions.load().sessions, email=email, first_name=first_name, last_name=last_name
            )
        if self._biometrics is not None:
            biometrics_time = find_session_time(
                self._biometrics.load().sessions, email=email, first_name=first_name, last_name=last_name
            )
        return EmployeeSessions(benefits_session=benefits_time, biometrics_session=biometrics_time)
