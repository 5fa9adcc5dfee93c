from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import EmployeeStatus, EmploymentType


@dataclass(frozen=True)
class EmployeeRecord:
    """Directory entry used to look people up at the door.

    Not linked to session registrations; those are matched by name/email at
    query time.
    """

    id: str
    first_name: str
    last_name: str
    phone: str
    status: EmployeeStatus
    created_at: str
    updated_at: str
    middle_name: Optional[str] = None
    employee_id: Optional[str] = None
    hire_date: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "EmployeeRecord":
        employment_type = d.get("employmentType")
        return cls(
            id=d["id"],
            first_name=d.get("firstName", ""),
            middle_name=d.get("middleName"),
            last_name=d.get("lastName", ""),
            employee_id=d.get("employeeId"),
            hire_date=d.get("hireDate"),
            employment_type=EmploymentType(employment_type) if employment_type is not None else None,
            phone=d.get("phone", ""),
            email=d.get("email"),
            status=EmployeeStatus(d.get("status") or EmployeeStatus.ACTIVE.value),
            created_at=d.get("createdAt", ""),
            updated_at=d.get("updatedAt", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "employeeId": self.employee_id,
            "hireDate": self.hire_date,
            "employmentType": self.employment_type.value if self.employment_type is not None else None,
            "phone": self.phone,
            "email": self.email,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        # Unset optionals are left out of the stored document.
        return {k: v for k, v in out.items() if v is not None}


@dataclass
class EmployeesData:
    employees: list[EmployeeRecord] = field(default_factory=list)

    def index_of(self, record_id: str) -> Optional[int]:
        for i, emp in enumerate(self.employees):
            if emp.id == record_id:
                return i
        return None

    def has_email(self, email: str) -> bool:
        return any(emp.email == email for emp in self.employees)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "EmployeesData":
        return cls(employees=[EmployeeRecord.from_dict(e) for e in d.get("employees") or []])

    def to_dict(self) -> dict[str, Any]:
        return {"employees": [e.to_dict() for e in self.employees]}
