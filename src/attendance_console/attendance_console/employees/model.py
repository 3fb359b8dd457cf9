from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..departments.model import Department


@dataclass(frozen=True)
class Employee:
    id: int
    code: str
    department_id: Optional[int]
    name: str
    address: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    department: Optional[Department] = None

    @classmethod
    def from_api(cls, row: Mapping[str, Any]) -> "Employee":
        dept_raw = row.get("departement")
        dept_id = row.get("departement_id")
        return cls(
            id=int(row["id"]),
            code=str(row.get("employee_id") or ""),
            department_id=int(dept_id) if dept_id not in (None, "") else None,
            name=str(row.get("name") or ""),
            address=str(row.get("address") or ""),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
            department=Department.from_api(dept_raw) if isinstance(dept_raw, Mapping) and "id" in dept_raw else None,
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.code})"


@dataclass(frozen=True)
class EmployeeDraft:
    code: str = ""
    department_id: Optional[int] = None
    name: str = ""
    address: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "EmployeeDraft":
        raw_dept = form.get("departement_id")
        try:
            dept_id = int(raw_dept) if raw_dept not in (None, "") else None
        except (TypeError, ValueError):
            dept_id = None
        return cls(
            code=str(form.get("employee_id") or ""),
            department_id=dept_id,
            name=str(form.get("name") or ""),
            address=str(form.get("address") or ""),
        )

    def to_payload(self) -> dict:
        return {
            "employee_id": self.code.strip(),
            "departement_id": self.department_id,
            "name": self.name.strip(),
            "address": self.address.strip(),
        }
