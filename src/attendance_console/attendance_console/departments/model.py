from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class DepartmentMember:
    id: int
    code: str
    name: str


@dataclass(frozen=True)
class Department:
    """Department as returned by the backend (read-only on the client)."""

    id: int
    name: str
    clock_in_cutoff: str
    clock_out_cutoff: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    employees: tuple[DepartmentMember, ...] = ()

    @classmethod
    def from_api(cls, row: Mapping[str, Any]) -> "Department":
        members = tuple(
            DepartmentMember(id=int(e["id"]), code=str(e.get("employee_id") or ""), name=str(e.get("name") or ""))
            for e in (row.get("employees") or [])
        )
        return cls(
            id=int(row["id"]),
            name=str(row.get("departement_name") or ""),
            clock_in_cutoff=str(row.get("max_clock_in_time") or ""),
            clock_out_cutoff=str(row.get("max_clock_out_time") or ""),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
            employees=members,
        )

    @property
    def employee_count(self) -> int:
        return len(self.employees)


@dataclass(frozen=True)
class DepartmentDraft:
    """Form state for create/update."""

    name: str = ""
    clock_in: str = ""
    clock_out: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "DepartmentDraft":
        return cls(
            name=str(form.get("departement_name") or ""),
            clock_in=str(form.get("max_clock_in_time") or ""),
            clock_out=str(form.get("max_clock_out_time") or ""),
        )

    def to_payload(self) -> dict:
        return {
            "departement_name": self.name.strip(),
            "max_clock_in_time": self.clock_in,
            "max_clock_out_time": self.clock_out,
        }
