from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..departments.model import Department


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model row of the attendance report.

    The backend sends no identifier for report rows, so ``row_id`` is
    synthesized from employee, date and position on the page.
    """

    row_id: str
    employee_id: int
    employee_name: str
    department: Optional[Department]
    date: str
    clock_in_time: Optional[str]
    status_in: str
    clock_out_time: Optional[str]
    status_out: str

    @classmethod
    def from_api(cls, row: Mapping[str, Any], index: int = 0) -> "AttendanceRecord":
        dept_raw = row.get("departement")
        employee_id = int(row.get("employee_id") or 0)
        day = str(row.get("date") or "")
        return cls(
            row_id=f"{employee_id}_{day}_{index}",
            employee_id=employee_id,
            employee_name=str(row.get("employee_name") or ""),
            department=Department.from_api(dept_raw) if isinstance(dept_raw, Mapping) and "id" in dept_raw else None,
            date=day,
            clock_in_time=row.get("clock_in_time"),
            status_in=str(row.get("status_in") or ""),
            clock_out_time=row.get("clock_out_time"),
            status_out=str(row.get("status_out") or ""),
        )


@dataclass(frozen=True)
class TodayAttendance:
    id: int
    employee_id: int
    date: str
    clock_in_time: Optional[str]
    clock_out_time: Optional[str] = None

    @classmethod
    def from_api(cls, row: Mapping[str, Any]) -> "TodayAttendance":
        return cls(
            id=int(row.get("id") or 0),
            employee_id=int(row.get("employee_id") or 0),
            date=str(row.get("date") or ""),
            clock_in_time=row.get("clock_in_time"),
            clock_out_time=row.get("clock_out_time") or None,
        )


@dataclass(frozen=True)
class CheckResult:
    message: str
    attendance: Optional[TodayAttendance]


@dataclass(frozen=True)
class AttendanceStats:
    on_time: int = 0
    late: int = 0
    early: int = 0
    total: int = 0

    @property
    def on_time_rate(self) -> int:
        if self.total <= 0:
            return 0
        return round(self.on_time / self.total * 100)

    def as_dict(self) -> dict:
        return {"onTime": self.on_time, "late": self.late, "early": self.early, "total": self.total}


@dataclass(frozen=True)
class ReportFilters:
    start_date: str
    end_date: str
    department_id: Optional[int] = None

    @property
    def complete(self) -> bool:
        return bool(self.start_date and self.end_date)
