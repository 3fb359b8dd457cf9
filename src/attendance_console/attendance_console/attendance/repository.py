from __future__ import annotations

from typing import Optional, Protocol

from ..api.pagination import Page
from .model import AttendanceRecord, CheckResult, ReportFilters, TodayAttendance


class AttendanceRepository(Protocol):
    def report_page(self, *, page: int, per_page: int, filters: ReportFilters) -> Page[AttendanceRecord]:
        raise NotImplementedError

    def today(self, *, employee_id: int, day: str) -> Optional[TodayAttendance]:
        raise NotImplementedError

    def check_in(self, *, employee_id: int) -> CheckResult:
        raise NotImplementedError

    def check_out(self, *, employee_id: int) -> CheckResult:
        raise NotImplementedError
