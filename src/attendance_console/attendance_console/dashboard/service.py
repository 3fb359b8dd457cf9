from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceStats, ReportFilters
from ..attendance.service import AttendanceService
from ..core.exceptions import ApiError
from ..departments.service import DepartmentService
from ..employees.service import EmployeeService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    day: date
    department_total: Optional[int]
    employee_total: Optional[int]
    today: AttendanceStats
    errors: tuple[str, ...] = field(default_factory=tuple)


class DashboardService:
    """Headline numbers for the landing page.

    Each figure is fetched on its own; a backend failure on one leaves that
    figure as ``None`` and is reported in ``errors`` instead of failing the
    whole page.
    """

    def __init__(
        self,
        departments: DepartmentService,
        employees: EmployeeService,
        attendance: AttendanceService,
    ):
        self._departments = departments
        self._employees = employees
        self._attendance = attendance

    def summary(self, *, day: Optional[date] = None) -> DashboardSummary:
        day = day or date.today()
        errors: list[str] = []

        department_total = None
        try:
            department_total = self._departments.list_page(page=1, per_page=1).total
        except ApiError as e:
            logger.warning("Dashboard: departments unavailable: %s", e.message)
            errors.append("Failed to load departments")

        employee_total = None
        try:
            employee_total = self._employees.list_page(page=1, per_page=1).total
        except ApiError as e:
            logger.warning("Dashboard: employees unavailable: %s", e.message)
            errors.append("Failed to load employees")

        today = AttendanceStats()
        iso = day.strftime("%Y-%m-%d")
        try:
            today = self._attendance.global_stats(ReportFilters(start_date=iso, end_date=iso))
        except ApiError as e:
            logger.warning("Dashboard: attendance unavailable: %s", e.message)
            errors.append("Failed to fetch attendance data")

        return DashboardSummary(
            day=day,
            department_total=department_total,
            employee_total=employee_total,
            today=today,
            errors=tuple(errors),
        )
