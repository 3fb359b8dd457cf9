from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

from ..api.pagination import Page
from ..core.constants import LOOKUP_PER_PAGE, STATUS_EARLY, STATUS_LATE, STATUS_ON_TIME
from ..core.enums import KioskStatus
from ..core.exceptions import ApiError, ValidationError
from ..employees.model import Employee
from .model import AttendanceRecord, AttendanceStats, CheckResult, ReportFilters, TodayAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def tally_statuses(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    """Count on-time/late clock-ins and early clock-outs."""
    on_time = late = early = total = 0
    for record in records:
        total += 1
        status_in = record.status_in.strip().lower()
        if status_in == STATUS_ON_TIME:
            on_time += 1
        elif status_in == STATUS_LATE:
            late += 1
        if record.status_out.strip().lower() == STATUS_EARLY:
            early += 1
    return AttendanceStats(on_time=on_time, late=late, early=early, total=total)


def status_color(status: Optional[str]) -> str:
    s = (status or "").strip().lower()
    if s == STATUS_ON_TIME:
        return "success"
    if s == STATUS_LATE:
        return "danger"
    if s == STATUS_EARLY:
        return "warning"
    return "default"


def kiosk_status(record: Optional[TodayAttendance]) -> KioskStatus:
    if record is None:
        return KioskStatus.NOT_CHECKED_IN
    if not record.clock_out_time:
        return KioskStatus.CHECKED_IN
    return KioskStatus.COMPLETED


@dataclass(frozen=True)
class KioskView:
    """What the check-in/check-out screen shows for the selected employee."""

    employee: Optional[Employee]
    today: Optional[TodayAttendance]

    @property
    def status(self) -> KioskStatus:
        return kiosk_status(self.today)

    @property
    def status_color(self) -> str:
        return {
            KioskStatus.CHECKED_IN: "warning",
            KioskStatus.COMPLETED: "success",
        }.get(self.status, "default")

    @property
    def can_check_in(self) -> bool:
        return self.employee is not None and self.today is None

    @property
    def can_check_out(self) -> bool:
        return self.employee is not None and self.today is not None and not self.today.clock_out_time


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, stats_per_page: int = LOOKUP_PER_PAGE):
        self._attendance = attendance
        self._stats_per_page = int(stats_per_page)

    # report
    def report_page(self, *, page: int, per_page: int, filters: ReportFilters) -> Page[AttendanceRecord]:
        if not filters.complete:
            raise ValidationError("Start date and end date are required")
        return self._attendance.report_page(page=page, per_page=per_page, filters=filters)

    def page_stats(self, records: Sequence[AttendanceRecord]) -> AttendanceStats:
        """Tally over the rows currently displayed only."""
        return tally_statuses(records)

    def iter_report(self, filters: ReportFilters) -> Iterator[AttendanceRecord]:
        """Every row matching the filters, walking the report page by page."""
        page = 1
        while True:
            result = self.report_page(page=page, per_page=self._stats_per_page, filters=filters)
            yield from result.items
            if page >= result.last_page or not result.items:
                break
            page += 1

    def global_stats(self, filters: ReportFilters) -> AttendanceStats:
        """Tally over the whole filtered report, not just one page."""
        return tally_statuses(self.iter_report(filters))

    # kiosk
    def today_record(self, employee_id: int, *, day: Optional[date] = None) -> Optional[TodayAttendance]:
        day = day or date.today()
        try:
            return self._attendance.today(employee_id=int(employee_id), day=day.strftime("%Y-%m-%d"))
        except ApiError as e:
            # Treated as "no record yet"; the kiosk stays usable
            logger.warning("Error fetching today attendance for %s: %s", employee_id, e.message)
            return None

    def check_in(self, employee_id: Optional[int]) -> CheckResult:
        if not employee_id:
            raise ValidationError("Please select an employee first")
        result = self._attendance.check_in(employee_id=int(employee_id))
        logger.info("Employee %s checked in", employee_id)
        return result

    def check_out(self, employee_id: Optional[int], *, day: Optional[date] = None) -> CheckResult:
        if not employee_id:
            raise ValidationError("Please select an employee first")
        if self.today_record(int(employee_id), day=day) is None:
            raise ValidationError("No check-in record found for today")
        result = self._attendance.check_out(employee_id=int(employee_id))
        logger.info("Employee %s checked out", employee_id)
        return result

    def kiosk_view(self, employee: Optional[Employee], *, day: Optional[date] = None) -> KioskView:
        if employee is None:
            return KioskView(employee=None, today=None)
        return KioskView(employee=employee, today=self.today_record(employee.id, day=day))
