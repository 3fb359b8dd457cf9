from __future__ import annotations

from typing import Any, Mapping, Optional

from ..api.client import BackendClient
from ..api.pagination import Page
from .model import AttendanceRecord, CheckResult, ReportFilters, TodayAttendance
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def report_page(self, *, page: int, per_page: int, filters: ReportFilters) -> Page[AttendanceRecord]:
        body = self._client.get(
            "attendance/report",
            params={
                "page": page,
                "per_page": per_page,
                "start_date": filters.start_date,
                "end_date": filters.end_date,
                "department_id": filters.department_id,
            },
            fallback="Failed to fetch attendance data",
        )
        envelope = dict(body or {})
        raw_rows = list(envelope.get("data") or [])
        # Row ids depend on the position within the page
        envelope["data"] = [dict(r, _index=i) for i, r in enumerate(raw_rows)]
        return Page.from_envelope(envelope, lambda r: AttendanceRecord.from_api(r, r["_index"]))

    def today(self, *, employee_id: int, day: str) -> Optional[TodayAttendance]:
        body = self._client.get("attendance/today", params={"employee_id": employee_id, "date": day})
        data = body.get("data") if isinstance(body, Mapping) else None
        return TodayAttendance.from_api(data) if isinstance(data, Mapping) else None

    def check_in(self, *, employee_id: int) -> CheckResult:
        body = self._client.post("attendance", json={"employee_id": employee_id}, fallback="Failed to check in")
        return _check_result(body)

    def check_out(self, *, employee_id: int) -> CheckResult:
        body = self._client.put("attendance", json={"employee_id": employee_id}, fallback="Failed to check out")
        return _check_result(body)


def _check_result(body: Any) -> CheckResult:
    body = body if isinstance(body, Mapping) else {}
    raw = body.get("attendance")
    return CheckResult(
        message=str(body.get("message") or ""),
        attendance=TodayAttendance.from_api(raw) if isinstance(raw, Mapping) else None,
    )
