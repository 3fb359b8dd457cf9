"""Table columns for the attendance history report."""
from __future__ import annotations

from markupsafe import Markup

from ..common.datetime_utils import format_date, format_time
from ..ui.table import Column, DataTable, EmptyState
from .model import AttendanceRecord
from .service import status_color


def render_employee(record: AttendanceRecord, index: int) -> Markup:
    return Markup('<div><span class="cell-strong">{}</span><span class="muted">ID: {}</span></div>').format(
        record.employee_name, record.employee_id
    )


def render_department(record: AttendanceRecord, index: int) -> Markup:
    dept = record.department
    if dept is None:
        return Markup('<div><span class="cell-strong">N/A</span></div>')
    return Markup('<div><span class="cell-strong">{}</span><span class="muted">{} - {}</span></div>').format(
        dept.name, format_time(dept.clock_in_cutoff), format_time(dept.clock_out_cutoff)
    )


def render_date(record: AttendanceRecord, index: int) -> Markup:
    return Markup("<span>{}</span>").format(format_date(record.date))


def _time_with_status(time_value, status: str) -> Markup:
    return Markup('<div><span class="time">{}</span> <span class="chip chip-{}">{}</span></div>').format(
        format_time(time_value), status_color(status), status or "-"
    )


def render_clock_in(record: AttendanceRecord, index: int) -> Markup:
    return _time_with_status(record.clock_in_time, record.status_in)


def render_clock_out(record: AttendanceRecord, index: int) -> Markup:
    return _time_with_status(record.clock_out_time, record.status_out)


def attendance_table(per_page_options, *, has_filter: bool) -> DataTable:
    return DataTable(
        columns=[
            Column("employee_info", "EMPLOYEE", render=render_employee),
            Column("department", "DEPARTMENT", render=render_department),
            Column("date", "DATE", render=render_date),
            Column("clock_in", "CLOCK IN", render=render_clock_in),
            Column("clock_out", "CLOCK OUT", render=render_clock_out),
        ],
        row_key="row_id",
        empty=EmptyState(
            title="No attendance records found",
            description=(
                "Try adjusting your filter criteria"
                if has_filter
                else "No attendance data available for the selected period"
            ),
        ),
        per_page_options=per_page_options,
    )
