"""Table columns for the department list."""
from __future__ import annotations

from markupsafe import Markup

from ..common.datetime_utils import format_date, format_time
from ..ui.table import Action, Column, DataTable, EmptyState
from .model import Department


def render_name(department: Department, index: int) -> Markup:
    return Markup('<span class="cell-strong">{}</span>').format(department.name)


def render_schedule(department: Department, index: int) -> Markup:
    return Markup(
        '<div class="schedule"><span class="chip chip-success">In: {}</span>'
        '<span class="chip chip-danger">Out: {}</span></div>'
    ).format(format_time(department.clock_in_cutoff), format_time(department.clock_out_cutoff))


def render_employees(department: Department, index: int) -> Markup:
    count = department.employee_count
    return Markup('<div class="count"><strong>{}</strong> <span class="muted">Staff {}</span></div>').format(
        count, "Member" if count == 1 else "Members"
    )


def render_created(department: Department, index: int) -> Markup:
    return Markup('<div>{} <span class="muted">Created</span></div>').format(format_date(department.created_at))


def department_table(per_page_options) -> DataTable:
    return DataTable(
        columns=[
            Column("departement_name", "DEPARTMENT NAME", render=render_name),
            Column("schedule", "SCHEDULE", render=render_schedule),
            Column("employees", "EMPLOYEES", render=render_employees, align="center"),
            Column("created_at", "CREATED DATE", render=render_created),
        ],
        actions=[
            Action("edit", "Edit", endpoint="department_list", id_arg="edit_id"),
            Action("delete", "Delete", endpoint="department_list", id_arg="confirm_delete", color="danger"),
        ],
        empty=EmptyState(
            title="No departments found",
            description="Get started by creating your first department",
        ),
        per_page_options=per_page_options,
    )
