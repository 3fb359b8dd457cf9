"""Table columns for the employee list."""
from __future__ import annotations

from markupsafe import Markup

from ..common.datetime_utils import format_date
from ..ui.table import Action, Column, DataTable, EmptyState
from .model import Employee


def render_info(employee: Employee, index: int) -> Markup:
    initial = employee.name[:1].upper() or "?"
    return Markup(
        '<div class="person"><span class="avatar">{}</span>'
        '<div><span class="cell-strong">{}</span><span class="muted">ID: {}</span></div></div>'
    ).format(initial, employee.name, employee.code)


def render_department(employee: Employee, index: int) -> Markup:
    name = employee.department.name if employee.department else "N/A"
    return Markup('<div><span class="chip">{}</span> <span class="muted">Department</span></div>').format(name)


def render_address(employee: Employee, index: int) -> Markup:
    return Markup('<div>{} <span class="muted">Location</span></div>').format(employee.address)


def render_created(employee: Employee, index: int) -> Markup:
    return Markup('<div>{} <span class="muted">Created</span></div>').format(format_date(employee.created_at))


def employee_table(per_page_options) -> DataTable:
    return DataTable(
        columns=[
            Column("employee_info", "EMPLOYEE INFO", render=render_info),
            Column("department", "DEPARTMENT", render=render_department),
            Column("address", "ADDRESS", render=render_address),
            Column("created_at", "CREATED DATE", render=render_created),
        ],
        actions=[
            Action("edit", "Edit", endpoint="employee_list", id_arg="edit_id"),
            Action("delete", "Delete", endpoint="employee_list", id_arg="confirm_delete", color="danger"),
        ],
        empty=EmptyState(
            title="No employees found",
            description="Get started by creating your first employee",
            icon="\U0001F465",
        ),
        per_page_options=per_page_options,
    )
