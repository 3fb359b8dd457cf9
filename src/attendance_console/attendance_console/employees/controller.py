from __future__ import annotations

from flask import Flask

from ..core.enums import ValidPage
from ..container import Container
from ..ui.crud import CrudPage, register_crud
from .form import EmployeeFormModal
from .model import EmployeeDraft
from .views import employee_table


def register(app: Flask, container: Container) -> None:
    service = container.employee_service
    per_page_options = list(app.config["PER_PAGE_OPTIONS"])

    page = CrudPage(
        slug="employee",
        page=ValidPage.EMPLOYEE,
        entity_label="Employee",
        plural_label="Employees",
        form_template="employee/_form.html",
        list_page=service.list_page,
        delete=service.delete,
        make_table=lambda: employee_table(per_page_options),
        make_form=lambda: EmployeeFormModal(service, container.department_service),
        draft_from_form=EmployeeDraft.from_form,
        display_name=lambda e: e.name,
        delete_message=lambda e: (
            f'Are you sure you want to delete "{e.name}" ({e.code})? '
            "This will permanently remove the employee and all associated data."
        ),
    )
    register_crud(app, page, in_flight=container.in_flight)
