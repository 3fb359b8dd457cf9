from __future__ import annotations

from flask import Flask

from ..core.enums import ValidPage
from ..container import Container
from ..ui.crud import CrudPage, register_crud
from .form import DepartmentFormModal
from .model import DepartmentDraft
from .views import department_table


def register(app: Flask, container: Container) -> None:
    service = container.department_service
    per_page_options = list(app.config["PER_PAGE_OPTIONS"])

    page = CrudPage(
        slug="department",
        page=ValidPage.DEPARTMENT,
        entity_label="Department",
        plural_label="Departments",
        form_template="department/_form.html",
        list_page=service.list_page,
        delete=service.delete,
        make_table=lambda: department_table(per_page_options),
        make_form=lambda: DepartmentFormModal(service),
        draft_from_form=DepartmentDraft.from_form,
        display_name=lambda d: d.name,
        delete_message=lambda d: (
            f'Are you sure you want to delete "{d.name}" department? '
            "This will permanently remove the department and all its associated data."
        ),
    )
    register_crud(app, page, in_flight=container.in_flight)
