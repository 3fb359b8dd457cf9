from __future__ import annotations

import pytest

from src.attendance_console.attendance_console.core.enums import ModalMode
from src.attendance_console.attendance_console.core.exceptions import ApiError
from src.attendance_console.attendance_console.departments.service import DepartmentService
from src.attendance_console.attendance_console.employees.form import EmployeeFormModal
from src.attendance_console.attendance_console.employees.model import EmployeeDraft
from src.attendance_console.attendance_console.employees.service import (
    EmployeeService,
    generate_employee_code,
    validate_employee,
)


def test_generated_code_uses_last_six_millisecond_digits(fixed_now):
    code = generate_employee_code(fixed_now)
    millis = str(int(fixed_now.timestamp() * 1000))

    assert code == "EMP" + millis[-6:]
    assert len(code) == 9


def test_validation_reports_each_field():
    errors = validate_employee(EmployeeDraft(code="E1", department_id=None, name="A", address="abc"))

    assert errors == {
        "code": "Employee ID must be at least 3 characters",
        "name": "Employee name must be at least 2 characters",
        "address": "Address must be at least 4 characters",
        "department_id": "Department is required",
    }


def test_valid_employee_passes():
    draft = EmployeeDraft(code="EMP001", department_id=1, name="Budi", address="Jl. A")

    assert validate_employee(draft) == {}


def test_lookup_propagates_backend_errors(employee_repo):
    employee_repo.fail_with = "Backend down"

    with pytest.raises(ApiError):
        EmployeeService(employee_repo).lookup()


def test_form_loads_department_options(employee_repo, department_repo):
    modal = EmployeeFormModal(EmployeeService(employee_repo), DepartmentService(department_repo))

    modal.open(ModalMode.CREATE)

    assert [d.name for d in modal.department_options] == ["Engineering"]
    assert modal.draft.code.startswith("EMP")
    assert modal.dependencies_loading is False


def test_form_submits_new_employee(employee_repo, department_repo):
    modal = EmployeeFormModal(EmployeeService(employee_repo), DepartmentService(department_repo))
    modal.open(ModalMode.CREATE)
    modal.update_field("name", "Sari Dewi")
    modal.update_field("address", "Jl. Sudirman 10")
    modal.update_field("department_id", 1)

    assert modal.submit() is True
    assert employee_repo.saved[-1].to_payload()["departement_id"] == 1


def test_draft_from_form_parses_department():
    draft = EmployeeDraft.from_form(
        {"employee_id": "EMP1", "departement_id": "3", "name": "N", "address": "Addr"}
    )

    assert draft.department_id == 3
    assert EmployeeDraft.from_form({"departement_id": "x"}).department_id is None
