from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ModalMode
from ..departments.model import Department
from ..departments.service import DepartmentService
from ..ui.modals import EntityFormModal
from .model import Employee, EmployeeDraft
from .service import EmployeeService, generate_employee_code, validate_employee


class EmployeeFormModal(EntityFormModal[Employee, EmployeeDraft]):
    entity_label = "Employee"

    def __init__(self, service: EmployeeService, departments: DepartmentService):
        super().__init__()
        self._service = service
        self._departments = departments
        self.department_options: Sequence[Department] = []

    def load_dependencies(self) -> None:
        self.department_options = self._departments.lookup()

    def default_draft(self) -> EmployeeDraft:
        return EmployeeDraft(code=generate_employee_code(), department_id=None, name="", address="")

    def seed_draft(self, entity: Employee) -> EmployeeDraft:
        return EmployeeDraft(
            code=entity.code,
            department_id=entity.department_id,
            name=entity.name,
            address=entity.address,
        )

    def validate(self, draft: EmployeeDraft) -> dict[str, str]:
        return validate_employee(draft)

    def send(self, mode: ModalMode, draft: EmployeeDraft, target_id: Optional[int]) -> None:
        self._service.save(draft, employee_id=target_id if mode == ModalMode.EDIT else None)

    @property
    def subtitle(self) -> str:
        if self.mode == ModalMode.EDIT:
            return "Update employee information"
        return "Register a new employee"
