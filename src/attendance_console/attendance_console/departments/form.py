from __future__ import annotations

from typing import Optional

from ..core.enums import ModalMode
from ..ui.modals import EntityFormModal
from .model import Department, DepartmentDraft
from .service import DepartmentService, default_department_draft, validate_department


class DepartmentFormModal(EntityFormModal[Department, DepartmentDraft]):
    entity_label = "Department"

    def __init__(self, service: DepartmentService):
        super().__init__()
        self._service = service

    def default_draft(self) -> DepartmentDraft:
        return default_department_draft()

    def seed_draft(self, entity: Department) -> DepartmentDraft:
        # Time inputs take HH:MM; the backend may send seconds too
        return DepartmentDraft(name=entity.name, clock_in=entity.clock_in_cutoff[:5], clock_out=entity.clock_out_cutoff[:5])

    def validate(self, draft: DepartmentDraft) -> dict[str, str]:
        return validate_department(draft)

    def send(self, mode: ModalMode, draft: DepartmentDraft, target_id: Optional[int]) -> None:
        self._service.save(draft, department_id=target_id if mode == ModalMode.EDIT else None)

    @property
    def subtitle(self) -> str:
        if self.mode == ModalMode.EDIT:
            return "Update department information and working hours"
        return "Create a new department with working hours"

    @property
    def working_hours(self) -> Optional[str]:
        if self.draft and self.draft.clock_in and self.draft.clock_out:
            return f"{self.draft.clock_in} - {self.draft.clock_out}"
        return None
