from __future__ import annotations

from typing import Protocol

from ..api.pagination import Page
from .model import Department, DepartmentDraft


class DepartmentRepository(Protocol):
    """Department persistence; the service depends on this, not on HTTP."""

    def list_page(self, *, page: int, per_page: int) -> Page[Department]:
        raise NotImplementedError

    def create(self, draft: DepartmentDraft) -> None:
        raise NotImplementedError

    def update(self, department_id: int, draft: DepartmentDraft) -> None:
        raise NotImplementedError

    def delete(self, department_id: int) -> None:
        raise NotImplementedError
