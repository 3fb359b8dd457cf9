from __future__ import annotations

from typing import Protocol

from ..api.pagination import Page
from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    def list_page(self, *, page: int, per_page: int) -> Page[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft) -> None:
        raise NotImplementedError

    def update(self, employee_id: int, draft: EmployeeDraft) -> None:
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError
