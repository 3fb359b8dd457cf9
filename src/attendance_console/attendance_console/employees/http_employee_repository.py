from __future__ import annotations

from ..api.client import BackendClient
from ..api.pagination import Page
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository


class HttpEmployeeRepository(EmployeeRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_page(self, *, page: int, per_page: int) -> Page[Employee]:
        body = self._client.get("employees", params={"page": page, "per_page": per_page})
        return Page.from_envelope(body or {}, Employee.from_api)

    def create(self, draft: EmployeeDraft) -> None:
        self._client.post("employees", json=draft.to_payload(), fallback="Failed to create employee")

    def update(self, employee_id: int, draft: EmployeeDraft) -> None:
        self._client.put(f"employees/{int(employee_id)}", json=draft.to_payload(), fallback="Failed to update employee")

    def delete(self, employee_id: int) -> None:
        self._client.delete(f"employees/{int(employee_id)}", fallback="Failed to delete employee")
