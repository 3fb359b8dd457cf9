from __future__ import annotations

from ..api.client import BackendClient
from ..api.pagination import Page
from .model import Department, DepartmentDraft
from .repository import DepartmentRepository


class HttpDepartmentRepository(DepartmentRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_page(self, *, page: int, per_page: int) -> Page[Department]:
        body = self._client.get("departements", params={"page": page, "per_page": per_page})
        return Page.from_envelope(body or {}, Department.from_api)

    def create(self, draft: DepartmentDraft) -> None:
        self._client.post("departements", json=draft.to_payload(), fallback="Failed to create department")

    def update(self, department_id: int, draft: DepartmentDraft) -> None:
        self._client.put(f"departements/{int(department_id)}", json=draft.to_payload(), fallback="Failed to update department")

    def delete(self, department_id: int) -> None:
        self._client.delete(f"departements/{int(department_id)}", fallback="Failed to delete department")
