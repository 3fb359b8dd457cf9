from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..api.pagination import Page
from ..common.validators import check_required, check_required_min_length
from ..core.constants import EMPLOYEE_CODE_PREFIX, LOOKUP_PER_PAGE
from ..core.exceptions import ApiError, ValidationError
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def generate_employee_code(now: Optional[datetime] = None) -> str:
    """``EMP`` + last six digits of the epoch milliseconds."""
    now = now or datetime.now()
    millis = str(int(now.timestamp() * 1000))
    return f"{EMPLOYEE_CODE_PREFIX}{millis[-6:]}"


def validate_employee(draft: EmployeeDraft) -> dict[str, str]:
    errors: dict[str, str] = {}

    checks = (
        ("code", check_required_min_length(draft.code, label="Employee ID", min_len=3)),
        ("name", check_required_min_length(draft.name, label="Employee name", min_len=2)),
        ("address", check_required_min_length(draft.address, label="Address", min_len=4)),
        ("department_id", check_required(draft.department_id or None, label="Department")),
    )
    for field_name, message in checks:
        if message:
            errors[field_name] = message

    return errors


class EmployeeService:
    """Use case: manage employees through the backend."""

    def __init__(self, employees: EmployeeRepository, *, lookup_per_page: int = LOOKUP_PER_PAGE):
        self._employees = employees
        self._lookup_per_page = lookup_per_page

    def list_page(self, *, page: int, per_page: int) -> Page[Employee]:
        return self._employees.list_page(page=page, per_page=per_page)

    def lookup(self) -> Sequence[Employee]:
        """Employees for the kiosk selector.

        Unlike the department dropdown this propagates ``ApiError``: the
        kiosk cannot work without the list and reports it to the operator.
        """
        return list(self._employees.list_page(page=1, per_page=self._lookup_per_page).items)

    def save(self, draft: EmployeeDraft, *, employee_id: Optional[int] = None) -> None:
        errors = validate_employee(draft)
        if errors:
            raise ValidationError("Employee is invalid", errors)

        if employee_id is None:
            self._employees.create(draft)
            logger.info("Created employee %s", draft.code.strip())
        else:
            self._employees.update(int(employee_id), draft)
            logger.info("Updated employee %s", employee_id)

    def delete(self, employee_id: int) -> None:
        self._employees.delete(int(employee_id))
        logger.info("Deleted employee %s", employee_id)
