from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..api.pagination import Page
from ..common.datetime_utils import parse_clock
from ..common.validators import check_required, check_required_min_length
from ..core.constants import DEFAULT_CLOCK_IN, DEFAULT_CLOCK_OUT, LOOKUP_PER_PAGE
from ..core.exceptions import ApiError, ValidationError
from .model import Department, DepartmentDraft
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


def default_department_draft() -> DepartmentDraft:
    return DepartmentDraft(name="", clock_in=DEFAULT_CLOCK_IN, clock_out=DEFAULT_CLOCK_OUT)


def validate_department(draft: DepartmentDraft) -> dict[str, str]:
    errors: dict[str, str] = {}

    name_error = check_required_min_length(draft.name, label="Department name", min_len=2)
    if name_error:
        errors["name"] = name_error

    in_error = check_required(draft.clock_in, label="Clock in time")
    if in_error:
        errors["clock_in"] = in_error
    out_error = check_required(draft.clock_out, label="Clock out time")
    if out_error:
        errors["clock_out"] = out_error

    if not in_error and not out_error:
        try:
            clock_in = parse_clock(draft.clock_in)
            clock_out = parse_clock(draft.clock_out)
        except ValueError:
            errors["clock_out"] = "Invalid time"
        else:
            # Both cutoffs are times on the same day
            if clock_in >= clock_out:
                errors["clock_out"] = "Clock out time must be after clock in time"

    return errors


class DepartmentService:
    """Use case: manage departments through the backend."""

    def __init__(self, departments: DepartmentRepository, *, lookup_per_page: int = LOOKUP_PER_PAGE):
        self._departments = departments
        self._lookup_per_page = lookup_per_page

    def list_page(self, *, page: int, per_page: int) -> Page[Department]:
        return self._departments.list_page(page=page, per_page=per_page)

    def lookup(self) -> Sequence[Department]:
        """Departments for dropdowns; failures degrade to an empty list."""
        try:
            return list(self._departments.list_page(page=1, per_page=self._lookup_per_page).items)
        except ApiError as e:
            logger.warning("Error fetching departments: %s", e.message)
            return []

    def save(self, draft: DepartmentDraft, *, department_id: Optional[int] = None) -> None:
        errors = validate_department(draft)
        if errors:
            raise ValidationError("Department is invalid", errors)

        if department_id is None:
            self._departments.create(draft)
            logger.info("Created department %r", draft.name.strip())
        else:
            self._departments.update(int(department_id), draft)
            logger.info("Updated department %s", department_id)

    def delete(self, department_id: int) -> None:
        self._departments.delete(int(department_id))
        logger.info("Deleted department %s", department_id)
