from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from ..core.enums import ModalMode
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E")  # entity
D = TypeVar("D")  # draft


class EntityFormModal(Generic[E, D]):
    """Create/edit form bound to a local draft.

    Subclasses supply the entity specifics: ``default_draft``, ``seed_draft``,
    ``validate`` and ``send``. The modal owns open/close, the draft, per-field
    errors and the submitting flag.
    """

    entity_label = "Item"

    def __init__(self) -> None:
        self.is_open = False
        self.mode = ModalMode.CREATE
        self.edit_target: Optional[E] = None
        self.target_id: Optional[int] = None
        self.draft: Optional[D] = None
        self.errors: dict[str, str] = {}
        self.submitting = False
        self.dependencies_loading = False

    # hooks
    def default_draft(self) -> D:
        raise NotImplementedError

    def seed_draft(self, entity: E) -> D:
        raise NotImplementedError

    def validate(self, draft: D) -> dict[str, str]:
        raise NotImplementedError

    def send(self, mode: ModalMode, draft: D, target_id: Optional[int]) -> Any:
        raise NotImplementedError

    def load_dependencies(self) -> None:
        """Fetch anything the form needs besides the draft (e.g. dropdowns)."""

    # lifecycle
    def open(self, mode: ModalMode, entity: Optional[E] = None) -> None:
        self.mode = mode
        self.errors = {}
        if mode == ModalMode.EDIT and entity is not None:
            self.edit_target = entity
            self.target_id = getattr(entity, "id", None)
            self.draft = self.seed_draft(entity)
        else:
            self.mode = ModalMode.CREATE
            self.edit_target = None
            self.target_id = None
            self.draft = self.default_draft()
        self.is_open = True
        self._run_dependencies()

    def restore(self, mode: ModalMode, draft: D, target_id: Optional[int] = None) -> None:
        """Reopen with a draft posted back from the browser."""
        self.mode = mode
        self.target_id = target_id if mode == ModalMode.EDIT else None
        self.draft = draft
        self.errors = {}
        self.is_open = True
        self._run_dependencies()

    def close(self) -> bool:
        if self.submitting:
            return False
        self.is_open = False
        self.edit_target = None
        self.target_id = None
        return True

    def update_field(self, name: str, value: Any) -> None:
        self.draft = dataclasses.replace(self.draft, **{name: value})
        self.errors.pop(name, None)

    @property
    def submit_disabled(self) -> bool:
        return self.submitting or self.dependencies_loading

    @property
    def title(self) -> str:
        if self.mode == ModalMode.EDIT:
            return f"Edit {self.entity_label}"
        return f"Add New {self.entity_label}"

    @property
    def submit_label(self) -> str:
        verb = "Update" if self.mode == ModalMode.EDIT else "Create"
        if self.submitting:
            return f"{verb[:-1]}ing..."
        return f"{verb} {self.entity_label}"

    def submit(self, on_success: Optional[Callable[[], None]] = None) -> bool:
        """Validate then create/update.

        Returns False when blocked (disabled or invalid). Backend failures
        propagate as ``ApiError`` with the modal left open.
        """
        if self.submit_disabled or self.draft is None:
            return False

        self.errors = self.validate(self.draft)
        if self.errors:
            return False

        if self.mode == ModalMode.EDIT and self.target_id is None:
            raise ValidationError(f"{self.entity_label} not found")

        self.submitting = True
        try:
            self.send(self.mode, self.draft, self.target_id)
        finally:
            self.submitting = False

        if on_success is not None:
            on_success()
        self.close()
        return True

    def _run_dependencies(self) -> None:
        self.dependencies_loading = True
        try:
            self.load_dependencies()
        finally:
            self.dependencies_loading = False


@dataclass
class DeleteConfirmation:
    """Yes/no gate in front of a destructive action; performs no I/O itself."""

    title: str = "Confirm Delete"
    message: Optional[str] = None
    item_name: Optional[str] = None
    loading: bool = False
    is_open: bool = False

    @property
    def body(self) -> str:
        return self.message or "Are you sure you want to delete this item? This action cannot be undone."

    def open(self) -> None:
        self.is_open = True

    def close(self) -> bool:
        if self.loading:
            return False
        self.is_open = False
        return True

    def confirm(self, on_confirm: Callable[[], Any]) -> bool:
        if self.loading:
            return False
        on_confirm()
        return True


@dataclass
class InFlightRegistry:
    """Process-wide set of actions currently talking to the backend.

    Used to mark a delete as loading so a second submit for the same entity
    is refused while the first is still running.
    """

    _keys: set = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def acquire(self, key: Hashable) -> bool:
        with self._lock:
            if key in self._keys:
                logger.info("Action %s already in flight", key)
                return False
            self._keys.add(key)
            return True

    def release(self, key: Hashable) -> None:
        with self._lock:
            self._keys.discard(key)

    def is_held(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._keys
