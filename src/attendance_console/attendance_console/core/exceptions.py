from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for the console."""


class ValidationError(DomainError):
    """Raised when a form draft fails client-side validation.

    ``errors`` maps field name to a human readable message.
    """

    def __init__(self, message: str = "Invalid input", errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class ApiError(DomainError):
    """Raised when the backend answers non-2xx or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
