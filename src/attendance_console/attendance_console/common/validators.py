from __future__ import annotations

from typing import Optional


def check_required_min_length(
    value: Optional[str],
    *,
    label: str,
    min_len: int,
) -> Optional[str]:
    """Return an error message for a required text field, or None when valid."""
    text = (value or "").strip()
    if not text:
        return f"{label} is required"
    if len(text) < min_len:
        return f"{label} must be at least {min_len} characters"
    return None


def check_required(value, *, label: str) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"{label} is required"
    return None
