from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of entities plus the envelope's page metadata."""

    items: Sequence[T]
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: int
    to: int

    @classmethod
    def from_envelope(cls, body: Mapping[str, Any], parse: Callable[[Mapping[str, Any]], T]) -> "Page[T]":
        raw_items = body.get("data") or []
        items = [parse(r) for r in raw_items]
        per_page = _int(body.get("per_page"), default=len(items) or 1)
        return cls(
            items=items,
            current_page=_int(body.get("current_page"), default=1),
            last_page=_int(body.get("last_page"), default=1),
            per_page=per_page,
            total=_int(body.get("total"), default=len(items)),
            # Laravel-style envelopes send null from/to on an empty page
            from_=_int(body.get("from"), default=0),
            to=_int(body.get("to"), default=0),
        )


def _int(value: Any, *, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
