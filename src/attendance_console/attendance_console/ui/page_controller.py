"""List page state: ``{page, per_page, filters}`` plus one fetch lifecycle.

Every state change re-runs the fetch. Each fetch takes a sequence number and
only the latest one may publish its result, so a slow earlier response never
overwrites a newer one.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_PER_PAGE, PER_PAGE_OPTIONS
from ..core.enums import LoadState
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetch = Callable[[int, int, Mapping[str, Any]], T]


class ListController(Generic[T]):
    def __init__(
        self,
        fetch: Fetch,
        *,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        filters: Optional[Mapping[str, Any]] = None,
        ready: Optional[Callable[[Mapping[str, Any]], bool]] = None,
        error_message: str = "An error occurred",
    ):
        self._fetch = fetch
        self._ready = ready
        self._error_message = error_message
        self.page = max(int(page), 1)
        self.per_page = max(int(per_page), 1)
        self.filters: dict[str, Any] = dict(filters or {})

        self.state = LoadState.IDLE
        self.data: Optional[T] = None
        self.error: Optional[str] = None
        self._seq = 0

    @classmethod
    def from_request_args(
        cls,
        args: Mapping[str, Any],
        fetch: Fetch,
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        per_page_options: Sequence[int] = PER_PAGE_OPTIONS,
        filter_defaults: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> "ListController[T]":
        page = _positive_int(args.get("page"), 1)
        per_page = _positive_int(args.get("per_page"), default_per_page)
        if per_page not in per_page_options:
            per_page = default_per_page

        filters: dict[str, Any] = {}
        for key, default in (filter_defaults or {}).items():
            value = args.get(key)
            filters[key] = default if value is None else value

        return cls(fetch, page=page, per_page=per_page, filters=filters, **kwargs)

    # state transitions
    def begin(self) -> int:
        self._seq += 1
        self.state = LoadState.LOADING
        return self._seq

    def complete(self, seq: int, data: T) -> bool:
        if seq != self._seq:
            logger.debug("Discarding stale response seq=%s latest=%s", seq, self._seq)
            return False
        self.data = data
        self.error = None
        self.state = LoadState.SUCCESS
        return True

    def fail(self, seq: int, message: str) -> bool:
        if seq != self._seq:
            logger.debug("Discarding stale failure seq=%s latest=%s", seq, self._seq)
            return False
        self.error = message
        self.state = LoadState.ERROR
        return True

    def refresh(self) -> LoadState:
        if self._ready is not None and not self._ready(self.filters):
            return self.state

        seq = self.begin()
        try:
            data = self._fetch(self.page, self.per_page, dict(self.filters))
        except ApiError as e:
            self.fail(seq, e.message or self._error_message)
        else:
            self.complete(seq, data)
        return self.state

    # dependency changes
    def set_page(self, page: int) -> LoadState:
        self.page = max(int(page), 1)
        return self.refresh()

    def set_per_page(self, per_page: int) -> LoadState:
        self.per_page = max(int(per_page), 1)
        self.page = 1
        return self.refresh()

    def set_filters(self, **filters: Any) -> LoadState:
        self.filters.update(filters)
        self.page = 1
        return self.refresh()

    def clear_filters(self, defaults: Mapping[str, Any]) -> LoadState:
        self.filters = dict(defaults)
        self.page = 1
        return self.refresh()

    @property
    def loading(self) -> bool:
        return self.state == LoadState.LOADING

    def query(self, **overrides: Any) -> dict[str, Any]:
        """Current state as query-string params for links and redirects."""
        params: dict[str, Any] = {"page": self.page, "per_page": self.per_page}
        params.update({k: v for k, v in self.filters.items() if v not in (None, "")})
        params.update(overrides)
        return params


def _positive_int(value: Any, default: int) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    return n if n >= 1 else default
