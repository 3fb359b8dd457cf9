"""Generic paginated data table.

Columns and actions are declarative descriptors consumed by one renderer
(``templates/_table.html``). The table never fetches: page and page-size
controls are links back to the owning page controller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from ..api.pagination import Page
from ..core.constants import PER_PAGE_OPTIONS

CellRenderer = Callable[[Any, int], Any]
UrlBuilder = Callable[..., str]

_ALIGN_CLASSES = {"center": "text-center", "right": "text-right"}


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    render: Optional[CellRenderer] = None
    align: str = "left"
    width: Optional[str] = None

    @property
    def align_class(self) -> str:
        return _ALIGN_CLASSES.get(self.align, "")

    def cell(self, row: Any, index: int) -> Any:
        if self.render is not None:
            return self.render(row, index)
        return field_value(row, self.key)


@dataclass(frozen=True)
class Action:
    """Per-row action resolved to a link (GET) or a form button (POST)."""

    key: str
    label: str
    endpoint: str
    id_arg: str = "id"
    color: str = "default"
    method: str = "get"


@dataclass(frozen=True)
class EmptyState:
    title: str = "No data found"
    description: str = "Get started by adding your first item"
    icon: str = "\U0001F4CB"


@dataclass(frozen=True)
class PaginationData:
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: int
    to: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationData":
        return cls(
            current_page=page.current_page,
            last_page=page.last_page,
            per_page=page.per_page,
            total=page.total,
            from_=page.from_,
            to=page.to,
        )

    @property
    def summary(self) -> str:
        if self.total > 0:
            return f"Showing {self.from_} to {self.to} of {self.total} entries"
        return "No entries found"

    def page_window(self, size: int = 5) -> list[int]:
        """Page numbers around the current one for the page-number control."""
        last = max(self.last_page, 1)
        current = min(max(self.current_page, 1), last)
        start = max(1, current - size // 2)
        end = min(last, start + size - 1)
        start = max(1, end - size + 1)
        return list(range(start, end + 1))


def row_number(index: int, pagination: Optional[PaginationData] = None) -> int:
    if pagination is not None:
        return (pagination.current_page - 1) * pagination.per_page + index + 1
    return index + 1


def field_value(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


@dataclass(frozen=True)
class ActionLink:
    action: Action
    url: str


@dataclass(frozen=True)
class TableRow:
    key: Any
    number: int
    cells: list
    actions: list[ActionLink]


@dataclass(frozen=True)
class TableView:
    title: str
    columns: Sequence[Column]
    rows: list[TableRow]
    has_actions: bool
    pagination: Optional[PaginationData]
    state: str
    error: Optional[str]
    empty: EmptyState
    show_add: bool
    add_label: str
    add_url: Optional[str]
    per_page_options: Sequence[int]
    page_urls: Mapping[int, str] = field(default_factory=dict)
    per_page_urls: Mapping[int, str] = field(default_factory=dict)
    prev_url: Optional[str] = None
    next_url: Optional[str] = None


class DataTable:
    def __init__(
        self,
        columns: Sequence[Column],
        *,
        actions: Sequence[Action] = (),
        row_key: str = "id",
        empty: EmptyState = EmptyState(),
        per_page_options: Sequence[int] = PER_PAGE_OPTIONS,
    ):
        self.columns = list(columns)
        self.actions = list(actions)
        self.row_key = row_key
        self.empty = empty
        self.per_page_options = list(per_page_options)

    def build(
        self,
        rows: Sequence[Any],
        *,
        pagination: Optional[PaginationData] = None,
        loading: bool = False,
        error: Optional[str] = None,
        title: Optional[str] = None,
        add_label: str = "Add Item",
        add_url: Optional[str] = None,
        url_for: Optional[UrlBuilder] = None,
        list_endpoint: Optional[str] = None,
        link_params: Optional[Mapping[str, Any]] = None,
    ) -> TableView:
        """Turn fetched rows into a render-ready view.

        ``url_for`` resolves action and pagination links; ``link_params`` are
        carried on every link so the controller state survives navigation.
        """
        params = dict(link_params or {})

        if error:
            state = "error"
        elif loading:
            state = "loading"
        elif not rows:
            state = "empty"
        else:
            state = "ready"

        seen: set = set()
        table_rows: list[TableRow] = []
        if state in {"ready", "empty"}:
            for index, row in enumerate(rows):
                key = field_value(row, self.row_key)
                if key in seen:
                    raise ValueError(f"Duplicate row key {key!r}")
                seen.add(key)
                links = []
                if url_for is not None:
                    for action in self.actions:
                        links.append(ActionLink(action, url_for(action.endpoint, **{**params, action.id_arg: key})))
                table_rows.append(
                    TableRow(
                        key=key,
                        number=row_number(index, pagination),
                        cells=[c.cell(row, index) for c in self.columns],
                        actions=links,
                    )
                )

        total = pagination.total if pagination and pagination.total else len(rows)

        page_urls: dict[int, str] = {}
        per_page_urls: dict[int, str] = {}
        prev_url = next_url = None
        if pagination is not None and url_for is not None and list_endpoint:
            for n in pagination.page_window():
                page_urls[n] = url_for(list_endpoint, **{**params, "page": n, "per_page": pagination.per_page})
            for option in self.per_page_options:
                # A new page size always starts again from page 1
                per_page_urls[option] = url_for(list_endpoint, **{**params, "page": 1, "per_page": option})
            if pagination.current_page > 1:
                prev_url = url_for(list_endpoint, **{**params, "page": pagination.current_page - 1, "per_page": pagination.per_page})
            if pagination.current_page < pagination.last_page:
                next_url = url_for(list_endpoint, **{**params, "page": pagination.current_page + 1, "per_page": pagination.per_page})

        return TableView(
            title=title or f"Total {total} Items",
            columns=self.columns,
            rows=table_rows,
            has_actions=bool(self.actions),
            pagination=pagination,
            state=state,
            error=error,
            empty=self.empty,
            show_add=add_url is not None,
            add_label=add_label,
            add_url=add_url,
            per_page_options=self.per_page_options,
            page_urls=page_urls,
            per_page_urls=per_page_urls,
            prev_url=prev_url,
            next_url=next_url,
        )
