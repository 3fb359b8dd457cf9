from __future__ import annotations

import pytest

from src.attendance_console.attendance_console.ui.table import (
    Action,
    Column,
    DataTable,
    PaginationData,
    row_number,
)


def fake_url_for(endpoint, **params):
    query = "&".join(f"{k}={params[k]}" for k in sorted(params))
    return f"/{endpoint}?{query}"


def _table(**kwargs):
    return DataTable(
        [Column("name", "NAME")],
        actions=[Action("edit", "Edit", endpoint="thing_list", id_arg="edit_id")],
        **kwargs,
    )


def _pagination(page=1, per_page=10, total=25):
    last = (total + per_page - 1) // per_page
    start = (page - 1) * per_page
    return PaginationData(
        current_page=page,
        last_page=last,
        per_page=per_page,
        total=total,
        from_=start + 1,
        to=min(start + per_page, total),
    )


def test_row_number_continues_across_pages():
    assert row_number(0, _pagination(page=2, per_page=10)) == 11
    assert row_number(4, _pagination(page=3, per_page=5)) == 15
    assert row_number(2) == 3


def test_build_numbers_rows_and_links_actions():
    rows = [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]

    view = _table().build(
        rows,
        pagination=_pagination(page=2, per_page=10, total=12),
        url_for=fake_url_for,
        list_endpoint="thing_list",
        link_params={"page": 2, "per_page": 10},
    )

    assert view.state == "ready"
    assert [r.number for r in view.rows] == [11, 12]
    assert view.rows[0].cells == ["A"]
    assert view.rows[1].actions[0].url == "/thing_list?edit_id=2&page=2&per_page=10"


def test_state_prefers_error_then_loading_then_empty():
    table = _table()

    assert table.build([{"id": 1, "name": "A"}], error="boom", loading=True).state == "error"
    assert table.build([{"id": 1, "name": "A"}], loading=True).state == "loading"
    assert table.build([]).state == "empty"


def test_duplicate_row_key_is_rejected():
    with pytest.raises(ValueError):
        _table().build([{"id": 1, "name": "A"}, {"id": 1, "name": "B"}])


def test_default_title_uses_total():
    view = _table().build([{"id": 1, "name": "A"}], pagination=_pagination(total=42))

    assert view.title == "Total 42 Items"


def test_per_page_links_reset_to_first_page():
    view = _table(per_page_options=[5, 10]).build(
        [{"id": 1, "name": "A"}],
        pagination=_pagination(page=3, per_page=10, total=40),
        url_for=fake_url_for,
        list_endpoint="thing_list",
        link_params={"page": 3, "per_page": 10},
    )

    assert view.per_page_urls[5] == "/thing_list?page=1&per_page=5"
    assert view.prev_url == "/thing_list?page=2&per_page=10"
    assert view.next_url == "/thing_list?page=4&per_page=10"


def test_pagination_summary():
    assert _pagination(page=2, per_page=10, total=25).summary == "Showing 11 to 20 of 25 entries"
    empty = PaginationData(current_page=1, last_page=1, per_page=10, total=0, from_=0, to=0)
    assert empty.summary == "No entries found"


def test_page_window_stays_within_bounds():
    assert _pagination(page=1, per_page=10, total=25).page_window() == [1, 2, 3]
    assert _pagination(page=9, per_page=1, total=10).page_window() == [6, 7, 8, 9, 10]
