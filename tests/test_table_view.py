"""Tests for table sort, search and pagination state."""

from __future__ import annotations

from datetime import date

import pytest

from cwdsurv.records import normalize_records
from cwdsurv.views import TableState, TableView, UnknownColumnError
from cwdsurv.views.table import compare_values, step_page, toggle_sort, with_search


def _records(count: int):
    return normalize_records(
        [
            {
                "OBJECTID": index,
                "Specimen_No": f"S-{index:03d}",
                "CountyName": "Adair" if index % 2 else "Macon",
                "RESULT": "Positive" if index % 5 == 0 else "Negative",
            }
            for index in range(1, count + 1)
        ]
    )


def test_toggle_sort_transitions() -> None:
    state = toggle_sort(TableState(current_page=3), "result")
    assert (state.sort_key, state.sort_direction, state.current_page) == ("result", "asc", 1)
    state = toggle_sort(state, "result")
    assert (state.sort_key, state.sort_direction) == ("result", "desc")
    state = toggle_sort(state, "region_name")
    assert (state.sort_key, state.sort_direction) == ("region_name", "asc")


def test_search_and_step_transitions() -> None:
    state = with_search(TableState(current_page=2), "")
    assert state.search_term is None and state.current_page == 1
    assert step_page(state, -1, total_pages=3) is state
    assert step_page(state, 1, total_pages=3).current_page == 2
    assert step_page(TableState(current_page=3), 1, total_pages=3).current_page == 3


def test_compare_values_policy() -> None:
    assert compare_values(None, None) == 0
    assert compare_values(None, "a", "asc") == 1
    assert compare_values(None, "a", "desc") == 1
    assert compare_values("a", None, "desc") == -1
    assert compare_values("apple", "Banana") == -1
    assert compare_values("APPLE", "apple") == 0
    assert compare_values(date(2023, 1, 1), date(2022, 1, 1)) == 1
    assert compare_values(2, 10, "desc") == 1
    assert compare_values(3, "x") != 0


def test_pagination_math() -> None:
    table = TableView(page_size=20)
    table.set_dataset(_records(45))
    assert table.total_pages == 3
    table.next_page()
    table.next_page()
    assert table.state.current_page == 3
    assert len(table.page_rows) == 5
    table.next_page()
    assert table.state.current_page == 3
    table.previous_page()
    assert table.state.current_page == 2


def test_previous_page_noop_on_first_page() -> None:
    table = TableView(page_size=20)
    table.set_dataset(_records(45))
    table.previous_page()
    assert table.state.current_page == 1


def test_controls_hidden_for_single_page() -> None:
    table = TableView(page_size=20)
    table.set_dataset(_records(20))
    page = table.render()
    assert page.total_pages == 1
    assert page.show_controls is False

    table.set_dataset([])
    assert table.total_pages == 0
    assert table.render().rows == []


def test_sort_by_twice_toggles_direction() -> None:
    table = TableView(page_size=50)
    table.set_dataset(_records(5))
    table.sort_by("specimen_no")
    assert [record.id for record in table.rows] == [1, 2, 3, 4, 5]
    table.sort_by("specimen_no")
    assert table.state.sort_key == "specimen_no"
    assert table.state.sort_direction == "desc"
    assert [record.id for record in table.rows] == [5, 4, 3, 2, 1]
    table.sort_by("region_name")
    assert table.state.sort_direction == "asc"


def test_sort_resets_page() -> None:
    table = TableView(page_size=20)
    table.set_dataset(_records(45))
    table.next_page()
    table.sort_by("result")
    assert table.state.current_page == 1


def test_nulls_sort_last_in_both_directions() -> None:
    records = normalize_records(
        [
            {"OBJECTID": 1, "CollectionDate": "20230105"},
            {"OBJECTID": 2},
            {"OBJECTID": 3, "CollectionDate": "20220105"},
        ]
    )
    table = TableView()
    table.set_dataset(records)
    table.sort_by("collection_date")
    assert [record.id for record in table.rows] == [3, 1, 2]
    table.sort_by("collection_date")
    assert [record.id for record in table.rows] == [1, 3, 2]


def test_set_dataset_keeps_existing_sort() -> None:
    table = TableView()
    table.set_dataset(_records(3))
    table.sort_by("specimen_no")
    table.sort_by("specimen_no")
    table.search("S-001")
    table.set_dataset(_records(4))
    assert table.state.search_term is None
    assert table.state.sort_direction == "desc"
    assert [record.id for record in table.rows] == [4, 3, 2, 1]


def test_set_dataset_without_sort_keeps_arrival_order() -> None:
    records = list(reversed(_records(4)))
    table = TableView()
    table.set_dataset(records)
    assert table.rows == records


def test_search_is_case_insensitive_and_clearable() -> None:
    table = TableView(page_size=20)
    full = _records(45)
    table.set_dataset(full)
    table.next_page()
    table.search("macon")
    assert table.state.current_page == 1
    assert all(record.region_name == "Macon" for record in table.rows)
    assert len(table.rows) == 22
    table.search("")
    assert table.rows == full


def test_search_matches_formatted_dates() -> None:
    records = normalize_records(
        [
            {"OBJECTID": 1, "CollectionDate": "20230415"},
            {"OBJECTID": 2, "CollectionDate": "20230515"},
        ]
    )
    table = TableView()
    table.set_dataset(records)
    table.search("apr 15")
    assert [record.id for record in table.rows] == [1]


def test_unknown_sort_key_rejected() -> None:
    table = TableView()
    with pytest.raises(UnknownColumnError):
        table.sort_by("antler_points")


def test_render_formats_cells_and_headers() -> None:
    records = normalize_records(
        [{"OBJECTID": 1, "CollectionDate": "20230415", "RESULT": "Positive", "CountyName": "Adair"}]
    )
    table = TableView()
    table.set_dataset(records)
    table.sort_by("result")
    page = table.render()
    cells = {cell.key: cell for cell in page.rows[0].cells}
    assert cells["collection_date"].text == "Apr 15, 2023"
    assert cells["harvest_date"].text == "-"
    assert cells["specimen_no"].text == "-"
    assert cells["result"].color == "#dc3545"
    sorted_headers = [header.key for header in page.headers if header.sorted]
    assert sorted_headers == ["result"]
    payload = page.as_dict()
    assert payload["rows"][0]["region_name"] == "Adair"
    assert payload["pagination"]["label"] is None


def test_render_callback_runs_after_state_changes() -> None:
    pages = []
    table = TableView(page_size=2, on_render=pages.append)
    table.set_dataset(_records(5))
    table.sort_by("specimen_no")
    table.next_page()
    table.search("S-00")
    assert len(pages) == 4
    assert pages[2].current_page == 2
    assert pages[2].page_label == "Page 2 of 3"
