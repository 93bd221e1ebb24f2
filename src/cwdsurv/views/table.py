"""Paginated, sortable, searchable table over a filtered sample slice.

The view keeps its transient state in a frozen :class:`TableState`. Every
operation computes the next state with one of the pure transition functions
below and then re-derives the visible rows from the dataset, so the rows are
always ``sort(search(dataset))`` sliced to the current page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Literal, Optional, Sequence

from ..records.models import SampleRecord
from .columns import COLUMNS, ColumnSpec, result_color
from .exceptions import UnknownColumnError


SortDirection = Literal["asc", "desc"]

DEFAULT_PAGE_SIZE = 20
SORTABLE_KEYS = frozenset(item.name for item in fields(SampleRecord))


@dataclass(frozen=True)
class TableState:
    sort_key: Optional[str] = None
    sort_direction: SortDirection = "asc"
    current_page: int = 1
    search_term: Optional[str] = None


def toggle_sort(state: TableState, key: str) -> TableState:
    if state.sort_key == key:
        direction: SortDirection = "desc" if state.sort_direction == "asc" else "asc"
        return replace(state, sort_direction=direction, current_page=1)
    return replace(state, sort_key=key, sort_direction="asc", current_page=1)


def with_search(state: TableState, term: Optional[str]) -> TableState:
    return replace(state, search_term=term or None, current_page=1)


def step_page(state: TableState, delta: int, total_pages: int) -> TableState:
    target = state.current_page + delta
    if target < 1 or target > total_pages:
        return state
    return replace(state, current_page=target)


def compare_values(left: Any, right: Any, direction: SortDirection = "asc") -> int:
    """Compare two cell values; nulls sort last whatever the direction."""

    if left is None and right is None:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    if isinstance(left, str) and isinstance(right, str):
        left, right = left.lower(), right.lower()
    try:
        order = (left > right) - (left < right)
    except TypeError:
        left_text, right_text = str(left).lower(), str(right).lower()
        order = (left_text > right_text) - (left_text < right_text)
    return order if direction == "asc" else -order


def sort_records(
    records: Sequence[SampleRecord], key: str, direction: SortDirection
) -> List[SampleRecord]:
    comparator = cmp_to_key(
        lambda a, b: compare_values(getattr(a, key), getattr(b, key), direction)
    )
    return sorted(records, key=comparator)


def matches_search(record: SampleRecord, term: str, columns: Sequence[ColumnSpec]) -> bool:
    needle = term.lower()
    for column in columns:
        text = column.search_text(getattr(record, column.key))
        if text is not None and needle in text.lower():
            return True
    return False


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    width: str
    sorted: Optional[SortDirection] = None


@dataclass(frozen=True)
class Cell:
    key: str
    text: str
    color: Optional[str] = None


@dataclass(frozen=True)
class TableRow:
    record_id: int
    cells: List[Cell] = field(default_factory=list)


@dataclass(frozen=True)
class TablePage:
    headers: List[HeaderCell]
    rows: List[TableRow]
    current_page: int
    total_pages: int
    total_rows: int
    show_controls: bool
    previous_enabled: bool
    next_enabled: bool

    @property
    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "columns": [
                {"key": header.key, "label": header.label, "sorted": header.sorted}
                for header in self.headers
            ],
            "rows": [
                {"id": row.record_id, **{cell.key: cell.text for cell in row.cells}}
                for row in self.rows
            ],
            "pagination": {
                "page": self.current_page,
                "total_pages": self.total_pages,
                "total_rows": self.total_rows,
                "label": self.page_label if self.show_controls else None,
                "previous_enabled": self.previous_enabled,
                "next_enabled": self.next_enabled,
            },
        }


class TableView:
    """Owns sort, search and page state for one table."""

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        columns: Sequence[ColumnSpec] = COLUMNS,
        on_render: Optional[Callable[[TablePage], None]] = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.page_size = page_size
        self.columns = list(columns)
        self.on_render = on_render
        self.state = TableState()
        self._dataset: List[SampleRecord] = []
        self._rows: List[SampleRecord] = []

    # ------------------------------------------------------------------
    @property
    def dataset(self) -> List[SampleRecord]:
        return list(self._dataset)

    @property
    def rows(self) -> List[SampleRecord]:
        """Searched and sorted rows across all pages."""

        return list(self._rows)

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self._rows) / self.page_size)

    @property
    def page_rows(self) -> List[SampleRecord]:
        start = (self.state.current_page - 1) * self.page_size
        return self._rows[start : start + self.page_size]

    @property
    def show_controls(self) -> bool:
        return self.total_pages > 1

    # ------------------------------------------------------------------
    def set_dataset(self, records: Sequence[SampleRecord]) -> None:
        self._dataset = list(records)
        self.state = replace(self.state, search_term=None, current_page=1)
        self._refresh()

    def sort_by(self, key: str) -> None:
        if key not in SORTABLE_KEYS:
            raise UnknownColumnError(key, SORTABLE_KEYS)
        self.state = toggle_sort(self.state, key)
        self._refresh()

    def search(self, term: Optional[str]) -> None:
        self.state = with_search(self.state, term)
        self._refresh()

    def next_page(self) -> None:
        self._step(1)

    def previous_page(self) -> None:
        self._step(-1)

    def render(self) -> TablePage:
        state = self.state
        headers = [
            HeaderCell(
                key=column.key,
                label=column.label,
                width=column.width,
                sorted=state.sort_direction if column.key == state.sort_key else None,
            )
            for column in self.columns
        ]
        rows = [
            TableRow(
                record_id=record.id,
                cells=[self._cell(column, record) for column in self.columns],
            )
            for record in self.page_rows
        ]
        total_pages = self.total_pages
        return TablePage(
            headers=headers,
            rows=rows,
            current_page=state.current_page,
            total_pages=total_pages,
            total_rows=len(self._rows),
            show_controls=total_pages > 1,
            previous_enabled=state.current_page > 1,
            next_enabled=state.current_page < total_pages,
        )

    # ------------------------------------------------------------------
    def _step(self, delta: int) -> None:
        next_state = step_page(self.state, delta, self.total_pages)
        if next_state is self.state:
            return
        self.state = next_state
        self._notify()

    def _refresh(self) -> None:
        rows = self._dataset
        if self.state.search_term:
            rows = [
                record
                for record in rows
                if matches_search(record, self.state.search_term, self.columns)
            ]
        if self.state.sort_key:
            rows = sort_records(rows, self.state.sort_key, self.state.sort_direction)
        self._rows = list(rows)
        self._notify()

    def _notify(self) -> None:
        if self.on_render is not None:
            self.on_render(self.render())

    @staticmethod
    def _cell(column: ColumnSpec, record: SampleRecord) -> Cell:
        value = getattr(record, column.key)
        color = result_color(value) if column.key == "result" else None
        return Cell(key=column.key, text=column.display_text(value), color=color)
