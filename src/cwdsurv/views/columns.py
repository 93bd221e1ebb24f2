"""Static column definitions for the samples table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional


Formatter = Callable[[Any], str]

PLACEHOLDER = "-"

RESULT_COLORS: Dict[str, str] = {
    "Pending": "#ffc107",
    "Positive": "#dc3545",
    "Negative": "#28a745",
}
DEFAULT_RESULT_COLOR = "#6c757d"


def format_date(value: Optional[date]) -> str:
    """Render a date the way the table shows it, e.g. ``Apr 15, 2023``."""

    if not value:
        return PLACEHOLDER
    return f"{value:%b} {value.day}, {value.year}"


def format_result(value: Optional[str]) -> str:
    return value or PLACEHOLDER


def result_color(value: Optional[str]) -> str:
    return RESULT_COLORS.get(value or "", DEFAULT_RESULT_COLOR)


@dataclass(frozen=True)
class ColumnSpec:
    key: str
    label: str
    width: str
    formatter: Optional[Formatter] = None

    def display_text(self, value: Any) -> str:
        if self.formatter is not None:
            return self.formatter(value)
        if value is None or value == "":
            return PLACEHOLDER
        return str(value)

    def search_text(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, date):
            return format_date(value)
        return str(value)


COLUMNS: List[ColumnSpec] = [
    ColumnSpec("specimen_no", "Specimen #", "120px"),
    ColumnSpec("region_name", "County", "100px"),
    ColumnSpec("collection_date", "Collection Date", "120px", format_date),
    ColumnSpec("harvest_date", "Harvest Date", "120px", format_date),
    ColumnSpec("result", "Result", "80px", format_result),
    ColumnSpec("sex_label", "Sex", "60px"),
    ColumnSpec("age_label", "Age", "60px"),
    ColumnSpec("sample_type", "Sample Type", "100px"),
    ColumnSpec("collection_type_label", "Collection", "120px"),
    ColumnSpec("telecheck_id", "Telecheck ID", "120px"),
]

COLUMN_KEYS = [column.key for column in COLUMNS]
