"""Date parsing strategies for raw survey fields.

The source layer carries two unrelated date encodings. ``CollectionDate``
is a compact ``YYYYMMDD`` string while ``HARVEST_DATE`` is a slash-delimited
``MM/DD/YYYY`` string. Each field is bound to exactly one strategy; a value
in the other field's format is rejected rather than guessed at.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, Optional

import pandas as pd

from .exceptions import InvalidDateError


DateStrategy = Callable[[str, Any], date]


def _compact_date(field: str, value: Any) -> date:
    if not isinstance(value, str):
        raise InvalidDateError(field=field, value=value, message="expected an 8-digit string")
    if len(value) != 8 or not (value.isascii() and value.isdigit()):
        raise InvalidDateError(field=field, value=value, message="expected YYYYMMDD")
    try:
        return date(int(value[0:4]), int(value[4:6]), int(value[6:8]))
    except ValueError as exc:
        raise InvalidDateError(field=field, value=value, message=str(exc)) from exc


def _slash_date(field: str, value: Any) -> date:
    if not isinstance(value, str) or "/" not in value:
        raise InvalidDateError(field=field, value=value, message="expected MM/DD/YYYY")
    try:
        parsed = pd.to_datetime(value.strip(), errors="coerce")
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidDateError(field=field, value=value, message=str(exc)) from exc
    if pd.isna(parsed):
        raise InvalidDateError(field=field, value=value, message="unparseable date")
    return parsed.date()


STRATEGIES: Dict[str, DateStrategy] = {
    "compact": _compact_date,
    "slash": _slash_date,
}


def parse_date(strategy: str, field: str, value: Any) -> Optional[date]:
    """Parse *value* with the named strategy, returning ``None`` on any failure."""

    if value is None or value == "":
        return None
    try:
        return STRATEGIES[strategy](field, value)
    except InvalidDateError:
        return None


def parse_compact_date(value: Any, field: str = "CollectionDate") -> Optional[date]:
    return parse_date("compact", field, value)


def parse_slash_date(value: Any, field: str = "HARVEST_DATE") -> Optional[date]:
    return parse_date("slash", field, value)
