"""Filter predicates shared by every dashboard view."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from ..records.models import SampleRecord
from .exceptions import UnknownPredicateError


# predicate name -> SampleRecord attribute it constrains
PREDICATE_FIELDS: Dict[str, str] = {
    "year": "permit_year",
    "region": "region_name",
    "result": "result",
    "sex": "sex_code",
    "age": "age_code",
    "collection_type": "collection_type_code",
}

ALL = "all"


def is_unset(value: Optional[str]) -> bool:
    return value is None or value == "" or (isinstance(value, str) and value.lower() == ALL)


def apply_filters(
    records: Iterable[SampleRecord], predicates: Mapping[str, Optional[str]]
) -> List[SampleRecord]:
    """Return the records matching every set predicate, in input order."""

    active = []
    for name, value in predicates.items():
        if name not in PREDICATE_FIELDS:
            raise UnknownPredicateError(name, PREDICATE_FIELDS)
        if not is_unset(value):
            active.append((PREDICATE_FIELDS[name], str(value)))

    if not active:
        return list(records)
    return [
        record
        for record in records
        if all(getattr(record, attribute) == value for attribute, value in active)
    ]


class FilterEngine:
    """Holds the current predicate set."""

    def __init__(self) -> None:
        self._predicates: Dict[str, str] = {}

    @property
    def predicates(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._predicates))

    def set(self, name: str, value: Optional[str]) -> None:
        if name not in PREDICATE_FIELDS:
            raise UnknownPredicateError(name, PREDICATE_FIELDS)
        if is_unset(value):
            self._predicates.pop(name, None)
        else:
            self._predicates[name] = str(value)

    def clear(self) -> None:
        self._predicates.clear()

    def apply(self, records: Iterable[SampleRecord]) -> List[SampleRecord]:
        return apply_filters(records, self._predicates)


def year_options(records: Iterable[SampleRecord]) -> List[str]:
    """Distinct non-empty permit years, sorted, for the year selector."""

    return sorted({record.permit_year for record in records if record.permit_year})
