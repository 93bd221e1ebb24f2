"""Static lookup tables for survey codes."""

from __future__ import annotations

from typing import Dict, Optional


UNKNOWN_LABEL = "Unknown"

COLLECTION_TYPES: Dict[str, str] = {
    "1": "Hunter Harvest",
    "2": "Surveillance",
}

DEER_SEXES: Dict[str, str] = {
    "M": "Male",
    "F": "Female",
}

DEER_AGES: Dict[str, str] = {
    "A": "Adult",
    "Y": "Young",
    "F": "Fawn",
    "U": "Unknown",
}


def _lookup(table: Dict[str, str], code: Optional[str]) -> str:
    if code is None:
        return UNKNOWN_LABEL
    return table.get(code, UNKNOWN_LABEL)


def collection_type_label(code: Optional[str]) -> str:
    return _lookup(COLLECTION_TYPES, code)


def sex_label(code: Optional[str]) -> str:
    return _lookup(DEER_SEXES, code)


def age_label(code: Optional[str]) -> str:
    return _lookup(DEER_AGES, code)
