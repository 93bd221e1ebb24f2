"""Data models for surveillance samples."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Union


RawValue = Union[str, int, float, None]
RawRecord = Mapping[str, RawValue]


@dataclass(frozen=True)
class SampleRecord:
    id: int
    permit_year: str
    collection_type_code: Optional[str]
    collection_type_label: str
    result: str
    collection_date: Optional[date]
    harvest_date: Optional[date]
    sample_type: Optional[str]
    sex_code: Optional[str]
    sex_label: str
    age_code: Optional[str]
    age_label: str
    region_code: Optional[str]
    region_name: Optional[str]
    core_area: Optional[str] = None
    township: Optional[str] = None
    range: Optional[str] = None
    township_range: Optional[str] = None
    section: Optional[str] = None
    gis_label: Optional[str] = None
    is_non_primary: bool = False
    mobile_app: Optional[str] = None
    is_published: bool = False
    specimen_no: Optional[str] = None
    telecheck_id: Optional[str] = None
