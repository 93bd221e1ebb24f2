"""Sample record model and normalization."""

from .codes import UNKNOWN_LABEL, age_label, collection_type_label, sex_label
from .dates import parse_compact_date, parse_slash_date
from .exceptions import InvalidDateError, RecordError, RecordShapeError
from .models import RawRecord, SampleRecord
from .normalization import normalize_record, normalize_records

__all__ = [
    "UNKNOWN_LABEL",
    "age_label",
    "collection_type_label",
    "sex_label",
    "parse_compact_date",
    "parse_slash_date",
    "RecordError",
    "RecordShapeError",
    "InvalidDateError",
    "RawRecord",
    "SampleRecord",
    "normalize_record",
    "normalize_records",
]
