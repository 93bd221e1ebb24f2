"""Normalization of raw ArcGIS attribute records into sample records."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from . import codes
from .dates import parse_compact_date, parse_slash_date
from .exceptions import RecordShapeError
from .models import RawRecord, SampleRecord


logger = logging.getLogger(__name__)

ID_FIELD = "OBJECTID"


def normalize_record(raw: Any, *, default_id: int = 0, position: int = 0) -> SampleRecord:
    """Convert one raw attribute mapping into a :class:`SampleRecord`.

    Each field is extracted on its own and falls back to a default when the
    source value is missing or malformed. Only a *raw* that is not a mapping
    raises :class:`RecordShapeError`.
    """

    if not isinstance(raw, Mapping):
        raise RecordShapeError(
            position=position,
            message=f"expected a mapping of attributes, got {type(raw).__name__}",
        )

    def text(field: str) -> Optional[str]:
        return _as_text(raw.get(field))

    object_id = _as_int(raw.get(ID_FIELD))
    collection_type = text("Collection_Type")
    sex = text("Deer_Sex")
    age = text("Deer_Age")

    return SampleRecord(
        id=object_id if object_id is not None else default_id,
        permit_year=text("PERMITYEAR") or "",
        collection_type_code=collection_type,
        collection_type_label=codes.collection_type_label(collection_type),
        result=text("RESULT") or codes.UNKNOWN_LABEL,
        collection_date=parse_compact_date(raw.get("CollectionDate")),
        harvest_date=parse_slash_date(raw.get("HARVEST_DATE")),
        sample_type=text("SampleType"),
        sex_code=sex,
        sex_label=codes.sex_label(sex),
        age_code=age,
        age_label=codes.age_label(age),
        region_code=text("County"),
        region_name=text("CountyName"),
        core_area=text("CoreArea"),
        township=text("Township"),
        range=text("Range"),
        township_range=text("TownshipRange"),
        section=text("Section"),
        gis_label=text("GISlabel"),
        is_non_primary=_is_numeric_one(raw.get("Non_MDC")),
        mobile_app=text("MobileApp"),
        is_published=raw.get("Publish") == "Y",
        specimen_no=text("Specimen_No"),
        telecheck_id=text("TelecheckID"),
    )


def normalize_records(raw_records: Optional[Iterable[RawRecord]]) -> List[SampleRecord]:
    """Normalize a batch of raw records, dropping the ones that are not record-like.

    Records without a usable ``OBJECTID`` receive ids counting up from the
    largest id seen in the batch so every id stays unique.
    """

    if raw_records is None or isinstance(raw_records, (str, bytes, Mapping)):
        logger.error("Invalid data provided for normalization: %s", type(raw_records).__name__)
        return []
    try:
        items = list(raw_records)
    except TypeError:
        logger.error("Invalid data provided for normalization: %s", type(raw_records).__name__)
        return []

    observed = [
        _as_int(raw.get(ID_FIELD)) for raw in items if isinstance(raw, Mapping)
    ]
    next_id = max((value for value in observed if value is not None), default=0) + 1

    records: List[SampleRecord] = []
    for position, raw in enumerate(items):
        synthetic = isinstance(raw, Mapping) and _as_int(raw.get(ID_FIELD)) is None
        try:
            record = normalize_record(raw, default_id=next_id, position=position)
        except RecordShapeError as exc:
            logger.warning("Skipping raw record: %s", exc)
            continue
        if synthetic:
            next_id += 1
        records.append(record)

    dropped = len(items) - len(records)
    if dropped:
        logger.warning("Dropped %d of %d raw records", dropped, len(items))
    logger.info("Normalized %d samples", len(records))
    return records


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _is_numeric_one(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == 1
