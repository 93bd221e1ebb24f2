"""Summary counts for the stat cards."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Sequence

from ..records.models import SampleRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryStats:
    total: int
    unique_regions: int
    pending: int
    positive: int
    negative: int
    hunter_harvest: int
    surveillance: int
    male: int
    female: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def compute_summary(records: Sequence[SampleRecord]) -> SummaryStats:
    def count(predicate) -> int:
        return sum(1 for record in records if predicate(record))

    summary = SummaryStats(
        total=len(records),
        unique_regions=len({record.region_name for record in records if record.region_name}),
        pending=count(lambda record: record.result == "Pending"),
        positive=count(lambda record: record.result == "Positive"),
        negative=count(lambda record: record.result == "Negative"),
        hunter_harvest=count(lambda record: record.collection_type_code == "1"),
        surveillance=count(lambda record: record.collection_type_code == "2"),
        male=count(lambda record: record.sex_code == "M"),
        female=count(lambda record: record.sex_code == "F"),
    )
    logger.debug("Stats updated: %s", summary.as_dict())
    return summary
