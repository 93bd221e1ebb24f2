"""Map metric state: which count drives the per-region coloring."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..records.models import SampleRecord
from .aggregate import GroupSummary, group_by_region
from .exceptions import UnknownMetricError


METRICS: Tuple[str, ...] = ("positive", "negative", "pending", "total")
DEFAULT_METRIC = "positive"


class MapView:
    """Holds the records and active metric handed to the map renderer."""

    def __init__(self, metric: str = DEFAULT_METRIC) -> None:
        self._groups: List[GroupSummary] = []
        self._metric = DEFAULT_METRIC
        self.set_metric(metric)

    @property
    def metric(self) -> str:
        return self._metric

    @property
    def groups(self) -> List[GroupSummary]:
        return list(self._groups)

    def update(self, records: Sequence[SampleRecord]) -> None:
        self._groups = group_by_region(records)

    def set_metric(self, metric: str) -> None:
        if metric not in METRICS:
            raise UnknownMetricError(metric, METRICS)
        self._metric = metric

    def region_values(self) -> Dict[str, int]:
        return {str(group.group_key): group.count_for(self._metric) for group in self._groups}

    def max_value(self) -> int:
        return max(self.region_values().values(), default=0)
