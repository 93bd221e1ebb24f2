"""Dashboard session: one normalized dataset feeding every view."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import DashboardConfig
from .records import RawRecord, SampleRecord, normalize_records
from .retrieval import RecordSource, load_raw_records
from .views import (
    FilterEngine,
    MapView,
    SummaryStats,
    TableView,
    compute_summary,
    year_options,
)


logger = logging.getLogger(__name__)


class DashboardSession:
    """Normalizes the raw records once and keeps the views in step with the filters."""

    def __init__(
        self,
        raw_records: Iterable[RawRecord],
        *,
        page_size: int = 20,
        metric: str = "positive",
    ) -> None:
        self.records: Tuple[SampleRecord, ...] = tuple(normalize_records(raw_records))
        logger.info("Loaded %d CWD samples", len(self.records))
        self.filters = FilterEngine()
        self.table = TableView(page_size=page_size)
        self.map = MapView(metric)
        self._filtered: List[SampleRecord] = []
        self._summary: SummaryStats
        self.update_all()

    @classmethod
    def load(
        cls, sources: Sequence[RecordSource], config: Optional[DashboardConfig] = None
    ) -> "DashboardSession":
        """Fetch raw records through *sources* and build a session.

        Raises :class:`~cwdsurv.retrieval.RetrievalFailure` when no source works.
        """

        config = config or DashboardConfig()
        raw_records = load_raw_records(sources)
        return cls(
            raw_records,
            page_size=config.table.page_size,
            metric=config.map.default_metric,
        )

    # ------------------------------------------------------------------
    @property
    def filtered(self) -> List[SampleRecord]:
        return list(self._filtered)

    @property
    def summary(self) -> SummaryStats:
        return self._summary

    @property
    def year_options(self) -> List[str]:
        return year_options(self.records)

    @property
    def count_label(self) -> str:
        return f"{len(self._filtered)} samples"

    # ------------------------------------------------------------------
    def set_filter(self, name: str, value: Optional[str]) -> None:
        self.filters.set(name, value)
        self.update_all()

    def clear_filters(self) -> None:
        self.filters.clear()
        self.update_all()

    def set_metric(self, metric: str) -> None:
        self.map.set_metric(metric)

    def update_all(self) -> None:
        self._filtered = self.filters.apply(self.records)
        self.map.update(self._filtered)
        self.table.set_dataset(self._filtered)
        self._summary = compute_summary(self._filtered)
