"""Derived views over the normalized sample set."""

from .aggregate import GroupSummary, group_by, group_by_region
from .columns import COLUMNS, ColumnSpec, format_date
from .exceptions import UnknownColumnError, UnknownMetricError, UnknownPredicateError, ViewError
from .filters import PREDICATE_FIELDS, FilterEngine, apply_filters, year_options
from .map import METRICS, MapView
from .stats import SummaryStats, compute_summary
from .table import TablePage, TableState, TableView

__all__ = [
    "GroupSummary",
    "group_by",
    "group_by_region",
    "COLUMNS",
    "ColumnSpec",
    "format_date",
    "ViewError",
    "UnknownColumnError",
    "UnknownMetricError",
    "UnknownPredicateError",
    "PREDICATE_FIELDS",
    "FilterEngine",
    "apply_filters",
    "year_options",
    "METRICS",
    "MapView",
    "SummaryStats",
    "compute_summary",
    "TablePage",
    "TableState",
    "TableView",
]
