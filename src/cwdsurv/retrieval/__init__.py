"""Raw record retrieval."""

from .exceptions import EmptyResultError, RetrievalError, RetrievalFailure, SourceError
from .sources import (
    ArcGisSource,
    LocalFileSource,
    RecordSource,
    build_sources,
    feature_attributes,
    load_raw_records,
)

__all__ = [
    "RetrievalError",
    "RetrievalFailure",
    "SourceError",
    "EmptyResultError",
    "ArcGisSource",
    "LocalFileSource",
    "RecordSource",
    "build_sources",
    "feature_attributes",
    "load_raw_records",
]
