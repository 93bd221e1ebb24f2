"""Raw record retrieval with an ordered fallback chain."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Protocol, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import DashboardConfig
from ..records.models import RawRecord
from .exceptions import EmptyResultError, RetrievalFailure, SourceError


logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    name: str

    def fetch(self) -> List[RawRecord]:
        ...


def build_retry_session(retries: int) -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class ArcGisSource:
    """Query an ArcGIS MapServer layer and return its feature attributes."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
        retries: int = 3,
    ) -> None:
        self.url = url
        self.name = "api"
        self.timeout_seconds = timeout_seconds
        self._session = session or build_retry_session(retries)

    def fetch(self) -> List[RawRecord]:
        try:
            response = self._session.get(self.url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise SourceError(self.name, f"request failed: {exc}") from exc
        if not response.ok:
            raise SourceError(self.name, f"request failed with status {response.status_code}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise SourceError(self.name, "response is not JSON") from exc
        return feature_attributes(self.name, payload)


class LocalFileSource:
    """Read a saved ArcGIS query response from disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.name = f"file:{self.path.name}"

    def fetch(self) -> List[RawRecord]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                payload = json.load(fh)
        except FileNotFoundError as exc:
            raise SourceError(self.name, "file not found") from exc
        except (OSError, ValueError) as exc:
            raise SourceError(self.name, f"invalid JSON ({exc})") from exc
        return feature_attributes(self.name, payload)


def feature_attributes(source: str, payload: Any) -> List[RawRecord]:
    """Extract ``features[*].attributes`` from an ArcGIS query response."""

    if not isinstance(payload, dict):
        raise SourceError(source, f"unexpected response type {type(payload).__name__}")
    if "error" in payload:
        raise SourceError(source, f"service error: {payload['error']}")
    features = payload.get("features")
    if not isinstance(features, list):
        raise EmptyResultError(source)
    records = [
        feature.get("attributes")
        for feature in features
        if isinstance(feature, dict) and feature.get("attributes") is not None
    ]
    if not records:
        raise EmptyResultError(source)
    return records


def load_raw_records(sources: Sequence[RecordSource]) -> List[RawRecord]:
    """Return records from the first source that yields any, else raise RetrievalFailure."""

    errors: List[SourceError] = []
    for source in sources:
        try:
            records = source.fetch()
        except SourceError as exc:
            logger.warning("Failed to load from %s, trying next source: %s", source.name, exc)
            errors.append(exc)
            continue
        logger.info("Loaded %d raw records from %s", len(records), source.name)
        return records
    raise RetrievalFailure(errors)


def build_sources(
    config: DashboardConfig,
    *,
    offline: bool = False,
    source_file: Optional[Path] = None,
) -> List[RecordSource]:
    """Build the ordered source chain: API first (unless offline), then the local file."""

    sources: List[RecordSource] = []
    settings = config.sources
    if settings.api_url and not offline:
        sources.append(
            ArcGisSource(
                settings.api_url,
                timeout_seconds=settings.timeout_seconds,
                retries=settings.retries,
            )
        )
    fallback = source_file or settings.fallback_path
    if fallback:
        sources.append(LocalFileSource(Path(fallback)))
    return sources
