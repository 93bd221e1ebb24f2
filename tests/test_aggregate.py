"""Tests for grouping, summary statistics and map metrics."""

from __future__ import annotations

import pytest

from cwdsurv.records import normalize_records
from cwdsurv.views import MapView, UnknownMetricError, compute_summary, group_by, group_by_region


RAW = [
    {"OBJECTID": 1, "CountyName": "Adair", "RESULT": "Negative", "Collection_Type": "1", "Deer_Sex": "M"},
    {"OBJECTID": 2, "CountyName": "Macon", "RESULT": "Positive", "Collection_Type": "2", "Deer_Sex": "F"},
    {"OBJECTID": 3, "CountyName": "Adair", "RESULT": "Pending", "Collection_Type": "1", "Deer_Sex": "F"},
    {"OBJECTID": 4, "CountyName": "Adair", "RESULT": "Inconclusive", "Collection_Type": "1"},
    {"OBJECTID": 5, "CountyName": "", "RESULT": "Positive"},
    {"OBJECTID": 6, "RESULT": "Negative", "Deer_Sex": "M"},
]


@pytest.fixture()
def records():
    return normalize_records(RAW)


def test_group_by_region_first_seen_order(records) -> None:
    groups = group_by_region(records)
    assert [group.group_key for group in groups] == ["Adair", "Macon"]
    adair = groups[0]
    assert adair.total_count == 3
    assert (adair.pending_count, adair.positive_count, adair.negative_count) == (1, 0, 1)
    assert [record.id for record in adair.members] == [1, 3, 4]


def test_group_invariants_hold(records) -> None:
    for group in group_by(records, lambda record: record.result):
        assert len(group.members) == group.total_count
        assert (
            group.positive_count + group.negative_count + group.pending_count
            <= group.total_count
        )


def test_group_by_skips_null_keys(records) -> None:
    groups = group_by(records, lambda record: record.sex_code)
    assert [group.group_key for group in groups] == ["M", "F"]
    assert sum(group.total_count for group in groups) == 4


def test_compute_summary_counts(records) -> None:
    summary = compute_summary(records)
    assert summary.total == 6
    assert summary.unique_regions == 2
    assert (summary.pending, summary.positive, summary.negative) == (1, 2, 2)
    assert (summary.hunter_harvest, summary.surveillance) == (3, 1)
    assert (summary.male, summary.female) == (2, 2)
    assert summary.as_dict()["total"] == 6


def test_compute_summary_empty() -> None:
    assert compute_summary([]).as_dict() == {
        "total": 0,
        "unique_regions": 0,
        "pending": 0,
        "positive": 0,
        "negative": 0,
        "hunter_harvest": 0,
        "surveillance": 0,
        "male": 0,
        "female": 0,
    }


def test_map_view_metric_values(records) -> None:
    view = MapView()
    view.update(records)
    assert view.metric == "positive"
    assert view.region_values() == {"Adair": 0, "Macon": 1}
    view.set_metric("total")
    assert view.region_values() == {"Adair": 3, "Macon": 1}
    assert view.max_value() == 3


def test_map_view_rejects_unknown_metric() -> None:
    view = MapView()
    with pytest.raises(UnknownMetricError):
        view.set_metric("antlers")
    assert view.metric == "positive"
