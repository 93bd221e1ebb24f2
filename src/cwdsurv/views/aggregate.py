"""Group samples by a key and count outcomes per group."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from ..records.models import SampleRecord


OUTCOMES = ("Pending", "Positive", "Negative")


@dataclass(frozen=True)
class GroupSummary:
    group_key: Hashable
    total_count: int
    pending_count: int
    positive_count: int
    negative_count: int
    members: Tuple[SampleRecord, ...]

    def count_for(self, metric: str) -> int:
        if metric == "total":
            return self.total_count
        return getattr(self, f"{metric}_count")

    def as_dict(self, *, include_members: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "group": self.group_key,
            "total": self.total_count,
            "pending": self.pending_count,
            "positive": self.positive_count,
            "negative": self.negative_count,
        }
        if include_members:
            payload["members"] = [record.id for record in self.members]
        return payload


def group_by(
    records: Iterable[SampleRecord],
    key_fn: Callable[[SampleRecord], Optional[Hashable]],
) -> List[GroupSummary]:
    """Summarize *records* per key in first-seen order, skipping null and empty keys."""

    grouped: Dict[Hashable, List[SampleRecord]] = {}
    for record in records:
        key = key_fn(record)
        if key is None or key == "":
            continue
        grouped.setdefault(key, []).append(record)

    return [_summarize(key, members) for key, members in grouped.items()]


def group_by_region(records: Iterable[SampleRecord]) -> List[GroupSummary]:
    return group_by(records, lambda record: record.region_name)


def _summarize(key: Hashable, members: List[SampleRecord]) -> GroupSummary:
    counts = {outcome: 0 for outcome in OUTCOMES}
    for record in members:
        if record.result in counts:
            counts[record.result] += 1
    return GroupSummary(
        group_key=key,
        total_count=len(members),
        pending_count=counts["Pending"],
        positive_count=counts["Positive"],
        negative_count=counts["Negative"],
        members=tuple(members),
    )
