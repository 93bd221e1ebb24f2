"""View state errors."""

from __future__ import annotations

from typing import Iterable

from ..exceptions import CwdError


class ViewError(CwdError):
    """Base class for view-related issues."""


class _UnknownNameError(ViewError):
    kind = "name"

    def __init__(self, name: str, choices: Iterable[str]):
        self.name = name
        self.choices = sorted(choices)
        super().__init__(f"unknown {self.kind} {name!r} (expected one of {', '.join(self.choices)})")


class UnknownPredicateError(_UnknownNameError):
    kind = "filter"


class UnknownMetricError(_UnknownNameError):
    kind = "metric"


class UnknownColumnError(_UnknownNameError):
    kind = "column"
