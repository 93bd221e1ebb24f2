"""Record normalization errors.

Both errors are recovered inside the normalizer; callers of
``normalize_records`` never see them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import CwdError


class RecordError(CwdError):
    """Base class for record-related issues."""


@dataclass
class RecordShapeError(RecordError):
    """Raised when a raw record is not record-like at all."""

    position: int
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"record {self.position}: {self.message}")


@dataclass
class InvalidDateError(RecordError):
    """Raised when a date field fails its format check."""

    field: str
    value: Any
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.field}={self.value!r}: {self.message}")
