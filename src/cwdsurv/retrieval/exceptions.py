"""Data retrieval errors."""

from __future__ import annotations

from typing import List

from ..exceptions import CwdError


class RetrievalError(CwdError):
    """Base class for retrieval-related issues."""


class SourceError(RetrievalError):
    """Raised when a single source cannot supply records."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class EmptyResultError(SourceError):
    """Raised when a source answers successfully but carries no records."""

    def __init__(self, source: str):
        super().__init__(source, "no features found")


class RetrievalFailure(RetrievalError):
    """Raised when every configured source failed."""

    def __init__(self, errors: List[SourceError]):
        self.errors = list(errors)
        if self.errors:
            detail = "; ".join(str(error) for error in self.errors)
            message = f"failed to load data from every source ({detail})"
        else:
            message = "no data sources configured"
        super().__init__(message)
