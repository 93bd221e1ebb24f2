"""Custom exception hierarchy for cwdsurv."""

from __future__ import annotations

from pathlib import Path


class CwdError(Exception):
    """Base error for the cwdsurv package."""


class ConfigError(CwdError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")
