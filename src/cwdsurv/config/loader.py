"""Functions for reading and validating the configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import DashboardConfig


DEFAULT_CONFIG_FILENAME = "dashboard.toml"


def load_config(path: Path) -> DashboardConfig:
    """Load the dashboard configuration from *path*."""

    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(path, "file not found") from exc
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(path, f"failed to read TOML: {exc}") from exc

    try:
        config = DashboardConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, _format_validation_errors(exc)) from exc

    fallback = config.sources.fallback_path
    if fallback and not Path(fallback).is_absolute():
        config.sources.fallback_path = str((path.resolve().parent / fallback).resolve())
    return config


def _format_validation_errors(error: ValidationError) -> str:
    messages = []
    for err in error.errors(include_context=False):
        loc = _format_location(err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        if loc:
            messages.append(f"{loc}: {msg}")
        else:
            messages.append(msg)
    return "; ".join(messages)


def _format_location(loc: tuple[Any, ...]) -> str:
    if not loc:
        return ""

    parts: list[str] = []
    for entry in loc:
        if isinstance(entry, int):
            if not parts:
                parts.append(f"[{entry}]")
            else:
                parts[-1] = parts[-1] + f"[{entry}]"
        else:
            parts.append(str(entry))
    return ".".join(parts)
