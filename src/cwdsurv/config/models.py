"""Pydantic models describing the dashboard configuration file."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_API_URL = (
    "https://gisblue.mdc.mo.gov/arcgis/rest/services/Terrestrial/"
    "CWD_Fall_Reporting_Dashboard/MapServer/26/query?f=json&where=1%3D1&outFields=*"
)

MapMetric = Literal["positive", "negative", "pending", "total"]


class SourcesConfig(BaseModel):
    api_url: Optional[str] = DEFAULT_API_URL
    fallback_path: Optional[str] = "output-data.json"
    timeout_seconds: float = Field(default=30.0, gt=0)
    retries: int = Field(default=3, ge=0)

    @field_validator("api_url", "fallback_path")
    @classmethod
    def blank_as_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class TableConfig(BaseModel):
    page_size: int = Field(default=20, ge=1)


class MapConfig(BaseModel):
    default_metric: MapMetric = "positive"


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class DashboardConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
