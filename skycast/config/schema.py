"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from skycast.config.defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_DB_PATH,
    DEFAULT_FAVORITES_KEY,
    MAX_FORECAST_DAYS,
)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    units: Literal["metric"] = "metric"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = DEFAULT_DB_PATH
    favorites_key: str = Field(default=DEFAULT_FAVORITES_KEY, min_length=1)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=MAX_FORECAST_DAYS, ge=1, le=MAX_FORECAST_DAYS)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    storage: StorageConfig = StorageConfig()
    forecast: ForecastConfig = ForecastConfig()
