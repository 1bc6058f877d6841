"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from skycast.config.schema import AppConfig, ForecastConfig, ProviderConfig, StorageConfig


class TestProviderConfig:
    def test_defaults(self):
        p = ProviderConfig()
        assert p.units == "metric"
        assert p.api_key == ""
        assert p.timeout_seconds > 0

    def test_imperial_rejected(self):
        with pytest.raises(ValidationError):
            ProviderConfig(units="imperial")

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            ProviderConfig(timeout_seconds=0)


class TestStorageConfig:
    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            StorageConfig(favorites_key="")


class TestForecastConfig:
    @pytest.mark.parametrize("days", [0, 6])
    def test_bounds(self, days: int):
        with pytest.raises(ValidationError):
            ForecastConfig(max_days=days)

    def test_fewer_days_allowed(self):
        assert ForecastConfig(max_days=3).max_days == 3


class TestAppConfig:
    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            AppConfig(cities=[])

    def test_nested_dicts(self):
        config = AppConfig(provider={"api_key": "k"}, storage={"db_path": "x.db"})
        assert config.provider.api_key == "k"
        assert config.storage.db_path == "x.db"
