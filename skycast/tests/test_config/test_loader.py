"""Tests for config loading, dotted lookup, and the redacted dump."""

import json
from pathlib import Path

import pytest
import yaml

from skycast.config.defaults import DEFAULT_BASE_URL
from skycast.config.loader import get_config_value, load_config, redacted_dump
from skycast.config.schema import AppConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path, base_url: str):
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "test-key"
        assert config.provider.base_url == base_url
        assert config.provider.units == "metric"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config == AppConfig()
        assert config.provider.base_url == DEFAULT_BASE_URL
        assert config.storage.favorites_key == "favorites"

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "absent.yaml") == AppConfig()

    def test_none_uses_defaults(self):
        assert load_config(None) == AppConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        from pydantic import ValidationError

        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"provider": {"retries": 3}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestGetConfigValue:
    def test_dotted_key(self, default_config: AppConfig):
        assert get_config_value(default_config, "provider.timeout_seconds") == 10.0

    def test_top_level(self, default_config: AppConfig):
        assert get_config_value(default_config, "forecast").max_days == 5

    def test_invalid_key(self, default_config: AppConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "nonexistent.key")


class TestRedactedDump:
    def test_masks_api_key(self):
        config = AppConfig(provider={"api_key": "secret"})
        out = redacted_dump(config)
        assert "secret" not in out
        assert json.loads(out)["provider"]["api_key"] == "***"

    def test_empty_key_left_empty(self, default_config: AppConfig):
        assert json.loads(redacted_dump(default_config))["provider"]["api_key"] == ""
