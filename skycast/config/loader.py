"""YAML config loader with dotted-key lookup and a redacted dump."""

import json
from pathlib import Path
from typing import Any

import yaml

from skycast.config.schema import AppConfig

REDACTED = "***"


def load_config(path: str | Path | None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    if not path.exists():
        return AppConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.timeout_seconds'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_dump(config: AppConfig) -> str:
    """JSON dump of the config with the API key masked."""
    data = json.loads(config.model_dump_json())
    if data["provider"]["api_key"]:
        data["provider"]["api_key"] = REDACTED
    return json.dumps(data, indent=2)
