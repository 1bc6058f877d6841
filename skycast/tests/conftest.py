"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest
import yaml

from skycast.config.schema import AppConfig
from skycast.storage.database import connect, run_migrations

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-owm.example.com/data/2.5"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def paris_current() -> dict:
    return load_fixture("owm_current_paris.json")


@pytest.fixture
def paris_forecast() -> dict:
    return load_fixture("owm_forecast_paris.json")


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    """A migrated SQLite database on disk."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "test-key", "base_url": TEST_BASE_URL},
        "storage": {"db_path": str(tmp_path / "skycast.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL
