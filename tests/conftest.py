"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from control_api.config import Settings


TEST_ENDPOINT = "http://test-api"
TEST_TOKEN = "test-token-for-testing"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and environment out of every test."""
    for key in ("CONTROL_API_ENDPOINT", "CONTROL_API_TOKEN", "CONTROL_API_TIMEOUT", "CONTROL_API_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / ".control-api" / "config.yaml"
    monkeypatch.setattr("control_api.config.CONFIG_FILE", config_file)
    yield config_file


@pytest.fixture
def settings():
    """Settings pointing at the mocked API."""
    return Settings(endpoint=TEST_ENDPOINT, token=TEST_TOKEN, timeout=5)


@pytest.fixture
def mock_env(monkeypatch):
    """Mock environment variables for API configuration."""
    monkeypatch.setenv("CONTROL_API_ENDPOINT", TEST_ENDPOINT)
    monkeypatch.setenv("CONTROL_API_TOKEN", TEST_TOKEN)


@pytest.fixture
def two_days_ago():
    return datetime.now(timezone.utc) - timedelta(days=2)
