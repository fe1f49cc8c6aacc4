"""Tests for config module."""

import pytest

from lazy_lists.config import AppConfig, get_app_config


def test_defaults(monkeypatch):
    """Test configuration defaults when no variables are set."""
    for name in ("LAZY_RANGE_START", "LAZY_TAKE_COUNT", "LAZY_SINK_TYPE", "LAZY_VERBOSE"):
        monkeypatch.delenv(name, raising=False)

    config = get_app_config()

    assert config.range_start == 100
    assert config.take_count == 10
    assert config.sink_type == "list"
    assert config.verbose is False


def test_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("LAZY_RANGE_START", "-3")
    monkeypatch.setenv("LAZY_TAKE_COUNT", "0")
    monkeypatch.setenv("LAZY_SINK_TYPE", "arrow")
    monkeypatch.setenv("LAZY_VERBOSE", "TRUE")

    config = AppConfig.from_env()

    assert config.range_start == -3
    assert config.take_count == 0
    assert config.sink_type == "arrow"
    assert config.verbose is True


def test_invalid_take_count():
    """Test that a negative take count is rejected."""
    with pytest.raises(ValueError, match="take_count"):
        AppConfig(take_count=-1)


def test_invalid_sink_type():
    """Test that an unknown sink type is rejected."""
    with pytest.raises(ValueError, match="Unknown sink type"):
        AppConfig(sink_type="csv")


def test_non_numeric_start(monkeypatch):
    """Test that a non-numeric start fails to parse."""
    monkeypatch.setenv("LAZY_RANGE_START", "one")
    with pytest.raises(ValueError):
        AppConfig.from_env()
