"""Tests for settings loading and logging configuration."""

import logging
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from quake_viz.config import MapSettings, Settings, get_settings
from quake_viz.frontend.app import load_config
from quake_viz.logger import PACKAGE_LOGGER, configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the settings load without any environment."""
    monkeypatch.chdir("/")
    settings = Settings()

    assert settings.feed.timeout == 10.0
    assert settings.map.max_zoom == 6
    assert settings.map.padding == 40
    assert settings.map.min_radius == 4.0
    assert settings.logging.level == "INFO"


def test_nested_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that nested values are read with the '__' delimiter."""
    monkeypatch.setenv("FEED__TIMEOUT", "2.5")
    monkeypatch.setenv("MAP__MAX_ZOOM", "8")

    settings = Settings()

    assert settings.feed.timeout == 2.5
    assert settings.map.max_zoom == 8


@pytest.mark.parametrize("name", ["Mars/Olympus_Mons", ""])
def test_unknown_display_timezone(name: str) -> None:
    """Test that a bad timezone fails at load time instead of during rendering."""
    with pytest.raises(ValidationError, match="timezone"):
        MapSettings(display_timezone=name)


def test_unknown_display_timezone_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that load_config reports a bad MAP__DISPLAY_TIMEZONE as a config error."""
    monkeypatch.setenv("MAP__DISPLAY_TIMEZONE", "Not/AZone")
    get_settings.cache_clear()
    try:
        with pytest.raises(RuntimeError, match="Failed to load configuration"):
            load_config()
    finally:
        get_settings.cache_clear()


def test_known_display_timezone() -> None:
    """Test that IANA names are accepted."""
    assert MapSettings(display_timezone="Asia/Tokyo").display_timezone == "Asia/Tokyo"


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after a test configures it."""
    get_settings.cache_clear()
    package = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(package.handlers), package.level
    yield package
    package.handlers[:] = handlers
    package.setLevel(level)
    get_settings.cache_clear()


def test_configure_logging_explicit_level(package_logger: logging.Logger) -> None:
    """Test that an explicit level wins over the settings."""
    configured = configure_logging(level="debug")

    assert configured is package_logger
    assert package_logger.level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_configure_logging_is_repeatable(package_logger: logging.Logger) -> None:
    """Test that every script rerun leaves exactly one package handler."""
    configure_logging(level="INFO")
    configure_logging(level="WARNING", format_string="%(message)s")

    ours = [h for h in package_logger.handlers if h.get_name() == "quake_viz.stdout"]
    assert len(ours) == 1
    assert ours[0].formatter is not None
    assert ours[0].formatter._fmt == "%(message)s"
    assert package_logger.level == logging.WARNING
