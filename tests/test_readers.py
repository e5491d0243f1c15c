"""
Tests for reader selection and configuration.
"""

import pytest

from seisnav.config import ReaderSettings, resolve_settings
from seisnav.errors import ConfigurationError, NavigationError
from seisnav.services.p190_reader import P190Reader
from seisnav.services.readers import READERS, get_reader, read_navigation
from seisnav.services.sps_reader import SpsReader


class TestRegistry:
    """Tests for the reader registry."""

    def test_registered_formats(self):
        assert set(READERS) == {"p190", "sps"}
        assert isinstance(get_reader("p190"), P190Reader)
        assert isinstance(get_reader("SPS"), SpsReader)

    def test_unknown_format(self):
        with pytest.raises(ConfigurationError, match="segd"):
            get_reader("segd")

    def test_read_navigation_dispatch(self, make_line, write_log):
        lines = [make_line("V"), make_line("S")]
        log = write_log("pair.p190", lines)

        assert len(read_navigation(log, year=2021)) == 2
        assert len(read_navigation(log, fmt="sps", year=2021)) == 1


class TestSettings:
    """Tests for ReaderSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SEISNAV_LEAP_RULE", raising=False)
        monkeypatch.delenv("SEISNAV_LOG_DROPPED", raising=False)
        settings = resolve_settings()

        assert settings.leap_rule == "julian"
        assert settings.log_dropped is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SEISNAV_LEAP_RULE", "gregorian")
        monkeypatch.setenv("SEISNAV_LOG_DROPPED", "false")
        settings = ReaderSettings.from_env()

        assert settings.leap_rule == "gregorian"
        assert settings.log_dropped is False

    def test_invalid_env(self, monkeypatch):
        monkeypatch.setenv("SEISNAV_LEAP_RULE", "lunar")
        with pytest.raises(ConfigurationError):
            ReaderSettings.from_env()

    def test_explicit_settings_used(self):
        settings = ReaderSettings(leap_rule="gregorian")
        assert resolve_settings(settings) is settings


class TestErrors:

    def test_error_family(self):
        assert issubclass(ConfigurationError, NavigationError)
        assert issubclass(NavigationError, ValueError)
