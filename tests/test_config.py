"""Tests for configuration."""

import pytest

from zermelo.config import Settings, get_settings, reset_settings, validate_school_code


class TestValidateSchoolCode:
    """Tests for validate_school_code."""

    @pytest.mark.parametrize(
        "school, expected",
        [
            ("example", "example"),
            ("Example", "example"),
            ("my-school2", "my-school2"),
        ],
    )
    def test_valid(self, school, expected):
        """Valid codes are lowercased."""
        assert validate_school_code(school) == expected

    @pytest.mark.parametrize(
        "school",
        ["", None, "evil.com", "a/b", "school?x=1", "-school", "school-", "a" * 64],
    )
    def test_invalid(self, school):
        """Anything that is not a hostname label is rejected."""
        with pytest.raises(ValueError):
            validate_school_code(school)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Defaults target the public portal."""
        settings = Settings()

        assert settings.portal_domain == "zportal.nl"
        assert settings.api_version == "v3"
        assert settings.timeout is None
        assert settings.portal_url("example") == "https://example.zportal.nl/api/v3"

    def test_environment(self, monkeypatch):
        """ZERMELO_ variables override defaults."""
        monkeypatch.setenv("ZERMELO_PORTAL_DOMAIN", "zportal.test")
        monkeypatch.setenv("ZERMELO_TIMEOUT", "10")

        settings = Settings()

        assert settings.portal_domain == "zportal.test"
        assert settings.timeout == 10.0

    def test_invalid_timeout(self, monkeypatch):
        """Timeout must be positive."""
        monkeypatch.setenv("ZERMELO_TIMEOUT", "0")

        with pytest.raises(ValueError):
            Settings()

    def test_get_settings_cached(self):
        """get_settings returns the same instance until reset."""
        first = get_settings()

        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
