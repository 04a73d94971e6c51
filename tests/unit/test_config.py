"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from twk.config import Settings, TimeSettings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "TIME__DEFAULT_TIME_ZONE", "VOTING__EMPTY_TOTAL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.time.default_time_zone == "UTC"
        assert settings.voting.empty_total == 0.001
        assert settings.database_url == settings.database.url

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("TIME__DEFAULT_TIME_ZONE", "Pacific Time (US & Canada)")
        monkeypatch.setenv("DATABASE__POOL_SIZE", "20")

        settings = Settings(_env_file=None)

        assert settings.time.default_time_zone == "Pacific Time (US & Canada)"
        assert settings.database.pool_size == 20


class TestTimeSettings:
    def test_unknown_default_zone_is_rejected(self):
        with pytest.raises(ValidationError, match="Unknown time zone"):
            TimeSettings(default_time_zone="Nowhere/Land")

    def test_iana_default_zone(self):
        assert TimeSettings(default_time_zone="Europe/Oslo").default_time_zone == (
            "Europe/Oslo"
        )
