"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from continent_stats.config.settings import Environment, LogLevel, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("GOOD_QOL_THRESHOLD", "ROUNDING_PRECISION", "LOG_LEVEL", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.GOOD_QOL_THRESHOLD == 80.0
        assert settings.ROUNDING_PRECISION == 2
        assert settings.LOG_LEVEL == LogLevel.INFO
        assert settings.ENVIRONMENT == Environment.DEV

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOD_QOL_THRESHOLD", "72.5")
        monkeypatch.setenv("ROUNDING_PRECISION", "3")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = Settings(_env_file=None)
        assert settings.GOOD_QOL_THRESHOLD == 72.5
        assert settings.ROUNDING_PRECISION == 3

    def test_negative_precision_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROUNDING_PRECISION", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
