"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from timescope.config import Settings, get_settings


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.app_name == "timescope"
        assert settings.use_local_time is False
        assert settings.week_start == 6
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMESCOPE_USE_LOCAL_TIME", "true")
        monkeypatch.setenv("TIMESCOPE_WEEK_START", "0")
        settings = Settings(_env_file=None)
        assert settings.use_local_time is True
        assert settings.week_start == 0

    @pytest.mark.parametrize("week_start", ["-1", "7"])
    def test_rejects_bad_week_start(self, monkeypatch: pytest.MonkeyPatch, week_start: str) -> None:
        monkeypatch.setenv("TIMESCOPE_WEEK_START", week_start)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
