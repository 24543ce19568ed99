"""Tests for DbQuerySettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dbquery_graphql.core.settings import DbQuerySettings, clear_settings_cache, get_settings


@pytest.mark.unit
class TestDbQuerySettings:
    """Test suite for settings loading and derived flags."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("DBQUERY_ENVIRONMENT", raising=False)
        settings = DbQuerySettings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.mask_errors is None
        assert settings.should_mask_errors is False

    def test_production_masks_by_default(self):
        settings = DbQuerySettings(environment="production")
        assert settings.is_production is True
        assert settings.should_mask_errors is True

    @pytest.mark.parametrize(
        ("environment", "mask_errors", "expected"),
        [
            ("production", False, False),
            ("development", True, True),
            ("test", None, False),
        ],
    )
    def test_mask_override(self, environment, mask_errors, expected):
        settings = DbQuerySettings(environment=environment, mask_errors=mask_errors)
        assert settings.should_mask_errors is expected

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DBQUERY_ENVIRONMENT", "staging")
        monkeypatch.setenv("DBQUERY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DBQUERY_MASK_ERRORS", "true")
        settings = DbQuerySettings()
        assert settings.environment == "staging"
        assert settings.log_level == "DEBUG"
        assert settings.should_mask_errors is True

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            DbQuerySettings(environment="qa")

    def test_frozen(self):
        settings = DbQuerySettings()
        with pytest.raises(ValidationError):
            settings.environment = "production"


@pytest.mark.unit
class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache_rereads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DBQUERY_ENVIRONMENT", "test")
        first = get_settings()
        assert first.environment == "test"

        monkeypatch.setenv("DBQUERY_ENVIRONMENT", "production")
        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().environment == "production"
