"""
Tests for centralized configuration module.
"""

from __future__ import annotations

import logging
import os
from unittest import mock

import pytest
from pydantic import ValidationError

from relscale.core.config import (
    RelscaleSettings,
    get_settings,
    is_json_logging,
    reset_settings,
)


class TestRelscaleSettings:
    """Test RelscaleSettings class."""

    def test_default_values(self):
        """Test that default values are correct."""
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = RelscaleSettings()

            assert settings.log_level == "WARNING"
            assert settings.debug is False
            assert settings.log_json is False

    def test_log_level_case_insensitive(self):
        """Test log level is case-insensitive."""
        with mock.patch.dict(os.environ, {"RELSCALE_LOG_LEVEL": "info"}, clear=True):
            settings = RelscaleSettings()
            assert settings.log_level == "INFO"

    def test_debug_legacy_flag(self):
        """Test legacy RELSCALE_DEBUG flag enables debug mode."""
        with mock.patch.dict(os.environ, {"RELSCALE_DEBUG": "1"}, clear=True):
            settings = RelscaleSettings()
            assert settings.debug is True
            assert settings.effective_log_level == "DEBUG"

    def test_debug_legacy_does_not_override_explicit_level(self):
        """Test explicit log level takes precedence over RELSCALE_DEBUG."""
        env = {"RELSCALE_LOG_LEVEL": "ERROR", "RELSCALE_DEBUG": "1"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = RelscaleSettings()
            assert settings.effective_log_level == "ERROR"

    def test_log_level_int(self):
        """Test log_level_int returns correct logging constant."""
        with mock.patch.dict(os.environ, {"RELSCALE_LOG_LEVEL": "DEBUG"}, clear=True):
            assert RelscaleSettings().log_level_int == logging.DEBUG

        with mock.patch.dict(os.environ, {"RELSCALE_LOG_LEVEL": "ERROR"}, clear=True):
            assert RelscaleSettings().log_level_int == logging.ERROR

    def test_scale_kind_not_read_from_environment(self):
        """Scale construction is never configured through the environment."""
        with mock.patch.dict(os.environ, {"RELSCALE_DEFAULT_KIND": "log"}, clear=True):
            settings = RelscaleSettings()

        assert "default_kind" not in settings.model_dump()

    def test_invalid_log_level_rejected(self):
        with mock.patch.dict(os.environ, {"RELSCALE_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError):
                RelscaleSettings()


class TestSettingsSingleton:
    """Test singleton accessor functions."""

    def test_get_settings_returns_same_instance(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()

    def test_reset_settings_clears_cache(self):
        with mock.patch.dict(os.environ, {"RELSCALE_LOG_LEVEL": "DEBUG"}, clear=True):
            settings1 = get_settings()
        reset_settings()
        with mock.patch.dict(os.environ, {}, clear=True):
            settings2 = get_settings()

        assert settings1 is not settings2
        assert settings2.log_level == "WARNING"


class TestConvenienceFunctions:
    """Test module-level convenience helpers."""

    def test_is_json_logging(self):
        with mock.patch.dict(os.environ, {"RELSCALE_LOG_JSON": "1"}, clear=True):
            assert is_json_logging() is True
