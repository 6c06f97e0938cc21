"""Unit tests for shape_validator.config."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from shape_validator.config import (
    ValidatorSettings,
    get_settings,
    load_settings,
)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_debug(self):
        assert ValidatorSettings().debug is False

    def test_default_path_separator(self):
        assert ValidatorSettings().path_separator == "."

    def test_default_no_truncation(self):
        assert ValidatorSettings().max_rendered_value_length is None


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsEnvOverrides:
    def test_env_var_overrides_separator(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SHAPE_VALIDATOR_PATH_SEPARATOR", "/")
        assert ValidatorSettings().path_separator == "/"

    def test_env_var_overrides_truncation(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SHAPE_VALIDATOR_MAX_RENDERED_VALUE_LENGTH", "80")
        assert ValidatorSettings().max_rendered_value_length == 80

    def test_non_positive_truncation_rejected(self):
        with pytest.raises(PydanticValidationError):
            ValidatorSettings(max_rendered_value_length=0)

    def test_dotenv_in_working_directory_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        (tmp_path / ".env").write_text("SHAPE_VALIDATOR_PATH_SEPARATOR=/\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert ValidatorSettings().path_separator == "."

    def test_unknown_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SHAPE_VALIDATOR_ENV", "prod")
        settings = ValidatorSettings()
        assert "env" not in ValidatorSettings.model_fields
        assert not hasattr(settings, "env")


# ---------------------------------------------------------------------------
# load_settings / get_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(path_separator="/", debug=True)
        assert settings.path_separator == "/"
        assert settings.debug is True

    def test_debug_logs_loaded_values(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="shape_validator.config"):
            load_settings(debug=True, path_separator="/")
        assert "Loaded validator settings: path_separator='/'" in caplog.text

    def test_quiet_without_debug(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="shape_validator.config"):
            load_settings()
        assert caplog.text == ""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch):
        first = get_settings()
        monkeypatch.setenv("SHAPE_VALIDATOR_PATH_SEPARATOR", "::")
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings().path_separator == "::"
