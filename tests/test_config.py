"""Tests for environment configuration and logging setup."""

import logging
from pathlib import Path

from splitpane.config.settings import (
    get_default_sash_size,
    get_env_var,
    get_layouts_dir,
    get_log_level,
    validate_all_env_vars,
    validate_env_var,
)
from splitpane.utils.logging import setup_logging


class TestEnvValidation:
    """Test environment variable validation."""

    def test_unknown_variable_is_valid(self):
        assert validate_env_var("SOMETHING_ELSE", "x") == (True, None)

    def test_unset_is_valid(self):
        assert validate_env_var("SPLITPANE_SASH_SIZE", None) == (True, None)

    def test_sash_size_must_be_numeric(self):
        is_valid, error = validate_env_var("SPLITPANE_SASH_SIZE", "thick")
        assert not is_valid
        assert "SPLITPANE_SASH_SIZE" in error

    def test_log_level_values(self):
        assert validate_env_var("SPLITPANE_LOG_LEVEL", "debug") == (True, None)
        assert not validate_env_var("SPLITPANE_LOG_LEVEL", "chatty")[0]

    def test_validate_all(self, monkeypatch):
        monkeypatch.setenv("SPLITPANE_SASH_SIZE", "thick")
        monkeypatch.setenv("SPLITPANE_LOG_LEVEL", "chatty")

        errors = validate_all_env_vars()

        assert len(errors) == 2

    def test_invalid_value_is_ignored(self, monkeypatch):
        monkeypatch.setenv("SPLITPANE_LOG_LEVEL", "chatty")
        assert get_env_var("SPLITPANE_LOG_LEVEL") is None
        assert get_env_var("SPLITPANE_LOG_LEVEL", validate=False) == "chatty"


class TestSettings:
    """Test typed settings accessors."""

    def test_default_sash_size(self, monkeypatch):
        monkeypatch.delenv("SPLITPANE_SASH_SIZE", raising=False)
        assert get_default_sash_size() == 4

    def test_sash_size_from_environment(self, monkeypatch):
        monkeypatch.setenv("SPLITPANE_SASH_SIZE", "12")
        assert get_default_sash_size() == 12

    def test_invalid_sash_size_falls_back(self, monkeypatch):
        monkeypatch.setenv("SPLITPANE_SASH_SIZE", "thick")
        assert get_default_sash_size() == 4

    def test_layouts_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SPLITPANE_LAYOUTS_DIR", str(tmp_path))
        assert get_layouts_dir() == tmp_path

    def test_layouts_dir_default(self, monkeypatch):
        monkeypatch.delenv("SPLITPANE_LAYOUTS_DIR")
        assert get_layouts_dir() == Path.home() / ".config" / "splitpane" / "layouts"

    def test_log_level(self, monkeypatch):
        monkeypatch.delenv("SPLITPANE_LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

        monkeypatch.setenv("SPLITPANE_LOG_LEVEL", "info")
        assert get_log_level() == "INFO"


class TestSetupLogging:
    """Test CLI logging configuration."""

    def test_verbose(self):
        setup_logging(verbose=True)
        assert logging.getLogger("splitpane").level == logging.DEBUG

    def test_quiet(self):
        setup_logging(quiet=True)
        assert logging.getLogger("splitpane").level == logging.ERROR

    def test_explicit_level(self):
        setup_logging(level="INFO")
        assert logging.getLogger("splitpane").level == logging.INFO

    def test_unknown_level_falls_back(self):
        setup_logging(level="CHATTY")
        assert logging.getLogger("splitpane").level == logging.WARNING
