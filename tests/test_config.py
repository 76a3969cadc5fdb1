"""Tests for env-backed settings and logging configuration."""

import logging

import pytest

from adcheckout.core import Config, Settings, configure_logging


class TestConfig:
    def test_load_from_env_strips_prefix(self, monkeypatch):
        monkeypatch.setenv("ADCHECKOUT_LOG_LEVEL", "DEBUG")
        values = Config.load_from_env(default_customer="x")
        assert values["log_level"] == "DEBUG"
        assert values["default_customer"] == "x"

    def test_settings_defaults(self, monkeypatch):
        monkeypatch.delenv("ADCHECKOUT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("ADCHECKOUT_DEFAULT_CUSTOMER", raising=False)
        assert Settings.from_env() == Settings(log_level="WARNING", default_customer="default")

    def test_settings_from_env_ignores_unknown_keys(self, monkeypatch):
        monkeypatch.setenv("ADCHECKOUT_DEFAULT_CUSTOMER", "Nike")
        monkeypatch.setenv("ADCHECKOUT_SOMETHING_ELSE", "1")
        assert Settings.from_env().default_customer == "Nike"


class TestConfigureLogging:
    def test_sets_package_level(self):
        logger = configure_logging("debug")
        assert logger.name == "adcheckout"
        assert logger.level == logging.DEBUG
        configure_logging(logging.WARNING)
        assert logger.level == logging.WARNING

    def test_handler_attached_once(self):
        configure_logging("INFO")
        logger = configure_logging("INFO")
        assert len(logger.handlers) == 1

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
