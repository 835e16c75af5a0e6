"""Test settings and logging setup"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from split_engine.config import Settings
from split_engine.core.logging import configure_logging
from split_engine.models.split_mode import SplitMode


class TestSettings:
    """Test settings loading"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SPLIT_ENGINE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SPLIT_ENGINE_DEFAULT_SPLIT_MODE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.default_split_mode == SplitMode.INCOME_WEIGHTED

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SPLIT_ENGINE_DEFAULT_SPLIT_MODE", "even")
        monkeypatch.setenv("SPLIT_ENGINE_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.default_split_mode == SplitMode.EVEN
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError, match="logging level"):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_split_mode(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, default_split_mode="random")


class TestConfigureLogging:
    """Test logging setup"""

    def test_sets_level_and_handler_once(self):
        logger = configure_logging(Settings(_env_file=None, log_level="DEBUG"))
        handlers = list(logger.handlers)

        configure_logging(Settings(_env_file=None, log_level="WARNING"))

        assert logger.name == "split_engine"
        assert logger.level == logging.WARNING
        assert logger.handlers == handlers
        assert len(handlers) == 1
