"""Unit tests for logging configuration."""

import logging

import pytest

from apprunner_ingress.config import Settings
from apprunner_ingress.utils.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test root logger setup from settings."""

    def test_applies_level(self, restore_root_logger):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="WARNING"))
        assert restore_root_logger.level == logging.WARNING

    def test_lowercase_level(self, restore_root_logger):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="debug"))
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="CHATTY"))
        assert restore_root_logger.level == logging.INFO

    def test_applies_format(self, restore_root_logger):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="%(levelname)s|%(message)s"))
        formats = [h.formatter._fmt for h in restore_root_logger.handlers if h.formatter]
        assert "%(levelname)s|%(message)s" in formats
