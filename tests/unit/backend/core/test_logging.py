"""
Unit Tests for Centralized Logging.

Tests the logging configuration, structured fields, and source handling.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from notefolio.backend.core.config_schema import LoggingSchema
from notefolio.backend.core.logging import (
    VALID_SOURCES,
    _resolve_log_path,
    get_logger,
    log_with_source,
    setup_logging,
)


def _logging_config(**overrides) -> LoggingSchema:
    data = {
        "level": "INFO",
        "format": "json",
        "handlers": {
            "console": {"enabled": True},
            "file": {
                "enabled": False,
                "path": "logs/system.jsonl",
                "max_bytes": 10485760,
                "backup_count": 5,
            },
        },
    }
    data.update(overrides)
    return LoggingSchema(**data)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; restore the previous handlers."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestValidSources:

    def test_valid_sources_contains_expected_values(self):
        assert VALID_SOURCES == frozenset({"web", "cli", "api", "internal", "unknown"})


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_uses_config_level(self):
        setup_logging(config=_logging_config(level="WARNING"))

        assert logging.getLogger().level == logging.WARNING

    def test_override_takes_precedence(self):
        setup_logging(level="DEBUG", config=_logging_config())

        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler(self):
        setup_logging(format_type="console", config=_logging_config())

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert handler_types == ["StreamHandler"]

    def test_console_disabled(self):
        setup_logging(enable_console=False, config=_logging_config())

        assert logging.getLogger().handlers == []

    def test_file_logging_enabled(self, tmp_path):
        """Should create a single RotatingFileHandler for the JSONL file."""
        log_file = tmp_path / "logs" / "system.jsonl"

        with patch("notefolio.backend.core.logging._resolve_log_path", return_value=log_file):
            setup_logging(enable_file_logging=True, config=_logging_config())

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert "RotatingFileHandler" in handler_types
        assert log_file.parent.is_dir()

    def test_loads_yaml_config_when_not_given(self):
        app_config = MagicMock()
        app_config.logging = _logging_config(level="ERROR")

        with patch("notefolio.backend.core.logging.get_app_config", return_value=app_config):
            setup_logging()

        assert logging.getLogger().level == logging.ERROR


class TestGetLogger:

    def test_get_logger_returns_structlog_logger(self):
        logger = get_logger("test.module")

        assert hasattr(logger, "bind")
        assert hasattr(logger, "info")


class TestLogWithSource:
    """Tests for log_with_source helper function."""

    def test_adds_source_field(self):
        logger = MagicMock()

        log_with_source(logger, "cli", "info", "Migration applied", revision="head")

        logger.info.assert_called_once_with(
            "Migration applied",
            source="cli",
            revision="head",
        )

    def test_unrecognized_source_becomes_unknown(self):
        logger = MagicMock()

        log_with_source(logger, "telegram", "warning", "Hello")

        logger.warning.assert_called_once_with("Hello", source="unknown")

    def test_raises_on_invalid_level(self):
        """Should raise AttributeError for invalid log levels (no fallback)."""
        logger = get_logger("test")

        with pytest.raises(AttributeError):
            log_with_source(logger, "web", "nonexistent_level", "Test")


class TestResolveLogPath:

    def test_relative_to_project_root(self, tmp_path):
        with patch("notefolio.backend.core.logging.find_project_root", return_value=tmp_path):
            result = _resolve_log_path("logs/system.jsonl")

        assert result == tmp_path / "logs" / "system.jsonl"
