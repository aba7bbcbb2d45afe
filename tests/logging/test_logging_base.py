"""Tests for the faultmark logging system.

This module contains tests for log levels, logging settings and structlog
configuration.
"""

from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError

from faultmark.logging import LoggingSettings, LogLevel, configure_logging, get_logger


class TestLogLevel:
    """Tests for the LogLevel enum."""

    def test_log_level_values(self) -> None:
        """Test that the LogLevel enum has the expected values."""
        assert LogLevel.DEBUG.value == "DEBUG"
        assert LogLevel.INFO.value == "INFO"
        assert LogLevel.WARNING.value == "WARNING"
        assert LogLevel.ERROR.value == "ERROR"
        assert LogLevel.CRITICAL.value == "CRITICAL"

    def test_to_stdlib_level(self) -> None:
        assert LogLevel.DEBUG.to_stdlib_level() == logging.DEBUG
        assert LogLevel.CRITICAL.to_stdlib_level() == logging.CRITICAL

    def test_from_string(self) -> None:
        assert LogLevel.from_string("warning") == LogLevel.WARNING
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.from_string("LOUD")

    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (-3, LogLevel.DEBUG),
            (1, LogLevel.DEBUG),
            (19, LogLevel.DEBUG),
            (20, LogLevel.INFO),
            (39, LogLevel.INFO),
            (40, LogLevel.WARNING),
            (59, LogLevel.WARNING),
            (60, LogLevel.ERROR),
            (89, LogLevel.ERROR),
            (90, LogLevel.CRITICAL),
            (100, LogLevel.CRITICAL),
            (250, LogLevel.CRITICAL),
        ],
    )
    def test_from_severity(self, severity: int, level: LogLevel) -> None:
        assert LogLevel.from_severity(severity) is level

    def test_from_severity_is_monotonic(self) -> None:
        """Test that higher severities never map to lower levels."""
        levels = [LogLevel.from_severity(s).to_stdlib_level() for s in range(1, 101)]
        assert levels == sorted(levels)


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.json_format is False
        assert settings.console_enabled is True
        assert settings.file_enabled is False

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAULTMARK_LOGGING_LEVEL", "debug")
        monkeypatch.setenv("FAULTMARK_LOGGING_JSON_FORMAT", "true")

        settings = LoggingSettings.load()
        assert settings.level == "DEBUG"
        assert settings.json_format is True

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_renderer(self, restore_root_logger: logging.Logger) -> None:
        processors = configure_logging(
            LoggingSettings(json_format=True, level="WARNING")
        )

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert restore_root_logger.level == logging.WARNING

    def test_console_renderer(self, restore_root_logger: logging.Logger) -> None:
        processors = configure_logging(LoggingSettings(include_timestamp=False))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(
            isinstance(p, structlog.processors.TimeStamper) for p in processors
        )

    def test_extra_processors_run_before_rendering(
        self, restore_root_logger: logging.Logger
    ) -> None:
        def tag(_, __, event_dict):
            event_dict["tagged"] = True
            return event_dict

        processors = configure_logging(LoggingSettings(), extra_processors=[tag])
        assert processors.index(tag) < len(processors) - 1

    def test_file_handler(self, restore_root_logger: logging.Logger, tmp_path) -> None:
        log_file = tmp_path / "errors.log"
        configure_logging(
            LoggingSettings(
                console_enabled=False,
                file_enabled=True,
                file_path=str(log_file),
                json_format=True,
            )
        )

        get_logger("faultmark.test").warning("disk almost full", free_mb=12)
        for handler in restore_root_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "disk almost full" in content
        assert '"free_mb": 12' in content
