# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Structured logging of errors.

ErrorLogger is the logging collaborator of StructuredError: it honours the
suppress-logging flag, maps severity to a log level and emits the error's
fields as structured log context.
"""

from __future__ import annotations

from typing import Any

from structlog.types import EventDict, Processor, WrappedLogger

from faultmark.config.settings import FormatMode, get_settings
from faultmark.errors.base import StructuredError, clamp_severity
from faultmark.errors.formatting import render
from faultmark.logging.config import LoggingSettings
from faultmark.logging.level import LogLevel
from faultmark.logging.logger import configure_logging, get_logger


def error_fields(error: BaseException) -> dict[str, Any]:
    """Get the structured log fields describing an exception.

    Args:
        error: The exception to describe

    Returns:
        Field name to value mapping
    """
    fields: dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": error.message
        if isinstance(error, StructuredError)
        else str(error),
    }
    if isinstance(error, StructuredError):
        fields.update(
            {
                "error_severity": error.severity,
                "error_method": error.method_name,
                "error_file": error.file_name,
                "error_line": error.line_number,
                "error_caller_data": error.caller_data,
            }
        )
    return fields


def add_error_context(
    _: WrappedLogger, __: str, event_dict: EventDict
) -> EventDict:
    """Add error fields to log entries carrying an ``error`` exception.

    Args:
        _: The logger instance
        __: The log method name
        event_dict: The event dictionary to modify

    Returns:
        The event dictionary, with fields already present left untouched
    """
    error = event_dict.get("error")
    if isinstance(error, BaseException):
        for key, value in error_fields(error).items():
            event_dict.setdefault(key, value)
    return event_dict


class ErrorLogger:
    """Logger for structured errors."""

    def __init__(
        self, name: str = "faultmark.errors", min_severity: int | None = None
    ) -> None:
        """Initialize an error logger.

        Args:
            name: Logger name
            min_severity: Structured errors below this severity are not
                logged; the configured minimum if None
        """
        self.name = name
        self.logger = get_logger(name)
        self._min_severity = min_severity

    @property
    def min_severity(self) -> int:
        if self._min_severity is None:
            return get_settings().min_log_severity
        return clamp_severity(self._min_severity)

    def log_error(self, error: BaseException, **context: Any) -> bool:
        """Log an error unless it asks not to be logged.

        Args:
            error: The error to log
            **context: Additional log context

        Returns:
            True if the error was logged
        """
        if not isinstance(error, StructuredError):
            self.logger.error(
                str(error) or type(error).__name__,
                exc_info=error,
                **{**error_fields(error), **context},
            )
            return True

        if error.suppress_logging or error.severity < self.min_severity:
            return False

        level = LogLevel.from_severity(error.severity)
        log = getattr(self.logger, level.value.lower())
        log(render(error, FormatMode.DEBUG), **{**error_fields(error), **context})
        return True


def configure_error_logging(
    settings: LoggingSettings | None = None,
    extra_processors: tuple[Processor, ...] = (),
) -> list[Processor]:
    """Configure logging with structured error fields added to every event.

    Args:
        settings: Logging settings (loads from environment if None)
        extra_processors: Further processors to run after error enrichment

    Returns:
        The configured processor chain
    """
    return configure_logging(
        settings, extra_processors=(add_error_context, *extra_processors)
    )
