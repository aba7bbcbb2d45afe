# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Logger setup for faultmark.

structlog sits on top of the standard library logging module: structlog
processors shape the event, stdlib handlers decide where it goes.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

import structlog
from structlog.types import Processor

from faultmark.logging.config import LoggingSettings
from faultmark.logging.level import LogLevel


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if settings.console_enabled:
        handlers.append(logging.StreamHandler(sys.stderr))
    if settings.file_enabled and settings.file_path:
        handlers.append(logging.FileHandler(settings.file_path))
    if not handlers:
        handlers.append(logging.NullHandler())
    return handlers


def configure_logging(
    settings: LoggingSettings | None = None,
    extra_processors: Sequence[Processor] = (),
) -> list[Processor]:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Logging settings (loads from environment if None)
        extra_processors: Processors run after the standard enrichment and
            before rendering

    Returns:
        The configured processor chain
    """
    settings = settings or LoggingSettings.load()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]
    if settings.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.extend(extra_processors)
    processors.append(structlog.processors.StackInfoRenderer())

    if settings.json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=LogLevel.from_string(settings.level).to_stdlib_level(),
        format="%(message)s",
        handlers=_build_handlers(settings),
        force=True,
    )

    return processors


def get_logger(name: str, **initial_values: Any) -> Any:
    """Get a structlog logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        **initial_values: Context bound to every event of this logger

    Returns:
        A structlog bound logger
    """
    return structlog.get_logger(name, **initial_values)
