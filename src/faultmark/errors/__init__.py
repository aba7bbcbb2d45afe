# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark

"""
Structured errors for faultmark.
"""

from __future__ import annotations

from faultmark.errors.base import (
    SEVERITY_MAX,
    SEVERITY_MIN,
    UNKNOWN_METHOD,
    StructuredError,
    clamp_line_number,
    clamp_severity,
)
from faultmark.errors.caller import CallerSite, capture_caller_site
from faultmark.errors.formatting import render
from faultmark.errors.handling import ErrorBoundary, error_boundary, wrap_exception
from faultmark.errors.logging import (
    ErrorLogger,
    add_error_context,
    configure_error_logging,
    error_fields,
)
from faultmark.errors.presentation import (
    ConsolePresenter,
    LoggingPresenter,
    PresenterProtocol,
    get_default_presenter,
    reset_default_presenter,
    set_default_presenter,
    show,
)

__all__ = [
    # Error type
    "StructuredError",
    "SEVERITY_MIN",
    "SEVERITY_MAX",
    "UNKNOWN_METHOD",
    "clamp_severity",
    "clamp_line_number",
    # Caller site
    "CallerSite",
    "capture_caller_site",
    # Rendering and presentation
    "render",
    "show",
    "PresenterProtocol",
    "ConsolePresenter",
    "LoggingPresenter",
    "get_default_presenter",
    "set_default_presenter",
    "reset_default_presenter",
    # Logging
    "ErrorLogger",
    "add_error_context",
    "configure_error_logging",
    "error_fields",
    # Boundaries
    "ErrorBoundary",
    "error_boundary",
    "wrap_exception",
]
