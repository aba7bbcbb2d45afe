# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark

"""
faultmark: structured errors with severity, caller data and caller site.
"""

from __future__ import annotations

from faultmark.config import ErrorSettings, FormatMode, configure, get_settings
from faultmark.errors import (
    ErrorBoundary,
    ErrorLogger,
    StructuredError,
    error_boundary,
    render,
    show,
    wrap_exception,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorBoundary",
    "ErrorLogger",
    "ErrorSettings",
    "FormatMode",
    "StructuredError",
    "configure",
    "error_boundary",
    "get_settings",
    "render",
    "show",
    "wrap_exception",
]
