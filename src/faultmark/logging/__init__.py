# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark

"""
Public API for the faultmark logging system.
"""

from __future__ import annotations

from faultmark.logging.config import LoggingSettings
from faultmark.logging.level import LogLevel
from faultmark.logging.logger import configure_logging, get_logger

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
]
