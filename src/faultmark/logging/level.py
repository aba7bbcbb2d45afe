# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Log levels for faultmark, including the mapping from error severity.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

# Lowest severity of each band, highest band first.
SEVERITY_BANDS: Final = (
    (90, "CRITICAL"),
    (60, "ERROR"),
    (40, "WARNING"),
    (20, "INFO"),
    (1, "DEBUG"),
)


class LogLevel(str, Enum):
    """Standard logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        """Convert to standard library logging level.

        Returns:
            Standard library logging level integer
        """
        return int(getattr(logging, self.value))

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Convert a string to a LogLevel.

        Args:
            value: String representation of level

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If the string doesn't match a valid level
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}")

    @classmethod
    def from_severity(cls, severity: int) -> LogLevel:
        """Map an error severity (1-100) to the level it is logged at.

        Out-of-range severities are clamped first.

        Args:
            severity: Error severity

        Returns:
            LogLevel for the severity band
        """
        severity = max(1, min(100, int(severity)))
        for floor, name in SEVERITY_BANDS:
            if severity >= floor:
                return cls(name)
        return cls.DEBUG
