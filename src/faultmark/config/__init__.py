# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark

"""
Configuration for faultmark.
"""

from __future__ import annotations

from faultmark.config.settings import (
    ErrorSettings,
    FormatMode,
    configure,
    get_settings,
    reset_settings,
)

__all__ = [
    "ErrorSettings",
    "FormatMode",
    "configure",
    "get_settings",
    "reset_settings",
]
