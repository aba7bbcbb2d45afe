# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Process-wide settings for structured errors.

The format mode (debug or release) is decided once, when the settings are
first loaded, and is then used by every rendering that does not name a mode
explicitly.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormatMode(str, Enum):
    """Rendering modes for structured errors."""

    DEBUG = "debug"
    RELEASE = "release"

    @classmethod
    def from_string(cls, value: str) -> FormatMode:
        """Convert a string to a FormatMode.

        Args:
            value: String representation of the mode

        Returns:
            FormatMode enum value

        Raises:
            ValueError: If the string doesn't match a valid mode
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid format mode: {value}")


class ErrorSettings(BaseSettings):
    """
    Settings for structured error rendering, display and logging.
    Loads from environment variables prefixed with ``FAULTMARK_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAULTMARK_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    format_mode: FormatMode = Field(
        default=FormatMode.RELEASE, description="Rendering mode for str(error)"
    )
    display_title: str = Field(
        default="Exception in application",
        description="Title used when an error is displayed without one",
    )
    wrapped_caller_data: str = Field(
        default="Generic platform exception",
        description="Caller data used when wrapping a plain exception",
    )
    full_file_paths: bool = Field(
        default=False, description="Capture full source paths instead of base names"
    )
    default_severity: int = Field(
        default=50, description="Severity used by error boundaries"
    )
    min_log_severity: int = Field(
        default=1, description="Structured errors below this severity are not logged"
    )

    @field_validator("format_mode", mode="before")
    @classmethod
    def validate_format_mode(cls, v: Any) -> FormatMode:
        if isinstance(v, FormatMode):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Format mode must be a string, got {type(v).__name__}")
        return FormatMode.from_string(v)

    @field_validator("default_severity", "min_log_severity")
    @classmethod
    def clamp_severity(cls, v: int) -> int:
        return max(1, min(100, v))

    @property
    def debug(self) -> bool:
        return self.format_mode is FormatMode.DEBUG

    @classmethod
    def load(cls) -> ErrorSettings:
        """
        Load error settings from environment variables or defaults.

        Returns:
            ErrorSettings: Loaded and validated settings instance.
        """
        return cls()


_settings: ErrorSettings | None = None
_lock = threading.RLock()


def get_settings() -> ErrorSettings:
    """Get the process-wide error settings, loading them on first use."""
    global _settings
    with _lock:
        if _settings is None:
            _settings = ErrorSettings.load()
        return _settings


def configure(settings: ErrorSettings | None = None, **overrides: Any) -> ErrorSettings:
    """Install the process-wide error settings.

    Args:
        settings: Settings to install; loaded from the environment if None
        **overrides: Field values that replace those of ``settings``

    Returns:
        The installed settings
    """
    global _settings
    base = settings or ErrorSettings.load()
    if overrides:
        base = ErrorSettings.model_validate({**base.model_dump(), **overrides})
    with _lock:
        _settings = base
    return base


def reset_settings() -> None:
    """Forget the installed settings so the next access reloads them."""
    global _settings
    with _lock:
        _settings = None
