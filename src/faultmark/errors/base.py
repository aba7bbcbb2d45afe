# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
The structured error type.

A StructuredError carries, next to its message, a severity between 1 and 100,
free-form caller data supplied by the raising code, and the caller site
(method, file and line) the error was raised from. ``str()`` renders as much
of that as the configured format mode allows.
"""

from __future__ import annotations

from typing import Any, Final

from faultmark.config.settings import FormatMode, get_settings
from faultmark.errors.caller import capture_caller_site
from faultmark.errors.formatting import render
from faultmark.errors.presentation import PresenterProtocol, show

SEVERITY_MIN: Final = 1
SEVERITY_MAX: Final = 100
UNKNOWN_METHOD: Final = "Unknown"


def clamp_severity(value: int) -> int:
    """Clamp a severity into [SEVERITY_MIN, SEVERITY_MAX]."""
    return max(SEVERITY_MIN, min(SEVERITY_MAX, int(value)))


def clamp_line_number(value: int) -> int:
    """Clamp a line number to be non-negative."""
    return max(0, int(value))


def _restore_error(
    cls: type[StructuredError], args: tuple[Any, ...], state: dict[str, Any]
) -> StructuredError:
    # rebuild without __init__ so the caller site is not captured again
    error = cls.__new__(cls, *args)
    error.args = args
    error.__dict__.update(state)
    return error


class StructuredError(Exception):
    """
    Error with severity, caller data and caller site.

    Caller-site arguments left as None are captured from the calling frame.
    Pass them explicitly (empty strings and 0 included) to override capture.
    """

    def __init__(
        self,
        message: str,
        severity: int,
        caller_data: str | None = "",
        *,
        method_name: str | None = None,
        line_number: int | None = None,
        file_name: str | None = None,
        suppress_logging: bool = False,
    ) -> None:
        """Initialize a new StructuredError.

        Args:
            message: Human-readable error message
            severity: Severity between 1 and 100 (used for logging)
            caller_data: Additional information from the code raising the error
            method_name: Function raising the error; captured if None
            line_number: Line the error was raised at; captured if None
            file_name: Source file raising the error; captured if None
            suppress_logging: Tell error loggers not to log this occurrence
        """
        message = "" if message is None else str(message)
        super().__init__(message)
        self._message = message

        if method_name is None or line_number is None or file_name is None:
            site = capture_caller_site(
                skip_instance=self, full_path=get_settings().full_file_paths
            )
            if method_name is None:
                method_name = site.method_name
            if line_number is None:
                line_number = site.line_number
            if file_name is None:
                file_name = site.file_name

        self.caller_data = caller_data
        self.severity = severity
        self.method_name = method_name
        self.line_number = line_number
        self.file_name = file_name
        self._suppress_logging = bool(suppress_logging)

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        severity: int,
        caller_data: str | None = None,
        *,
        method_name: str | None = None,
        line_number: int | None = None,
        file_name: str | None = None,
        suppress_logging: bool = False,
    ) -> StructuredError:
        """Create a structured error from an existing exception.

        The exception's message is adopted verbatim. The exception itself and
        its own cause chain are not kept.

        Args:
            exception: The exception to convert
            severity: Severity between 1 and 100 (used for logging)
            caller_data: Additional information from the code (re)raising the
                error; defaults to the configured wrapped-exception label
            method_name: Function raising the error; captured if None
            line_number: Line the error was raised at; captured if None
            file_name: Source file raising the error; captured if None
            suppress_logging: Tell error loggers not to log this occurrence

        Returns:
            A new instance of ``cls``

        Raises:
            TypeError: If ``exception`` is None
        """
        if exception is None:
            raise TypeError("Cannot create a structured error from None")

        if caller_data is None:
            caller_data = get_settings().wrapped_caller_data

        error = cls(
            str(exception),
            severity,
            caller_data,
            method_name=method_name,
            line_number=line_number,
            file_name=file_name,
            suppress_logging=suppress_logging,
        )
        error.__cause__ = None
        error.__suppress_context__ = True
        return error

    @property
    def message(self) -> str:
        return self._message

    @property
    def caller_data(self) -> str:
        return self._caller_data

    @caller_data.setter
    def caller_data(self, value: str | None) -> None:
        self._caller_data = "" if value is None else str(value)

    @property
    def severity(self) -> int:
        return clamp_severity(self._severity)

    @severity.setter
    def severity(self, value: int) -> None:
        self._severity = clamp_severity(value)

    @property
    def method_name(self) -> str:
        """The raising function, or "Unknown" if none was recorded."""
        return self._method_name or UNKNOWN_METHOD

    @method_name.setter
    def method_name(self, value: str | None) -> None:
        self._method_name = "" if value is None else str(value)

    @property
    def file_name(self) -> str:
        return self._file_name

    @file_name.setter
    def file_name(self, value: str | None) -> None:
        self._file_name = "" if value is None else str(value)

    @property
    def line_number(self) -> int:
        return clamp_line_number(self._line_number)

    @line_number.setter
    def line_number(self, value: int | None) -> None:
        self._line_number = clamp_line_number(value or 0)

    @property
    def suppress_logging(self) -> bool:
        return self._suppress_logging

    @property
    def has_method_name(self) -> bool:
        return bool(self._method_name)

    @property
    def has_file_name(self) -> bool:
        return bool(self._file_name)

    @property
    def has_caller_data(self) -> bool:
        return bool(self._caller_data)

    def render(self, mode: FormatMode | str | None = None) -> str:
        """Render this error; ``mode`` defaults to the configured format mode."""
        return render(self, mode or get_settings().format_mode)

    def display(
        self, title: str = "", presenter: PresenterProtocol | None = None
    ) -> None:
        """Show this error through a presenter.

        Args:
            title: Title of the presentation; the configured title if empty
            presenter: Presenter to use; the default presenter if None
        """
        show(self, title, presenter)

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception.__reduce__ would call cls(*args) without a severity
        return (_restore_error, (type(self), self.args, dict(self.__dict__)))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, severity={self.severity}, "
            f"method_name={self._method_name!r}, line_number={self.line_number}, "
            f"file_name={self.file_name!r})"
        )
