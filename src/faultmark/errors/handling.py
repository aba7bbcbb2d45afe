# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""Error boundaries: turn escaping exceptions into logged structured errors.

An error boundary wraps a block or a function. Any exception leaving it is
converted to a StructuredError whose caller site is the place the original
exception was raised. The error is logged, optionally displayed, and raised
again.
"""

from __future__ import annotations

from contextlib import ContextDecorator
from types import TracebackType
from typing import Final

from faultmark.config.settings import get_settings
from faultmark.errors.base import StructuredError
from faultmark.errors.caller import CallerSite
from faultmark.errors.logging import ErrorLogger
from faultmark.errors.presentation import PresenterProtocol

# Set on errors an ErrorBoundary has logged.
_HANDLED_ATTR: Final = "_faultmark_boundary_logged"


def wrap_exception(
    exception: BaseException,
    severity: int | None = None,
    caller_data: str | None = None,
) -> StructuredError:
    """Convert an exception into a StructuredError.

    Structured errors are returned unchanged. Anything else is converted
    with ``StructuredError.from_exception``, taking the caller site from the
    exception's traceback.

    Args:
        exception: The exception to convert
        severity: Severity; the configured default severity if None
        caller_data: Caller data; the configured wrapped-exception label if None

    Returns:
        The structured error
    """
    if isinstance(exception, StructuredError):
        return exception

    settings = get_settings()
    if severity is None:
        severity = settings.default_severity

    site = CallerSite.from_traceback(
        exception.__traceback__, full_path=settings.full_file_paths
    )
    return StructuredError.from_exception(
        exception,
        severity,
        caller_data,
        method_name=site.method_name,
        line_number=site.line_number,
        file_name=site.file_name,
    )


class ErrorBoundary(ContextDecorator):
    """Context manager and decorator that logs escaping exceptions."""

    def __init__(
        self,
        severity: int | None = None,
        caller_data: str | None = None,
        *,
        display: bool = False,
        title: str = "",
        presenter: PresenterProtocol | None = None,
        logger: ErrorLogger | None = None,
        reraise: bool = True,
    ) -> None:
        """Initialize an error boundary.

        Args:
            severity: Severity given to wrapped exceptions
            caller_data: Caller data given to wrapped exceptions
            display: Show the error through a presenter
            title: Title used when displaying
            presenter: Presenter used when displaying; the default if None
            logger: Error logger; a new ErrorLogger if None
            reraise: Raise the structured error after handling it
        """
        self.severity = severity
        self.caller_data = caller_data
        self.display = display
        self.title = title
        self.presenter = presenter
        self.logger = logger or ErrorLogger()
        self.reraise = reraise
        self.error: StructuredError | None = None

    def _recreate_cm(self) -> ErrorBoundary:
        # each decorated call gets its own boundary, so calls never share `error`
        return ErrorBoundary(
            self.severity,
            self.caller_data,
            display=self.display,
            title=self.title,
            presenter=self.presenter,
            logger=self.logger,
            reraise=self.reraise,
        )

    def __enter__(self) -> ErrorBoundary:
        self.error = None
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        if exc_val is None or not isinstance(exc_val, Exception):
            return False

        error = wrap_exception(exc_val, self.severity, self.caller_data)
        self.error = error
        # skip errors an inner boundary already logged
        if not getattr(error, _HANDLED_ATTR, False):
            self.logger.log_error(error)
            setattr(error, _HANDLED_ATTR, True)
        if self.display:
            error.display(self.title, self.presenter)

        if not self.reraise:
            return True
        if error is exc_val:
            return False
        raise error from None


def error_boundary(
    severity: int | None = None,
    caller_data: str | None = None,
    *,
    display: bool = False,
    title: str = "",
    presenter: PresenterProtocol | None = None,
    logger: ErrorLogger | None = None,
    reraise: bool = True,
) -> ErrorBoundary:
    """Create an ErrorBoundary; see its constructor for the arguments."""
    return ErrorBoundary(
        severity,
        caller_data,
        display=display,
        title=title,
        presenter=presenter,
        logger=logger,
        reraise=reraise,
    )
