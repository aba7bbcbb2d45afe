# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Presenting structured errors to users and operators.

faultmark never talks to a UI toolkit directly. ``show`` renders the error
and hands title and body to a presenter, any object with a
``present(title, body)`` method.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Protocol

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from faultmark.config.settings import FormatMode, get_settings
from faultmark.errors.formatting import render
from faultmark.logging.level import LogLevel
from faultmark.logging.logger import get_logger

if TYPE_CHECKING:
    from faultmark.errors.base import StructuredError


class PresenterProtocol(Protocol):
    """Protocol for anything that can show a titled message."""

    def present(self, title: str, body: str) -> None:
        """Show ``body`` under ``title``. May block until dismissed."""
        ...


class ConsolePresenter:
    """Presents errors as a rich panel on the console (stderr by default)."""

    def __init__(self, console: Console | None = None, style: str = "red") -> None:
        self.console = console or Console(stderr=True)
        self.style = style

    def present(self, title: str, body: str) -> None:
        self.console.print(
            Panel(Text(body), title=Text(title), border_style=self.style, expand=False)
        )


class LoggingPresenter:
    """Presents errors as log events, for processes without a user surface."""

    def __init__(
        self, logger: Any = None, level: LogLevel = LogLevel.ERROR
    ) -> None:
        self.logger = logger or get_logger("faultmark.presentation")
        self.level = level

    def present(self, title: str, body: str) -> None:
        getattr(self.logger, self.level.value.lower())(body, title=title)


_default_presenter: PresenterProtocol | None = None
_lock = threading.RLock()


def get_default_presenter() -> PresenterProtocol:
    """Get the process-wide presenter, creating a ConsolePresenter on first use."""
    global _default_presenter
    with _lock:
        if _default_presenter is None:
            _default_presenter = ConsolePresenter()
        return _default_presenter


def set_default_presenter(presenter: PresenterProtocol) -> None:
    """Install the process-wide presenter."""
    global _default_presenter
    with _lock:
        _default_presenter = presenter


def reset_default_presenter() -> None:
    global _default_presenter
    with _lock:
        _default_presenter = None


def show(
    error: StructuredError,
    title: str = "",
    presenter: PresenterProtocol | None = None,
    mode: FormatMode | str | None = None,
) -> None:
    """Render an error and hand it to a presenter.

    Args:
        error: The error to show
        title: Title of the presentation; the configured title if empty
        presenter: Presenter to use; the default presenter if None
        mode: Format mode; the configured mode if None
    """
    settings = get_settings()
    if not title:
        title = settings.display_title
    body = render(error, mode or settings.format_mode)
    (presenter or get_default_presenter()).present(title, body)
