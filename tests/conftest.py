"""Top-level pytest configuration for faultmark."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
import structlog

from faultmark.config import reset_settings
from faultmark.errors.presentation import reset_default_presenter


class RecordingPresenter:
    """Presenter that remembers what it was asked to show."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def present(self, title: str, body: str) -> None:
        self.calls.append((title, body))


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test fresh settings, presenter and structlog config."""
    for key in list(os.environ):
        if key.upper().startswith("FAULTMARK_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_default_presenter()
    structlog.reset_defaults()
    yield
    reset_settings()
    reset_default_presenter()
    structlog.reset_defaults()


@pytest.fixture
def presenter() -> RecordingPresenter:
    """Create a presenter that records its calls."""
    return RecordingPresenter()


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
