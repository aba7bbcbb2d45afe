# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Caller-site capture for structured errors.

A caller site is the function name, line number and file of the code that
raised an error. It is read from the interpreter's frames at construction
time, or from an exception's traceback when a failure is wrapped.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from types import FrameType, TracebackType
from typing import Any, Final

# Frames from these modules are never reported as the caller site.
_INTERNAL_MODULE_PREFIX: Final = "faultmark.errors."


@dataclass(frozen=True)
class CallerSite:
    """Where an error originated. The default value means "unknown"."""

    method_name: str = ""
    line_number: int = 0
    file_name: str = ""

    @classmethod
    def from_frame(cls, frame: FrameType, *, full_path: bool = False) -> CallerSite:
        file_name = frame.f_code.co_filename
        if not full_path:
            file_name = os.path.basename(file_name)
        return cls(
            method_name=frame.f_code.co_name,
            line_number=frame.f_lineno or 0,
            file_name=file_name,
        )

    @classmethod
    def from_traceback(
        cls, tb: TracebackType | None, *, full_path: bool = False
    ) -> CallerSite:
        """Get the site of the innermost traceback entry.

        Args:
            tb: Traceback of a raised exception, or None
            full_path: Keep the full source path instead of the base name

        Returns:
            The site where the exception was raised
        """
        if tb is None:
            return cls()
        while tb.tb_next is not None:
            tb = tb.tb_next
        site = cls.from_frame(tb.tb_frame, full_path=full_path)
        # tb_lineno is the raising line; f_lineno may have moved on
        return cls(site.method_name, tb.tb_lineno or 0, site.file_name)


def _is_internal(frame: FrameType, skip_instance: Any) -> bool:
    module = frame.f_globals.get("__name__", "")
    if module.startswith(_INTERNAL_MODULE_PREFIX):
        return True
    if skip_instance is not None and frame.f_code.co_name == "__init__":
        return frame.f_locals.get("self") is skip_instance
    return False


def capture_caller_site(
    *, skip_instance: Any = None, full_path: bool = False
) -> CallerSite:
    """
    Get the site of the code that called into faultmark.

    Frames of faultmark's own error modules are skipped, as are ``__init__``
    frames of ``skip_instance`` so that subclass constructors report the code
    that instantiated them.

    Args:
        skip_instance: The error under construction, if any
        full_path: Keep the full source path instead of the base name

    Returns:
        The caller site, or ``CallerSite()`` when frames are unavailable
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return CallerSite()

    frame = current_frame.f_back
    try:
        while frame is not None and _is_internal(frame, skip_instance):
            frame = frame.f_back
        if frame is None:
            return CallerSite()
        return CallerSite.from_frame(frame, full_path=full_path)
    finally:
        # Break the reference cycle between this frame and its locals
        del current_frame
        del frame
