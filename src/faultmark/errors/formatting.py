# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: faultmark
"""
Human-readable rendering of structured errors.

Release rendering is the bare message, so no caller metadata reaches end
users. Debug rendering prints as much of the caller site and caller data as
the raising code set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from faultmark.config.settings import FormatMode

if TYPE_CHECKING:
    from faultmark.errors.base import StructuredError


def render(error: StructuredError, mode: FormatMode | str) -> str:
    """Render an error as text.

    Args:
        error: The error to render
        mode: Format mode, or its string value

    Returns:
        The rendered error

    Raises:
        ValueError: If ``mode`` is not a valid format mode
    """
    if not isinstance(mode, FormatMode):
        mode = FormatMode.from_string(mode)

    message = error.message
    if mode is FormatMode.RELEASE:
        return message

    caller_data = error.caller_data

    # without a method name only the message and caller data are printed
    if not error.has_method_name:
        if not error.has_caller_data:
            return message
        return f"{message}: {caller_data}"

    method_name = error.method_name
    line_number = error.line_number

    # without a file name print method, line number and caller data
    if not error.has_file_name:
        if not error.has_caller_data:
            return f"{method_name}() @{line_number}: {message}"
        return f"{method_name}() @{line_number}: {caller_data} - {message}"

    file_name = error.file_name
    if not error.has_caller_data:
        return f'{method_name}() in "{file_name}" @({line_number}): {message}'
    return f'{method_name}() in "{file_name}" @{line_number}: {caller_data} - {message}'
