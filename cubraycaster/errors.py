"""Error type and the error report format used by the engine."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_FALLBACK_MESSAGE = "OEM : err"


class CubError(Exception):
    """Raised when the input or the engine state is invalid."""

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message
        super().__init__(message if message is not None else _FALLBACK_MESSAGE)


def format_error(message: Optional[str]) -> str:
    """Return the text printed for an error: a header line and the message."""
    body = message if message else _FALLBACK_MESSAGE
    return f"Error\n{body}\n"


def report_error(message: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write the formatted error to ``stream`` (standard error by default)."""
    target = stream if stream is not None else sys.stderr
    target.write(format_error(message))
    target.flush()