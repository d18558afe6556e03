"""Error type and stderr reporting for the .cub loader and the game."""

from __future__ import annotations

import sys
from typing import TextIO


class CubError(Exception):
    """Raised when a scene file is invalid or a resource cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(message: str | None) -> str:
    """Return the text written for an error: an 'Error' line, then the message."""
    return f"Error\n{message or ''}\n"


def report(message: str | None, stream: TextIO | None = None) -> None:
    """Write the formatted error to ``stream`` (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_error(message))
    target.flush()