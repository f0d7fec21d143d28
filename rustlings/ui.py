"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(soft_wrap=True, highlight=False)


def _emit(prefix: str, message: str, style: str) -> None:
    _console().print(Text(f"{prefix} {message}", style=style))


def warn(message: str) -> None:
    """Print a warning line in red."""
    prefix = _WARN_PLAIN if no_emoji() else _WARN_EMOJI
    _emit(prefix, message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    prefix = _SUCCESS_PLAIN if no_emoji() else _SUCCESS_EMOJI
    _emit(prefix, message, "green")