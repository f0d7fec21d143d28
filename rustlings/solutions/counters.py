"""Counting bytes and characters, and squaring numbers."""

from __future__ import annotations


def byte_counter(arg: str) -> int:
    """Return the number of UTF-8 bytes in the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Return the number of characters in the text."""
    return len(arg)


def num_sq(arg: int) -> int:
    """Return the square of the number."""
    return arg * arg