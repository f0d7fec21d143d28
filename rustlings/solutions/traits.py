"""Solutions to the generics, traits, tests and lifetimes exercises."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@functools.singledispatch
def append_bar(value):
    """Return the value with "Bar" appended: to a string, or as a new list element."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing information."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


def longest(x: str, y: str) -> str:
    """Return the longer text by UTF-8 byte length; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y