"""Solutions to the iterator exercises."""

from __future__ import annotations

import math
from collections.abc import Iterable

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when it divides evenly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each sample number by 27; the first failure is raised."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each failure in place."""
    return [_try_divide(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! as an unsigned 64-bit value."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result