"""Solutions to the error handling exercises."""

from __future__ import annotations

import re
from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_DIGITS = re.compile(r"[0-9]+")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed decimal integer strictly, rejecting whitespace and separators."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign = -1 if text[0] == "-" else 1
    digits = text[1:] if text[0] in "+-" else text
    if not _DIGITS.fullmatch(digits):
        raise ValueError("invalid digit found in string")
    value = sign * int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the cost of the typed-in quantity of items, processing fee included."""
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError(f"total cost for {quantity} items overflows")
    return cost


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _DESCRIPTIONS = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise ValueError(f"unknown creation error kind {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer.

    ``cause`` is a CreationError when the number was out of range, or the
    ValueError raised while parsing the text.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse the text as a positive non-zero integer."""
    try:
        value = _parse_int(text, _I64_MIN, _I64_MAX)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error