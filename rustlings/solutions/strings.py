"""Solutions to the strings exercises and the string transformer quiz."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

_COLOR_WORDS = frozenset({"green", "blue", "red"})


class CommandKind(enum.Enum):
    """What the transformer does to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformer command; ``amount`` is how often "bar" is appended."""

    kind: CommandKind
    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"append amount must not be negative, got {self.amount}")

    def apply(self, text: str) -> str:
        """Return the text transformed by this command."""
        match self.kind:
            case CommandKind.UPPERCASE:
                return text.upper()
            case CommandKind.TRIM:
                return text.strip()
            case CommandKind.APPEND:
                return text + "bar" * self.amount
        raise ValueError(f"unknown command kind {self.kind!r}")


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the text."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [command.apply(text) for text, command in inputs]