"""Solutions to the smart pointer exercises: cons lists and clone-on-write."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons list cell; the end of the list is None."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """Return a cons list holding a few values."""
    return Cons(1, Cons(2, Cons(3)))


class Cow:
    """Data that is borrowed until it must be changed, and then copied."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[int]) -> Cow:
        """Wrap data that this object owns."""
        return cls(list(data) if not isinstance(data, list) else data, owned=True)

    @property
    def is_owned(self) -> bool:
        """Whether the data is owned rather than borrowed."""
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        """The wrapped data, borrowed or owned."""
        return self._data

    def to_mut(self) -> list[int]:
        """Return mutable data, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if a change is needed."""
    for index, value in enumerate(list(cow.data)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow