"""Counting exercises by their progress."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress, one by one."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps the exercises with the given progress, one by one."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps the exercises with the given progress."""
    return sum(count_iterator(mapping, value) for mapping in collection)