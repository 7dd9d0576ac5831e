"""Solutions to the exercise on counting exercise progress with iterators."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping


class Progress(enum.Enum):
    """How far an exercise has been worked through."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several mappings, with loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several mappings."""
    return sum(count_iterator(mapping, value) for mapping in collection)