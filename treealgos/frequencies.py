"""Checks for two values that occur the same number of times."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import pairwise


def has_duplicate_frequencies(values: Iterable[int]) -> bool:
    """Return True if two distinct values share an occurrence count (sorting)."""
    frequencies = sorted(Counter(values).values())
    return any(a == b for a, b in pairwise(frequencies))


def has_duplicate_frequencies_hashed(values: Iterable[int]) -> bool:
    """Return True if two distinct values share an occurrence count (hashing)."""
    seen: set[int] = set()
    for freq in Counter(values).values():
        if freq in seen:
            return True
        seen.add(freq)
    return False


def has_duplicate_frequencies_bounded(values: Iterable[int], distinct: int) -> bool:
    """Like :func:`has_duplicate_frequencies` when at most ``distinct`` values occur.

    Raises ValueError if ``distinct`` is negative or more distinct values occur.
    """
    if distinct < 0:
        raise ValueError("distinct must not be negative")
    counts = Counter(values)
    if len(counts) > distinct:
        raise ValueError(
            f"{len(counts)} distinct values occur, more than the bound {distinct}"
        )
    seen: set[int] = set()
    for freq in counts.values():
        if freq in seen:
            return True
        seen.add(freq)
    return False