"""Exact frequency table over the 12-bit value domain.

Every possible value (0..4095) owns one bucket, so insertion and lookup are
O(1) and memory is fixed regardless of input size. Buckets are indexed by
value, which lets reporting walk them in numeric order without sorting.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from bintally.sketching.base import FrequencySketch
from bintally.unpacker import MAX_VALUE, check_value

if TYPE_CHECKING:
    from collections.abc import Iterator

DOMAIN_SIZE = MAX_VALUE + 1


class FrequencyTable(FrequencySketch):
    """Occurrence counter with one bucket per 12-bit value.

    Invariant: ``sum(table.counts) == table.item_count``.

    Example:
        table = FrequencyTable()
        for value in (7, 7, 4095):
            table.add(value)

        table[7]          # 2
        table.max_value   # 4095
        list(table.nonzero())  # [(7, 2), (4095, 1)]
    """

    def __init__(self):
        self._counts: list[int] = [0] * DOMAIN_SIZE
        self._total_count = 0

    def add(self, item: int, count: int = 1) -> None:
        """Record ``count`` occurrences of ``item``.

        Raises:
            ValueError: If item is outside the 12-bit domain or count is negative.
        """
        check_value(item)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._counts[item] += count
        self._total_count += count

    def estimate(self, item: int) -> int:
        """Exact count for ``item``."""
        check_value(item)
        return self._counts[item]

    def __getitem__(self, item: int) -> int:
        return self.estimate(item)

    def __len__(self) -> int:
        return DOMAIN_SIZE

    @property
    def counts(self) -> list[int]:
        """Copy of all bucket counts, indexed by value."""
        return list(self._counts)

    def nonzero(self) -> Iterator[tuple[int, int]]:
        """Yield ``(value, count)`` for every non-empty bucket, ascending."""
        for value, count in enumerate(self._counts):
            if count:
                yield value, count

    @property
    def max_value(self) -> int | None:
        """Largest value with a non-zero count, or None if empty."""
        for value in range(MAX_VALUE, -1, -1):
            if self._counts[value]:
                return value
        return None

    @property
    def distinct_count(self) -> int:
        """Number of non-empty buckets."""
        return sum(1 for count in self._counts if count)

    def merge(self, other: FrequencyTable) -> None:
        """Add every bucket of ``other`` into this table.

        Raises:
            TypeError: If other is not a FrequencyTable.
        """
        if not isinstance(other, FrequencyTable):
            raise TypeError(f"Can only merge with FrequencyTable, got {type(other).__name__}")
        for value, count in other.nonzero():
            self._counts[value] += count
        self._total_count += other._total_count

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        # list header + one pointer per bucket; small ints are cached
        return sys.getsizeof(self._counts) + sys.getsizeof(self)

    @property
    def item_count(self) -> int:
        """Total occurrences recorded."""
        return self._total_count

    def clear(self) -> None:
        self._counts = [0] * DOMAIN_SIZE
        self._total_count = 0

    def __repr__(self) -> str:
        return f"FrequencyTable(distinct={self.distinct_count}, total={self._total_count})"
