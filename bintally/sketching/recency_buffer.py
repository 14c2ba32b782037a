"""Fixed-capacity ring buffer of the most recently added values.

Slots live in a preallocated list. A write cursor marks the next slot to
fill; once every slot is used the cursor wraps and overwrites the oldest
value. Reading back starts at ``(cursor - count) mod capacity`` and walks
forward ``count`` slots, which yields values oldest-first.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from bintally.sketching.base import WindowSketch
from bintally.unpacker import check_value

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_CAPACITY = 32


def wrap_index(index: int, capacity: int) -> int:
    """Normalise ``index`` into ``[0, capacity)``, including negative indices."""
    return index % capacity


class RecencyBuffer(WindowSketch):
    """Sliding window over the tail of a value stream.

    After N insertions the buffer holds the last ``min(N, capacity)`` values
    in arrival order.

    Args:
        capacity: Number of slots. Must be positive.

    Example:
        recent = RecencyBuffer(capacity=3)
        for value in (1, 2, 3, 4):
            recent.add(value)

        recent.values()   # [2, 3, 4]
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._slots: list[int] = [0] * capacity
        self._cursor = 0
        self._count = 0
        self._total_count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Index of the slot the next value will be written to."""
        return self._cursor

    def add(self, item: int, count: int = 1) -> None:
        """Append ``item`` to the window ``count`` times.

        Raises:
            ValueError: If item is outside the 12-bit domain or count is negative.
        """
        check_value(item)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        for _ in range(count):
            self._slots[self._cursor] = item
            self._cursor = wrap_index(self._cursor + 1, self._capacity)
            if self._count < self._capacity:
                self._count += 1
            self._total_count += 1

    @property
    def start_offset(self) -> int:
        """Slot index of the oldest retained value."""
        return wrap_index(self._cursor - self._count, self._capacity)

    def __iter__(self) -> Iterator[int]:
        start = self.start_offset
        for step in range(self._count):
            yield self._slots[wrap_index(start + step, self._capacity)]

    def values(self) -> list[int]:
        """Retained values, oldest first."""
        return list(self)

    def __len__(self) -> int:
        return self._count

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    def merge(self, other: RecencyBuffer) -> None:
        """Append ``other``'s retained values as if its stream followed this one.

        Raises:
            TypeError: If other is not a RecencyBuffer.
            ValueError: If other has a different capacity.
        """
        if not isinstance(other, RecencyBuffer):
            raise TypeError(f"Can only merge with RecencyBuffer, got {type(other).__name__}")
        if other._capacity != self._capacity:
            raise ValueError(
                f"Cannot merge: capacity differs ({self._capacity} vs {other._capacity})"
            )

        for value in other.values():
            self.add(value)
        # values other saw but no longer retains still count as seen
        self._total_count += other._total_count - len(other)

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        return sys.getsizeof(self._slots) + sys.getsizeof(self)

    @property
    def item_count(self) -> int:
        """Total values ever added (not just those retained)."""
        return self._total_count

    def clear(self) -> None:
        self._slots = [0] * self._capacity
        self._cursor = 0
        self._count = 0
        self._total_count = 0

    def __repr__(self) -> str:
        return (
            f"RecencyBuffer(capacity={self._capacity}, "
            f"retained={self._count}, "
            f"seen={self._total_count})"
        )
