"""Base protocols for the tally structures.

Both structures used by a run consume a stream of 12-bit values one at a
time and answer questions about it afterwards:
- FrequencySketch: how often did each value occur (FrequencyTable)
- WindowSketch: which values arrived most recently (RecencyBuffer)

Unlike approximate sketches these are exact, because the value domain is
small enough (4096 values) to count every bucket.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class Sketch(ABC):
    """Base protocol for stream summaries.

    Supports:
    - Adding items (with optional counts)
    - Merging two summaries of the same type
    - Estimating memory usage
    - Clearing state for reuse
    """

    @abstractmethod
    def add(self, item: int, count: int = 1) -> None:
        """Add an item to the summary.

        Args:
            item: The value to add.
            count: Number of occurrences to add (default 1).
        """

    @abstractmethod
    def merge(self, other: "Sketch") -> None:
        """Merge another summary of the same type into this one.

        Args:
            other: Another summary of the same type and configuration.

        Raises:
            TypeError: If other is not the same type.
            ValueError: If other has incompatible configuration.
        """

    @property
    @abstractmethod
    def memory_bytes(self) -> int:
        """Approximate memory footprint in bytes."""

    @property
    @abstractmethod
    def item_count(self) -> int:
        """Total count of items added via add()."""

    @abstractmethod
    def clear(self) -> None:
        """Reset to the initial empty state."""


class FrequencySketch(Sketch):
    """Protocol for summaries that count occurrences per value."""

    @abstractmethod
    def estimate(self, item: int) -> int:
        """Return the number of times ``item`` was added."""


class WindowSketch(Sketch):
    """Protocol for summaries that retain a window of recent items."""

    @abstractmethod
    def values(self) -> list[int]:
        """Return the retained items, oldest first."""

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """Iterate over retained items, oldest first."""

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of retained items."""
