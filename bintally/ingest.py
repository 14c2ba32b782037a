"""Ingest driver: feeds unpacked values into the tally structures."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import BinaryIO

from bintally.sketching import FrequencyTable, RecencyBuffer
from bintally.unpacker import iter_groups, unpack_group

logger = logging.getLogger(__name__)

REPORT_SIZE = 32


@dataclass
class Tally:
    """All state accumulated for one run.

    Attributes:
        frequencies: Occurrence count per 12-bit value.
        recent: The last ``REPORT_SIZE`` values in arrival order.
        max_seen: Largest value ingested, or None if nothing was ingested.
        groups_read: Number of (possibly partial) groups consumed.
    """

    frequencies: FrequencyTable = field(default_factory=FrequencyTable)
    recent: RecencyBuffer = field(default_factory=lambda: RecencyBuffer(capacity=REPORT_SIZE))
    max_seen: int | None = None
    groups_read: int = 0

    def record(self, value: int) -> None:
        """Account for one ingested value."""
        self.frequencies.add(value)
        self.recent.add(value)
        if self.max_seen is None or value > self.max_seen:
            self.max_seen = value

    @property
    def value_count(self) -> int:
        return self.frequencies.item_count

    @property
    def is_empty(self) -> bool:
        return self.max_seen is None


def ingest(source: BinaryIO, tally: Tally | None = None) -> Tally:
    """Consume ``source`` completely and return the resulting tally.

    Args:
        source: Binary stream positioned at the first group.
        tally: Existing tally to extend. A fresh one is created if omitted.

    Raises:
        MalformedInput: If the input ends with a single dangling byte. The
            tally is left partially filled and must not be reported.
    """
    if tally is None:
        tally = Tally()

    offset = 0
    for group in iter_groups(source):
        for value in unpack_group(group, offset):
            tally.record(value)
        tally.groups_read += 1
        offset += len(group)

    logger.debug(
        "Ingested %d values from %d groups (%d bytes), max=%s",
        tally.value_count,
        tally.groups_read,
        offset,
        tally.max_seen,
    )
    return tally


def ingest_bytes(data: bytes, tally: Tally | None = None) -> Tally:
    """Ingest an in-memory buffer."""
    return ingest(io.BytesIO(data), tally)
