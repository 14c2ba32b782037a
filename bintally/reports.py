"""Text reports over a finished tally.

Two reports are written to the same sink, in order:

    --Sorted Max 32 Values--
    <largest occurrences, one per line, largest first>
    --Last 32 Values--
    <most recent values, one per line, oldest first>

Every line ends with CRLF. The sink should be opened with ``newline=""``
so the terminator reaches the file unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from bintally.errors import WriteFailed
from bintally.ingest import REPORT_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bintally.ingest import Tally
    from bintally.sketching import FrequencyTable

logger = logging.getLogger(__name__)

LINE_END = "\r\n"
SORTED_HEADER = f"--Sorted Max {REPORT_SIZE} Values--"
LAST_HEADER = f"--Last {REPORT_SIZE} Values--"


def top_values(
    frequencies: FrequencyTable,
    max_seen: int | None,
    limit: int = REPORT_SIZE,
) -> list[int]:
    """Return the ``limit`` largest occurrences, largest first.

    Walks buckets downward from ``max_seen`` in a single pass. Each
    non-empty bucket contributes all of its occurrences until the limit is
    reached; only the bucket that crosses the limit is cut short. Duplicates
    are indistinguishable, so which occurrences of that bucket are kept does
    not matter.

    The result has exactly ``min(limit, frequencies.item_count)`` entries
    and is non-increasing.
    """
    if max_seen is None:
        return []

    selected: list[int] = []
    for value in range(max_seen, -1, -1):
        remaining = limit - len(selected)
        if remaining <= 0:
            break
        count = frequencies[value]
        if count:
            selected.extend([value] * min(count, remaining))
    return selected


def _write_lines(sink: TextIO, header: str, values: Iterable[int]) -> None:
    try:
        sink.write(header + LINE_END)
        for value in values:
            sink.write(f"{value}{LINE_END}")
    except OSError as exc:
        raise WriteFailed(f"write failed during '{header}' report: {exc}") from exc


def write_sorted_report(sink: TextIO, tally: Tally) -> None:
    """Write the header and the largest occurrences.

    Raises:
        WriteFailed: If the sink rejects a write.
    """
    values = top_values(tally.frequencies, tally.max_seen)
    _write_lines(sink, SORTED_HEADER, values)
    logger.debug("Wrote %d sorted values", len(values))


def write_last_report(sink: TextIO, tally: Tally) -> None:
    """Write the header and the retained recent values, oldest first.

    Raises:
        WriteFailed: If the sink rejects a write.
    """
    values = tally.recent.values()
    _write_lines(sink, LAST_HEADER, values)
    logger.debug("Wrote %d recent values", len(values))


def write_reports(sink: TextIO, tally: Tally) -> None:
    """Write both reports. A failure in the first skips the second."""
    write_sorted_report(sink, tally)
    write_last_report(sink, tally)


def render_reports(tally: Tally) -> str:
    """Return both reports as one string."""
    return "".join(
        f"{line}{LINE_END}"
        for line in (
            SORTED_HEADER,
            *top_values(tally.frequencies, tally.max_seen),
            LAST_HEADER,
            *tally.recent.values(),
        )
    )
