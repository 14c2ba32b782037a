"""Run orchestration: open the input, tally it, write the reports.

The input is read to the end and closed before the output is opened, so a
malformed input never creates or truncates the output file. Each resource
is held in a ``with`` block and is closed on every exit path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bintally.errors import InputUnavailable, OutputUnavailable, WriteFailed
from bintally.export import plot_histogram, write_counts_csv
from bintally.ingest import Tally, ingest
from bintally.reports import write_reports

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Parameters for one run.

    Attributes:
        input_path: Packed 12-bit binary file to read.
        output_path: Text report to (over)write.
        counts_csv_path: Optional CSV of non-empty buckets.
        histogram_path: Optional histogram image.
    """

    input_path: Path
    output_path: Path
    counts_csv_path: Path | None = None
    histogram_path: Path | None = None


def load_tally(input_path: str | Path) -> Tally:
    """Open and fully ingest ``input_path``.

    Raises:
        InputUnavailable: If the file cannot be opened or read.
        MalformedInput: If the file ends with a dangling byte.
    """
    try:
        with open(input_path, "rb") as source:
            return ingest(source)
    except OSError as exc:
        raise InputUnavailable(f"cannot read {input_path}: {exc}") from exc


def save_reports(output_path: str | Path, tally: Tally) -> None:
    """Write both reports to ``output_path``.

    Raises:
        OutputUnavailable: If the file cannot be opened.
        WriteFailed: If a write fails. The file is still closed.
    """
    try:
        sink = open(output_path, "w", newline="", encoding="ascii")
    except OSError as exc:
        raise OutputUnavailable(f"cannot open {output_path}: {exc}") from exc

    # buffered text only reaches the disk on close, so close errors are write errors
    try:
        with sink:
            write_reports(sink, tally)
    except OSError as exc:
        raise WriteFailed(f"cannot write {output_path}: {exc}") from exc


def run(config: RunConfig) -> Tally:
    """Execute one run and return the tally it produced."""
    logger.info("Reading %s", config.input_path)
    tally = load_tally(config.input_path)
    logger.info(
        "Tallied %d values (%d distinct)",
        tally.value_count,
        tally.frequencies.distinct_count,
    )

    save_reports(config.output_path, tally)
    logger.info("Wrote reports to %s", config.output_path)

    if config.counts_csv_path is not None:
        write_counts_csv(tally.frequencies, config.counts_csv_path)
    if config.histogram_path is not None:
        plot_histogram(tally.frequencies, config.histogram_path)

    return tally
