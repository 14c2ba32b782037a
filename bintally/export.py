"""Tabular and graphical export of a frequency table.

The frequency table is turned into a pandas DataFrame with one row per
non-empty bucket, which can be written as CSV or plotted as a histogram.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from bintally.errors import WriteFailed

if TYPE_CHECKING:
    from bintally.sketching import FrequencyTable

logger = logging.getLogger(__name__)

VALUE = "value"
COUNT = "count"


def frequencies_to_dataframe(frequencies: FrequencyTable) -> pd.DataFrame:
    """One row per non-empty bucket, ascending by value."""
    rows = list(frequencies.nonzero())
    return pd.DataFrame(rows, columns=[VALUE, COUNT]).astype({VALUE: "int64", COUNT: "int64"})


def write_counts_csv(frequencies: FrequencyTable, path: str | Path) -> Path:
    """Write the non-empty buckets as CSV.

    Raises:
        WriteFailed: If the file cannot be written.
    """
    path = Path(path)
    frame = frequencies_to_dataframe(frequencies)
    try:
        frame.to_csv(path, index=False)
    except OSError as exc:
        raise WriteFailed(f"cannot write counts to {path}: {exc}") from exc
    logger.info("Saved %d buckets to %s", len(frame), path)
    return path


def plot_histogram(frequencies: FrequencyTable, path: str | Path, dpi: int = 150) -> Path:
    """Save a bar chart of occurrence count per value.

    Raises:
        WriteFailed: If the image cannot be saved.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    frame = frequencies_to_dataframe(frequencies)

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.bar(frame[VALUE], frame[COUNT], width=1.0, color="steelblue")
    ax.set_xlim(-1, 4096)
    ax.set_xlabel("Value (12-bit)")
    ax.set_ylabel("Occurrences")
    ax.set_title(f"Value histogram ({frequencies.item_count} values, {len(frame)} distinct)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    try:
        fig.savefig(path, dpi=dpi)
    except OSError as exc:
        raise WriteFailed(f"cannot save histogram to {path}: {exc}") from exc
    finally:
        plt.close(fig)
    logger.info("Saved histogram to %s", path)
    return path
