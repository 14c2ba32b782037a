"""Exact stream summaries used to tally 12-bit values.

Quick Reference:
    FrequencyTable: One counter per 12-bit value (0..4095)
    RecencyBuffer: Ring buffer of the most recent values, oldest-first readback

Example:
    from bintally.sketching import FrequencyTable, RecencyBuffer

    table = FrequencyTable()
    recent = RecencyBuffer(capacity=32)
    for value in values:
        table.add(value)
        recent.add(value)

    print(table.max_value, recent.values())
"""

# Base protocols
from bintally.sketching.base import FrequencySketch, Sketch, WindowSketch

# Frequency counting
from bintally.sketching.frequency_table import DOMAIN_SIZE, FrequencyTable

# Recency window
from bintally.sketching.recency_buffer import DEFAULT_CAPACITY, RecencyBuffer, wrap_index

__all__ = [
    "DEFAULT_CAPACITY",
    "DOMAIN_SIZE",
    "FrequencySketch",
    "FrequencyTable",
    "RecencyBuffer",
    "Sketch",
    "WindowSketch",
    "wrap_index",
]
