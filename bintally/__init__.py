"""bintally: tally a file of packed 12-bit values.

Reads 3-byte groups (two 12-bit values each), counts every value and
reports the 32 largest occurrences and the last 32 values.

Example:
    import bintally

    with open("data.bin", "rb") as source:
        tally = bintally.ingest(source)

    print(bintally.render_reports(tally))
"""

import logging

from bintally.errors import (
    BinTallyError,
    InputUnavailable,
    MalformedInput,
    OutputUnavailable,
    WriteFailed,
)
from bintally.ingest import REPORT_SIZE, Tally, ingest, ingest_bytes
from bintally.logging_config import (
    configure_from_env,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
)
from bintally.reports import render_reports, top_values, write_reports
from bintally.runner import RunConfig, run
from bintally.sketching import FrequencyTable, RecencyBuffer
from bintally.unpacker import iter_values, unpack_group

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "BinTallyError",
    "InputUnavailable",
    "MalformedInput",
    "OutputUnavailable",
    "WriteFailed",
    # Core
    "REPORT_SIZE",
    "FrequencyTable",
    "RecencyBuffer",
    "RunConfig",
    "Tally",
    "ingest",
    "ingest_bytes",
    "iter_values",
    "render_reports",
    "run",
    "top_values",
    "unpack_group",
    "write_reports",
    # Logging
    "configure_from_env",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
]
