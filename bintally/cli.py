"""Command-line interface.

Usage:
    bintally <in-file> <out-file>
    bintally data.bin report.txt --counts-csv counts.csv --histogram hist.png
    python -m bintally data.bin report.txt -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bintally.errors import EXIT_SUCCESS, BinTallyError
from bintally.logging_config import configure_from_env, enable_console_logging
from bintally.runner import RunConfig, run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintally",
        description=(
            "Read a file of packed 12-bit values and report the 32 largest "
            "occurrences and the last 32 values."
        ),
    )
    parser.add_argument("input", type=Path, help="Binary input file")
    parser.add_argument("output", type=Path, help="Text report to write")
    parser.add_argument("--counts-csv", type=Path, default=None, help="Also write per-value counts as CSV")
    parser.add_argument("--histogram", type=Path, default=None, help="Also save a histogram image")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code.

    A wrong argument count makes argparse print usage and exit with code 2.
    """
    args = build_parser().parse_args(argv)

    configure_from_env()
    if args.verbose:
        enable_console_logging(level="DEBUG")

    config = RunConfig(
        input_path=args.input,
        output_path=args.output,
        counts_csv_path=args.counts_csv,
        histogram_path=args.histogram,
    )

    try:
        run(config)
    except BinTallyError as exc:
        logger.debug("Run aborted by %s", type(exc).__name__)
        print(exc.summary, file=sys.stderr)
        print(f"  {exc}", file=sys.stderr)
        return exc.exit_code

    return EXIT_SUCCESS
