"""Error kinds raised while tallying a packed 12-bit file.

Every failure is terminal for the run. Errors carry the process exit code
the CLI should return and a short summary line for the user; the exception
message holds the detail (path, byte offset, underlying OS error).

Hierarchy:
    BinTallyError
    ├── InputError          (exit 1)
    │   ├── InputUnavailable    source cannot be opened or read
    │   └── MalformedInput      trailing single byte, no complete value
    └── OutputError         (exit 3)
        ├── OutputUnavailable   sink cannot be opened
        └── WriteFailed         a write failed partway through a report

Exit code 2 is left to argparse for usage errors.
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_INPUT_FAILURE = 1
EXIT_USAGE = 2
EXIT_OUTPUT_FAILURE = 3

__all__ = [
    "EXIT_INPUT_FAILURE",
    "EXIT_OUTPUT_FAILURE",
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "BinTallyError",
    "InputError",
    "InputUnavailable",
    "MalformedInput",
    "OutputError",
    "OutputUnavailable",
    "WriteFailed",
]


class BinTallyError(Exception):
    """Base class for all run-terminating errors."""

    exit_code: int = 1
    summary: str = "ERROR: bintally failed."


class InputError(BinTallyError):
    exit_code = EXIT_INPUT_FAILURE
    summary = "ERROR: Input file either doesn't exist or is invalid."


class InputUnavailable(InputError):
    """The byte source could not be opened or read."""


class MalformedInput(InputError):
    """A dangling single byte at end of input cannot form a 12-bit value.

    Attributes:
        offset: Byte offset of the dangling byte within the input.
    """

    def __init__(self, offset: int):
        super().__init__(f"dangling byte at offset {offset}: at least 2 bytes are needed per value")
        self.offset = offset


class OutputError(BinTallyError):
    exit_code = EXIT_OUTPUT_FAILURE
    summary = "ERROR: Failed to write to output file."


class OutputUnavailable(OutputError):
    """The text sink could not be opened."""


class WriteFailed(OutputError):
    """A write to an already-open sink failed."""
