"""Unpacking of 12-bit values from 3-byte groups.

Values are packed big-endian, two per group:

    byte0    byte1    byte2
    AAAAAAAA AAAABBBB BBBBBBBB
    \\___ upper ___/\\__ lower __/

A group holding only two bytes still carries a complete upper value; the
missing third byte is read as zero. A lone trailing byte cannot form a
value and is reported as ``MalformedInput``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from bintally.errors import MalformedInput

if TYPE_CHECKING:
    from collections.abc import Iterator

BITS_PER_VALUE = 12
MAX_VALUE = (1 << BITS_PER_VALUE) - 1  # 0xFFF
GROUP_SIZE = 3


def check_value(value: int) -> None:
    """Raise ValueError unless ``value`` fits in 12 bits."""
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"value must be in [0, {MAX_VALUE}], got {value}")


def read_group(source: BinaryIO) -> bytes:
    """Read the next group of up to ``GROUP_SIZE`` bytes.

    Streams may return fewer bytes than requested without being at end of
    input, so reads continue until the group is full or ``read`` returns
    an empty result.

    Returns:
        Between 0 and 3 bytes. Fewer than 3 means end of input was reached.
    """
    group = b""
    while len(group) < GROUP_SIZE:
        chunk = source.read(GROUP_SIZE - len(group))
        if not chunk:
            break
        group += chunk
    return group


def unpack_group(group: bytes, offset: int = 0) -> tuple[int, ...]:
    """Extract the 12-bit values held in one group.

    Args:
        group: 0 to 3 bytes.
        offset: Byte offset of the group within the input, used for errors.

    Returns:
        ``()`` for an empty group, ``(upper,)`` for 2 bytes,
        ``(upper, lower)`` for 3 bytes.

    Raises:
        MalformedInput: If the group holds a single byte.
    """
    size = len(group)
    if size == 0:
        return ()
    if size == 1:
        raise MalformedInput(offset)

    word = int.from_bytes(group.ljust(GROUP_SIZE, b"\x00"), "big")
    upper = (word >> BITS_PER_VALUE) & MAX_VALUE
    if size == 2:
        return (upper,)
    return (upper, word & MAX_VALUE)


def iter_groups(source: BinaryIO) -> Iterator[bytes]:
    """Yield raw groups until the source is exhausted."""
    while group := read_group(source):
        yield group
        if len(group) < GROUP_SIZE:
            return


def iter_values(source: BinaryIO) -> Iterator[int]:
    """Yield every 12-bit value in the source, upper before lower."""
    offset = 0
    for group in iter_groups(source):
        yield from unpack_group(group, offset)
        offset += len(group)
