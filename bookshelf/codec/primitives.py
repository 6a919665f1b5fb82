"""Primitive read/write routines for the collection file format.

Layout, all integers in network byte order:

    bounded string   u32 length | <length> bytes of UTF-8
    number           u16

Records are these primitives concatenated in a fixed field order; the file
is records concatenated with no header, footer or count.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from bookshelf.domain.errors import RecordDecodeError, RecordEncodeError

LENGTH_PREFIX_STRUCT = struct.Struct("!I")
NUMBER_STRUCT = struct.Struct("!H")
MAX_NUMBER = 0xFFFF
STRING_ENCODING = "utf-8"


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ``RecordDecodeError``."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise RecordDecodeError(
                f"unexpected end of stream ({size - remaining} of {size} bytes read)"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def at_end(stream: BinaryIO) -> bool:
    """Return True when no further byte can be read from ``stream``."""
    position = stream.tell()
    if not stream.read(1):
        return True
    stream.seek(position)
    return False


def write_string(stream: BinaryIO, value: str, max_length: int) -> None:
    """Write a length-prefixed string, enforcing its declared maximum."""
    payload = value.encode(STRING_ENCODING)
    if len(payload) > max_length:
        raise RecordEncodeError(
            f"string of {len(payload)} bytes exceeds maximum of {max_length}"
        )
    stream.write(LENGTH_PREFIX_STRUCT.pack(len(payload)))
    stream.write(payload)


def read_string(stream: BinaryIO, max_length: int) -> str:
    """Read a length-prefixed string, rejecting lengths above ``max_length``."""
    (length,) = LENGTH_PREFIX_STRUCT.unpack(
        read_exact(stream, LENGTH_PREFIX_STRUCT.size)
    )
    if length > max_length:
        raise RecordDecodeError(
            f"string length {length} exceeds maximum of {max_length}"
        )
    payload = read_exact(stream, length)
    try:
        return payload.decode(STRING_ENCODING)
    except UnicodeDecodeError as e:
        raise RecordDecodeError(f"string is not valid {STRING_ENCODING}: {e}") from e


def write_number(stream: BinaryIO, value: int) -> None:
    """Write a fixed-width unsigned number."""
    if not 0 <= value <= MAX_NUMBER:
        raise RecordEncodeError(f"number {value} outside 0..{MAX_NUMBER}")
    stream.write(NUMBER_STRUCT.pack(value))


def read_number(stream: BinaryIO) -> int:
    """Read a fixed-width unsigned number."""
    (value,) = NUMBER_STRUCT.unpack(read_exact(stream, NUMBER_STRUCT.size))
    return value
