"""Byte searching helpers used to locate the cross-reference table."""

from __future__ import annotations

import io
import re
from typing import BinaryIO

from pdfdraw.errors import PdfParserError

READ_CHUNK_SIZE = 1024
STARTXREF = b"startxref"

_DIGITS = re.compile(rb"\d*")


def _prefix_table(pattern: bytes) -> list[int]:
    table = [0] * len(pattern)
    k = 0
    for i, byte in enumerate(pattern[1:], 1):
        while k and byte != pattern[k]:
            k = table[k - 1]
        if byte == pattern[k]:
            k += 1
        table[i] = k
    return table


def kmp_search(
    data: bytes, pattern: bytes | str, start: int = 0, end: int | None = None
) -> int | None:
    """Return the index of the first ``pattern`` in ``data[start:end]``, or None."""
    if isinstance(pattern, str):
        pattern = pattern.encode("latin-1")
    if end is None:
        end = len(data)
    if not pattern:
        return start
    table = _prefix_table(pattern)
    matched = 0
    for index, byte in enumerate(data[start:end], start):
        while matched and byte != pattern[matched]:
            matched = table[matched - 1]
        if byte == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            return index - len(pattern) + 1
    return None


def read_startxref(data: bytes, pos: int) -> int:
    """Read the offset written on the line after the one holding ``pos``."""
    newline = data.find(b"\n", pos)
    if newline == -1:
        raise PdfParserError("no line follows startxref")
    digits = _DIGITS.match(data, newline + 1).group()
    if not digits:
        raise PdfParserError("startxref is not followed by an offset")
    return int(digits)


def find_startxref(stream: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> int:
    """Scan a binary stream backwards for ``startxref`` and return its offset."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    pos = stream.seek(0, io.SEEK_END)
    buffer = b""
    while pos > 0:
        chunk_start = max(0, pos - chunk_size)
        stream.seek(chunk_start)
        buffer = stream.read(pos - chunk_start) + buffer
        pos = chunk_start
        found = kmp_search(buffer, STARTXREF)
        if found is not None:
            return read_startxref(buffer, found)
    raise PdfParserError("startxref not found")