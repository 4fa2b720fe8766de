"""Extraction of path drawing commands from the compressed streams of PDF files."""

from __future__ import annotations

import logging
import re
import time
import zlib
from pathlib import Path
from typing import BinaryIO, Iterable

from pdfdraw.commands import CMatrix, CubicBezier, DrawingCommand, Line, Move, Quit
from pdfdraw.errors import PdfParserError, zlib_error_name
from pdfdraw.search import find_startxref

log = logging.getLogger(__name__)

_WHITESPACE = bytes(range(33))
_DIGITS = re.compile(rb"\d*")
_NUMBER = re.compile(rb"\d+(?:\.\d*)?(?:[eE][+-]?\d+)?")
_ZLIB_CODE = re.compile(r"Error (-?\d+)")

_SPACE = ord(" ")
_C = ord("c")
_M = ord("m")
_L = ord("l")
_Q = ord("q")


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _is_lower(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A


def _pop(stack: list[float], count: int) -> list[float]:
    if len(stack) < count:
        raise PdfParserError("operand stack underflow")
    values = stack[-count:]
    del stack[-count:]
    return values


def parse_content(data: bytes) -> list[DrawingCommand]:
    """Scan a decompressed content stream for path operators.

    The last byte of ``data`` is treated as a terminator and never read as
    part of a number.
    """
    data = bytes(data)
    end = len(data) - 1

    def at(index: int) -> int:
        return data[index] if 0 <= index < len(data) else 0

    stack: list[float] = []
    commands: list[DrawingCommand] = []
    i = 0
    while i < end:
        byte = data[i]
        prev = at(i - 1)
        nxt = at(i + 1)
        if _is_digit(byte):
            stop = data.find(b" ", i, end)
            if stop == -1:
                stop = end
            stack.append(float(_NUMBER.match(data, i, stop).group()))
            i = stop
        elif byte == _C and nxt == _M and prev == _SPACE:
            commands.append(CMatrix(tuple(_pop(stack, 6))))
            i += 2
        elif byte == _M and i != 0 and prev == _SPACE and not _is_lower(nxt):
            x, y = _pop(stack, 2)
            commands.append(Move((x, y)))
        elif byte == _C and prev == _SPACE and not _is_lower(nxt) and len(stack) >= 6:
            x1, y1, x2, y2, x3, y3 = _pop(stack, 6)
            commands.append(CubicBezier(((x1, y1), (x2, y2), (x3, y3))))
        elif byte == _L and prev == _SPACE and not _is_lower(nxt) and len(stack) >= 2:
            x, y = _pop(stack, 2)
            commands.append(Line((x, y)))
        elif byte == _Q and prev == _SPACE:
            commands.append(Quit())
        if i != end:
            i += 1
    return commands


def _zlib_code(error: zlib.error) -> int:
    found = _ZLIB_CODE.search(str(error))
    return int(found.group(1)) if found else -3


class PdfParser:
    """Collects drawing commands from the FlateDecode streams of PDF files."""

    def __init__(self, filename: str = "") -> None:
        self.filename = str(filename)
        self.commands: list[DrawingCommand] = []
        self.decompress_time = 0.0
        self.parse_time = 0.0

    def read_files(self, files: Iterable[str | Path]) -> None:
        """Parse every file in turn, skipping those that cannot be read."""
        for name in files:
            try:
                self.parse_file(name)
            except Exception as exc:  # a broken file must not stop the rest
                log.debug("skipping %s: %s", name, exc)

    def parse_file(self, filename: str | Path) -> None:
        """Read the cross-reference table of one file and parse its streams."""
        self.filename = str(filename)
        try:
            stream = open(filename, "rb")
        except OSError as exc:
            raise PdfParserError("Failed to open file") from exc
        with stream:
            self.read_xref_table(stream, find_startxref(stream))

    def read_xref_table(self, stream: BinaryIO, pos: int) -> None:
        """Walk the xref table at ``pos`` and decode each object in use."""
        stream.seek(pos)
        line = stream.readline()
        while line and not line.startswith(b"t"):
            if line.rstrip(_WHITESPACE).endswith(b"n"):
                offset_field = line.split(b" ", 1)[0]
                try:
                    offset = int(offset_field)
                except ValueError as exc:
                    raise PdfParserError(f"bad xref entry {line!r}") from exc
                resume = stream.tell()
                self._read_object(stream, offset)
                stream.seek(resume)
            line = stream.readline()

    def _read_object(self, stream: BinaryIO, offset: int) -> None:
        stream.seek(offset)
        stream.readline()
        header = stream.readline()
        if b"FlateDecode" not in header:
            return
        at = header.find(b"Length ")
        if at == -1:
            return
        digits = _DIGITS.match(header, at + len(b"Length ")).group()
        if not digits:
            raise PdfParserError(f"bad stream length in {self.filename}")
        stream.readline()
        self.decompress(stream.read(int(digits)))

    def decompress(self, data: bytes) -> bytes:
        """Inflate one stream, parse its commands and return the inflated bytes."""
        started = time.perf_counter()
        inflater = zlib.decompressobj()
        try:
            inflated = inflater.decompress(bytes(data))
        except zlib.error as exc:
            name = zlib_error_name(_zlib_code(exc))
            raise PdfParserError(f"{name} {self.filename}") from exc
        if not inflater.eof:
            raise PdfParserError(f"{zlib_error_name(zlib.Z_BUF_ERROR)} {self.filename}")
        self.decompress_time += time.perf_counter() - started
        log.debug("inflated %d bytes", len(inflated))
        self.transform(inflated)
        return inflated

    def transform(self, data: bytes) -> list[DrawingCommand]:
        """Parse a content stream and keep the commands found; return them."""
        started = time.perf_counter()
        found = parse_content(data)
        self.commands.extend(found)
        self.parse_time += time.perf_counter() - started
        return found

    def dump(self) -> None:
        """Print every collected command, one per line."""
        for command in self.commands:
            print(command)

    def __len__(self) -> int:
        return len(self.commands)