"""Error type raised while reading PDF files."""

from __future__ import annotations

_ZLIB_ERROR_NAMES = {
    0: "Z_OK",
    1: "Z_STREAM_END",
    2: "Z_NEED_DICT",
    -1: "Z_ERRNO",
    -2: "Z_STREAM_ERROR",
    -3: "Z_DATA_ERROR",
    -4: "Z_MEM_ERROR",
    -5: "Z_BUF_ERROR",
    -6: "Z_VERSION_ERROR",
}


class PdfParserError(Exception):
    """Raised when a PDF file or one of its streams cannot be read."""


def zlib_error_name(code: int) -> str:
    """Return the symbolic zlib name of a status code, or ``UNKNOWN_ERROR``."""
    return _ZLIB_ERROR_NAMES.get(code, "UNKNOWN_ERROR")