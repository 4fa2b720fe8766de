"""Command line entry: extract drawing commands from PDF files and report."""

from __future__ import annotations

import argparse
import time

from pdfdraw.parser import PdfParser

DEFAULT_FILES = ["test2.pdf", "test3.pdf", "test4.pdf"]


def main(argv: list[str] | None = None) -> int:
    """Parse the given PDF files, print their commands and timing figures."""
    arguments = argparse.ArgumentParser(
        prog="pdfdraw",
        description="Print the path drawing commands found in PDF files.",
    )
    arguments.add_argument("files", nargs="*", default=DEFAULT_FILES)
    options = arguments.parse_args(argv)

    started = time.perf_counter()
    parser = PdfParser()
    parser.read_files(options.files)
    parser.dump()
    elapsed = time.perf_counter() - started

    print(f"Time taken: {elapsed} seconds")
    print(f"While decompress: {parser.decompress_time}")
    print(f"While pars: {parser.parse_time}")
    print(len(parser))
    return 0