# pdfdraw

`pdfdraw` reads PDF files and pulls the path-drawing operators out of their
Flate-compressed content streams. It finds each file's cross-reference table
through the `startxref` entry near the end of the file. It inflates every
object in use whose stream is marked `FlateDecode` and has a `Length`, then
scans the inflated content for these operators:

- `cm`, returned as `CMatrix`: a transformation matrix of six numbers
- `m`, returned as `Move`: a move to a point
- `l`, returned as `Line`: a line to a point
- `c`, returned as `CubicBezier`: a cubic Bézier segment through three points
- `q`, returned as `Quit`

The classes live in `pdfdraw.commands`. They are frozen dataclasses that
derive from `DrawingCommand`. Each has a `kind` attribute, a
`DrawingLineType` member. Its string form is the numeric kind followed by
the command's values, for example `109 (10.0, 20.0)` for a `Move`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
pdfdraw drawing1.pdf drawing2.pdf
```

The command parses each file it is given and prints every drawing command it
finds, one per line. It then prints the total time taken, the time spent
inflating and the time spent parsing streams, and the number of commands. A
file that cannot be opened or parsed is skipped without a message. If no
files are given, it reads `test2.pdf`, `test3.pdf` and `test4.pdf` from the
current directory.

## Library use

```python
from pdfdraw.parser import PdfParser, parse_content

parser = PdfParser()
parser.read_files(["drawing.pdf"])   # skips unreadable files
print(len(parser))                   # number of commands collected
parser.dump()                        # print them
print(parser.commands[:5])

# Parse a content stream that is already inflated
commands = parse_content(b"1 0 0 1 0 0 cm 10 20 m 30 40 l ")
for command in commands:
    print(command)
```

`PdfParser.parse_file` reads a single file. It raises
`pdfdraw.errors.PdfParserError` where `read_files` would skip the file. This
happens when the file cannot be opened, when `startxref` is missing, when an
xref entry or stream length is malformed, or when a stream fails to inflate.
When inflation fails, the message names the zlib error as
`zlib_error_name` gives it, for example `Z_DATA_ERROR`, followed by the file
name. `PdfParser.decompress` and `PdfParser.transform` work on a single stream.
They add what they find to `parser.commands`, and they add their running time
to `decompress_time` and `parse_time`.

`parse_content` treats the last byte of its input as a terminator. It raises
`PdfParserError` when an operator needs more operands than are on the stack.

`pdfdraw.search` holds the lower-level helpers:

- `kmp_search(data, pattern, start, end)` returns the index of the first
  match, or `None`.
- `find_startxref(stream, chunk_size)` scans a binary file backwards in
  chunks and returns the offset that follows `startxref`.
- `read_startxref(data, pos)` reads that offset from the line after `pos`.

## What it does not do

`pdfdraw` does not render or convert anything. It only collects the
commands listed above. It reads only classic cross-reference tables, where
each stream's dictionary is on the line after its object header and gives
the length directly. It does not handle cross-reference streams, indirect
lengths, filters other than `FlateDecode`, or encryption. Other content
stream operators are ignored.