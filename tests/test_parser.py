import io
import zlib

import pytest

from pdfdraw.commands import CMatrix, CubicBezier, Line, Move, Quit
from pdfdraw.errors import PdfParserError
from pdfdraw.parser import PdfParser, parse_content
from pdfdraw.search import find_startxref

CONTENT = b" 10 20 m 30 40 l 1 2 3 4 5 6 c q\n"
EXPECTED = [
    Move((10, 20)),
    Line((30, 40)),
    CubicBezier(((1, 2), (3, 4), (5, 6))),
    Quit(),
]


def build_pdf(*contents):
    header = b"%PDF-1.4\n"
    body = b""
    offsets = []
    for number, content in enumerate(contents, 1):
        stream = zlib.compress(content)
        offsets.append(len(header) + len(body))
        body += (
            b"%d 0 obj\n<< /Length %d /Filter /FlateDecode >>\nstream\n"
            % (number, len(stream))
            + stream
            + b"\nendstream\nendobj\n"
        )
    xref_pos = len(header) + len(body)
    xref = b"xref\n0 %d\n0000000000 65535 f \n" % (len(contents) + 1)
    for offset in offsets:
        xref += b"%010d 00000 n \n" % offset
    xref += b"trailer\n<< /Size %d >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(contents) + 1,
        xref_pos,
    )
    return header + body + xref


def test_parse_content_basic():
    assert parse_content(CONTENT) == EXPECTED


def test_parse_content_matrix():
    assert parse_content(b" 1 0 0 1 50 60 cm\n") == [CMatrix((1, 0, 0, 1, 50, 60))]


def test_parse_content_ignores_operator_followed_by_letter():
    assert parse_content(b" 1 2 mx 3 4 lw\n") == []


def test_parse_content_number_runs_to_next_space():
    assert parse_content(b" 5 10\n20 m\n") == [Move((5, 10))]


def test_parse_content_sign_is_not_part_of_number():
    assert parse_content(b" -3 4 l\n") == [Line((3, 4))]


def test_parse_content_decimal_numbers():
    assert parse_content(b" 1.5 2.25 l\n") == [Line((1.5, 2.25))]


def test_parse_content_short_stack_skips_curve_and_line():
    assert parse_content(b" 1 2 3 c\n") == []
    assert parse_content(b" 1 l\n") == []


def test_parse_content_move_underflow_raises():
    with pytest.raises(PdfParserError):
        parse_content(b" 1 m\n")


def test_parse_content_empty():
    assert parse_content(b"") == []


def test_transform_accumulates():
    parser = PdfParser()
    assert parser.transform(CONTENT) == EXPECTED
    parser.transform(CONTENT)
    assert len(parser) == 2 * len(EXPECTED)


def test_decompress_returns_inflated_and_parses():
    parser = PdfParser()
    assert parser.decompress(zlib.compress(CONTENT)) == CONTENT
    assert parser.commands == EXPECTED
    assert parser.decompress_time >= 0.0
    assert parser.parse_time >= 0.0


def test_decompress_bad_data():
    parser = PdfParser("doc.pdf")
    with pytest.raises(PdfParserError, match="Z_DATA_ERROR doc.pdf"):
        parser.decompress(b"not a zlib stream")


def test_read_xref_table_from_stream():
    pdf = build_pdf(CONTENT, b" 1 0 0 1 50 60 cm\n")
    stream = io.BytesIO(pdf)
    parser = PdfParser()
    parser.read_xref_table(stream, find_startxref(stream))
    assert parser.commands == EXPECTED + [CMatrix((1, 0, 0, 1, 50, 60))]


def test_parse_file(tmp_path):
    path = tmp_path / "drawing.pdf"
    path.write_bytes(build_pdf(CONTENT))
    parser = PdfParser()
    parser.parse_file(path)
    assert parser.commands == EXPECTED
    assert parser.filename == str(path)


def test_parse_missing_file(tmp_path):
    with pytest.raises(PdfParserError, match="Failed to open file"):
        PdfParser().parse_file(tmp_path / "absent.pdf")


def test_read_files_skips_broken(tmp_path):
    good = tmp_path / "good.pdf"
    good.write_bytes(build_pdf(CONTENT))
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"%PDF-1.4\nno table here\n")
    parser = PdfParser()
    parser.read_files([tmp_path / "absent.pdf", broken, good, good])
    assert len(parser) == 2 * len(EXPECTED)


def test_dump_prints_each_command(capsys):
    parser = PdfParser()
    parser.transform(CONTENT)
    parser.dump()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(command) for command in EXPECTED]