import io

import pytest

from nested_csv.tabular.csv_rows import CsvRowReader, CsvRowWriter
from nested_csv.tabular.in_memory import InMemoryRowReader, InMemoryRowWriter


def test_in_memory_writer_stores_header_and_rows() -> None:
    writer = InMemoryRowWriter()
    writer.write_header(["a", "b"])
    writer.write_row(["true", "1"])
    writer.flush()

    assert writer.header == ["a", "b"]
    assert writer.rows == [["true", "1"]]


def test_in_memory_writer_header_written_once() -> None:
    writer = InMemoryRowWriter()
    writer.write_header(["a"])
    with pytest.raises(RuntimeError, match="header row already written"):
        writer.write_header(["a"])


def test_in_memory_reader_returns_header_and_rows() -> None:
    reader = InMemoryRowReader(("a", "b"), [("1", "2"), ("3", "4")])
    assert reader.headers() == ["a", "b"]
    assert list(reader.rows()) == [["1", "2"], ["3", "4"]]
    assert list(reader.rows()) == []


def test_csv_writer_writes_rows() -> None:
    stream = io.StringIO()
    writer = CsvRowWriter(stream)
    writer.write_header(["a", "b"])
    writer.write_row(["true", "1"])
    writer.write_row(["false", "2"])
    writer.flush()

    assert stream.getvalue() == "a,b\r\ntrue,1\r\nfalse,2\r\n"


def test_csv_writer_forwards_dialect_options() -> None:
    stream = io.StringIO()
    writer = CsvRowWriter(stream, delimiter=";", lineterminator="\n")
    writer.write_header(["a", "b"])
    writer.write_row(['"x"', "1"])

    assert stream.getvalue() == 'a;b\n"""x""";1\n'


def test_csv_writer_header_written_once() -> None:
    writer = CsvRowWriter(io.StringIO())
    writer.write_header(["a"])
    with pytest.raises(RuntimeError, match="header row already written"):
        writer.write_header(["a"])


def test_csv_reader_reads_header_once_and_skips_blank_lines() -> None:
    reader = CsvRowReader(io.StringIO('a,b\r\n\r\ntrue,"""x"""\r\n'))
    assert reader.headers() == ["a", "b"]
    assert reader.headers() == ["a", "b"]
    assert list(reader.rows()) == [["true", '"x"']]


def test_csv_reader_rows_reads_header_first() -> None:
    reader = CsvRowReader(io.StringIO("a\n1\n2\n"))
    assert list(reader.rows()) == [["1"], ["2"]]
    assert reader.headers() == ["a"]


def test_csv_reader_empty_stream_has_no_header() -> None:
    reader = CsvRowReader(io.StringIO(""))
    assert reader.headers() is None
    assert list(reader.rows()) == []


def test_csv_reader_empty_header_keeps_blank_rows() -> None:
    reader = CsvRowReader(io.StringIO("\r\n\r\n\r\n"))
    assert reader.headers() == []
    assert list(reader.rows()) == [[], []]
